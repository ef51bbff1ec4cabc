"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
"""

from dependency_injector import containers, providers

from .adapters.parsing.m3u_parser import M3UPlaylistParser
from .adapters.parsing.m3u_writer import M3UPlaylistWriter
from .config import Settings
from .infrastructure.persistence.cached_store import CachedLibraryStore
from .infrastructure.persistence.database import build_engine, init_db
from .infrastructure.persistence.library_store import SQLModelLibraryStore
from .services.classifier import ClassifierService
from .services.ingest import IngestService
from .services.library import LibraryService
from .services.series_organizer import SeriesOrganizerService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Cree les tables une fois
        library = container.library_service()
        report = library.import_playlist(text)
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Engine SQLAlchemy partage
    engine = providers.Singleton(build_engine, db_url=config.provided.database_url)

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db, engine=engine)

    # Adapters - implementations concretes des ports
    playlist_parser = providers.Singleton(
        M3UPlaylistParser,
        default_group=config.provided.default_group,
        stream_schemes=config.provided.stream_schemes,
    )
    playlist_writer = providers.Singleton(M3UPlaylistWriter)

    # Stockage : SQLModel derriere un cache TTL, partage par toute l'application
    sqlmodel_store = providers.Singleton(SQLModelLibraryStore, engine=engine)
    library_store = providers.Singleton(
        CachedLibraryStore,
        inner=sqlmodel_store,
        ttl_seconds=config.provided.cache_ttl_seconds,
        cache_dir=config.provided.cache_dir,
        namespace=config.provided.database_url,
    )

    # Services sans etat - Singletons
    classifier_service = providers.Singleton(ClassifierService)
    series_organizer_service = providers.Singleton(SeriesOrganizerService)

    ingest_service = providers.Singleton(
        IngestService,
        parser=playlist_parser,
        classifier=classifier_service,
        organizer=series_organizer_service,
        deduplicate=config.provided.deduplicate_urls,
    )

    library_service = providers.Factory(
        LibraryService,
        store=library_store,
        ingest_service=ingest_service,
        writer=playlist_writer,
        organizer=series_organizer_service,
    )
