"""
Fixtures pytest partagees pour les tests IPTVOrg.

Ce module contient les fixtures communes utilisees dans les tests:
- Playlists M3U d'exemple
- Services du pipeline (parser, classifieur, organisateur, import)
- Stockage SQLite en memoire et Settings de test
- Container DI branche sur une base en memoire
"""

from pathlib import Path

import pytest
from dependency_injector import providers

from iptvorg.adapters.parsing.m3u_parser import M3UPlaylistParser
from iptvorg.adapters.parsing.m3u_writer import M3UPlaylistWriter
from iptvorg.config import Settings
from iptvorg.container import Container
from iptvorg.core.entities.entry import PlaylistEntry
from iptvorg.infrastructure.persistence.cached_store import CachedLibraryStore
from iptvorg.infrastructure.persistence.database import build_engine, init_db
from iptvorg.infrastructure.persistence.library_store import SQLModelLibraryStore
from iptvorg.services.classifier import ClassifierService
from iptvorg.services.ingest import IngestService
from iptvorg.services.library import LibraryService
from iptvorg.services.series_organizer import SeriesOrganizerService

SAMPLE_PLAYLIST = """#EXTM3U
#EXTINF:-1 tvg-id="cnn.us" tvg-logo="http://x/l.png" group-title="News",CNN HD
http://stream/cnn
#EXTINF:-1 group-title="Filmes",The Matrix 1999 HD
http://stream/matrix
#EXTINF:-1 group-title="Series",Breaking Bad S01E03
http://stream/bb-s01e03
#EXTINF:-1 group-title="Series",Breaking Bad S01E01
http://stream/bb-s01e01
#EXTINF:-1 group-title="Series",Breaking Bad S02E01
http://stream/bb-s02e01
#EXTINF:-1 group-title="Desenhos",Pica-Pau
http://stream/picapau
#EXTINF:-1 group-title="Esportes",ESPN Brasil
http://stream/espn
#EXTINF:-1,Canal Local
http://stream/local
"""


@pytest.fixture
def sample_playlist() -> str:
    """Playlist couvrant chaines, films, series, dessins animes et sport."""
    return SAMPLE_PLAYLIST


@pytest.fixture
def make_entry():
    """Fabrique d'entrees avec des valeurs par defaut."""

    def _make(name: str = "Canal", url: str = "", **kwargs) -> PlaylistEntry:
        return PlaylistEntry(name=name, url=url or f"http://stream/{name.lower()}", **kwargs)

    return _make


@pytest.fixture
def parser() -> M3UPlaylistParser:
    return M3UPlaylistParser()


@pytest.fixture
def writer() -> M3UPlaylistWriter:
    return M3UPlaylistWriter()


@pytest.fixture
def classifier() -> ClassifierService:
    return ClassifierService()


@pytest.fixture
def organizer() -> SeriesOrganizerService:
    return SeriesOrganizerService()


@pytest.fixture
def ingest_service(parser, classifier, organizer) -> IngestService:
    return IngestService(parser=parser, classifier=classifier, organizer=organizer)


@pytest.fixture
def memory_engine():
    """Engine SQLite en memoire avec les tables creees."""
    engine = build_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def library_store(memory_engine) -> SQLModelLibraryStore:
    return SQLModelLibraryStore(memory_engine)


@pytest.fixture
def library_service(library_store, ingest_service, writer, organizer, tmp_path) -> LibraryService:
    """LibraryService sur un stockage en memoire, sans cache."""
    return LibraryService(
        store=CachedLibraryStore(library_store, ttl_seconds=0, cache_dir=tmp_path / "service-cache"),
        ingest_service=ingest_service,
        writer=writer,
        organizer=organizer,
    )


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test : base en memoire, log dans un repertoire temporaire.
    """
    return Settings(
        database_url="sqlite://",
        log_file=tmp_path / "test.log",
        cache_ttl_seconds=0,
        cache_dir=tmp_path / "cache",
        page_size=50,
        max_upload_mb=1,
    )


@pytest.fixture
def test_container(test_settings: Settings):
    """Container DI dont la configuration est remplacee par test_settings."""
    container = Container()
    container.config.override(providers.Object(test_settings))
    container.database.init()
    yield container
    container.library_store().close()
    container.shutdown_resources()
    container.config.reset_override()
