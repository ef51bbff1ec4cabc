"""
Service de gestion de la bibliothèque stockée.

Cas d'utilisation exposés à la CLI et à l'API HTTP :
- import d'une playlist (remplacement complet de la bibliothèque)
- lecture d'une catégorie, pagination des catégories plates
- export d'une catégorie en playlist M3U
- ajout / retrait d'une entrée sans relancer le pipeline
- recherche et statistiques
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from loguru import logger

from iptvorg.core.entities.entry import PlaylistEntry
from iptvorg.core.entities.library import OrganizedLibrary
from iptvorg.core.exceptions import EmptyLibraryError
from iptvorg.core.ports.playlist import IPlaylistWriter
from iptvorg.core.ports.store import ILibraryStore
from iptvorg.core.value_objects.category import Category
from iptvorg.core.value_objects.playlist_info import PlaylistStats
from iptvorg.services.ingest import IngestReport, IngestService
from iptvorg.services.playlist_tools import compute_stats, group_by, search, sort_entries
from iptvorg.services.series_organizer import SeriesOrganizerService


@dataclass(frozen=True)
class PlaylistExport:
    """
    Playlist exportée pour une catégorie.

    Attributs:
        filename: Nom de fichier suggéré (<catégorie>.m3u)
        content: Texte M3U
        entry_count: Nombre d'entrées exportées
    """

    filename: str
    content: str
    entry_count: int


class LibraryService:
    """
    Service orchestrant le stockage et les opérations sur la bibliothèque.

    Coordonne:
    - Le service d'import pour construire la bibliothèque
    - Le stockage (ILibraryStore) pour la conserver
    - L'écrivain (IPlaylistWriter) pour les exports
    """

    def __init__(
        self,
        store: ILibraryStore,
        ingest_service: IngestService,
        writer: IPlaylistWriter,
        organizer: SeriesOrganizerService,
    ) -> None:
        self._store = store
        self._ingest_service = ingest_service
        self._writer = writer
        self._organizer = organizer

    def import_playlist(self, text: str) -> IngestReport:
        """Construit une nouvelle bibliothèque et remplace la précédente."""
        report = self._ingest_service.ingest(text)
        self._store.replace(report.library)
        return report

    def get_library(self) -> tuple[OrganizedLibrary, datetime]:
        """
        Retourne la bibliothèque courante et sa date d'écriture.

        Raises:
            EmptyLibraryError: si aucune playlist n'a été importée
        """
        library, updated_at = self._store.get()
        if library is None or updated_at is None:
            raise EmptyLibraryError()
        return library, updated_at

    def get_library_or_empty(self) -> OrganizedLibrary:
        """Retourne la bibliothèque courante, ou une bibliothèque vide."""
        library, _ = self._store.get()
        return library if library is not None else OrganizedLibrary.empty()

    def list_entries(
        self,
        category: Category,
        limit: Optional[int] = None,
        offset: int = 0,
        sort_by: Optional[str] = None,
        order: str = "asc",
    ) -> list[PlaylistEntry]:
        """
        Retourne une page des entrées d'une catégorie.

        Sans sort_by, l'ordre est celui de la liste plate ; sinon les entrées
        sont triées par nom ou par groupe avant la pagination.
        """
        entries = self.get_library_or_empty().flatten(category)
        if sort_by:
            entries = sort_entries(entries, by=sort_by, order=order)
        end = None if limit is None else offset + limit
        return entries[offset:end]

    def groups(self, category: Category) -> dict[str, int]:
        """Nombre d'entrées par groupe d'origine dans une catégorie."""
        grouped = group_by(self.get_library_or_empty().flatten(category))
        return {name: len(items) for name, items in grouped.items()}

    def export(self, category: Category, title: Optional[str] = None) -> PlaylistExport:
        """Génère la playlist M3U d'une catégorie."""
        entries = self.get_library_or_empty().flatten(category)
        playlist_title = title or f"IPTV - {category.value.upper()}"
        content = self._writer.serialize(entries, playlist_title)
        logger.info(f"Export de '{category.value}': {len(entries)} entrée(s)")
        return PlaylistExport(
            filename=f"{category.value}.m3u",
            content=content,
            entry_count=len(entries),
        )

    def add_entry(self, category: Category, entry: PlaylistEntry) -> PlaylistEntry:
        """
        Ajoute une entrée à une catégorie stockée.

        Pour une catégorie épisodique, l'entrée est rangée dans sa série et
        sa saison selon les mêmes règles que l'import.
        """
        library = self.get_library_or_empty()
        if category.is_episodic:
            entry = self._organizer.extract(entry)
        library.add_entry(category, entry)
        self._store.replace(library)
        logger.info(f"Entrée ajoutée à '{category.value}': {entry.name}")
        return entry

    def remove_entry(self, category: Category, index: int) -> PlaylistEntry:
        """
        Retire l'entrée à l'index donné (ordre de la liste plate).

        Raises:
            EmptyLibraryError: si aucune playlist n'a été importée
            EntryNotFoundError: si l'index est hors limites
        """
        library, _ = self.get_library()
        removed = library.remove_entry(category, index)
        self._store.replace(library)
        logger.info(f"Entrée retirée de '{category.value}': {removed.name}")
        return removed

    def search(self, term: str, category: Optional[Category] = None) -> list[PlaylistEntry]:
        """Recherche dans une catégorie, ou dans toute la bibliothèque."""
        return search(self._collect(category), term)

    def stats(self, category: Optional[Category] = None) -> PlaylistStats:
        """Statistiques d'une catégorie, ou de toute la bibliothèque."""
        return compute_stats(self._collect(category))

    def _collect(self, category: Optional[Category]) -> list[PlaylistEntry]:
        library = self.get_library_or_empty()
        categories = [category] if category is not None else list(Category)
        entries: list[PlaylistEntry] = []
        for item in categories:
            entries.extend(library.flatten(item))
        return entries
