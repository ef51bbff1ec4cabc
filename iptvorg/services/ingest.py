"""
Service d'import de playlist.

Orchestre le pipeline complet : texte -> entrées -> entrées classées ->
bibliothèque organisée. Le service est sans état entre deux appels.
"""

from dataclasses import dataclass
from typing import Sequence

from loguru import logger

from iptvorg.core.entities.entry import PlaylistEntry
from iptvorg.core.entities.library import EpisodicSection, FlatSection, OrganizedLibrary
from iptvorg.core.ports.playlist import IPlaylistParser
from iptvorg.core.value_objects.category import Category
from iptvorg.services.classifier import ClassifierService
from iptvorg.services.playlist_tools import remove_duplicates
from iptvorg.services.series_organizer import SeriesOrganizerService


@dataclass
class IngestReport:
    """
    Resultat d'un import.

    Attributs:
        library: Bibliothèque organisée construite
        parsed_count: Nombre d'entrées extraites du texte
        duplicate_count: Nombre d'entrées retirées car URL déjà vue
    """

    library: OrganizedLibrary
    parsed_count: int
    duplicate_count: int = 0

    @property
    def kept_count(self) -> int:
        return self.parsed_count - self.duplicate_count


class IngestService:
    """
    Service orchestrant parsing, classification et organisation.

    Coordonne:
    - Le parser (IPlaylistParser) pour extraire les entrées
    - Le classifieur pour attribuer une catégorie à chaque entrée
    - L'organisateur pour reconstruire séries/saisons/épisodes
    """

    def __init__(
        self,
        parser: IPlaylistParser,
        classifier: ClassifierService,
        organizer: SeriesOrganizerService,
        deduplicate: bool = True,
    ) -> None:
        """
        Initialise le service d'import.

        Args:
            parser: Implementation de IPlaylistParser
            classifier: Service de classification
            organizer: Service d'organisation des épisodes
            deduplicate: Retirer les entrées dont l'URL est déjà apparue
        """
        self._parser = parser
        self._classifier = classifier
        self._organizer = organizer
        self._deduplicate = deduplicate

    def ingest(self, text: str) -> IngestReport:
        """
        Construit une bibliothèque organisée depuis le texte d'une playlist.

        Args:
            text: Contenu complet de la playlist

        Returns:
            IngestReport avec la bibliothèque et les compteurs
        """
        entries = self._parser.parse(text)
        parsed_count = len(entries)

        duplicate_count = 0
        if self._deduplicate:
            entries = remove_duplicates(entries)
            duplicate_count = parsed_count - len(entries)

        library = self.build_library(entries)
        self._log_summary(library, parsed_count, duplicate_count)
        return IngestReport(
            library=library,
            parsed_count=parsed_count,
            duplicate_count=duplicate_count,
        )

    def build_library(self, entries: Sequence[PlaylistEntry]) -> OrganizedLibrary:
        """Classe et organise une liste d'entrées déjà extraites."""
        categorized = self._classifier.categorize(entries)
        sections: dict = {}
        for category in Category:
            items = categorized[category]
            if category.is_episodic:
                sections[category] = EpisodicSection(shows=self._organizer.organize(items))
            else:
                sections[category] = FlatSection(entries=items)
        return OrganizedLibrary(sections=sections)

    def _log_summary(
        self, library: OrganizedLibrary, parsed_count: int, duplicate_count: int
    ) -> None:
        logger.info(
            f"Playlist importée: {parsed_count} entrée(s), {duplicate_count} doublon(s) retiré(s)"
        )
        for category in Category:
            section = library.section(category)
            if isinstance(section, EpisodicSection):
                logger.info(
                    f"- {category.value}: {section.show_count} série(s), "
                    f"{section.episode_count} épisode(s)"
                )
            else:
                logger.info(f"- {category.value}: {len(section)} entrée(s)")
