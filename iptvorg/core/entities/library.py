"""
Entite bibliotheque organisee.

Structure terminale du pipeline : chaque categorie possede une section,
soit plate (liste ordonnee d'entrees), soit episodique
(serie -> saison -> episodes tries).
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterator, Union

from iptvorg.core.entities.entry import PlaylistEntry
from iptvorg.core.exceptions import EntryNotFoundError
from iptvorg.core.value_objects.category import Category
from iptvorg.core.value_objects.series_info import SeriesInfo


def _episode_key(entry: PlaylistEntry) -> int:
    return entry.series_info.episode if entry.series_info else 1


@dataclass
class FlatSection:
    """Section d'une categorie non episodique : entrees dans l'ordre d'arrivee."""

    entries: list[PlaylistEntry] = field(default_factory=list)

    def flatten(self) -> list[PlaylistEntry]:
        """Retourne une copie de la liste des entrees."""
        return list(self.entries)

    def insert(self, entry: PlaylistEntry) -> None:
        """Ajoute une entree en fin de section."""
        self.entries.append(entry)

    def remove_at(self, index: int) -> PlaylistEntry:
        """Retire et retourne l'entree a l'index donne."""
        return self.entries.pop(index)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass
class EpisodicSection:
    """
    Section d'une categorie episodique.

    Attributs:
        shows: Nom de serie -> numero de saison -> episodes tries par numero.
               Les series suivent l'ordre d'arrivee, les saisons sont triees.
    """

    shows: dict[str, dict[int, list[PlaylistEntry]]] = field(default_factory=dict)

    def iter_episodes(self) -> Iterator[PlaylistEntry]:
        """Parcourt les episodes : series dans l'ordre, saisons croissantes."""
        for seasons in self.shows.values():
            for season in sorted(seasons):
                yield from seasons[season]

    def flatten(self) -> list[PlaylistEntry]:
        """Retourne tous les episodes dans l'ordre de parcours."""
        return list(self.iter_episodes())

    def insert(self, entry: PlaylistEntry) -> None:
        """
        Range un episode dans sa serie et sa saison.

        L'entree doit porter son SeriesInfo ; a defaut, elle est rangee
        comme episode 1 de la saison 1 d'une serie nommee d'apres son titre.
        """
        info = entry.series_info or SeriesInfo(show_name=entry.name)
        seasons = self.shows.setdefault(info.show_name, {})
        seasons.setdefault(info.season, []).append(entry)
        seasons[info.season].sort(key=_episode_key)
        self.shows[info.show_name] = dict(sorted(seasons.items()))

    def remove_at(self, index: int) -> PlaylistEntry:
        """
        Retire l'episode a l'index donne dans l'ordre de parcours.

        Les saisons et series devenues vides sont supprimees.
        """
        if index < 0:
            index += self.episode_count
        position = 0
        for show_name, seasons in self.shows.items():
            for season in sorted(seasons):
                episodes = seasons[season]
                if index < position + len(episodes):
                    removed = episodes.pop(index - position)
                    if not episodes:
                        del seasons[season]
                    if not seasons:
                        del self.shows[show_name]
                    return removed
                position += len(episodes)
        raise IndexError(index)

    @property
    def show_count(self) -> int:
        return len(self.shows)

    @property
    def episode_count(self) -> int:
        return sum(len(episodes) for seasons in self.shows.values() for episodes in seasons.values())

    def __len__(self) -> int:
        return self.episode_count


Section = Union[FlatSection, EpisodicSection]


@dataclass
class OrganizedLibrary:
    """
    Bibliotheque organisee par categorie.

    Reconstruite integralement a chaque import ; un nouvel import remplace
    la precedente.

    Attributs :
        sections : Section (plate ou episodique) de chaque categorie
        created_at : Date de construction
    """

    sections: dict[Category, Section] = field(default_factory=dict)
    created_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def empty(cls) -> "OrganizedLibrary":
        """Cree une bibliotheque avec une section vide pour chaque categorie."""
        return cls(sections={category: new_section(category) for category in Category})

    def section(self, category: Category) -> Section:
        """Retourne la section d'une categorie (creee vide si absente)."""
        if category not in self.sections:
            self.sections[category] = new_section(category)
        return self.sections[category]

    def flat(self, category: Category) -> FlatSection:
        """Retourne la section plate d'une categorie non episodique."""
        section = self.section(category)
        if not isinstance(section, FlatSection):
            raise TypeError(f"La categorie '{category.value}' est episodique")
        return section

    def episodic(self, category: Category) -> EpisodicSection:
        """Retourne la section episodique d'une categorie episodique."""
        section = self.section(category)
        if not isinstance(section, EpisodicSection):
            raise TypeError(f"La categorie '{category.value}' n'est pas episodique")
        return section

    def flatten(self, category: Category) -> list[PlaylistEntry]:
        """Retourne les entrees d'une categorie sous forme de liste plate."""
        return self.section(category).flatten()

    def add_entry(self, category: Category, entry: PlaylistEntry) -> None:
        """Ajoute une entree a une categorie sans reconstruire la bibliotheque."""
        self.section(category).insert(entry)

    def remove_entry(self, category: Category, index: int) -> PlaylistEntry:
        """
        Retire l'entree a l'index donne (ordre de la liste plate).

        Raises:
            EntryNotFoundError: si l'index est hors limites
        """
        try:
            return self.section(category).remove_at(index)
        except IndexError:
            raise EntryNotFoundError(category.value, index) from None

    def counts(self) -> dict[str, int]:
        """
        Resume par categorie : nombre d'entrees pour les categories plates,
        nombre de series pour les categories episodiques.
        """
        summary = {}
        for category in Category:
            section = self.section(category)
            if isinstance(section, EpisodicSection):
                summary[category.value] = section.show_count
            else:
                summary[category.value] = len(section)
        return summary

    @property
    def total_entries(self) -> int:
        return sum(len(section) for section in self.sections.values())


def new_section(category: Category) -> Section:
    """Cree une section vide adaptee a la categorie."""
    if category.is_episodic:
        return EpisodicSection()
    return FlatSection()
