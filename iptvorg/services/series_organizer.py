"""
Service d'organisation des séries par saison et épisode.

Reconstruit la structure série -> saison -> épisodes à partir de titres
libres ("Show S01E02", "Show 1x02", "Show Temporada 1 Episodio 2", ...).
"""

import re
from dataclasses import replace
from typing import Iterable, Optional, Sequence

from loguru import logger

from iptvorg.core.entities.entry import PlaylistEntry
from iptvorg.core.entities.library import EpisodicSection
from iptvorg.core.value_objects.series_info import SeriesInfo
from iptvorg.utils.constants import SEASON_TOKEN_PATTERN, SERIES_TITLE_PATTERNS

TitlePatterns = Sequence[tuple[re.Pattern[str], int, int, int]]

Organized = dict[str, dict[int, list[PlaylistEntry]]]

_TRAILING_SEPARATORS = " -–:._"


def _clean_show_name(raw: str) -> str:
    # "Show - S01E02" capture "Show -" avec le premier pattern
    return raw.strip().rstrip(_TRAILING_SEPARATORS).strip()


def _positive(value: str) -> int:
    return max(1, int(value))


def extract_series_info(
    name: str, patterns: Optional[TitlePatterns] = None
) -> SeriesInfo:
    """
    Extrait série, saison et épisode d'un titre.

    Les patterns sont essayes dans l'ordre, le premier qui correspond gagne.
    Sans correspondance, le nom de série est la partie du titre précédant le
    premier indicateur de saison (S01, Temporada, 1x02), ou le titre complet ;
    saison et épisode valent alors 1. Deux titres sans rapport peuvent ainsi
    se retrouver sous la même série.

    Args:
        name: Titre de l'entrée
        patterns: Table (regex, index nom, index saison, index épisode)

    Returns:
        SeriesInfo (saison et épisode >= 1)
    """
    table = patterns if patterns is not None else SERIES_TITLE_PATTERNS
    for regex, name_index, season_index, episode_index in table:
        match = regex.match(name)
        if not match:
            continue
        show_name = _clean_show_name(match.group(name_index))
        if show_name:
            return SeriesInfo(
                show_name=show_name,
                season=_positive(match.group(season_index)),
                episode=_positive(match.group(episode_index)),
            )

    token_match = SEASON_TOKEN_PATTERN.match(name)
    if token_match and _clean_show_name(token_match.group(1)):
        show_name = _clean_show_name(token_match.group(1))
    else:
        show_name = name.strip()
    return SeriesInfo(show_name=show_name, season=1, episode=1)


class SeriesOrganizerService:
    """
    Service de regroupement des épisodes.

    Methodes :
        organize: Groupe des entrées en série -> saison -> épisodes triés.
        build_section: Meme regroupement sous forme d'EpisodicSection.
    """

    def __init__(self, patterns: Optional[TitlePatterns] = None) -> None:
        self._patterns = patterns

    def extract(self, entry: PlaylistEntry) -> PlaylistEntry:
        """Retourne une copie de l'entrée portant son SeriesInfo."""
        info = extract_series_info(entry.name, self._patterns)
        return replace(entry, series_info=info)

    def organize(self, entries: Iterable[PlaylistEntry]) -> Organized:
        """
        Groupe des entrées épisodiques.

        Les séries suivent l'ordre d'arrivée, les saisons sont triées par
        numéro croissant et les épisodes de chaque saison par numéro
        d'épisode (tri stable : à numéro égal, l'ordre d'arrivée est gardé).

        Returns:
            Nom de série -> numéro de saison -> entrées (avec series_info).
        """
        grouped: Organized = {}
        for entry in entries:
            episode = self.extract(entry)
            info = episode.series_info
            grouped.setdefault(info.show_name, {}).setdefault(info.season, []).append(episode)

        organized: Organized = {}
        for show_name, seasons in grouped.items():
            organized[show_name] = {
                season: sorted(seasons[season], key=lambda item: item.series_info.episode)
                for season in sorted(seasons)
            }
            logger.debug(
                f"{show_name}: {len(seasons)} saison(s), "
                f"{sum(len(items) for items in seasons.values())} épisode(s)"
            )
        return organized

    def build_section(self, entries: Iterable[PlaylistEntry]) -> EpisodicSection:
        """Organise des entrées et les enveloppe dans une EpisodicSection."""
        return EpisodicSection(shows=self.organize(entries))
