"""
Conversion entre la bibliotheque organisee et sa forme JSON.

Forme produite (utilisee par le stockage et par l'API HTTP) :
    {
        "channels": [ {entree}, ... ],
        "series": { "Nom": { "1": [ {entree}, ... ] } },
        ...
    }
Les numeros de saison sont des cles texte (contrainte JSON).
"""

from typing import Any

from iptvorg.core.entities.entry import PlaylistEntry
from iptvorg.core.entities.library import (
    EpisodicSection,
    FlatSection,
    OrganizedLibrary,
    Section,
    new_section,
)
from iptvorg.core.value_objects.category import Category
from iptvorg.core.value_objects.series_info import SeriesInfo
from iptvorg.utils.constants import DEFAULT_GROUP


def entry_to_dict(entry: PlaylistEntry) -> dict[str, Any]:
    """Convertit une entree en dictionnaire serialisable."""
    data: dict[str, Any] = {
        "id": entry.entry_id,
        "name": entry.name,
        "url": entry.url,
        "duration": entry.duration,
        "tvg_id": entry.tvg_id,
        "tvg_name": entry.tvg_name,
        "logo_url": entry.logo_url,
        "group": entry.group,
        "extra_attributes": dict(entry.extra_attributes),
    }
    if entry.series_info is not None:
        data["series_info"] = {
            "show_name": entry.series_info.show_name,
            "season": entry.series_info.season,
            "episode": entry.series_info.episode,
        }
    return data


def entry_from_dict(data: dict[str, Any]) -> PlaylistEntry:
    """Reconstruit une entree depuis sa forme dictionnaire."""
    info = data.get("series_info")
    return PlaylistEntry(
        name=data["name"],
        url=data["url"],
        duration=int(data.get("duration", -1)),
        tvg_id=data.get("tvg_id", ""),
        tvg_name=data.get("tvg_name", ""),
        logo_url=data.get("logo_url", ""),
        group=data.get("group") or DEFAULT_GROUP,
        extra_attributes=dict(data.get("extra_attributes") or {}),
        series_info=SeriesInfo(**info) if info else None,
    )


def section_to_json(section: Section) -> Any:
    """Convertit une section en liste (plate) ou en dictionnaire imbrique (episodique)."""
    if isinstance(section, EpisodicSection):
        return {
            show_name: {
                str(season): [entry_to_dict(entry) for entry in episodes]
                for season, episodes in seasons.items()
            }
            for show_name, seasons in section.shows.items()
        }
    return [entry_to_dict(entry) for entry in section.entries]


def section_from_json(category: Category, data: Any) -> Section:
    """Reconstruit la section d'une categorie."""
    section = new_section(category)
    if not data:
        return section
    if isinstance(section, EpisodicSection):
        for show_name, seasons in data.items():
            section.shows[show_name] = {
                int(season): [entry_from_dict(item) for item in episodes]
                for season, episodes in sorted(seasons.items(), key=lambda pair: int(pair[0]))
            }
    elif isinstance(section, FlatSection):
        section.entries.extend(entry_from_dict(item) for item in data)
    return section


def library_to_dict(library: OrganizedLibrary) -> dict[str, Any]:
    """Convertit toute la bibliotheque (toutes les categories presentes)."""
    return {category.value: section_to_json(library.section(category)) for category in Category}


def library_from_dict(data: dict[str, Any]) -> OrganizedLibrary:
    """Reconstruit une bibliotheque ; les categories absentes sont vides."""
    return OrganizedLibrary(
        sections={
            category: section_from_json(category, data.get(category.value))
            for category in Category
        }
    )
