"""
Outils sur les listes d'entrées de playlist.

Fonctions pures utilisées par l'import, l'API et la CLI :
- remove_duplicates / merge_playlists : déduplication par URL, fusion
- search / sort_entries / group_by : filtrage, tri et regroupement
- is_valid_url / extract_url_metadata : inspection des URLs de flux
- compute_stats : statistiques d'une liste d'entrées
"""

import re
from collections import Counter
from typing import Iterable, Optional, Sequence
from urllib.parse import urlparse

from iptvorg.core.entities.entry import PlaylistEntry
from iptvorg.core.ports.playlist import IPlaylistParser
from iptvorg.core.value_objects.playlist_info import PlaylistStats, UrlMetadata
from iptvorg.utils.constants import (
    DEFAULT_GROUP,
    URL_BITRATE_PATTERN,
    URL_QUALITY_PATTERN,
    VALID_URL_SCHEMES,
)

_EXTENSION_PATTERN = re.compile(r"\.(\w+)$")

SORT_FIELDS = ("name", "group")


def remove_duplicates(entries: Iterable[PlaylistEntry]) -> list[PlaylistEntry]:
    """Retire les entrées dont l'URL a déjà été vue (la première est gardée)."""
    seen: set[str] = set()
    unique = []
    for entry in entries:
        if entry.url in seen:
            continue
        seen.add(entry.url)
        unique.append(entry)
    return unique


def merge_playlists(texts: Iterable[str], parser: IPlaylistParser) -> list[PlaylistEntry]:
    """
    Fusionne plusieurs playlists en une liste sans doublons d'URL.

    Args:
        texts: Contenus des playlists, dans l'ordre de priorité
        parser: Parser utilise pour chaque contenu
    """
    merged: list[PlaylistEntry] = []
    for text in texts:
        merged.extend(parser.parse(text))
    return remove_duplicates(merged)


def search(entries: Sequence[PlaylistEntry], term: Optional[str]) -> list[PlaylistEntry]:
    """
    Filtre les entrées dont le nom, le groupe ou le tvg-name contient le terme.

    La comparaison est insensible à la casse ; un terme vide retourne tout.
    """
    if not term:
        return list(entries)
    needle = term.lower()
    return [
        entry
        for entry in entries
        if needle in entry.name.lower()
        or needle in entry.group.lower()
        or (entry.tvg_name and needle in entry.tvg_name.lower())
    ]


def sort_entries(
    entries: Sequence[PlaylistEntry], by: str = "name", order: str = "asc"
) -> list[PlaylistEntry]:
    """
    Trie les entrées par nom ou par groupe (insensible à la casse).

    Un critere inconnu trie par nom ; order="desc" inverse l'ordre.
    """
    field_name = by if by in SORT_FIELDS else "name"
    return sorted(
        entries,
        key=lambda entry: getattr(entry, field_name).lower(),
        reverse=order == "desc",
    )


def group_by(entries: Iterable[PlaylistEntry], field_name: str = "group") -> dict[str, list[PlaylistEntry]]:
    """Regroupe les entrées selon la valeur d'un champ ("Outros" si vide)."""
    grouped: dict[str, list[PlaylistEntry]] = {}
    for entry in entries:
        key = getattr(entry, field_name, "") or DEFAULT_GROUP
        grouped.setdefault(str(key), []).append(entry)
    return grouped


def is_valid_url(url: str) -> bool:
    """Vrai pour une URL http, https, rtmp ou rtsp avec un hote."""
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme.lower() in VALID_URL_SCHEMES and bool(parsed.netloc)


def extract_url_metadata(url: str) -> UrlMetadata:
    """
    Déduit protocole, extension, qualité et débit d'une URL de flux.

    Les champs non deductibles restent vides.
    """
    try:
        parsed = urlparse(url)
    except ValueError:
        return UrlMetadata()

    extension_match = _EXTENSION_PATTERN.search(parsed.path)
    quality_match = URL_QUALITY_PATTERN.search(url)
    bitrate_match = URL_BITRATE_PATTERN.search(url)

    return UrlMetadata(
        protocol=parsed.scheme.lower(),
        extension=extension_match.group(1) if extension_match else "",
        quality=quality_match.group(1) if quality_match else "",
        bitrate=f"{bitrate_match.group(1)}k" if bitrate_match else "",
    )


def _url_protocol(url: str) -> str:
    try:
        return urlparse(url).scheme.lower() if url else ""
    except ValueError:
        return ""


def compute_stats(entries: Sequence[PlaylistEntry]) -> PlaylistStats:
    """Calcule le total, la répartition par groupe et protocole, et la couverture des logos."""
    groups: Counter[str] = Counter()
    protocols: Counter[str] = Counter()
    with_logo = 0

    for entry in entries:
        groups[entry.group] += 1
        if entry.logo_url:
            with_logo += 1
        protocols[_url_protocol(entry.url) or "unknown"] += 1

    return PlaylistStats(
        total=len(entries),
        groups=dict(groups),
        with_logo=with_logo,
        without_logo=len(entries) - with_logo,
        protocols=dict(protocols),
    )
