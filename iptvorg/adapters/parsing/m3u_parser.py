"""
Implementation du parser de playlists M3U/M3U8.

Ce module fournit M3UPlaylistParser qui implemente IPlaylistParser
pour extraire les entrees (#EXTINF + URL) d'un fichier M3U.
"""

import re
from typing import Iterable, Optional

from loguru import logger

from iptvorg.core.entities.entry import PlaylistEntry
from iptvorg.core.ports.playlist import IPlaylistParser
from iptvorg.utils.constants import (
    DEFAULT_GROUP,
    DEFAULT_STREAM_SCHEMES,
    GROUP_TITLE_ATTR,
    KNOWN_ATTRIBUTES,
    M3U_INFO_MARKER,
    TVG_ID_ATTR,
    TVG_LOGO_ATTR,
    TVG_NAME_ATTR,
)
from iptvorg.utils.helpers import clean_title

_DURATION_PATTERN = re.compile(r"^#EXTINF:\s*(-?\d+(?:\.\d+)?)")
_ATTRIBUTE_PATTERN = re.compile(r'([\w-]+)="([^"]*)"')
_SCHEME_PATTERN = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.-]*)://")


def find_title_separator(line: str) -> int:
    """
    Trouve la virgule qui separe les attributs du titre dans une ligne #EXTINF.

    C'est la premiere virgule situee hors d'une valeur entre guillemets ;
    un titre peut donc lui-meme contenir des virgules.
    Si les guillemets sont desequilibres, la derniere virgule est utilisee.

    Returns:
        Position de la virgule, ou -1 si la ligne n'en contient pas.
    """
    in_quotes = False
    for index, char in enumerate(line):
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            return index
    return line.rfind(",")


def parse_duration(line: str) -> int:
    """Extrait la duree d'une ligne #EXTINF (-1 si absente ou invalide)."""
    match = _DURATION_PATTERN.match(line)
    if not match:
        return -1
    return int(float(match.group(1)))


def parse_attributes(header: str) -> dict[str, str]:
    """
    Extrait toutes les paires key="value" d'une section d'attributs.

    En cas de cle repetee, la premiere occurrence est conservee.
    """
    attributes: dict[str, str] = {}
    for match in _ATTRIBUTE_PATTERN.finditer(header):
        attributes.setdefault(match.group(1), match.group(2))
    return attributes


class M3UPlaylistParser(IPlaylistParser):
    """
    Parser de playlists M3U ligne a ligne.

    Maintient une entree en attente ouverte par chaque ligne #EXTINF
    et completee par la ligne d'URL suivante.
    """

    def __init__(
        self,
        default_group: str = DEFAULT_GROUP,
        stream_schemes: Iterable[str] = DEFAULT_STREAM_SCHEMES,
    ) -> None:
        """
        Initialise le parser.

        Args:
            default_group: Groupe attribue aux entrees sans group-title
            stream_schemes: Schemes d'URL reconnus comme ligne de flux
        """
        self._default_group = default_group
        self._stream_schemes = frozenset(scheme.lower() for scheme in stream_schemes)

    def parse(self, text: str) -> list[PlaylistEntry]:
        """
        Parse le texte complet d'une playlist M3U.

        Args:
            text: Contenu de la playlist

        Returns:
            Entrees dans l'ordre du fichier.

        Raises:
            TypeError: si text n'est pas une chaine
        """
        if not isinstance(text, str):
            raise TypeError(f"Texte de playlist attendu, recu {type(text).__name__}")

        entries: list[PlaylistEntry] = []
        pending: Optional[dict] = None
        dropped = 0

        for raw_line in text.splitlines():
            line = raw_line.strip().lstrip("\ufeff")
            if not line:
                continue

            if line.startswith(M3U_INFO_MARKER):
                if pending is not None:
                    dropped += 1
                pending = self.parse_header(line)
            elif self.is_stream_url(line):
                if pending is None or not pending["name"]:
                    dropped += 1
                else:
                    entries.append(PlaylistEntry(url=line, **pending))
                pending = None

        if pending is not None:
            dropped += 1

        logger.debug(f"{len(entries)} entree(s) extraite(s), {dropped} bloc(s) ignore(s)")
        return entries

    def parse_header(self, line: str) -> dict:
        """
        Extrait duree, attributs et titre d'une ligne #EXTINF.

        Returns:
            Champs de PlaylistEntry hors url.
        """
        separator = find_title_separator(line)
        if separator >= 0:
            header, name = line[:separator], clean_title(line[separator + 1:])
        else:
            header, name = line, ""

        attributes = parse_attributes(header)
        extra = {
            key: value for key, value in attributes.items() if key not in KNOWN_ATTRIBUTES
        }

        return {
            "name": name,
            "duration": parse_duration(line),
            "tvg_id": attributes.get(TVG_ID_ATTR, ""),
            "tvg_name": attributes.get(TVG_NAME_ATTR, ""),
            "logo_url": attributes.get(TVG_LOGO_ATTR, ""),
            "group": attributes.get(GROUP_TITLE_ATTR) or self._default_group,
            "extra_attributes": extra,
        }

    def is_stream_url(self, line: str) -> bool:
        """Vrai si la ligne commence par un scheme de flux reconnu."""
        match = _SCHEME_PATTERN.match(line)
        return bool(match) and match.group(1).lower() in self._stream_schemes
