"""
Generation de playlists M3U depuis des entrees.

Ce module fournit M3UPlaylistWriter, l'inverse exact de M3UPlaylistParser :
relire le texte produit redonne les memes entrees.
"""

from typing import Sequence

from iptvorg.core.entities.entry import PlaylistEntry
from iptvorg.core.ports.playlist import IPlaylistWriter
from iptvorg.utils.constants import (
    GROUP_TITLE_ATTR,
    M3U_FILE_MARKER,
    M3U_INFO_MARKER,
    M3U_PLAYLIST_MARKER,
    TVG_ID_ATTR,
    TVG_LOGO_ATTR,
    TVG_NAME_ATTR,
)


def _clean_value(value: str) -> str:
    # Une valeur d'attribut ne peut contenir ni guillemet ni saut de ligne
    return value.replace('"', "'").replace("\n", " ").replace("\r", " ")


class M3UPlaylistWriter(IPlaylistWriter):
    """Ecrivain de playlists au format M3U etendu."""

    def serialize(self, entries: Sequence[PlaylistEntry], title: str = "") -> str:
        """
        Produit le texte M3U d'une liste d'entrees.

        Args:
            entries: Entrees a ecrire, dans l'ordre
            title: Titre de la playlist (ligne #PLAYLIST, omise si vide)

        Returns:
            Texte commencant par #EXTM3U, un bloc #EXTINF + URL par entree.
        """
        lines = [M3U_FILE_MARKER]
        if title:
            lines.append(f"{M3U_PLAYLIST_MARKER}{_clean_value(title)}")
        for entry in entries:
            lines.append(self.format_header(entry))
            lines.append(entry.url)
        return "\n".join(lines) + "\n"

    def format_header(self, entry: PlaylistEntry) -> str:
        """Reconstruit la ligne #EXTINF d'une entree."""
        duration = entry.duration if entry.duration is not None else -1
        parts = [f"{M3U_INFO_MARKER}{duration}"]

        named = (
            (TVG_ID_ATTR, entry.tvg_id),
            (TVG_NAME_ATTR, entry.tvg_name),
            (TVG_LOGO_ATTR, entry.logo_url),
            (GROUP_TITLE_ATTR, entry.group),
        )
        for key, value in named:
            if value:
                parts.append(f'{key}="{_clean_value(value)}"')

        for key, value in entry.extra_attributes.items():
            parts.append(f'{key}="{_clean_value(value)}"')

        name = entry.name.replace("\n", " ").replace("\r", " ")
        return " ".join(parts) + f",{name}"
