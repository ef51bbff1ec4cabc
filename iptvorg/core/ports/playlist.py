"""
Interfaces ports pour la lecture et l'ecriture de playlists.

Le domaine manipule des listes de PlaylistEntry ; le format texte
(M3U/M3U8) est l'affaire des adaptateurs.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from iptvorg.core.entities.entry import PlaylistEntry


class IPlaylistParser(ABC):
    """Interface pour transformer le texte d'une playlist en entrees."""

    @abstractmethod
    def parse(self, text: str) -> list[PlaylistEntry]:
        """
        Parse le texte complet d'une playlist.

        Args:
            text: Contenu de la playlist deja decode

        Retourne:
            Entrees dans l'ordre du fichier. Les blocs malformes sont ignores,
            un texte sans entree retourne une liste vide.
        """
        ...


class IPlaylistWriter(ABC):
    """Interface pour regenerer le texte d'une playlist depuis des entrees."""

    @abstractmethod
    def serialize(self, entries: Sequence[PlaylistEntry], title: str = "") -> str:
        """
        Produit le texte d'une playlist relisible par IPlaylistParser.

        Args:
            entries: Entrees a ecrire, dans l'ordre
            title: Titre affiche de la playlist
        """
        ...
