"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Ports playlist : Contrats de lecture/ecriture du format texte
- IPlaylistParser : Texte de playlist -> entrees
- IPlaylistWriter : Entrees -> texte de playlist

Ports stockage : Contrat de persistance de la bibliotheque
- ILibraryStore : replace(library) / get()
"""

from iptvorg.core.ports.playlist import IPlaylistParser, IPlaylistWriter
from iptvorg.core.ports.store import ILibraryStore

__all__ = [
    "IPlaylistParser",
    "IPlaylistWriter",
    "ILibraryStore",
]
