"""
Entites metier representant les concepts centraux du domaine.

Exports:
- PlaylistEntry: Entree lisible d'une playlist (chaine, film, episode)
- OrganizedLibrary: Bibliotheque organisee par categorie
- FlatSection / EpisodicSection: Formes possibles d'une section de categorie
"""

from iptvorg.core.entities.entry import PlaylistEntry, compute_entry_id
from iptvorg.core.entities.library import (
    EpisodicSection,
    FlatSection,
    OrganizedLibrary,
    Section,
    new_section,
)

__all__ = [
    "PlaylistEntry",
    "compute_entry_id",
    "OrganizedLibrary",
    "FlatSection",
    "EpisodicSection",
    "Section",
    "new_section",
]
