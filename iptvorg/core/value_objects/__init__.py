"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- Category : Categorie de contenu d'une entree
- SeriesInfo : Nom de serie, saison et episode extraits d'un titre
- UrlMetadata : Metadonnees deduites d'une URL de flux
- PlaylistStats : Statistiques d'une liste d'entrees
"""

from iptvorg.core.value_objects.category import Category, EPISODIC_CATEGORIES
from iptvorg.core.value_objects.playlist_info import PlaylistStats, UrlMetadata
from iptvorg.core.value_objects.series_info import SeriesInfo

__all__ = [
    "Category",
    "EPISODIC_CATEGORIES",
    "SeriesInfo",
    "UrlMetadata",
    "PlaylistStats",
]
