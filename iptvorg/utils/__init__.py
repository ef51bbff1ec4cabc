"""
Utilitaires et constantes pour IPTVOrg.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from iptvorg.utils.constants import (
    CATEGORY_RULES,
    DEFAULT_GROUP,
    M3U_MIME_TYPE,
    SERIES_TITLE_PATTERNS,
)

__all__ = [
    "CATEGORY_RULES",
    "DEFAULT_GROUP",
    "M3U_MIME_TYPE",
    "SERIES_TITLE_PATTERNS",
]
