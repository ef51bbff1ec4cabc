"""
Fonctions utilitaires partagées dans le projet IPTVOrg.

Ce module centralise les fonctions réutilisées à travers le codebase :
- normalize_accents : suppression des diacritiques pour comparaison
- clean_title : nettoyage des bords d'un titre de playlist
- matching_text : texte normalisé comparé aux règles de classification
"""

import unicodedata


def _is_invisible(char: str) -> bool:
    """Vrai pour un espace, un caractère de contrôle ou de format (LRM, RLM, BOM...)."""
    return char.isspace() or unicodedata.category(char) in ("Cf", "Cc")


def clean_title(title: str) -> str:
    """
    Retire les espaces et caractères invisibles en début et fin de titre.

    Les caractères internes sont conservés : un ZWJ relie les emojis
    composés et les écritures arabe ou persane en dépendent.
    """
    start, end = 0, len(title)
    while start < end and _is_invisible(title[start]):
        start += 1
    while end > start and _is_invisible(title[end - 1]):
        end -= 1
    return title[start:end]


def normalize_accents(text: str) -> str:
    """
    Supprime les accents d'une chaîne pour une comparaison insensible aux accents.

    Utilise la décomposition NFD puis filtre les caractères diacritiques (Mn).
    Ex: "Documentário" -> "Documentario"
    """
    normalized = unicodedata.normalize("NFD", text)
    return "".join(char for char in normalized if unicodedata.category(char) != "Mn")


def matching_text(*parts: str) -> str:
    """Concatène les parties par un espace, sans accents et en minuscules."""
    return normalize_accents(" ".join(parts)).lower()
