"""
Service de classification des entrées de playlist par catégorie.

La classification est une table de règles ordonnée (catégorie, patterns)
évaluée par une seule routine "première règle satisfaite". Les patterns
sont des données : une table personnalisée peut être injectée sans
modifier l'algorithme.
"""

import re
from typing import Iterable, Optional, Sequence, TypeVar

from iptvorg.core.entities.entry import PlaylistEntry
from iptvorg.core.value_objects.category import Category
from iptvorg.utils.constants import CATEGORY_RULES
from iptvorg.utils.helpers import matching_text

T = TypeVar("T")

RuleTable = Sequence[tuple[Category, Sequence[re.Pattern[str]]]]


def first_match(
    rules: Iterable[tuple[T, Sequence[re.Pattern[str]]]], text: str
) -> Optional[T]:
    """
    Retourne la clé de la première règle dont un pattern correspond au texte.

    Args:
        rules: Paires (clé, patterns) dans l'ordre de priorité
        text: Texte à tester

    Returns:
        La clé de la première règle satisfaite, ou None.
    """
    for key, patterns in rules:
        if any(pattern.search(text) for pattern in patterns):
            return key
    return None


class ClassifierService:
    """
    Service attribuant exactement une catégorie à chaque entrée.

    La décision ne dépend que du nom et du groupe de l'entrée.
    Toute entrée sans correspondance est rangée dans CHANNELS.
    """

    def __init__(self, rules: Optional[RuleTable] = None) -> None:
        """
        Initialise le classifieur.

        Args:
            rules: Table de règles ordonnée (défaut: CATEGORY_RULES)
        """
        self._rules = rules if rules is not None else CATEGORY_RULES

    def classify(self, entry: PlaylistEntry) -> Category:
        """Retourne la catégorie d'une entrée."""
        return self.classify_text(entry.name, entry.group)

    def classify_text(self, name: str, group: str = "") -> Category:
        """Retourne la catégorie correspondant à un nom et un groupe."""
        text = matching_text(name or "", group or "")
        category = first_match(self._rules, text)
        return category if category is not None else Category.CHANNELS

    def categorize(self, entries: Iterable[PlaylistEntry]) -> dict[Category, list[PlaylistEntry]]:
        """
        Répartit des entrées par catégorie.

        Returns:
            Dictionnaire contenant toutes les catégories (listes éventuellement
            vides), entrées dans l'ordre d'arrivée.
        """
        categorized: dict[Category, list[PlaylistEntry]] = {
            category: [] for category in Category
        }
        for entry in entries:
            categorized[self.classify(entry)].append(entry)
        return categorized
