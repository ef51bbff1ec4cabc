"""
Exceptions du domaine IPTVOrg.

Le pipeline de parsing/classification ne leve pas d'erreur sur une entree
malformee (repli silencieux). Ces exceptions concernent les operations
sur la bibliotheque stockee (categorie inconnue, index hors limites,
bibliotheque absente).
"""


class IPTVOrgError(Exception):
    """Classe de base des erreurs IPTVOrg."""


class UnknownCategoryError(IPTVOrgError):
    """
    Exception levee quand une categorie demandee n'existe pas.

    Attributes:
        category: Valeur de categorie recue
    """

    def __init__(self, category: str) -> None:
        self.category = category
        super().__init__(f"Categorie invalide: {category}")


class EntryNotFoundError(IPTVOrgError):
    """
    Exception levee quand un index d'entree est hors limites.

    Attributes:
        category: Categorie concernee
        index: Index demande
    """

    def __init__(self, category: str, index: int) -> None:
        self.category = category
        self.index = index
        super().__init__(f"Aucune entree a l'index {index} dans '{category}'")


class EmptyLibraryError(IPTVOrgError):
    """Exception levee quand aucune bibliotheque n'a encore ete importee."""

    def __init__(self) -> None:
        super().__init__("Aucune playlist importee")
