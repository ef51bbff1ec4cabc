"""
Objet valeur pour la categorie de contenu d'une entree de playlist.
"""

from enum import Enum

from iptvorg.core.exceptions import UnknownCategoryError


class Category(Enum):
    """Categorie de contenu attribuee a chaque entree.

    Valeurs:
        MOVIES: Films
        SERIES: Series TV (episodiques)
        CARTOONS: Dessins animes et contenu jeunesse (episodiques)
        SPORTS: Chaines et evenements sportifs
        NEWS: Information
        MUSIC: Musique et radio
        DOCUMENTARIES: Documentaires
        ADULT: Contenu adulte
        CHANNELS: Chaines en direct / non classees (repli)
    """

    MOVIES = "movies"
    SERIES = "series"
    CARTOONS = "cartoons"
    SPORTS = "sports"
    NEWS = "news"
    MUSIC = "music"
    DOCUMENTARIES = "documentaries"
    ADULT = "adult"
    CHANNELS = "channels"

    @property
    def is_episodic(self) -> bool:
        """Vrai si le contenu est organise en serie/saison/episode."""
        return self in EPISODIC_CATEGORIES

    @classmethod
    def from_value(cls, value: str) -> "Category":
        """
        Retrouve une categorie depuis sa valeur textuelle (insensible a la casse).

        Raises:
            UnknownCategoryError: si la valeur ne correspond a aucune categorie
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise UnknownCategoryError(value) from None


EPISODIC_CATEGORIES = frozenset({Category.SERIES, Category.CARTOONS})
