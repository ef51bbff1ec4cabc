"""
Objet valeur pour les informations serie/saison/episode d'une entree.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SeriesInfo:
    """
    Informations extraites du titre d'un episode.

    Attributs:
        show_name: Nom de la serie
        season: Numero de saison (>= 1)
        episode: Numero d'episode (>= 1)
    """

    show_name: str
    season: int = 1
    episode: int = 1

    @property
    def label(self) -> str:
        """Libelle court au format S01E02."""
        return f"S{self.season:02d}E{self.episode:02d}"
