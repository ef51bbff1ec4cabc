"""
Entite entree de playlist.

Une entree represente une unite lisible (chaine, film, episode) extraite
d'un bloc #EXTINF + URL d'un fichier M3U.
"""

from dataclasses import dataclass, field
from typing import Optional

from iptvorg.core.value_objects.series_info import SeriesInfo
from iptvorg.utils.constants import DEFAULT_GROUP

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def compute_entry_id(name: str, url: str, group: str) -> str:
    """
    Calcule un identifiant court et stable pour une entree.

    Hash 32 bits (h = h * 31 + c) de "nom-url-groupe", valeur absolue
    exprimee en base 36.
    """
    hash_value = 0
    for char in f"{name}-{url}-{group}":
        hash_value = (hash_value * 31 + ord(char)) & 0xFFFFFFFF
    if hash_value >= 0x80000000:
        hash_value -= 0x100000000
    return _to_base36(abs(hash_value))


@dataclass
class PlaylistEntry:
    """
    Entree lisible d'une playlist M3U.

    Attributs :
        name : Titre affiche (obligatoire)
        url : Adresse du flux (obligatoire)
        duration : Duree en secondes, -1 pour inconnue/direct
        tvg_id : Identifiant EPG (tvg-id)
        tvg_name : Nom EPG (tvg-name)
        logo_url : URL du logo (tvg-logo)
        group : Groupe d'origine (group-title), "Outros" si absent
        extra_attributes : Autres attributs key="value" de la ligne #EXTINF
        series_info : Serie/saison/episode pour les categories episodiques
    """

    name: str
    url: str
    duration: int = -1
    tvg_id: str = ""
    tvg_name: str = ""
    logo_url: str = ""
    group: str = DEFAULT_GROUP
    extra_attributes: dict[str, str] = field(default_factory=dict)
    series_info: Optional[SeriesInfo] = None

    @property
    def entry_id(self) -> str:
        """Identifiant derive de nom, url et groupe."""
        return compute_entry_id(self.name, self.url, self.group)
