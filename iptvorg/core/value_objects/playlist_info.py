"""
Objets valeur decrivant une URL de flux et les statistiques d'une playlist.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class UrlMetadata:
    """
    Metadonnees deduites d'une URL de flux.

    Attributs:
        protocol: Scheme de l'URL sans ":" (ex: "http")
        extension: Extension du chemin (ex: "m3u8", "ts")
        quality: Qualite detectee dans l'URL (ex: "1080p", "hd")
        bitrate: Debit detecte (ex: "2500k")
    """

    protocol: str = ""
    extension: str = ""
    quality: str = ""
    bitrate: str = ""


@dataclass
class PlaylistStats:
    """Statistiques agregees d'une liste d'entrees."""

    total: int = 0
    groups: dict[str, int] = field(default_factory=dict)
    with_logo: int = 0
    without_logo: int = 0
    protocols: dict[str, int] = field(default_factory=dict)
