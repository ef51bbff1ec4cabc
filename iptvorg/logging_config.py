"""
Configuration du logging de l'application via loguru.

Fournit un logging structure avec :
- Sortie console : lisible, colorée, pour suivre un import en direct
- Sortie fichier (optionnelle) : sérialisée en JSON, avec rotation
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

_VERBOSITY_LEVELS = ("INFO", "DEBUG", "TRACE")


def level_from_verbosity(verbose: int = 0, quiet: bool = False, default: str = "INFO") -> str:
    """
    Traduit les options -v/-q de la CLI en niveau loguru.

    Args :
        verbose : Nombre de -v (0 = niveau par défaut, 1 = DEBUG, 2+ = TRACE)
        quiet : Mode silencieux (erreurs uniquement), prioritaire sur verbose
        default : Niveau utilise sans option
    """
    if quiet:
        return "ERROR"
    if verbose <= 0:
        return default
    return _VERBOSITY_LEVELS[min(verbose, len(_VERBOSITY_LEVELS) - 1)]


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = Path("logs/iptvorg.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum pour la sortie console
        log_file : Chemin du fichier de log JSON, None pour la console seule
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs à conserver
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    if log_file is None:
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug(f"Logging configuré : {log_file} (rotation {rotation_size})")
