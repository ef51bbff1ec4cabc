"""
Utilitaires partages pour les commandes CLI d'IPTVOrg.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container initialise
- resolve_category : conversion d'un argument CLI en Category
- read_playlist_file : lecture d'un fichier M3U sur disque
"""

from contextlib import contextmanager
from functools import wraps
from pathlib import Path

import typer
from loguru import logger as loguru_logger
from rich.console import Console

from iptvorg.container import Container
from iptvorg.core.exceptions import UnknownCategoryError
from iptvorg.core.value_objects.category import Category

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("iptvorg")
    try:
        yield
    finally:
        loguru_logger.enable("iptvorg")


def with_container(requires_db: bool = True):
    """
    Decorateur qui injecte un container initialise en premier argument.

    Args:
        requires_db: Si True (defaut), initialise la base de donnees.

    Usage:
        @with_container()
        def _my_command(container, ...):
            library = container.library_service()
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            container = Container()
            if requires_db:
                container.database.init()
            return func(container, *args, **kwargs)
        return wrapper
    return decorator


def resolve_category(value: str) -> Category:
    """Convertit un argument CLI en Category, ou termine avec le code 1."""
    try:
        return Category.from_value(value)
    except UnknownCategoryError as e:
        choices = ", ".join(category.value for category in Category)
        console.print(f"[red]Erreur:[/red] {e} (choix: {choices})")
        raise typer.Exit(code=1)


def read_playlist_file(path: Path) -> str:
    """Lit un fichier M3U (UTF-8, caracteres invalides remplaces)."""
    if not path.is_file():
        console.print(f"[red]Erreur:[/red] Fichier introuvable: {path}")
        raise typer.Exit(code=1)
    return path.read_text(encoding="utf-8", errors="replace")
