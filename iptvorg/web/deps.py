"""
Dépendances partagées de l'application web.

Accès au Container DI initialisé par le lifespan de l'application.
"""

from fastapi import Request

from ..config import Settings
from ..services.library import LibraryService


def get_library_service(request: Request) -> LibraryService:
    """Retourne un LibraryService construit par le container de l'application."""
    return request.app.state.container.library_service()


def get_settings(request: Request) -> Settings:
    """Retourne les paramètres chargés par le container de l'application."""
    return request.app.state.container.config()
