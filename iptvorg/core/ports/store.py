"""
Interface port pour le stockage de la bibliotheque organisee.

Le contrat d'invalidation est explicite : replace() remplace integralement
la bibliotheque courante, get() retourne la derniere bibliotheque ecrite
et sa date d'ecriture.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from iptvorg.core.entities.library import OrganizedLibrary


class ILibraryStore(ABC):
    """Interface de stockage de la bibliotheque organisee."""

    @abstractmethod
    def replace(self, library: OrganizedLibrary) -> datetime:
        """Remplace la bibliotheque courante. Retourne la date d'ecriture."""
        ...

    @abstractmethod
    def get(self) -> tuple[Optional[OrganizedLibrary], Optional[datetime]]:
        """Retourne (bibliotheque, date d'ecriture), ou (None, None) si vide."""
        ...
