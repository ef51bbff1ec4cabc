"""
Module de persistance SQLite pour IPTVOrg.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Configuration de l'engine SQLite, initialisation des tables
- models.py : Modeles SQLModel representant les tables de la base de donnees
- library_codec.py : Conversion bibliotheque <-> JSON
- library_store.py : Implementation SQLModel de ILibraryStore
- cached_store.py : Cache TTL devant un ILibraryStore

Usage:
    from iptvorg.infrastructure.persistence import build_engine, init_db
    from iptvorg.infrastructure.persistence import SQLModelLibraryStore

    engine = build_engine("sqlite:///iptvorg.db")
    init_db(engine)
    store = SQLModelLibraryStore(engine)
"""

from iptvorg.infrastructure.persistence.cached_store import CachedLibraryStore
from iptvorg.infrastructure.persistence.database import (
    build_engine,
    init_db,
)
from iptvorg.infrastructure.persistence.library_store import SQLModelLibraryStore
from iptvorg.infrastructure.persistence.models import LibrarySnapshotModel

__all__ = [
    "build_engine",
    "init_db",
    "LibrarySnapshotModel",
    "SQLModelLibraryStore",
    "CachedLibraryStore",
]
