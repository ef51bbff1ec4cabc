"""
Implementation SQLModel du stockage de la bibliotheque.

Implemente l'interface ILibraryStore : la bibliotheque organisee est
ecrite comme un instantane JSON unique, remplace a chaque import.
"""

import json
from datetime import datetime
from typing import Optional

from loguru import logger
from sqlalchemy import Engine
from sqlmodel import Session, select

from iptvorg.core.entities.library import OrganizedLibrary
from iptvorg.core.ports.store import ILibraryStore
from iptvorg.infrastructure.persistence.library_codec import (
    library_from_dict,
    library_to_dict,
)
from iptvorg.infrastructure.persistence.models import LibrarySnapshotModel


class SQLModelLibraryStore(ILibraryStore):
    """
    Stockage SQLModel de la bibliotheque organisee.

    Chaque operation ouvre sa propre session sur l'engine fourni.
    """

    def __init__(self, engine: Engine) -> None:
        """
        Initialise le stockage.

        Args :
            engine : Engine SQLAlchemy dont les tables sont deja creees
        """
        self._engine = engine

    def replace(self, library: OrganizedLibrary) -> datetime:
        """Remplace l'instantane courant par la bibliotheque donnee."""
        payload = json.dumps(library_to_dict(library), ensure_ascii=False)
        created_at = datetime.now()
        with Session(self._engine) as session:
            for previous in session.exec(select(LibrarySnapshotModel)).all():
                session.delete(previous)
            session.add(
                LibrarySnapshotModel(
                    payload_json=payload,
                    entry_count=library.total_entries,
                    created_at=created_at,
                )
            )
            session.commit()
        logger.debug(f"Bibliotheque enregistree ({library.total_entries} entree(s))")
        return created_at

    def get(self) -> tuple[Optional[OrganizedLibrary], Optional[datetime]]:
        """Retourne le dernier instantane, ou (None, None)."""
        with Session(self._engine) as session:
            statement = select(LibrarySnapshotModel).order_by(
                LibrarySnapshotModel.id.desc()
            )
            model = session.exec(statement).first()
            if model is None:
                return None, None
            library = library_from_dict(json.loads(model.payload_json))
            library.created_at = model.created_at
            return library, model.created_at
