"""
Modeles SQLModel pour la base de donnees IPTVOrg.

Ces modeles representent les tables de la base de donnees SQLite.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- library_snapshots: Bibliotheque organisee serialisee en JSON

Un seul instantane est conserve : chaque import remplace le precedent.
"""

from __future__ import annotations

from datetime import datetime

from sqlmodel import Field, SQLModel


class LibrarySnapshotModel(SQLModel, table=True):
    """
    Modele representant la bibliotheque organisee courante.

    Le champ payload_json contient library_to_dict() serialise.
    """

    __tablename__ = "library_snapshots"

    id: int | None = Field(default=None, primary_key=True)
    payload_json: str
    entry_count: int = 0
    created_at: datetime = Field(default_factory=datetime.now, index=True)
