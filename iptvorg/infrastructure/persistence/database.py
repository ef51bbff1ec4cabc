"""
Configuration de la base de donnees SQLite pour IPTVOrg.

Ce module fournit :
- Engine SQLite avec configuration pour multi-thread
- Fonction d'initialisation des tables

La base de donnees est configuree via IPTVORG_DATABASE_URL (defaut: sqlite:///iptvorg.db).
"""

from pathlib import Path
from sqlalchemy import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

def build_engine(db_url: str) -> Engine:
    """
    Cree un engine pour l'URL donnee.

    Le repertoire parent d'un fichier SQLite est cree si necessaire ;
    une base en memoire partage une connexion unique entre les sessions.
    """
    if db_url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(
            db_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    if db_url.startswith("sqlite:///"):
        db_path = Path(db_url.replace("sqlite:///", ""))
        db_path.parent.mkdir(exist_ok=True, parents=True)

    return create_engine(
        db_url,
        echo=False,
        connect_args={"check_same_thread": False},
    )


def init_db(engine: Engine) -> None:
    """
    Initialise la base de donnees en creant toutes les tables.

    Doit etre appelee une fois au demarrage de l'application.
    """
    # Import des modeles pour enregistrer leurs metadonnees
    from iptvorg.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
