"""
Moteur SQLAlchemy et sessions.

- build_engine() : construit un moteur depuis une URL (SQLite en dev/tests, Postgres ou MySQL en prod).
- init_db() : crée les tables user et todo au démarrage.
- get_session() : dépendance FastAPI, une session par requête, fermée en fin de requête.
"""

from typing import Dict, Any
from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy.engine import Engine

# Import all models for creating all tables
from app.db.models.users import User  # noqa: F401
from app.db.models.todos import Todo  # noqa: F401

from app.core.config import settings

def build_engine(url: str, *, echo: bool = False, **kwargs: Any) -> Engine:
    is_sqlite = url.startswith("sqlite")

    connect_args: Dict[str, Any] = {}
    if is_sqlite:
        # Requis pour SQLite quand utilisé dans un app serveur (multi-threads)
        connect_args["check_same_thread"] = False

    return create_engine(
        url,
        echo=echo,
        connect_args=connect_args,
        pool_pre_ping=not is_sqlite,  # ping utile pour Postgres/MySQL ; inutile pour SQLite
        **kwargs,
    )

# echo seulement en dev pour ne pas polluer les logs en prod
engine: Engine = build_engine(settings.DATABASE_URL, echo=(settings.ENV == "dev"))

def init_db(bind: Engine = engine) -> None:
    """
    Crée les tables si elles n'existent pas (usage dev/demo).
    En prod avec Alembic, préfère des migrations.
    """
    SQLModel.metadata.create_all(bind)


def get_session():
    """
    Dépendance FastAPI : fournit une session par requête.
    Utilisation :
        def route(..., session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session
