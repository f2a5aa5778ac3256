"""Wiring of the concrete collaborators. The transport layer (routes, sessions) lives outside this package."""

from sqlalchemy.orm import Session

from src.catalog.tmdb import TMDBCatalog
from src.core.config import configure_logging
from src.db.sql_repository import SQLGameStore
from src.services.game_service import GameService


def build_game_service(db_session: Session) -> GameService:
    """Game service backed by the SQL store and TMDB."""
    return GameService(store=SQLGameStore(db_session), catalog=TMDBCatalog())


def setup() -> None:
    """Process-wide setup: logging and database tables."""
    # imported here so that importing this module does not open a database connection
    from src.db.database import init_db

    configure_logging()
    init_db()
