"""
Database Package

Database models, connection management, and data persistence layer.
"""
from src.trailblazers.db.base import Base
from src.trailblazers.db.session import (
    engine,
    SessionLocal,
    get_db_session,
    get_db,
    make_session_scope,
    health_check,
    close_connections,
    create_all_tables,
)
from src.trailblazers.db.models import (
    Fauna,
    Plant,
    Geolocation,
)
from src.trailblazers.db.repository import (
    BaseRepository,
    FaunaRepository,
    PlantRepository,
    GeolocationRepository,
)

__all__ = [
    # Base
    "Base",
    # Session management
    "engine",
    "SessionLocal",
    "get_db_session",
    "get_db",
    "make_session_scope",
    "health_check",
    "close_connections",
    "create_all_tables",
    # Models
    "Fauna",
    "Plant",
    "Geolocation",
    # Repositories
    "BaseRepository",
    "FaunaRepository",
    "PlantRepository",
    "GeolocationRepository",
]
