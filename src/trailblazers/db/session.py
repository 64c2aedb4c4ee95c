"""
Database Session Management

Provides database connection pooling and session management.
"""
from contextlib import contextmanager
from typing import Any, Callable, ContextManager, Dict, Generator

from sqlalchemy import create_engine, event, exc, text
from sqlalchemy.orm import Session, sessionmaker

from config.settings import settings
from src.trailblazers.utils.logger import get_logger

logger = get_logger(__name__)

SessionScope = Callable[[], ContextManager[Session]]


def _engine_options(database_url: str) -> Dict[str, Any]:
    """Pool options for the configured backend; SQLite uses its default pool."""
    options: Dict[str, Any] = {"echo": settings.database_echo}
    if database_url.startswith("sqlite"):
        return options
    options.update(
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_timeout=settings.database_pool_timeout,
        pool_recycle=settings.database_pool_recycle,
        pool_pre_ping=True,  # Verify connections before using
    )
    return options


# Create database engine with connection pooling
engine = create_engine(settings.database_url, **_engine_options(settings.database_url))


@event.listens_for(engine, "connect")
def receive_connect(dbapi_conn, connection_record):
    """
    Event listener for new database connections.

    Logs connection establishment.
    """
    logger.debug("database_connection_established")


# Create session factory
SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False
)


def make_session_scope(session_factory: Callable[[], Session]) -> SessionScope:
    """
    Build a transactional session context manager around a session factory.

    The returned callable yields a session, commits on success, rolls back
    and re-raises on any error, and always closes the session.

    Args:
        session_factory: Zero-argument callable returning a new Session

    Returns:
        Context manager factory usable as ``with scope() as session:``
    """

    @contextmanager
    def session_scope() -> Generator[Session, None, None]:
        session = session_factory()
        try:
            logger.debug("database_session_created")
            yield session
            session.commit()
            logger.debug("database_session_committed")
        except exc.SQLAlchemyError as e:
            session.rollback()
            logger.error(
                "database_session_rollback",
                error=str(e),
                error_type=type(e).__name__
            )
            raise
        except Exception as e:
            session.rollback()
            logger.error(
                "database_session_error",
                error=str(e),
                error_type=type(e).__name__
            )
            raise
        finally:
            session.close()
            logger.debug("database_session_closed")

    return session_scope


# Usage:
#     with get_db_session() as session:
#         result = session.query(Model).all()
get_db_session = make_session_scope(SessionLocal)


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Yields:
        SQLAlchemy database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def health_check(session: Session) -> str:
    """
    Check database connection health on an open session.

    Args:
        session: Database session to check with ``SELECT 1``

    Returns:
        "connected" if the database answered, otherwise "error: <reason>"
    """
    try:
        session.execute(text("SELECT 1"))
        logger.debug("database_health_check_success")
        return "connected"
    except exc.SQLAlchemyError as e:
        logger.error(
            "database_health_check_failed",
            error=str(e),
            error_type=type(e).__name__
        )
        return f"error: {e}"


def close_connections():
    """
    Close all database connections and dispose of the engine.

    Should be called on application shutdown.
    """
    logger.info("closing_database_connections")
    engine.dispose()
    logger.info("database_connections_closed")


def create_all_tables(bind=None):
    """
    Create all database tables defined in models.

    Args:
        bind: Engine to create tables on (defaults to the application engine)
    """
    from src.trailblazers.db.base import Base, import_all_models

    logger.info("creating_database_tables")
    import_all_models()
    Base.metadata.create_all(bind=bind or engine)
    logger.info("database_tables_created")
