"""
Repository Pattern for Data Access

Provides the count, delete and bulk insert operations the seeding pipeline
runs against each table.
"""
from typing import Iterable, Type, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from src.trailblazers.db.models import Fauna, Geolocation, Plant
from src.trailblazers.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


class BaseRepository:
    """
    Base repository with common operations.

    Generic repository that can be extended for specific models.
    """

    def __init__(self, model: Type[T]):
        """
        Initialize repository with model class.

        Args:
            model: SQLAlchemy model class
        """
        self.model = model
        logger.debug("repository_initialized", model=model.__name__)

    def count(self, session: Session) -> int:
        """
        Count total records.

        Args:
            session: Database session

        Returns:
            Total count
        """
        count = session.scalar(select(func.count()).select_from(self.model))
        logger.debug("repository_count", model=self.model.__name__, count=count)
        return count

    def delete_all(self, session: Session) -> int:
        """
        Delete every record in one statement.

        Args:
            session: Database session

        Returns:
            Number of rows deleted
        """
        result = session.execute(delete(self.model))
        session.flush()
        logger.info("repository_deleted_all", model=self.model.__name__, count=result.rowcount)
        return result.rowcount

    def bulk_save(self, session: Session, records: Iterable[dict]) -> int:
        """
        Insert many records.

        Args:
            session: Database session
            records: Column-value dicts, one per row

        Returns:
            Number of rows inserted
        """
        instances = [self.model(**values) for values in records]
        if not instances:
            return 0

        session.add_all(instances)
        session.flush()
        logger.info("repository_bulk_saved", model=self.model.__name__, count=len(instances))
        return len(instances)


class FaunaRepository(BaseRepository):
    """Repository for Fauna model."""

    def __init__(self):
        super().__init__(Fauna)


class PlantRepository(BaseRepository):
    """Repository for Plant model."""

    def __init__(self):
        super().__init__(Plant)


class GeolocationRepository(BaseRepository):
    """Repository for Geolocation model."""

    def __init__(self):
        super().__init__(Geolocation)
