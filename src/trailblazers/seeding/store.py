"""
Seed Store Adapters

The seeding orchestrator talks to storage only through RecordStore: one
store per entity kind, offering count / delete_all / save_all.
RepositoryStore backs it with SQLAlchemy repositories; InMemoryStore keeps
records in a list for tests and dry runs.
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError

from src.trailblazers.db.repository import (
    BaseRepository,
    FaunaRepository,
    GeolocationRepository,
    PlantRepository,
)
from src.trailblazers.db.session import SessionScope, get_db_session
from src.trailblazers.errors import StoreFaultError
from src.trailblazers.seeding.records import EntityKind, SeedRecord
from src.trailblazers.utils.logger import get_logger

logger = get_logger(__name__)


class RecordStore(ABC):
    """Persistent collection of one entity kind."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored records."""

    @abstractmethod
    def delete_all(self) -> None:
        """Remove every stored record."""

    @abstractmethod
    def save_all(self, records: Sequence[SeedRecord]) -> None:
        """Persist a batch of records."""


class RepositoryStore(RecordStore):
    """
    RecordStore backed by a SQLAlchemy repository.

    Each operation runs in its own transaction. Database errors surface as
    StoreFaultError so the orchestrator can fail just the affected source.
    """

    def __init__(self, repository: BaseRepository, session_scope: SessionScope = get_db_session):
        self.repository = repository
        self.session_scope = session_scope

    def count(self) -> int:
        try:
            with self.session_scope() as session:
                return self.repository.count(session)
        except SQLAlchemyError as e:
            raise StoreFaultError(f"count failed for {self._name}: {e}") from e

    def delete_all(self) -> None:
        try:
            with self.session_scope() as session:
                self.repository.delete_all(session)
        except SQLAlchemyError as e:
            raise StoreFaultError(f"delete failed for {self._name}: {e}") from e

    def save_all(self, records: Sequence[SeedRecord]) -> None:
        try:
            with self.session_scope() as session:
                self.repository.bulk_save(session, (record.to_dict() for record in records))
        except SQLAlchemyError as e:
            raise StoreFaultError(f"save failed for {self._name}: {e}") from e

    @property
    def _name(self) -> str:
        return self.repository.model.__tablename__


class InMemoryStore(RecordStore):
    """List-backed RecordStore."""

    def __init__(self, records: Optional[Sequence[SeedRecord]] = None):
        self.records: List[SeedRecord] = list(records or [])

    def count(self) -> int:
        return len(self.records)

    def delete_all(self) -> None:
        self.records.clear()

    def save_all(self, records: Sequence[SeedRecord]) -> None:
        self.records.extend(records)


def sqlalchemy_stores(session_scope: SessionScope = get_db_session) -> Dict[EntityKind, RecordStore]:
    """
    Build the standard database-backed store for every entity kind.

    Args:
        session_scope: Transactional session context manager factory

    Returns:
        Entity kind → RecordStore
    """
    return {
        EntityKind.FAUNA: RepositoryStore(FaunaRepository(), session_scope),
        EntityKind.PLANT: RepositoryStore(PlantRepository(), session_scope),
        EntityKind.PARK: RepositoryStore(GeolocationRepository(), session_scope),
    }
