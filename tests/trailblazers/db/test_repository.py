"""
Tests for Repository Pattern

Tests count, bulk insert and delete against in-memory SQLite.
"""
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from src.trailblazers.db.base import Base
from src.trailblazers.db.models import Geolocation, Plant
from src.trailblazers.db.repository import GeolocationRepository, PlantRepository


@pytest.fixture(scope="function")
def test_db():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)

    Session = sessionmaker(bind=engine)
    session = Session()

    yield session

    session.close()
    Base.metadata.drop_all(engine)


class TestPlantRepository:
    """Tests for PlantRepository."""

    def test_count_empty(self, test_db):
        assert PlantRepository().count(test_db) == 0

    def test_bulk_save(self, test_db):
        """Test bulk inserting plants from column dicts."""
        repo = PlantRepository()

        inserted = repo.bulk_save(test_db, [
            {"common_name": "White oak", "family": "Fagaceae"},
            {"common_name": "Mead's milkweed", "federal_listing_status": "Threatened"},
        ])
        test_db.commit()

        assert inserted == 2
        assert repo.count(test_db) == 2
        milkweed = test_db.query(Plant).filter_by(common_name="Mead's milkweed").one()
        assert milkweed.federal_listing_status == "Threatened"
        assert milkweed.created_at is not None

    def test_bulk_save_nothing(self, test_db):
        assert PlantRepository().bulk_save(test_db, []) == 0

    def test_delete_all(self, test_db):
        repo = PlantRepository()
        repo.bulk_save(test_db, [{"common_name": "A"}, {"common_name": "B"}, {"common_name": "C"}])
        test_db.commit()

        deleted = repo.delete_all(test_db)
        test_db.commit()

        assert deleted == 3
        assert repo.count(test_db) == 0


class TestGeolocationRepository:
    """Tests for GeolocationRepository."""

    def test_bulk_save_coordinates(self, test_db):
        repo = GeolocationRepository()
        repo.bulk_save(test_db, [
            {"name": f"Park {i}", "latitude": 37.0 + i, "longitude": -92.0} for i in range(5)
        ])
        test_db.commit()

        park = test_db.query(Geolocation).filter_by(name="Park 1").one()

        assert repo.count(test_db) == 5
        assert park.latitude == pytest.approx(38.0)
        assert park.longitude == pytest.approx(-92.0)
