"""
Unit tests for entity mappers
"""
import pytest

from src.trailblazers.errors import RowRejectedError
from src.trailblazers.seeding.decoder import HeaderedRow
from src.trailblazers.seeding.mappers import map_fauna, map_park, map_plant, text_value
from src.trailblazers.seeding.records import FaunaRecord, ParkRecord, PlantRecord


def make_row(values, line_number=2):
    return HeaderedRow(line_number=line_number, raw=",".join(values.values()), values=values)


class TestTextValue:
    """Trim/null normalization"""

    @pytest.mark.parametrize("raw", ["", "  ", "\t"])
    def test_blank_becomes_none(self, raw):
        assert text_value(make_row({"family": raw}), "family") is None

    def test_absent_column_is_none(self):
        assert text_value(make_row({"family": "Felidae"}), "Family") is None

    def test_value_is_trimmed(self):
        assert text_value(make_row({"family": "  Felidae "}), "family") == "Felidae"


class TestMapFauna:
    """Tests for map_fauna"""

    def test_maps_all_columns(self):
        row = make_row({
            "Scientific Name": "Lynx rufus",
            "Common Name": " Bobcat ",
            "CurrentDistribution": "Statewide",
            "Family": "Felidae",
            "Federal Listing Status": "",
            "image": "bobcat.jpg",
            "photo_credit": "MDC",
            "Unused": "ignored",
        })

        record = map_fauna(row)

        assert record == FaunaRecord(
            scientific_name="Lynx rufus",
            common_name="Bobcat",
            current_distribution="Statewide",
            family="Felidae",
            status=None,
            image="bobcat.jpg",
            photo_credit="MDC",
        )

    def test_header_names_are_case_sensitive(self):
        record = map_fauna(make_row({"common name": "Bobcat"}))

        assert record.common_name is None


class TestMapPlant:
    """Tests for map_plant"""

    def test_maps_snake_case_columns(self):
        row = make_row({
            "scientific_name": "Quercus alba",
            "common_name": "White oak",
            "current_distribution": "",
            "family": "Fagaceae",
            "federal_listing_status": "None",
            "image": "  ",
            "photo_credit": "USDA",
        })

        record = map_plant(row)

        assert record == PlantRecord(
            scientific_name="Quercus alba",
            common_name="White oak",
            current_distribution=None,
            family="Fagaceae",
            federal_listing_status="None",
            image=None,
            photo_credit="USDA",
        )


class TestMapPark:
    """Tests for map_park"""

    def park_row(self, latitude="38.0", longitude="-92.5"):
        return make_row({
            "name": "Ha Ha Tonka State Park",
            "latitude": latitude,
            "longitude": longitude,
            "PARK_TYPE": "State Park",
            "URL": "https://mostateparks.com/park/ha-ha-tonka-state-park",
            "short_name": "",
        }, line_number=7)

    def test_maps_coordinates_and_text(self):
        record = map_park(self.park_row(latitude=" 37.97 ", longitude="-92.77"))

        assert record == ParkRecord(
            latitude=37.97,
            longitude=-92.77,
            name="Ha Ha Tonka State Park",
            park_type="State Park",
            url="https://mostateparks.com/park/ha-ha-tonka-state-park",
            short_name=None,
        )

    def test_missing_latitude_is_rejected(self):
        with pytest.raises(RowRejectedError) as exc_info:
            map_park(self.park_row(latitude="  "))

        assert exc_info.value.column == "latitude"
        assert exc_info.value.line_number == 7

    def test_non_numeric_longitude_is_rejected(self):
        row = self.park_row(longitude="west")

        with pytest.raises(RowRejectedError) as exc_info:
            map_park(row)

        assert exc_info.value.column == "longitude"
        assert "west" in exc_info.value.reason
        assert exc_info.value.raw == row.raw

    @pytest.mark.parametrize("value", ["3_7.5", "1_000", "١٢.٥", "0x1A", "38.0.1", "+"])
    def test_non_ascii_decimal_is_rejected(self, value):
        with pytest.raises(RowRejectedError) as exc_info:
            map_park(self.park_row(latitude=value))

        assert exc_info.value.column == "latitude"
        assert "not a decimal number" in exc_info.value.reason

    @pytest.mark.parametrize("value, expected", [
        ("+38", 38.0),
        ("-.5", -0.5),
        ("38.", 38.0),
        ("3.8E1", 38.0),
        ("380e-1", 38.0),
    ])
    def test_decimal_notations_are_accepted(self, value, expected):
        assert map_park(self.park_row(latitude=value)).latitude == pytest.approx(expected)

    @pytest.mark.parametrize("value", ["nan", "inf", "-Infinity", "1e999"])
    def test_non_finite_is_rejected(self, value):
        with pytest.raises(RowRejectedError):
            map_park(self.park_row(latitude=value))

    def test_absent_coordinate_column_is_rejected(self):
        row = make_row({"name": "Somewhere", "latitude": "38.1"})

        with pytest.raises(RowRejectedError) as exc_info:
            map_park(row)

        assert exc_info.value.column == "longitude"
