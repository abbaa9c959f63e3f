"""Tests for domain models."""

import dataclasses
from datetime import datetime

import pytest
from pydantic import ValidationError

from idfm_transit.domain.models import (
    ErrorDetails,
    Line,
    LineCategory,
    RouteModel,
    Section,
    SectionType,
    Station,
)


def test_station_creation() -> None:
    """Given station data, when creating a Station, then all fields are set correctly."""
    station = Station(id="stop_area:IDFM:71264", name="Châtelet")

    assert station.id == "stop_area:IDFM:71264"
    assert station.name == "Châtelet"


def test_station_is_immutable() -> None:
    """Given a Station, when assigning a field, then it is rejected."""
    station = Station(id="stop_area:IDFM:71264", name="Châtelet")

    with pytest.raises(dataclasses.FrozenInstanceError):
        station.name = "Les Halles"  # type: ignore[misc]


def test_line_category_values_are_labels() -> None:
    """Given the categories, then their values are the upper-case labels."""
    assert [category.value for category in LineCategory] == ["METRO", "RER", "TRAM", "OTHER"]


def test_line_creation() -> None:
    """Given line data, when creating a Line, then all fields are set correctly."""
    line = Line(
        id="line:IDFM:C01742",
        code="A",
        color="E2231A",
        name="RER A",
        mode="RER",
        category=LineCategory.RER,
    )

    assert line.code == "A"
    assert line.category == "RER"


def test_section_walking_flag() -> None:
    """Given section types, then only street network and transfer legs are walking."""
    when = datetime(2024, 1, 15, 14, 30)

    def make(section_type: SectionType) -> Section:
        return Section(
            type=section_type,
            departure_time=when,
            arrival_time=when,
            duration=60,
            from_name="A",
            to_name="B",
        )

    assert make(SectionType.STREET_NETWORK).is_walking is True
    assert make(SectionType.TRANSFER).is_walking is True
    assert make(SectionType.PUBLIC_TRANSPORT).is_walking is False
    assert make(SectionType.WAITING).is_walking is False


def test_route_defaults_to_no_sections() -> None:
    """Given no sections, when creating a RouteModel, then sections is an empty tuple."""
    when = datetime(2024, 1, 15, 14, 30)

    route = RouteModel(departure_time=when, arrival_time=when, duration=0)

    assert route.sections == ()


def test_error_details_is_frozen() -> None:
    """Given ErrorDetails, when assigning, then validation rejects the change."""
    details = ErrorDetails(status_code=500, reason="Server Error")

    with pytest.raises(ValidationError):
        details.reason = "changed"  # type: ignore[misc]


def test_error_details_without_status_or_id_describes_reason_only() -> None:
    """Given a transport failure, when describing, then only the reason is shown."""
    details = ErrorDetails(reason="Fetch failed for /places: timeout")

    assert details.describe() == "Fetch failed for /places: timeout"
