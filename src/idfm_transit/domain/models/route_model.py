"""Itinerary domain model."""

from dataclasses import dataclass, field
from datetime import datetime

from idfm_transit.domain.models.section import Section


@dataclass(frozen=True)
class RouteModel:
    """One full itinerary, sections in chronological order as returned upstream."""

    departure_time: datetime
    arrival_time: datetime
    duration: int  # seconds
    sections: tuple[Section, ...] = field(default_factory=tuple)
