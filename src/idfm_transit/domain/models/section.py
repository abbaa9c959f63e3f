"""Journey section (leg) domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from idfm_transit.domain.models.station import Station


class SectionType(StrEnum):
    """Kind of journey leg."""

    PUBLIC_TRANSPORT = "public_transport"
    STREET_NETWORK = "street_network"
    WAITING = "waiting"
    TRANSFER = "transfer"


@dataclass(frozen=True)
class Section:
    """One uninterrupted leg of a journey, either a ride or a walk."""

    type: SectionType | str
    departure_time: datetime
    arrival_time: datetime
    duration: int  # seconds
    from_name: str
    to_name: str
    mode: str | None = None
    line_code: str | None = None
    line_color: str | None = None
    stops: tuple[Station, ...] = field(default_factory=tuple)

    @property
    def is_walking(self) -> bool:
        """Whether this leg is spent on foot."""
        return self.type in (SectionType.STREET_NETWORK, SectionType.TRANSFER)
