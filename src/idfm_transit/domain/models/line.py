"""Line domain model."""

from dataclasses import dataclass
from enum import StrEnum


class LineCategory(StrEnum):
    """Category a line is listed under."""

    METRO = "METRO"
    RER = "RER"
    TRAM = "TRAM"  # Not produced by the Navitia adapter yet
    OTHER = "OTHER"


@dataclass(frozen=True)
class Line:
    """Represents a transit line as listed in the line catalog."""

    id: str
    code: str
    color: str  # Hex without leading '#', e.g. "FFCD00"
    name: str
    mode: str  # Display label, e.g. "Metro"
    category: LineCategory
