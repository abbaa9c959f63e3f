"""Station domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Station:
    """Represents a named stop (a Navitia stop area, or a stop point when no area is known)."""

    id: str
    name: str
