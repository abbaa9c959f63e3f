"""Domain layer - core models and ports."""

from idfm_transit.domain.models import (
    Line,
    LineCategory,
    RouteModel,
    Section,
    Station,
)
from idfm_transit.domain.ports import TransitRepository

__all__ = [
    "Line",
    "LineCategory",
    "RouteModel",
    "Section",
    "Station",
    "TransitRepository",
]
