"""Domain models for Paris-region trip planning."""

from idfm_transit.domain.models.error_details import ErrorDetails
from idfm_transit.domain.models.line import Line, LineCategory
from idfm_transit.domain.models.route_model import RouteModel
from idfm_transit.domain.models.section import Section, SectionType
from idfm_transit.domain.models.station import Station

__all__ = [
    "ErrorDetails",
    "Line",
    "LineCategory",
    "RouteModel",
    "Section",
    "SectionType",
    "Station",
]
