"""Navitia API adapters for the Île-de-France Mobilités PRIM marketplace."""

from idfm_transit.adapters.navitia_api.exceptions import (
    DecodeError,
    HttpError,
    NavitiaError,
    TransportError,
    UpstreamError,
)
from idfm_transit.adapters.navitia_api.navitia_transit_repository import (
    NavitiaTransitRepository,
)

__all__ = [
    "DecodeError",
    "HttpError",
    "NavitiaError",
    "NavitiaTransitRepository",
    "TransportError",
    "UpstreamError",
]
