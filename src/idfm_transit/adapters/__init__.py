"""Adapters layer - external system integrations."""

from idfm_transit.adapters.config import AppConfig
from idfm_transit.adapters.navitia_api import NavitiaTransitRepository

__all__ = [
    "AppConfig",
    "NavitiaTransitRepository",
]
