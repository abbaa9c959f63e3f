"""Ports (interfaces) for the ports-and-adapters architecture."""

from idfm_transit.domain.ports.transit_repository import TransitRepository

__all__ = ["TransitRepository"]
