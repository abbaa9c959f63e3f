"""Application services (use cases) for trip planning and line browsing."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from idfm_transit.domain.models import Line, LineCategory, RouteModel, Station

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from idfm_transit.domain.ports import TransitRepository

# Navitia identifiers of places that can be sent to the journeys endpoint as-is
_PLACE_ID_PREFIXES = ("stop_area:", "stop_point:")


@dataclass(frozen=True)
class TripPlan:
    """Resolved endpoints of a trip and the itineraries found between them."""

    origin: Station
    destination: Station
    routes: list[RouteModel] = field(default_factory=list)


def looks_like_place_id(text: str) -> bool:
    """Whether text is already a Navitia place identifier rather than a name."""
    return text.startswith(_PLACE_ID_PREFIXES)


class TripPlanningService:
    """Service turning user input into resolved stations and itineraries."""

    def __init__(self, transit_repository: "TransitRepository") -> None:
        """Initialize with a transit repository."""
        self._transit_repository = transit_repository

    async def resolve_station(self, text: str) -> Station | None:
        """Resolve a station name or identifier to a Station.

        Identifiers are used without a lookup. Names resolve to the first
        autocomplete suggestion.
        """
        text = text.strip()
        if looks_like_place_id(text):
            return Station(id=text, name=text)

        suggestions = await self._transit_repository.search_stations(text)
        if not suggestions:
            logger.info(f"No station matches {text!r}")
            return None
        return suggestions[0]

    async def plan_trip(self, origin: str, destination: str) -> TripPlan | None:
        """Resolve both ends of a trip and search itineraries between them.

        Returns:
            The plan, or None if either end could not be resolved. A plan with
            no routes means nothing was found or the search failed.
        """
        origin_station, destination_station = await asyncio.gather(
            self.resolve_station(origin), self.resolve_station(destination)
        )
        if origin_station is None or destination_station is None:
            return None

        routes = await self._transit_repository.search_routes(
            origin_station.id, destination_station.id
        )
        logger.debug(
            f"Found {len(routes)} route(s) from {origin_station.name} to {destination_station.name}"
        )
        return TripPlan(origin=origin_station, destination=destination_station, routes=routes)

    async def stations_near(self, latitude: float, longitude: float) -> list[Station]:
        """Stations around a coordinate, closest first.

        Errors from the repository propagate so callers can tell a failed
        lookup apart from an empty neighbourhood.
        """
        stations = await self._transit_repository.get_nearby_stations(latitude, longitude)
        logger.debug(f"{len(stations)} station(s) near {latitude},{longitude}")
        return stations

    async def locate_nearest_station(self, latitude: float, longitude: float) -> Station | None:
        """Return the closest station to a coordinate, or None if none is nearby."""
        stations = await self.stations_near(latitude, longitude)
        return stations[0] if stations else None


class LineBrowserService:
    """Service for browsing the line catalog by category."""

    def __init__(self, transit_repository: "TransitRepository") -> None:
        """Initialize with a transit repository."""
        self._transit_repository = transit_repository

    async def lines_by_category(self, category: LineCategory | None = None) -> list[Line]:
        """Return catalog lines, optionally restricted to one category, in catalog order."""
        lines = await self._transit_repository.get_lines()
        if category is None:
            return lines
        return [line for line in lines if line.category == category]

    async def browse_line(self, line_id: str) -> tuple[Line | None, list[Station]]:
        """Return a line together with the stations it serves.

        The line comes from the metro and RER catalog, fetched alongside the
        stations; it is None for lines outside that catalog.
        """
        lines, stations = await asyncio.gather(
            self._transit_repository.get_lines(),
            self._transit_repository.get_stations_by_line(line_id),
        )
        line = next((line for line in lines if line.id == line_id), None)
        return line, stations
