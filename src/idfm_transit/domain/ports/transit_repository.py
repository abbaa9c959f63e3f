"""Transit repository port."""

from typing import Protocol

from idfm_transit.domain.models.line import Line
from idfm_transit.domain.models.route_model import RouteModel
from idfm_transit.domain.models.station import Station


class TransitRepository(Protocol):
    """Port for querying stations, lines and itineraries.

    Failure policy differs per query:
    - search_stations, search_routes, get_stations_by_line return an empty list on any failure.
    - get_lines returns an empty list if any part of the catalog cannot be fetched.
    - get_nearby_stations raises on failure; an empty list means nothing was found.
    """

    async def search_stations(self, query: str) -> list[Station]:
        """Autocomplete station names."""
        ...

    async def search_routes(self, from_id: str, to_id: str) -> list[RouteModel]:
        """Find itineraries between two place identifiers."""
        ...

    async def get_lines(self) -> list[Line]:
        """List metro and RER lines, sorted for display."""
        ...

    async def get_stations_by_line(self, line_id: str) -> list[Station]:
        """List the stations served by a line, sorted by name."""
        ...

    async def get_nearby_stations(self, latitude: float, longitude: float) -> list[Station]:
        """Find stations around a coordinate."""
        ...
