"""Transit repository adapter backed by the Navitia API."""

import asyncio
import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from idfm_transit.adapters.config.app_config import AppConfig
from idfm_transit.adapters.navitia_api.constants import (
    JOURNEYS_PATH,
    LINE_STOP_POINTS_PATH,
    LINES_PATH,
    PLACES_NEARBY_PATH,
    PLACES_PATH,
    STOP_AREA_TYPE,
)
from idfm_transit.adapters.navitia_api.date_decoder import decode_navitia_datetime
from idfm_transit.adapters.navitia_api.exceptions import NavitiaError
from idfm_transit.adapters.navitia_api.http_client import NavitiaHttpClient
from idfm_transit.adapters.navitia_api.line_catalog import (
    build_line_catalog,
    build_metro_filter,
    build_rail_filter,
)
from idfm_transit.adapters.navitia_api.payloads import (
    JourneysResponse,
    LinesResponse,
    NavitiaJourney,
    NavitiaLine,
    NavitiaSection,
    NavitiaStopPoint,
    PlacesNearbyResponse,
    PlacesResponse,
    StopPointsResponse,
    parse_response,
)
from idfm_transit.domain.models.line import Line
from idfm_transit.domain.models.route_model import RouteModel
from idfm_transit.domain.models.section import Section, SectionType
from idfm_transit.domain.models.station import Station
from idfm_transit.domain.ports.transit_repository import TransitRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class NavitiaTransitRepository(TransitRepository):
    """Adapter answering transit queries from the Navitia API.

    Holds no state between calls; every query builds its result from a fresh
    response.
    """

    def __init__(self, session: "ClientSession", config: AppConfig | None = None) -> None:
        """Initialize with an aiohttp session.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            config: Settings for the service root, API key and result bounds.
        """
        self._config = config or AppConfig()
        self._http_client = NavitiaHttpClient(
            session=session,
            base_url=self._config.navitia_base_url,
            api_key=self._config.prim_api_key,
        )

    async def search_stations(self, query: str) -> list[Station]:
        """Autocomplete station names.

        Queries shorter than the configured minimum are answered locally with
        an empty list. Any failure also yields an empty list.
        """
        if len(query) < self._config.min_query_length:
            return []

        try:
            data = await self._http_client.get_json(PLACES_PATH, {"q": query})
            response = parse_response(PlacesResponse, data)
        except NavitiaError as e:
            logger.warning(f"Station search for {query!r} failed: {e}")
            return []

        stations = (
            Station(id=place.id, name=place.name or "")
            for place in response.places or []
            if place.id and place.embedded_type == STOP_AREA_TYPE
        )
        return _unique_stations(stations)

    async def search_routes(self, from_id: str, to_id: str) -> list[RouteModel]:
        """Find itineraries between two Navitia place identifiers.

        An empty list means either no journey exists or the search failed.
        """
        try:
            data = await self._http_client.get_json(JOURNEYS_PATH, {"from": from_id, "to": to_id})
            response = parse_response(JourneysResponse, data)
        except NavitiaError as e:
            logger.warning(f"Journey search from {from_id} to {to_id} failed: {e}")
            return []

        return [self._build_route(journey) for journey in response.journeys or []]

    async def get_lines(self) -> list[Line]:
        """List metro and RER lines, metro first.

        The metro and rail queries run concurrently. If either fails the whole
        catalog is empty rather than partial.
        """
        logger.debug("Fetching line catalog...")
        count = self._config.lines_count
        results = await asyncio.gather(
            self._fetch_lines({"count": count, "filter": build_metro_filter()}),
            self._fetch_lines({"count": count, "filter": build_rail_filter()}),
            return_exceptions=True,
        )

        raw_lines: list[NavitiaLine] = []
        for result in results:
            if isinstance(result, NavitiaError):
                logger.warning(f"Line catalog unavailable: {result}")
                return []
            if isinstance(result, BaseException):
                raise result
            raw_lines.extend(result)

        lines = build_line_catalog(raw_lines)
        logger.debug(f"Loaded {len(lines)} lines.")
        return lines

    async def get_stations_by_line(self, line_id: str) -> list[Station]:
        """List the stations served by a line, sorted by name.

        Stop points are folded into their stop area when Navitia provides one.
        The first stop point seen for a station decides its name.
        """
        path = LINE_STOP_POINTS_PATH.format(line_id=line_id)
        try:
            data = await self._http_client.get_json(
                path, {"count": self._config.stop_points_count}
            )
            response = parse_response(StopPointsResponse, data)
        except NavitiaError as e:
            logger.warning(f"Stations for line {line_id} unavailable: {e}")
            return []

        stations = _unique_stations(
            station
            for station in map(self._resolve_station, response.stop_points or [])
            if station is not None
        )
        return sorted(stations, key=lambda station: station.name)

    async def get_nearby_stations(self, latitude: float, longitude: float) -> list[Station]:
        """Find stations around a coordinate.

        Returns an empty list when nothing is nearby.

        Raises:
            NavitiaError: If the request or its decoding fails.
        """
        path = PLACES_NEARBY_PATH.format(
            lon=_format_coordinate(longitude), lat=_format_coordinate(latitude)
        )
        params: dict[str, str | int] = {
            "count": self._config.nearby_count,
            "distance": self._config.nearby_distance_meters,
            "type[]": STOP_AREA_TYPE,
        }
        data = await self._http_client.get_json(path, params)
        response = parse_response(PlacesNearbyResponse, data)

        stations: list[Station] = []
        for place in response.places_nearby or []:
            stop_area = place.stop_area
            if stop_area is None or not stop_area.id:
                logger.debug(f"Skipping nearby place without stop area: {place.id}")
                continue
            stations.append(Station(id=stop_area.id, name=stop_area.name or ""))
        return _unique_stations(stations)

    async def _fetch_lines(self, params: dict[str, str | int]) -> list[NavitiaLine]:
        data = await self._http_client.get_json(LINES_PATH, params)
        return parse_response(LinesResponse, data).lines or []

    @staticmethod
    def _resolve_station(stop_point: NavitiaStopPoint) -> Station | None:
        """Prefer the stop area of a stop point, else the stop point itself."""
        stop_area = stop_point.stop_area
        station_id = (stop_area.id if stop_area else None) or stop_point.id
        name = (stop_area.name if stop_area else None) or stop_point.name or ""
        if not station_id:
            return None
        return Station(id=station_id, name=name)

    def _build_route(self, journey: NavitiaJourney) -> RouteModel:
        return RouteModel(
            departure_time=decode_navitia_datetime(journey.departure_date_time),
            arrival_time=decode_navitia_datetime(journey.arrival_date_time),
            duration=_seconds(journey.duration),
            sections=tuple(self._build_section(section) for section in journey.sections or []),
        )

    def _build_section(self, section: NavitiaSection) -> Section:
        info = section.display_informations
        stops = (
            self._resolve_station(stop_date_time.stop_point)
            for stop_date_time in section.stop_date_times or []
            if stop_date_time.stop_point is not None
        )
        return Section(
            type=_section_type(section.type),
            departure_time=decode_navitia_datetime(section.departure_date_time),
            arrival_time=decode_navitia_datetime(section.arrival_date_time),
            duration=_seconds(section.duration),
            from_name=(section.from_place.name if section.from_place else None) or "",
            to_name=(section.to_place.name if section.to_place else None) or "",
            mode=info.physical_mode if info else None,
            line_code=info.code if info else None,
            line_color=info.color if info else None,
            stops=tuple(stop for stop in stops if stop is not None),
        )


def _unique_stations(stations: Iterable[Station]) -> list[Station]:
    """Drop repeated station ids, keeping the first occurrence."""
    unique: dict[str, Station] = {}
    for station in stations:
        unique.setdefault(station.id, station)
    return list(unique.values())


def _seconds(duration: int | None) -> int:
    return max(0, duration or 0)


def _section_type(value: str | None) -> SectionType | str:
    """Known section types become SectionType; others are kept as sent."""
    try:
        return SectionType(value)
    except ValueError:
        return value or ""


def _format_coordinate(value: float) -> str:
    """Fixed-point degrees; Navitia rejects scientific notation such as 1e-05."""
    return f"{value:.6f}"
