"""Pydantic models for raw Navitia responses.

Only the fields the adapter reads are declared; everything else Navitia sends
is ignored. Optional fields default so that a sparse entry still parses.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from idfm_transit.adapters.navitia_api.exceptions import DecodeError


class NavitiaModel(BaseModel):
    """Base for raw Navitia payloads."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class NavitiaPlace(NavitiaModel):
    id: str | None = None
    name: str | None = None
    embedded_type: str | None = None


class PlacesResponse(NavitiaModel):
    places: list[NavitiaPlace] | None = None


class NavitiaCommercialMode(NavitiaModel):
    id: str | None = None
    name: str | None = None


class NavitiaLine(NavitiaModel):
    id: str | None = None
    code: str | None = None
    name: str | None = None
    color: str | None = None
    commercial_mode: NavitiaCommercialMode | None = None


class LinesResponse(NavitiaModel):
    lines: list[NavitiaLine] | None = None


class NavitiaStopArea(NavitiaModel):
    id: str | None = None
    name: str | None = None


class NavitiaStopPoint(NavitiaModel):
    id: str | None = None
    name: str | None = None
    stop_area: NavitiaStopArea | None = None


class StopPointsResponse(NavitiaModel):
    stop_points: list[NavitiaStopPoint] | None = None


class NavitiaDisplayInformations(NavitiaModel):
    physical_mode: str | None = None
    commercial_mode: str | None = None
    code: str | None = None
    color: str | None = None


class NavitiaNamedPlace(NavitiaModel):
    id: str | None = None
    name: str | None = None


class NavitiaStopDateTime(NavitiaModel):
    stop_point: NavitiaStopPoint | None = None


class NavitiaSection(NavitiaModel):
    type: str | None = None
    departure_date_time: str | None = None
    arrival_date_time: str | None = None
    duration: int | None = None
    display_informations: NavitiaDisplayInformations | None = None
    from_place: NavitiaNamedPlace | None = Field(default=None, alias="from")
    to_place: NavitiaNamedPlace | None = Field(default=None, alias="to")
    stop_date_times: list[NavitiaStopDateTime] | None = None


class NavitiaJourney(NavitiaModel):
    departure_date_time: str | None = None
    arrival_date_time: str | None = None
    duration: int | None = None
    sections: list[NavitiaSection] | None = None


class JourneysResponse(NavitiaModel):
    journeys: list[NavitiaJourney] | None = None


class NavitiaPlaceNearby(NavitiaModel):
    id: str | None = None
    name: str | None = None
    embedded_type: str | None = None
    stop_area: NavitiaStopArea | None = None


class PlacesNearbyResponse(NavitiaModel):
    places_nearby: list[NavitiaPlaceNearby] | None = None


ResponseT = TypeVar("ResponseT", bound=NavitiaModel)


def parse_response(model: type[ResponseT], data: dict[str, Any]) -> ResponseT:
    """Validate a decoded JSON body against a response model.

    Raises:
        DecodeError: If the body does not match the expected shape.
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise DecodeError(f"Unexpected {model.__name__} shape: {e.error_count()} error(s)") from e
