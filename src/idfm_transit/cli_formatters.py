"""Plain-text and JSON rendering of stations, lines and itineraries for the CLI."""

import dataclasses
from datetime import datetime
from enum import Enum
from typing import Any

from idfm_transit.application.route_summary import (
    duration_minutes,
    line_display_name,
    section_badge,
    transfer_count,
    visible_sections,
)
from idfm_transit.domain.models import Line, RouteModel, Station


def to_jsonable(value: Any) -> Any:
    """Convert domain objects into values json.dumps accepts."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, list | tuple):
        return [to_jsonable(item) for item in value]
    if isinstance(value, dict):
        return {key: to_jsonable(item) for key, item in value.items()}
    return value


def format_stations(stations: list[Station]) -> str:
    """One station per line with its identifier."""
    return "\n".join(f"  {station.name}\n    ID: {station.id}" for station in stations)


def format_lines(lines: list[Line]) -> str:
    """One catalog line per row: color, display name, long name and id."""
    rows = []
    for line in lines:
        label = line_display_name(line)
        name = f" - {line.name}" if line.name else ""
        rows.append(f"  #{line.color}  {label}{name}\n    ID: {line.id}")
    return "\n".join(rows)


def format_route(route: RouteModel) -> str:
    """Header with times, duration and transfers, followed by the visible legs."""
    header = (
        f"{route.departure_time:%H:%M} -> {route.arrival_time:%H:%M}  "
        f"{duration_minutes(route)} min / {transfer_count(route)} transfer(s)"
    )
    rows = [header]
    for section in visible_sections(route):
        badge = section_badge(section)
        suffix = f"  [{badge}]" if badge else ""
        rows.append(f"    {section.departure_time:%H:%M}  {section.from_name}{suffix}")
    return "\n".join(rows)


def format_routes(routes: list[RouteModel]) -> str:
    """All routes, separated by blank lines."""
    return "\n\n".join(format_route(route) for route in routes)
