"""Display helpers for itineraries and lines."""

import math

from idfm_transit.domain.models import Line, LineCategory, RouteModel, Section, SectionType

# Walks shorter than this are not worth showing
MIN_VISIBLE_WALK_SECONDS = 60


def duration_minutes(route: RouteModel) -> int:
    """Whole minutes of a route, rounded down."""
    return route.duration // 60


def transfer_count(route: RouteModel) -> int:
    """Number of changes between vehicles."""
    rides = sum(1 for section in route.sections if section.mode)
    return max(0, rides - 1)


def is_visible_section(section: Section) -> bool:
    """Whether a section deserves a row in an itinerary timeline."""
    if section.type == SectionType.WAITING:
        return False
    if section.is_walking and section.duration < MIN_VISIBLE_WALK_SECONDS:
        return False
    return True


def visible_sections(route: RouteModel) -> list[Section]:
    """Sections of a route worth showing, in order."""
    return [section for section in route.sections if is_visible_section(section)]


def section_badge(section: Section) -> str:
    """Short label for a section, e.g. "Walk 4 min" or "Metro 14"."""
    if section.is_walking:
        return f"Walk {math.ceil(section.duration / 60)} min"
    return f"{section.mode or ''} {section.line_code or ''}".strip()


def line_display_name(line: Line) -> str:
    """Human-readable line name, e.g. "Metro 4" or "RER B"."""
    if line.category == LineCategory.METRO:
        return f"Metro {line.code}"
    if line.category == LineCategory.RER:
        return f"RER {line.code}"
    return f"{line.mode} {line.code}"
