"""Classification and ordering of Navitia lines for the line catalog."""

import re
from collections.abc import Iterable, Sequence
from functools import cmp_to_key

from idfm_transit.adapters.navitia_api.constants import (
    DEFAULT_LINE_COLOR,
    DEFAULT_LINE_MODE,
    METRO_COMMERCIAL_MODE_ID,
    TARGET_TRAIN_CODES,
)
from idfm_transit.adapters.navitia_api.payloads import NavitiaLine
from idfm_transit.domain.models.line import Line, LineCategory

# Display order of the categories kept in the catalog; anything else is dropped
CATEGORY_RANK: dict[LineCategory, int] = {
    LineCategory.METRO: 0,
    LineCategory.RER: 1,
}

# Feeds without commercial mode metadata still name RER lines by a single letter
_RER_LETTER_CODE = re.compile(r"^[A-E]$")
_LEADING_INTEGER = re.compile(r"^\s*([+-]?\d+)")


def build_metro_filter() -> str:
    """Navitia filter selecting every metro line."""
    return f'commercial_mode.id="{METRO_COMMERCIAL_MODE_ID}"'


def build_rail_filter(codes: Sequence[str] = TARGET_TRAIN_CODES) -> str:
    """Navitia filter selecting lines by code, e.g. 'line.code="A" OR line.code="B"'."""
    return " OR ".join(f'line.code="{code}"' for code in codes)


def determine_line_category(code: str, mode_id: str, mode_name: str) -> LineCategory:
    """Classify a line; the first matching rule wins."""
    if "Metro" in mode_id or mode_name == "Metro":
        return LineCategory.METRO
    if "RER" in mode_id or mode_name == "RER":
        return LineCategory.RER
    if _RER_LETTER_CODE.match(code):
        return LineCategory.RER
    return LineCategory.OTHER


def _parse_leading_int(code: str) -> int | None:
    """Parse the integer a code starts with ("3B" -> 3), or None."""
    match = _LEADING_INTEGER.match(code)
    return int(match.group(1)) if match else None


def _compare_text(a: str, b: str) -> int:
    return (a > b) - (a < b)


def compare_lines(a: Line, b: Line) -> int:
    """Order lines by category rank, then by code.

    RER codes compare as text. Metro codes compare numerically when both
    start with an integer (so 2 < 10), falling back to text otherwise and
    on numeric ties (so 3 < 3B).
    """
    if a.category != b.category:
        return CATEGORY_RANK.get(a.category, len(CATEGORY_RANK)) - CATEGORY_RANK.get(
            b.category, len(CATEGORY_RANK)
        )

    if a.category == LineCategory.RER:
        return _compare_text(a.code, b.code)

    num_a = _parse_leading_int(a.code)
    num_b = _parse_leading_int(b.code)
    if num_a is not None and num_b is not None and num_a != num_b:
        return num_a - num_b

    return _compare_text(a.code, b.code)


def sort_lines(lines: Iterable[Line]) -> list[Line]:
    """Return lines in catalog display order."""
    return sorted(lines, key=cmp_to_key(compare_lines))


def to_line(raw: NavitiaLine) -> Line:
    """Map a raw Navitia line, filling in defaults for missing fields."""
    code = raw.code or ""
    mode_id = (raw.commercial_mode.id if raw.commercial_mode else None) or ""
    mode_name = (raw.commercial_mode.name if raw.commercial_mode else None) or ""

    return Line(
        id=raw.id or "",
        code=code,
        color=raw.color or DEFAULT_LINE_COLOR,
        name=raw.name or "",
        mode=mode_name or DEFAULT_LINE_MODE,
        category=determine_line_category(code, mode_id, mode_name),
    )


def build_line_catalog(raw_lines: Iterable[NavitiaLine]) -> list[Line]:
    """Deduplicate, classify, filter and sort raw lines into the catalog.

    Duplicate ids keep the last entry seen. Entries without an id and lines
    that are neither metro nor RER are dropped.
    """
    unique: dict[str, NavitiaLine] = {}
    for raw in raw_lines:
        if raw.id:
            unique[raw.id] = raw

    lines = [to_line(raw) for raw in unique.values()]
    return sort_lines(line for line in lines if line.category in CATEGORY_RANK)
