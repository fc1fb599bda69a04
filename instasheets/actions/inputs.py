"""User input collection for endpoint actions.

Each prompt answer is `Optional[str]`: None means the dialog was cancelled.
`collect_inputs` returns None when the action must abort silently (a
cancelled prompt or a missing required value), otherwise the collected
values keyed by parameter / path placeholder name, in prompt order.

Policy per input kind:
- required:   blank -> abort
- coordinate: blank or not a number -> abort
- count:      blank, not an integer or <= 0 -> parameter omitted
- distance:   blank or not a number -> omitted; clamped to [1, maximum];
              equal to the API default -> omitted
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from instasheets.tools.ui.interface import UserInterface

REQUIRED = "required"
COORDINATE = "coordinate"
COUNT = "count"
DISTANCE = "distance"


@dataclass(frozen=True)
class InputSpec:
    name: str
    prompt: str
    kind: str = REQUIRED
    default: Optional[int] = None
    maximum: Optional[int] = None


USER_ID = InputSpec("user_id", "Enter a user ID number:")
MEDIA_ID = InputSpec("media_id", "Enter the media ID number of a post:")
TAG_NAME = InputSpec("tag_name", "Enter a hashtag:")
LOCATION_ID = InputSpec("location_id", "Enter a location ID number:")
USER_QUERY = InputSpec("q", "Enter a name to search for:")
TAG_QUERY = InputSpec("q", "Enter a hashtag to search for:")
COUNT_INPUT = InputSpec(
    "count", "Enter the number of resources to return (leave blank to return default):", COUNT
)
LATITUDE = InputSpec("lat", "Enter a latitude on which to center the search:", COORDINATE)
LONGITUDE = InputSpec("lng", "Enter a longitude on which to center the search:", COORDINATE)
MEDIA_DISTANCE = InputSpec(
    "distance",
    "Enter the radial distance to search (default is 1 km, maximum is 5 km):",
    DISTANCE,
    default=1000,
    maximum=5000,
)
LOCATION_DISTANCE = InputSpec(
    "distance",
    "Enter the radial distance to search (default is 500 m, maximum is 750 m):",
    DISTANCE,
    default=500,
    maximum=750,
)


def parse_number(value: str) -> Optional[float]:
    try:
        number = float(value)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def parse_count(value: str) -> Optional[int]:
    try:
        count = int(value)
    except ValueError:
        return None
    return count if count > 0 else None


def _format_number(number: float) -> str:
    return str(int(number)) if number.is_integer() else str(number)


def clamp_distance(value: str, spec: InputSpec) -> Optional[str]:
    """Return the distance parameter to send, or None to use the API default."""
    number = parse_number(value)
    if number is None:
        return None
    number = max(number, 1.0)
    if spec.maximum is not None:
        number = min(number, float(spec.maximum))
    if spec.default is not None and number == spec.default:
        return None
    return _format_number(number)


def collect_inputs(inputs: Iterable[InputSpec], ui: UserInterface) -> Optional[Dict[str, str]]:
    values: Dict[str, str] = {}
    for spec in inputs:
        raw = ui.prompt(spec.prompt)
        if raw is None:
            return None
        value = raw.strip()
        if spec.kind == REQUIRED:
            if not value:
                return None
            values[spec.name] = value
        elif spec.kind == COORDINATE:
            if parse_number(value) is None:
                return None
            values[spec.name] = value
        elif spec.kind == COUNT:
            count = parse_count(value)
            if count is not None:
                values[spec.name] = str(count)
        elif spec.kind == DISTANCE:
            distance = clamp_distance(value, spec)
            if distance is not None:
                values[spec.name] = distance
        else:
            raise ValueError(f"Unknown input kind '{spec.kind}'")
    return values


__all__ = [
    "InputSpec",
    "REQUIRED",
    "COORDINATE",
    "COUNT",
    "DISTANCE",
    "USER_ID",
    "MEDIA_ID",
    "TAG_NAME",
    "LOCATION_ID",
    "USER_QUERY",
    "TAG_QUERY",
    "COUNT_INPUT",
    "LATITUDE",
    "LONGITUDE",
    "MEDIA_DISTANCE",
    "LOCATION_DISTANCE",
    "parse_number",
    "parse_count",
    "clamp_distance",
    "collect_inputs",
]
