"""Reading road networks from JSON documents."""

from __future__ import annotations

import json
import re
import sys
from collections import deque
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .models import City, Road, road_class

DEFAULT_FILE = "json/all_W_CONNECTIONS.json"

REGIONAL_FILES = (
    "json/CONNECTIONS_slaskie_opolskie_malopolskie.json",
    "json/W_dolnoslaski.json",
    "json/W_lubuskie.json",
    "json/W_malopolskie.json",
    "json/W_opolskie.json",
    "json/W_slaskie.json",
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_UINT_MODULUS = 2**32


def _parse_class(text: str) -> int:
    """Read a leading integer the way a C integer parser would, as an unsigned value."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    value = int(match.group(1))
    if not -(2**31) <= value < 2**31:
        raise ValueError(f"number out of range: {text!r}")
    return value % _UINT_MODULUS


@dataclass(frozen=True)
class RoadClassRange:
    """The inclusive range of road classes that may be used (2 district .. 5 motorway)."""

    minimum: int = 0
    maximum: int = 5

    @classmethod
    def from_strings(cls, minimum: str, maximum: str) -> RoadClassRange:
        """Build a range from user input; 0 or 1 as maximum means no upper limit."""
        low = _parse_class(minimum)
        high = _parse_class(maximum)
        if (high > 1 and low > high) or low > 5:
            raise ValueError("All road types have been EXCLUDED!!!")
        if high < 2 or high > 5:
            high = 5
        return cls(minimum=low, maximum=high)

    def allows(self, road_type: str) -> bool:
        """Whether roads of this type fall within the range."""
        return self.minimum <= road_class(road_type) <= self.maximum


def _text(record: Mapping[str, Any], key: str) -> str:
    value = record[key]
    if not isinstance(value, str):
        raise TypeError(f"field {key!r} must be a string, not {type(value).__name__}")
    return value


def _number(record: Mapping[str, Any], key: str) -> float:
    value = record[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"field {key!r} must be a number, not {type(value).__name__}")
    return float(value)


def _parse_into(
    data: Mapping[str, Any],
    classes: RoadClassRange,
    cities: deque[City],
    roads: deque[Road],
) -> None:
    """Push the document's cities and allowed roads onto the front of the given queues."""
    for record in data.get("cities") or ():
        cities.appendleft(
            City(
                name=_text(record, "name"),
                id=_text(record, "id"),
                latitude=_number(record, "latitude"),
                longitude=_number(record, "longitude"),
            )
        )
    for record in data.get("connections") or ():
        road_type = _text(record, "road_type")
        if classes.allows(road_type):
            roads.appendleft(
                Road(
                    city_1=_text(record, "city_1"),
                    city_2=_text(record, "city_2"),
                    road_name=_text(record, "road_name"),
                    road_type=road_type,
                    distance=_number(record, "distance"),
                )
            )


def parse_network(
    data: Mapping[str, Any], classes: RoadClassRange | None = None
) -> tuple[list[City], list[Road]]:
    """Return the cities and allowed roads of a decoded document, newest entry first."""
    cities: deque[City] = deque()
    roads: deque[Road] = deque()
    _parse_into(data, classes or RoadClassRange(), cities, roads)
    return list(cities), list(roads)


def _read_json(file_name: str | Path) -> Any:
    with open(file_name, encoding="utf-8") as handle:
        return json.load(handle)


def load_network(
    file_name: str | Path = DEFAULT_FILE, classes: RoadClassRange | None = None
) -> tuple[list[City], list[Road]]:
    """Read a JSON network file; raises OSError or json.JSONDecodeError on failure."""
    return parse_network(_read_json(file_name), classes)


def load_many(
    file_names: Iterable[str | Path] = REGIONAL_FILES,
    classes: RoadClassRange | None = None,
) -> tuple[list[City], list[Road]]:
    """Read several files into one network, reporting and skipping the ones that fail.

    Entries already read from a file that fails part way through are kept.
    """
    classes = classes or RoadClassRange()
    cities: deque[City] = deque()
    roads: deque[Road] = deque()
    for file_name in file_names:
        try:
            _parse_into(_read_json(file_name), classes, cities, roads)
        except json.JSONDecodeError as error:
            print(f"Parse error: {error}", file=sys.stderr)
        except Exception as error:  # noqa: BLE001 - every failed file is reported and skipped
            print(f"Exception: {error}", file=sys.stderr)
    return list(cities), list(roads)