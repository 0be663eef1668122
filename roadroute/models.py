"""Core records of the road network and the helpers that price its roads."""

from __future__ import annotations

import math
from dataclasses import dataclass

EARTH_RADIUS_KM = 6371

_ROAD_CLASSES = {
    "P": 2, "p": 2,
    "K": 3, "k": 3,
    "S": 4, "s": 4,
    "A": 5, "a": 5,
}

_SPEED_LIMITS = {
    "a": 130,  # motorway
    "s": 110,  # expressway
    "k": 90,   # national road
    "p": 70,   # district road
}


@dataclass(frozen=True)
class City:
    """A vertex of the network: a named point on the globe."""

    name: str
    id: str
    latitude: float
    longitude: float


@dataclass(frozen=True)
class Road:
    """An undirected edge joining two cities, given by their ids."""

    city_1: str
    city_2: str
    road_name: str
    road_type: str
    distance: float


@dataclass(frozen=True)
class Route:
    """A found path: city ids from start to goal, its cost and the number of analysed nodes."""

    cities: tuple[str, ...]
    cost: float
    visited: int


class RouteNotFound(LookupError):
    """No route joins the requested cities."""


def road_class(road_type: str) -> int:
    """Return the class (2 to 5) of a road type code such as ``"A"`` or ``"p"``."""
    try:
        return _ROAD_CLASSES[road_type]
    except KeyError:
        raise ValueError(f"unknown road type: {road_type!r}") from None


def speed_limit(road_type: str) -> int:
    """Return the speed limit in km/h for a road type, judged by its first letter."""
    try:
        return _SPEED_LIMITS[road_type[:1].lower()]
    except KeyError:
        raise ValueError(f"unknown road type: {road_type!r}") from None


def format_time(hours: float) -> str:
    """Render a duration in hours as ``h:min:s.ms`` with truncated parts."""
    h = int(hours)
    rest = (hours - h) * 60
    minutes = int(rest)
    rest = (rest - minutes) * 60
    seconds = int(rest)
    millis = int((rest - seconds) * 1000)
    return f"{h}:{minutes}:{seconds}.{millis}"


def curve_distance(first: City, second: City) -> float:
    """Great-circle distance in km between two cities (haversine formula)."""
    lat1 = math.radians(first.latitude)
    lat2 = math.radians(second.latitude)
    lon1 = math.radians(first.longitude)
    lon2 = math.radians(second.longitude)
    return 2 * EARTH_RADIUS_KM * math.asin(
        math.sqrt(
            math.sin((lat1 - lat2) / 2) ** 2
            + math.cos(lat1) * math.cos(lat2) * math.sin((lon1 - lon2) / 2) ** 2
        )
    )