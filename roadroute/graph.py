"""An undirected road network indexed for route searches."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Iterator
from pathlib import Path

from .loader import DEFAULT_FILE, RoadClassRange, load_network
from .models import City, Road, speed_limit


class Graph:
    """Cities as vertices and roads as edges, with an adjacency list per city.

    Cities keep the order they are given in; when several share an id the last
    of them is the one the id resolves to. Each city's roads are listed newest
    first. A road whose endpoint is unknown is reported and left out.
    """

    def __init__(self, cities: Iterable[City], roads: Iterable[Road]) -> None:
        self._cities: list[City] = list(cities)
        self._roads: list[Road] = list(roads)
        self._index: dict[str, int] = {city.id: i for i, city in enumerate(self._cities)}
        adjacency: list[deque[Road]] = [deque() for _ in self._cities]
        for road in self._roads:
            first = self._index.get(road.city_1)
            second = self._index.get(road.city_2)
            if first is None or second is None:
                print(
                    f"No such city: {road.city_1} or: {road.city_2}",
                    file=sys.stderr,
                )
                continue
            adjacency[first].appendleft(road)
            adjacency[second].appendleft(road)
        self._adjacency: list[tuple[Road, ...]] = [tuple(roads_) for roads_ in adjacency]

    @classmethod
    def from_file(
        cls,
        file_name: str | Path = DEFAULT_FILE,
        classes: RoadClassRange | None = None,
    ) -> Graph:
        """Build a graph from a JSON network file."""
        cities, roads = load_network(file_name, classes)
        return cls(cities, roads)

    def __len__(self) -> int:
        return len(self._cities)

    def __contains__(self, city_id: object) -> bool:
        return city_id in self._index

    def __iter__(self) -> Iterator[City]:
        return iter(self._cities)

    def city(self, city_id: str) -> City:
        """Return the city with this id; raises KeyError if there is none."""
        try:
            return self._cities[self._index[city_id]]
        except KeyError:
            raise KeyError(f"unknown city id: {city_id!r}") from None

    def index_of(self, city: City) -> int:
        """Return the position of a city in the graph; raises KeyError if unknown."""
        try:
            return self._index[city.id]
        except KeyError:
            raise KeyError(f"unknown city id: {city.id!r}") from None

    def roads_of(self, city: City) -> tuple[Road, ...]:
        """Return the roads that touch a city, newest first."""
        return self._adjacency[self.index_of(city)]

    def _require_edges(self) -> None:
        if not self._cities or not self._roads:
            raise ValueError("the graph has no cities or no roads")

    def _find_road(self, first: City, second: City) -> Road | None:
        pair = {(first.id, second.id), (second.id, first.id)}
        for road in self.roads_of(first):
            if (road.city_1, road.city_2) in pair:
                return road
        return None

    def road_between(self, first: City, second: City) -> Road:
        """Return a road joining two cities; raises LookupError if none does."""
        self._require_edges()
        road = self._find_road(first, second)
        if road is None:
            raise LookupError(
                f"there is no road connecting {first.id!r} and {second.id!r}"
            )
        return road

    def end_vertices(self, road: Road) -> tuple[City, City]:
        """Return the two cities a road joins, in the road's own order."""
        return self.city(road.city_1), self.city(road.city_2)

    def is_endpoint(self, city: City, road: Road) -> bool:
        """Whether the city is one of the road's ends."""
        return city.id in (road.city_1, road.city_2)

    def opposite(self, city: City, road: Road) -> City:
        """Return the city at the other end of a road from the given one."""
        if road.city_1 == city.id:
            other = road.city_2
        elif road.city_2 == city.id:
            other = road.city_1
        else:
            raise ValueError(
                f"road {road.road_name!r} is not connected to city {city.name!r}"
            )
        try:
            return self.city(other)
        except KeyError:
            raise ValueError(f"no such city: {other!r}") from None

    def are_adjacent(self, first: City, second: City) -> bool:
        """Whether a road joins the two cities directly."""
        self._require_edges()
        return self._find_road(first, second) is not None

    def road_cost(self, road: Road, by_time: bool = False) -> float:
        """Cost of travelling a road: its length, or hours at its speed limit."""
        if by_time:
            return road.distance / speed_limit(road.road_type)
        return road.distance