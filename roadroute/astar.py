"""A* route search over a road network."""

from __future__ import annotations

from dataclasses import dataclass

from .graph import Graph
from .models import City, Road, Route, RouteNotFound, curve_distance

# Speed (km/h) the straight-line estimate to the goal is divided by.
HEURISTIC_SPEED = 130


@dataclass(frozen=True)
class _Visit:
    """A city taken into the route tree, with the visit it was reached from."""

    city: City
    prev: _Visit | None
    cost: float


@dataclass(frozen=True)
class _Candidate:
    """A road leading out of the tree: cost so far and cost plus estimate."""

    cost: float
    estimate: float
    road: Road


def _expand(
    graph: Graph,
    visit: _Visit,
    target: City,
    visited_ids: set[str],
    by_time: bool,
) -> list[_Candidate]:
    """Candidates for every road from the visit's city to a city not yet visited."""
    found = []
    for road in graph.roads_of(visit.city):
        other = graph.opposite(visit.city, road)
        if other.id in visited_ids:
            continue
        cost = visit.cost + graph.road_cost(road, by_time)
        estimate = cost + curve_distance(other, target) / HEURISTIC_SPEED
        found.append(_Candidate(cost, estimate, road))
    return found


def _drop_roads_touching(graph: Graph, candidates: list[_Candidate], city: City) -> None:
    """Remove candidates whose road touches the city, scanning from the front.

    When the front entry is removed, the entry that takes its place is not
    examined in this pass.
    """
    position = 0
    while position < len(candidates):
        if graph.is_endpoint(city, candidates[position].road):
            del candidates[position]
            if position == 0:
                position = 1
        else:
            position += 1


def _path(last: _Visit) -> tuple[str, ...]:
    ids = []
    visit: _Visit | None = last
    while visit is not None:
        ids.append(visit.city.id)
        visit = visit.prev
    return tuple(reversed(ids))


def astar(graph: Graph, start: str, goal: str, by_time: bool = False) -> Route:
    """Find a route from ``start`` to ``goal`` (city ids) with A* search.

    The cost is the total road length, or travel hours at the speed limits when
    ``by_time`` is set. Raises RouteNotFound when either city is unknown or no
    route joins them.
    """
    if start not in graph or goal not in graph:
        raise RouteNotFound(f"unknown city: {start!r} or {goal!r}")

    target = graph.city(goal)
    current = _Visit(graph.city(start), None, 0.0)
    visits = [current]  # oldest first
    visited_ids = {current.city.id}
    candidates: list[_Candidate] = []  # front of the queue first

    try:
        while current.city.id != target.id:
            fresh = _expand(graph, current, target, visited_ids, by_time)
            candidates[:0] = reversed(fresh)
            if not candidates:
                raise RouteNotFound(f"no route from {start!r} to {goal!r}")

            position, best = min(enumerate(candidates), key=lambda item: item[1].estimate)
            origin = next(
                (visit for visit in reversed(visits)
                 if graph.is_endpoint(visit.city, best.road)),
                None,
            )
            if origin is None:
                raise RouteNotFound(f"no route from {start!r} to {goal!r}")

            reached = graph.opposite(origin.city, best.road)
            current = _Visit(reached, origin, best.cost)
            visits.append(current)
            visited_ids.add(reached.id)
            del candidates[position]
            _drop_roads_touching(graph, candidates, reached)
    except (ValueError, KeyError) as error:
        raise RouteNotFound(f"no route from {start!r} to {goal!r}") from error

    return Route(cities=_path(current), cost=current.cost, visited=len(visits))