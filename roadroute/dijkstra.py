"""Dijkstra route search over a road network."""

from __future__ import annotations

import math
from collections import deque

from .graph import Graph
from .models import Route, RouteNotFound


def _relax(
    graph: Graph,
    current: str,
    distance: dict[str, float],
    prev: dict[str, str],
    seen: set[str],
    queue: deque[str],
    by_time: bool,
) -> None:
    """Shorten the distances of the current city's neighbours and queue new ones."""
    city = graph.city(current)
    for road in graph.roads_of(city):
        cost = distance[current] + graph.road_cost(road, by_time)
        other = graph.opposite(city, road).id
        if distance.get(other, math.inf) > cost:
            distance[other] = cost
            prev[other] = current
        if other not in seen:
            queue.appendleft(other)
            seen.add(other)


def _pop_nearest(queue: deque[str], distance: dict[str, float]) -> str:
    """Remove and return the queued city nearest the start, first one on ties."""
    position = min(
        range(len(queue)), key=lambda i: distance.get(queue[i], math.inf)
    )
    nearest = queue[position]
    del queue[position]
    return nearest


def dijkstra(graph: Graph, start: str, goal: str, by_time: bool = False) -> Route:
    """Find the cheapest route from ``start`` to ``goal`` (city ids).

    The cost is the total road length, or travel hours at the speed limits when
    ``by_time`` is set. The reported node count is the number of cities still
    waiting in the queue when the goal is reached, plus one. Raises
    RouteNotFound when either city is unknown or no route joins them.
    """
    if start not in graph or goal not in graph:
        raise RouteNotFound(f"unknown city: {start!r} or {goal!r}")

    distance: dict[str, float] = {start: 0.0}
    prev: dict[str, str] = {start: start}
    seen = {start}
    queue: deque[str] = deque()
    current = start

    try:
        while current != goal:
            _relax(graph, current, distance, prev, seen, queue, by_time)
            if not queue:
                raise RouteNotFound(f"no route from {start!r} to {goal!r}")
            current = _pop_nearest(queue, distance)
    except (ValueError, KeyError) as error:
        raise RouteNotFound(f"no route from {start!r} to {goal!r}") from error

    path = [goal]
    while path[-1] != start:
        path.append(prev[path[-1]])
    path.reverse()
    return Route(cities=tuple(path), cost=distance[goal], visited=len(queue) + 1)