"""Command line entry point: find a route between two cities."""

from __future__ import annotations

import json
import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

from .astar import astar
from .graph import Graph
from .loader import DEFAULT_FILE, RoadClassRange, load_network
from .models import Route, RouteNotFound, format_time


def format_route(route: Route, by_time: bool = False) -> str:
    """Render a route as its city ids, its cost and the number of analysed nodes."""
    path = "".join(f"{city_id} " for city_id in route.cities)
    cost = format_time(route.cost) if by_time else f"{route.cost:g}"
    return f"{path}{cost}  {route.visited}"


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask(prompt: str, words: Iterator[str]) -> str:
    print(prompt, end="", flush=True)
    return next(words, "")


def _interactive() -> tuple[str, str, str, str, str]:
    print("If the parameter is not to be set, enter 0.")
    words = _tokens(sys.stdin)
    start = _ask("Enter the name of the starting city: ", words)
    goal = _ask("Enter the name of the destination city: ", words)
    mode = _ask("The route is to be calculated according to TIME or distance: ", words)
    maximum = _ask("Enter the maximum class: ", words)
    minimum = _ask("Enter the minimum class: ", words)
    return start, goal, mode, maximum, minimum


def main(argv: Sequence[str] | None = None) -> int:
    """Run the route search.

    Arguments: start goal [TIME|LENGTH] [max class] [min class] [file].
    With fewer than two arguments the values are asked for on standard input.
    """
    args: Iterable[str] = sys.argv[1:] if argv is None else argv
    args = list(args)
    file_name = DEFAULT_FILE

    if len(args) < 2:
        print("Not enough arguments", file=sys.stderr)
        start, goal, mode, maximum, minimum = _interactive()
        try:
            classes = RoadClassRange.from_strings(minimum, maximum)
        except ValueError:
            print("NOTFAUND", file=sys.stderr)
            return -1
    else:
        start, goal = args[0], args[1]
        mode = args[2] if len(args) >= 3 else "LENGTH"
        try:
            if len(args) >= 5:
                classes = RoadClassRange.from_strings(args[4], args[3])
            elif len(args) == 4:
                classes = RoadClassRange.from_strings("0", args[3])
            else:
                classes = RoadClassRange.from_strings("0", "0")
        except ValueError:
            print("NOTFAUND", file=sys.stderr)
            return -2
        if len(args) >= 6:
            file_name = args[5]

    try:
        cities, roads = load_network(file_name, classes)
    except json.JSONDecodeError as error:
        print(f"Parse error: {error}", file=sys.stderr)
        return -3
    except Exception as error:  # noqa: BLE001 - any failure to load ends the run
        print(f"Exception: {error}", file=sys.stderr)
        return -4

    graph = Graph(cities, roads)
    by_time = mode == "TIME"

    try:
        route = astar(graph, start, goal, by_time)
    except RouteNotFound:
        print("NOTFAUND", file=sys.stderr)
        return 0

    print(format_route(route, by_time))
    return 0


if __name__ == "__main__":
    sys.exit(main())