# roadroute

Find a route between two cities in a road network described in a JSON file.
Routes are measured either by distance in kilometres or by travel time in
hours, using a speed limit for each type of road. The command line uses an A*
search with a great-circle (haversine) estimate of the remaining way; a
Dijkstra search is available from Python.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Network file

The network is a JSON document with a list of cities and a list of
connections:

```json
{
  "cities": [
    {"name": "Alpha", "id": "alpha", "latitude": 50.06, "longitude": 19.94},
    {"name": "Beta",  "id": "beta",  "latitude": 50.26, "longitude": 19.02}
  ],
  "connections": [
    {"city_1": "alpha", "city_2": "beta", "road_name": "A4",
     "road_type": "A", "distance": 80.0}
  ]
}
```

Connections are undirected. A connection that names a city missing from the
list of cities is reported on standard error and left out of the network.
An unknown road type or a field of the wrong kind makes loading fail.

Road types, their classes and the speed limits used for travel time:

| type | road              | class | speed limit |
|------|-------------------|-------|-------------|
| `A`  | motorway          | 5     | 130 km/h    |
| `S`  | expressway        | 4     | 110 km/h    |
| `K`  | national road     | 3     | 90 km/h     |
| `P`  | district road     | 2     | 70 km/h     |

Lower-case letters are accepted too.

## Command line

```
roadroute START GOAL [MODE] [MAXCLASS] [MINCLASS] [FILE]
```

- `START`, `GOAL` – city ids.
- `MODE` – `TIME` measures travel time; anything else (`LENGTH` is the
  default) measures distance.
- `MAXCLASS`, `MINCLASS` – the range of road classes that may be used. A
  maximum below 2 or above 5 means no upper limit; a minimum of `0` means no
  lower limit. A range that excludes every class (a minimum above 5, or above
  a maximum of 2 or more) is reported as `NOTFAUND` and the command exits with
  a non-zero status.
- `FILE` – the network file, `json/all_W_CONNECTIONS.json` by default.

Example:

```
roadroute alpha beta TIME 5 3 network.json
```

The route is printed on one line as the ids of the cities along it, followed
by its total length (or its travel time as `h:min:s.ms`) and the number of
cities the search took in. When a city is unknown or no route exists,
`NOTFAUND` is written to standard error instead. A file that cannot be read or
parsed is reported on standard error with a non-zero exit status.

Started with fewer than two arguments, the command asks on standard input for
the start, the goal, the mode, the maximum class and the minimum class in
turn, and reads the default network file.

## Library use

```python
from roadroute.astar import astar
from roadroute.cli import format_route
from roadroute.graph import Graph
from roadroute.loader import RoadClassRange
from roadroute.models import RouteNotFound

classes = RoadClassRange.from_strings("0", "0")
graph = Graph.from_file("network.json", classes)

try:
    route = astar(graph, "alpha", "beta", by_time=False)
except RouteNotFound:
    print("no route")
else:
    print(format_route(route, by_time=False))
```

- `roadroute.astar.astar` and `roadroute.dijkstra.dijkstra` take a graph, two
  city ids and `by_time`, and return a `Route` with `cities`, `cost` and
  `visited`. Both raise `RouteNotFound` when a city is unknown or no route
  joins them. For Dijkstra, `visited` is the number of cities still queued
  when the goal was reached, plus one.
- `roadroute.loader` has `load_network` for one file, `parse_network` for an
  already decoded document, and `load_many`, which merges several files and
  reports and skips those that fail. `RoadClassRange.allows` tells whether a
  road type is within the range.
- `roadroute.graph.Graph` is built from lists of `City` and `Road` records.
  It supports `len()`, `in` with a city id and iteration over its cities, and
  offers `city`, `index_of`, `roads_of`, `road_between`, `end_vertices`,
  `is_endpoint`, `opposite`, `are_adjacent` and `road_cost`.
- `roadroute.models` has `curve_distance` (great-circle distance in km
  between two cities), `speed_limit` and `road_class` (a road type's speed
  limit and class), and `format_time` (hours rendered as `h:min:s.ms`).

## What it does not do

The command line always uses the A* search; Dijkstra can only be called from
Python. No network data comes with the package: the default file
`json/all_W_CONNECTIONS.json` must be provided by the user.