import pytest

from roadroute.astar import astar
from roadroute.dijkstra import dijkstra
from roadroute.graph import Graph
from roadroute.models import City, Road, RouteNotFound, speed_limit


def _city(city_id, lat, lon):
    return City(name=city_id.upper(), id=city_id, latitude=lat, longitude=lon)


@pytest.fixture
def triangle():
    cities = [_city("a", 50.0, 19.0), _city("b", 50.0, 19.5), _city("c", 50.0, 20.0)]
    roads = [
        Road("a", "b", "P1", "P", 60.0),
        Road("b", "c", "P2", "P", 60.0),
        Road("a", "c", "A1", "A", 130.0),
    ]
    return Graph(cities, roads)


@pytest.fixture
def grid():
    cities = [
        _city(f"c{r}{c}", 50.0 + r * 0.1, 19.0 + c * 0.1)
        for r in range(3)
        for c in range(3)
    ]
    roads = []
    for r in range(3):
        for c in range(3):
            weight = 10.0 + ((r * 3 + c) % 4) * 5.0
            if c < 2:
                roads.append(Road(f"c{r}{c}", f"c{r}{c + 1}", "h", "P", weight))
            if r < 2:
                roads.append(Road(f"c{r}{c}", f"c{r + 1}{c}", "v", "K", weight + 3.0))
    return Graph(cities, roads)


def test_same_start_and_goal(triangle):
    route = dijkstra(triangle, "a", "a")
    assert route.cities == ("a",)
    assert route.cost == 0.0
    assert route.visited == 1


def test_unknown_city_raises(triangle):
    with pytest.raises(RouteNotFound):
        dijkstra(triangle, "a", "nowhere")
    with pytest.raises(RouteNotFound):
        dijkstra(triangle, "nowhere", "a")


def test_shortest_by_length_goes_through_middle(triangle):
    route = dijkstra(triangle, "a", "c")
    assert route.cities == ("a", "b", "c")
    ab = triangle.road_between(triangle.city("a"), triangle.city("b"))
    bc = triangle.road_between(triangle.city("b"), triangle.city("c"))
    assert route.cost == pytest.approx(ab.distance + bc.distance)


def test_fastest_by_time_takes_motorway(triangle):
    route = dijkstra(triangle, "a", "c", by_time=True)
    assert route.cities == ("a", "c")
    direct = triangle.road_between(triangle.city("a"), triangle.city("c"))
    assert route.cost == pytest.approx(direct.distance / speed_limit("A"))


def test_disconnected_goal_raises():
    cities = [_city("a", 50, 19), _city("b", 50, 20), _city("z", 51, 21)]
    graph = Graph(cities, [Road("a", "b", "r", "P", 5.0)])
    with pytest.raises(RouteNotFound):
        dijkstra(graph, "a", "z")


def test_isolated_start_raises():
    cities = [_city("a", 50, 19), _city("b", 50, 20), _city("z", 51, 21)]
    graph = Graph(cities, [Road("b", "z", "r", "P", 5.0)])
    with pytest.raises(RouteNotFound):
        dijkstra(graph, "a", "z")


def test_unknown_road_type_in_time_mode_raises():
    cities = [_city("a", 50, 19), _city("b", 50, 20)]
    graph = Graph(cities, [Road("a", "b", "r", "X", 5.0)])
    with pytest.raises(RouteNotFound):
        dijkstra(graph, "a", "b", by_time=True)


@pytest.mark.parametrize("by_time", [False, True])
def test_path_is_made_of_adjacent_cities_and_cost_matches(grid, by_time):
    route = dijkstra(grid, "c00", "c22", by_time)
    assert route.cities[0] == "c00"
    assert route.cities[-1] == "c22"
    total = 0.0
    for first, second in zip(route.cities, route.cities[1:]):
        a, b = grid.city(first), grid.city(second)
        assert grid.are_adjacent(a, b)
        total += grid.road_cost(grid.road_between(a, b), by_time)
    assert route.cost == pytest.approx(total)
    assert 1 <= route.visited <= len(grid)


@pytest.mark.parametrize("by_time", [False, True])
def test_never_worse_than_astar(grid, by_time):
    best = dijkstra(grid, "c00", "c22", by_time)
    other = astar(grid, "c00", "c22", by_time)
    assert best.cost <= other.cost + 1e-9


def test_symmetric_cost(grid):
    there = dijkstra(grid, "c00", "c21")
    back = dijkstra(grid, "c21", "c00")
    assert there.cost == pytest.approx(back.cost)