import pytest

from roadroute.astar import astar
from roadroute.graph import Graph
from roadroute.models import City, Road, RouteNotFound


def _city(city_id, lat, lon):
    return City(name=city_id.title(), id=city_id, latitude=lat, longitude=lon)


@pytest.fixture
def triangle():
    cities = [
        _city("A", 50.0, 19.0),
        _city("B", 50.1, 19.1),
        _city("C", 50.2, 19.2),
        _city("D", 51.0, 20.0),
    ]
    roads = [
        Road("A", "B", "p1", "P", 70.0),
        Road("B", "C", "p2", "P", 70.0),
        Road("A", "C", "a1", "A", 150.0),
    ]
    return Graph(cities, roads)


@pytest.fixture
def grid():
    cities = [
        _city(f"{row}{col}", 50.0 + row * 0.1, 19.0 + col * 0.1)
        for row in range(4)
        for col in range(4)
    ]
    roads = []
    lengths = [13.0, 17.0, 11.0, 19.0, 23.0]
    counter = 0
    for row in range(4):
        for col in range(4):
            if col < 3:
                roads.append(Road(f"{row}{col}", f"{row}{col + 1}", f"h{counter}", "K",
                                  lengths[counter % len(lengths)]))
                counter += 1
            if row < 3:
                roads.append(Road(f"{row}{col}", f"{row + 1}{col}", f"v{counter}", "S",
                                  lengths[counter % len(lengths)]))
                counter += 1
    return Graph(cities, roads)


def _path_cost(graph, path, by_time):
    total = 0.0
    for first, second in zip(path, path[1:]):
        road = graph.road_between(graph.city(first), graph.city(second))
        total += graph.road_cost(road, by_time)
    return total


def test_distance_prefers_shorter_total_length(triangle):
    route = astar(triangle, "A", "C")
    assert route.cities == ("A", "B", "C")
    assert route.cost == pytest.approx(140.0)


def test_time_prefers_faster_road(triangle):
    route = astar(triangle, "A", "C", by_time=True)
    assert route.cities == ("A", "C")
    motorway = triangle.road_between(triangle.city("A"), triangle.city("C"))
    assert route.cost == pytest.approx(triangle.road_cost(motorway, True))


def test_same_start_and_goal(triangle):
    route = astar(triangle, "B", "B")
    assert route.cities == ("B",)
    assert route.cost == 0.0
    assert route.visited == 1


def test_unknown_city_raises(triangle):
    with pytest.raises(RouteNotFound):
        astar(triangle, "A", "nowhere")
    with pytest.raises(RouteNotFound):
        astar(triangle, "nowhere", "A")


def test_unreachable_city_raises(triangle):
    with pytest.raises(RouteNotFound):
        astar(triangle, "A", "D")


def test_isolated_start_raises(triangle):
    with pytest.raises(RouteNotFound):
        astar(triangle, "D", "A")


def test_route_not_found_is_lookup_error(triangle):
    with pytest.raises(LookupError):
        astar(triangle, "A", "D")


@pytest.mark.parametrize("goal", ["33", "03", "30", "12", "21"])
@pytest.mark.parametrize("by_time", [False, True])
def test_grid_route_is_a_real_path(grid, goal, by_time):
    route = astar(grid, "00", goal, by_time=by_time)
    assert route.cities[0] == "00"
    assert route.cities[-1] == goal
    assert len(set(route.cities)) == len(route.cities)
    for first, second in zip(route.cities, route.cities[1:]):
        assert grid.are_adjacent(grid.city(first), grid.city(second))
    assert route.cost == pytest.approx(_path_cost(grid, route.cities, by_time))
    assert route.visited >= len(route.cities)


def test_line_costs_are_symmetric(triangle):
    forward = astar(triangle, "A", "C")
    backward = astar(triangle, "C", "A")
    assert forward.cost == pytest.approx(backward.cost)
    assert backward.cities == tuple(reversed(forward.cities))


def test_neighbour_reached_directly():
    cities = [_city("X", 50.0, 19.0), _city("Y", 50.05, 19.05)]
    roads = [Road("X", "Y", "k1", "K", 9.0)]
    graph = Graph(cities, roads)
    route = astar(graph, "X", "Y")
    assert route.cities == ("X", "Y")
    assert route.cost == pytest.approx(9.0)
    assert route.visited == 2