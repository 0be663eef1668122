"""Routes between cities in a road network, by distance or travel time, with A* and Dijkstra."""

__version__ = "0.1.0"

__all__ = ["astar", "cli", "dijkstra", "graph", "loader", "models"]