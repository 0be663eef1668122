[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roadroute"
version = "0.1.0"
description = "Shortest road routes between cities with A* and Dijkstra, by distance or by travel time"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "routing",
    "shortest path",
    "a-star",
    "dijkstra",
    "road network",
    "haversine",
    "graph",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
roadroute = "roadroute.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["roadroute"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
