[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grafo"
version = "0.1.0"
description = "Adjacency-list graphs loaded from edge-list files, with degree statistics and average shortest path."
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "network", "dijkstra", "edge-list", "shortest-path", "degree"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
grafo = "grafo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["grafo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
