[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smartcity"
version = "0.1.0"
description = "Data structures for modelling a city: queue, stack, min-heap, hash table, linked list, N-ary tree, a geographic graph and CSV loaders"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "graph", "dijkstra", "haversine", "csv", "tree", "heap", "hash table"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["smartcity"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
