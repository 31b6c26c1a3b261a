[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridgraph"
version = "0.1.0"
description = "Breadth- and depth-first search routines for undirected graphs and 2-D grids"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "grid", "bfs", "dfs", "connected-components", "flood-fill", "islands"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gridgraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
