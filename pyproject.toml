[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridastar"
version = "0.1.0"
description = "A* shortest-path search on 2D grids with obstacles, with matplotlib plotting"
requires-python = ">=3.10"
dependencies = [
    "matplotlib",
]
keywords = ["astar", "a-star", "pathfinding", "grid", "search", "visualization"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gridastar = "gridastar.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gridastar"]

[tool.pytest.ini_options]
addopts = "-ra"
