[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridpath"
version = "0.1.0"
description = "Interactive grid editor that visualises breadth-first search pathfinding"
requires-python = ">=3.10"
keywords = ["pathfinding", "bfs", "breadth-first search", "grid", "pygame", "visualisation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Education",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gridpath = "gridpath.game:main"

[tool.hatch.build.targets.wheel]
packages = ["gridpath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
