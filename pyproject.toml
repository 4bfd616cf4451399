[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minegrid"
version = "0.1.0"
description = "A small terminal minesweeper game on square grids"
requires-python = ">=3.10"
dependencies = []
keywords = ["minesweeper", "game", "terminal", "puzzle"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minegrid = "minegrid.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minegrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
