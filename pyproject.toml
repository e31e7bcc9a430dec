[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tile2048"
version = "0.1.0"
description = "The 2048 sliding-tile puzzle for the terminal, with saved games, high scores and statistics"
requires-python = ">=3.10"
dependencies = []
keywords = ["2048", "game", "puzzle", "terminal", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
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
tile2048 = "tile2048.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["tile2048"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
