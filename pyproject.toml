[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cardmatch"
version = "0.1.0"
description = "Game logic for a card matching puzzle: cards, playfield, stock, tray, undo and JSON level loading"
requires-python = ">=3.10"
keywords = ["cards", "solitaire", "puzzle", "game", "undo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cardmatch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
