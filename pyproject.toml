[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tileduel"
version = "1.0.0"
description = "A two-player, side-by-side sliding tile puzzle duel against the clock"
requires-python = ">=3.10"
keywords = ["game", "puzzle", "2048", "two-player", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tileduel = "tileduel.controller:main"

[tool.hatch.build.targets.wheel]
packages = ["tileduel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
