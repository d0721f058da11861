[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snakeduel"
version = "1.0.0"
description = "Two-player terminal snake duel, with a single-player mode, played in curses"
requires-python = ">=3.10"
dependencies = []
keywords = ["snake", "game", "curses", "terminal", "arcade", "two-player"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Operating System :: MacOS",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
snakeduel = "snakeduel.screen:main"
snakeduel-solo = "snakeduel.solo:main"

[tool.hatch.build.targets.wheel]
packages = ["snakeduel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
