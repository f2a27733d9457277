[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jogo"
version = "0.1.0"
description = "A terminal maze game: collect coins, dodge chasing and patrolling enemies."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "curses", "maze", "arcade"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: POSIX",
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
jogo = "jogo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["jogo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
