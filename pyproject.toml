[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raycube"
version = "0.1.0"
description = "A small grid-based raycasting engine that loads .cub scene files and shows them in a pygame window"
requires-python = ">=3.10"
keywords = ["raycasting", "game", "cub", "maze", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
raycube = "raycube.game:main"

[tool.hatch.build.targets.wheel]
packages = ["raycube"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
