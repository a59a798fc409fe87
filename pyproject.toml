[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tectonical"
version = "1.0.0"
description = "Deterministic plate-tectonics terrain generator that writes heightmaps and renders them as plain PPM images"
requires-python = ">=3.10"
dependencies = []
keywords = ["procedural generation", "terrain", "heightmap", "tectonics", "ppm", "map"]
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
    "Topic :: Multimedia :: Graphics",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tectonical = "tectonical.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tectonical"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
