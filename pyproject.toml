[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "towerengine"
version = "0.1.0"
description = "A small scene-based 2D game engine for tower defense games, built on pygame."
requires-python = ">=3.10"
keywords = ["game", "engine", "tower defense", "pygame", "2d", "scene"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Real Time Strategy",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["towerengine"]

[tool.pytest.ini_options]
addopts = "-ra"
