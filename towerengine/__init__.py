"""A scene-based 2D game engine for tower defense games, built on pygame."""

__version__ = "0.1.0"

__all__ = [
    "audio",
    "collider",
    "engine",
    "errors",
    "group",
    "log",
    "objects",
    "point",
    "resources",
    "scene",
]