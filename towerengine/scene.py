"""Base class for game scenes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .group import Group


class Scene(Group, ABC):
    """A group that takes over the screen and receives the window's events.

    Scenes are long-lived prototypes: set up their contents in ``initialize``
    and tear them down in ``terminate`` rather than in the constructor.
    """

    @abstractmethod
    def initialize(self) -> None:
        """Set up the scene's objects and controls when it becomes active."""

    def terminate(self) -> None:
        """Tear the scene down when it stops being active."""
        self.clear()

    def draw(self, surface: Any) -> None:
        """Clear the surface to black, then draw every visible child."""
        surface.fill((0, 0, 0))
        super().draw(surface)