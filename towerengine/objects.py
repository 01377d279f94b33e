"""Base classes for drawable objects and event-receiving controls."""

from __future__ import annotations

from typing import Any

from .point import Point


class GameObject:
    """Something that can be drawn and updated each frame.

    The anchor picks the point of the object that ``position`` refers to:
    (0, 0) is the top-left corner and (1, 1) the bottom-right corner.
    A width or height of 0 means the object's natural size.
    """

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        w: float = 0.0,
        h: float = 0.0,
        anchor_x: float = 0.0,
        anchor_y: float = 0.0,
    ) -> None:
        self.visible: bool = True
        self.position = Point(x, y)
        self.size = Point(w, h)
        self.anchor = Point(anchor_x, anchor_y)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(position={self.position!r}, size={self.size!r}, "
            f"anchor={self.anchor!r}, visible={self.visible!r})"
        )

    def draw(self, surface: Any) -> None:
        """Draw the object onto the surface; the base object draws nothing."""

    def update(self, delta_time: float) -> None:
        """Advance the object's logic by delta_time seconds; the base object does nothing."""


class Control:
    """Something that reacts to keyboard and mouse events.

    Every handler does nothing by default; subclasses override the ones they need.
    """

    def on_key_down(self, key_code: int) -> None:
        """Called when a key is pressed."""

    def on_key_up(self, key_code: int) -> None:
        """Called when a key is released."""

    def on_mouse_down(self, button: int, mx: int, my: int) -> None:
        """Called when a mouse button is pressed at window coordinates (mx, my)."""

    def on_mouse_up(self, button: int, mx: int, my: int) -> None:
        """Called when a mouse button is released at window coordinates (mx, my)."""

    def on_mouse_move(self, mx: int, my: int) -> None:
        """Called when the mouse moves to window coordinates (mx, my)."""

    def on_mouse_scroll(self, mx: int, my: int, delta: int) -> None:
        """Called when the mouse wheel scrolls by delta at (mx, my)."""