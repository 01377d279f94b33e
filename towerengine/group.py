"""A container that holds objects and controls and passes events on to them."""

from __future__ import annotations

from typing import Any, TypeVar

from .objects import Control, GameObject

_T = TypeVar("_T")


def _index_of(items: list[_T], item: _T) -> int:
    for index, candidate in enumerate(items):
        if candidate is item:
            return index
    raise ValueError(f"{item!r} is not in this group")


class Group(GameObject, Control):
    """An object and control that contains other objects and controls.

    Objects are updated and drawn in the order they were added; events are
    delivered to controls in the order they were added. Children may remove
    themselves from the group while being updated or notified.
    """

    def __init__(self) -> None:
        super().__init__()
        self._objects: list[GameObject] = []
        self._controls: list[Control] = []

    def clear(self) -> None:
        """Remove all objects and controls."""
        self._objects.clear()
        self._controls.clear()

    def update(self, delta_time: float) -> None:
        """Update every visible object."""
        for obj in list(self._objects):
            if obj.visible:
                obj.update(delta_time)

    def draw(self, surface: Any) -> None:
        """Draw every visible object onto the surface."""
        for obj in list(self._objects):
            if obj.visible:
                obj.draw(surface)

    def on_key_down(self, key_code: int) -> None:
        for ctrl in list(self._controls):
            ctrl.on_key_down(key_code)

    def on_key_up(self, key_code: int) -> None:
        for ctrl in list(self._controls):
            ctrl.on_key_up(key_code)

    def on_mouse_down(self, button: int, mx: int, my: int) -> None:
        for ctrl in list(self._controls):
            ctrl.on_mouse_down(button, mx, my)

    def on_mouse_up(self, button: int, mx: int, my: int) -> None:
        for ctrl in list(self._controls):
            ctrl.on_mouse_up(button, mx, my)

    def on_mouse_move(self, mx: int, my: int) -> None:
        for ctrl in list(self._controls):
            ctrl.on_mouse_move(mx, my)

    def on_mouse_scroll(self, mx: int, my: int, delta: int) -> None:
        for ctrl in list(self._controls):
            ctrl.on_mouse_scroll(mx, my, delta)

    def add_object(self, obj: GameObject) -> None:
        """Append an object; it is drawn after those already present."""
        self._objects.append(obj)

    def insert_object(self, obj: GameObject, before: GameObject) -> None:
        """Insert an object just before another object already in the group."""
        self._objects.insert(_index_of(self._objects, before), obj)

    def add_control(self, ctrl: Control) -> None:
        """Append a control to receive events."""
        self._controls.append(ctrl)

    def add_control_object(self, ctrl: Control) -> None:
        """Add something that is both an object and a control to both lists."""
        if not isinstance(ctrl, GameObject):
            raise TypeError("The control must be both a GameObject and a Control.")
        self.add_object(ctrl)
        self.add_control(ctrl)

    def remove_object(self, obj: GameObject) -> None:
        """Remove an object; raise ValueError if it is not in the group."""
        del self._objects[_index_of(self._objects, obj)]

    def remove_control(self, ctrl: Control) -> None:
        """Remove a control; raise ValueError if it is not in the group."""
        del self._controls[_index_of(self._controls, ctrl)]

    def remove_control_object(self, ctrl: Control, obj: GameObject) -> None:
        """Remove a control and an object, typically the same thing added by add_control_object."""
        self.remove_control(ctrl)
        self.remove_object(obj)

    def objects(self) -> list[GameObject]:
        """Return a new list of the contained objects, in order."""
        return list(self._objects)

    def controls(self) -> list[Control]:
        """Return a new list of the contained controls, in order."""
        return list(self._controls)