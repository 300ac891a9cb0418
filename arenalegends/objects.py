"""Drawable objects, event-receiving controls, groups of both, and scenes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .point import Point

_CLEAR_COLOR = (0, 0, 0)


def _remove_by_identity(items: list, item: object) -> None:
    for index, candidate in enumerate(items):
        if candidate is item:
            del items[index]
            return
    raise ValueError("the item is not in this group")


def _index_by_identity(items: list, item: object) -> int:
    for index, candidate in enumerate(items):
        if candidate is item:
            return index
    raise ValueError("the item is not in this group")


class GameObject:
    """Something with a position and size that can be drawn and updated."""

    def __init__(
        self,
        x: float = 0,
        y: float = 0,
        w: float = 0,
        h: float = 0,
        anchor_x: float = 0,
        anchor_y: float = 0,
    ) -> None:
        self.visible = True
        self.position = Point(x, y)
        self.size = Point(w, h)
        self.anchor = Point(anchor_x, anchor_y)

    def draw(self, surface: Any) -> None:
        """Draw onto the surface; the base object draws nothing."""

    def update(self, delta_time: float) -> None:
        """Advance game logic by delta_time seconds; the base object does nothing."""


class Control:
    """Something that receives keyboard and mouse events."""

    def on_key_down(self, key_code: int) -> None:
        """Handle a key press."""

    def on_key_up(self, key_code: int) -> None:
        """Handle a key release."""

    def on_mouse_down(self, button: int, mx: int, my: int) -> None:
        """Handle a mouse button press at window coordinates (mx, my)."""

    def on_mouse_up(self, button: int, mx: int, my: int) -> None:
        """Handle a mouse button release at window coordinates (mx, my)."""

    def on_mouse_move(self, mx: int, my: int) -> None:
        """Handle the mouse moving to window coordinates (mx, my)."""

    def on_mouse_scroll(self, mx: int, my: int, delta: int) -> None:
        """Handle a scroll of delta at window coordinates (mx, my)."""


class Group(GameObject, Control):
    """A container that forwards drawing, updates and events to its children."""

    def __init__(self) -> None:
        super().__init__()
        self._objects: list[GameObject] = []
        self._controls: list[Control] = []

    def clear(self) -> None:
        """Remove all objects and controls."""
        self._objects.clear()
        self._controls.clear()

    def update(self, delta_time: float) -> None:
        """Update every visible object, in insertion order."""
        for obj in list(self._objects):
            if obj.visible:
                obj.update(delta_time)

    def draw(self, surface: Any) -> None:
        """Draw every visible object, in insertion order."""
        for obj in self._objects:
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
        """Append an object to the drawing order."""
        self._objects.append(obj)

    def insert_object(self, obj: GameObject, before: GameObject) -> None:
        """Insert an object just before another object already in the group."""
        self._objects.insert(_index_by_identity(self._objects, before), obj)

    def add_control(self, ctrl: Control) -> None:
        """Append a control to the event order."""
        self._controls.append(ctrl)

    def add_control_object(self, ctrl: Control) -> None:
        """Add something that is both an object and a control to both lists."""
        if not isinstance(ctrl, GameObject):
            raise TypeError("The control must be both a GameObject and a Control.")
        self.add_object(ctrl)
        self.add_control(ctrl)

    def remove_object(self, obj: GameObject) -> None:
        """Remove an object; raise ValueError if it is not in the group."""
        _remove_by_identity(self._objects, obj)

    def remove_control(self, ctrl: Control) -> None:
        """Remove a control; raise ValueError if it is not in the group."""
        _remove_by_identity(self._controls, ctrl)

    def remove_control_object(self, ctrl: Control) -> None:
        """Remove something added with add_control_object from both lists."""
        self.remove_control(ctrl)
        self.remove_object(ctrl)  # type: ignore[arg-type]

    def get_objects(self) -> list[GameObject]:
        """Return a copy of the objects, in drawing order."""
        return list(self._objects)

    def get_controls(self) -> list[Control]:
        """Return a copy of the controls, in event order."""
        return list(self._controls)


class Scene(Group, ABC):
    """A screen of the game; set-up goes in initialize, tear-down in terminate."""

    @abstractmethod
    def initialize(self) -> None:
        """Create the scene's objects and controls."""

    def terminate(self) -> None:
        """Drop everything the scene holds."""
        self.clear()

    def draw(self, surface: Any) -> None:
        """Clear the surface to black, then draw the scene's objects."""
        surface.fill(_CLEAR_COLOR)
        super().draw(surface)