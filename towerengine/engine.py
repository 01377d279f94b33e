"""The game engine: window, event loop and scene management."""

from __future__ import annotations

import functools
import time
from typing import Any

import pygame

from .errors import EngineError
from .log import LogType, log
from .point import Point
from .resources import default_resources
from .scene import Scene

# Mouse button numbers delivered to scenes: 1 left, 2 right, 3 middle.
_MOUSE_BUTTONS = {1: 1, 2: 3, 3: 2}
# Buttons that pygame reports for wheel movement; scrolling arrives as MOUSEWHEEL.
_WHEEL_BUTTONS = {4, 5}


class GameEngine:
    """Owns the window and the scenes, and runs the update/draw loop.

    Scenes are registered by name and exactly one of them is active at a time.
    A scene change requested with ``change_scene`` takes effect at the start of
    the next update.
    """

    def __init__(self) -> None:
        self.fps = 60
        self.screen_w = 800
        self.screen_h = 600
        self.reserve_samples = 1000
        self.title = "Tower Defense"
        self.icon: str | None = "icon.png"
        self.free_memory_on_scene_changed = False
        self.delta_time_threshold = 0.05
        self.display: Any = None
        self._scenes: dict[str, Scene] = {}
        self._active: Scene | None = None
        self._next_scene = ""

    def _init_pygame(self) -> None:
        pygame.init()
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init()
        except pygame.error as exc:
            raise EngineError("failed to initialize audio add-on") from exc
        pygame.mixer.set_num_channels(self.reserve_samples)
        try:
            self.display = pygame.display.set_mode((self.screen_w, self.screen_h))
        except pygame.error as exc:
            raise EngineError("failed to create display") from exc
        pygame.display.set_caption(self.title)
        if self.icon:
            pygame.display.set_icon(default_resources().get_bitmap(self.icon))
            log(LogType.INFO, "Loaded window icon from: ", self.icon)

    def _dispatch(self, event: Any) -> bool:
        """Deliver one event to the active scene; return False when the window closes."""
        scene = self._require_active()
        if event.type == pygame.QUIT:
            log(LogType.VERBOSE, "Window close button clicked")
            return False
        if event.type == pygame.KEYDOWN:
            log(LogType.VERBOSE, "Key with keycode ", event.key, " down")
            scene.on_key_down(event.key)
        elif event.type == pygame.KEYUP:
            log(LogType.VERBOSE, "Key with keycode ", event.key, " up")
            scene.on_key_up(event.key)
        elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            if event.button in _WHEEL_BUTTONS:
                return True
            button = _MOUSE_BUTTONS.get(event.button, event.button)
            mx, my = event.pos
            state = "down" if event.type == pygame.MOUSEBUTTONDOWN else "up"
            log(LogType.VERBOSE, "Mouse button ", button, f" {state} at (", mx, ", ", my, ")")
            if event.type == pygame.MOUSEBUTTONDOWN:
                scene.on_mouse_down(button, mx, my)
            else:
                scene.on_mouse_up(button, mx, my)
        elif event.type == pygame.MOUSEMOTION:
            if event.rel != (0, 0):
                mx, my = event.pos
                log(LogType.VERBOSE, "Mouse move to (", mx, ", ", my, ")")
                scene.on_mouse_move(mx, my)
        elif event.type == pygame.MOUSEWHEEL:
            if event.y != 0:
                mx, my = pygame.mouse.get_pos()
                log(LogType.VERBOSE, "Mouse scroll at (", mx, ", ", my, ") with delta ", event.y)
                scene.on_mouse_scroll(mx, my, event.y)
        elif event.type == pygame.WINDOWLEAVE:
            log(LogType.VERBOSE, "Mouse leave display.")
            scene.on_mouse_move(-1, -1)
        elif event.type == pygame.WINDOWENTER:
            log(LogType.VERBOSE, "Mouse enter display.")
        return True

    def _event_loop(self) -> None:
        clock = pygame.time.Clock()
        timestamp = time.perf_counter()
        running = True
        while running:
            clock.tick(self.fps)
            for event in pygame.event.get():
                if not self._dispatch(event):
                    running = False
                    break
            if not running:
                break
            now = time.perf_counter()
            elapsed, timestamp = now - timestamp, now
            self.update(elapsed)
            self.draw()

    def _require_active(self) -> Scene:
        if self._active is None:
            raise RuntimeError("There is no active scene.")
        return self._active

    def _change_scene(self, name: str) -> None:
        if name not in self._scenes:
            raise ValueError("Cannot change to a unknown scene.")
        if self._active is not None:
            self._active.terminate()
        self._active = self._scenes[name]
        if self.free_memory_on_scene_changed:
            default_resources().release_unused()
        self._active.initialize()
        log(LogType.INFO, "Changed to ", name, " scene")

    def start(
        self,
        first_scene_name: str,
        fps: int = 60,
        screen_w: int = 800,
        screen_h: int = 600,
        reserve_samples: int = 1000,
        title: str = "Tower Defense",
        icon: str | None = "icon.png",
        free_memory_on_scene_changed: bool = False,
        delta_time_threshold: float = 0.05,
    ) -> None:
        """Open the window and run the game until it is closed.

        Scenes must be added before starting.
        """
        log(LogType.INFO, "Game Initializing...")
        self.fps = fps
        self.screen_w = screen_w
        self.screen_h = screen_h
        self.reserve_samples = reserve_samples
        self.title = title
        self.icon = icon
        self.free_memory_on_scene_changed = free_memory_on_scene_changed
        self.delta_time_threshold = delta_time_threshold
        if first_scene_name not in self._scenes:
            raise ValueError("The scene is not added yet.")
        self._active = self._scenes[first_scene_name]

        self._init_pygame()
        log(LogType.INFO, "Game begin")
        try:
            self._active.initialize()
            log(LogType.INFO, "Game initialized")
            self.draw()
            log(LogType.INFO, "Game start event loop")
            self._event_loop()
            log(LogType.INFO, "Game Terminating...")
            self._require_active().terminate()
            log(LogType.INFO, "Game terminated")
        finally:
            log(LogType.INFO, "Game end")
            self.display = None
            pygame.quit()

    def add_new_scene(self, name: str, scene: Scene) -> None:
        """Register a scene under a unique name."""
        if name in self._scenes:
            raise ValueError("Cannot add scenes with the same name.")
        self._scenes[name] = scene

    def change_scene(self, name: str) -> None:
        """Switch to the named scene at the next update."""
        self._next_scene = name

    def active_scene(self) -> Scene | None:
        """Return the scene that currently receives updates and events."""
        return self._active

    def get_scene(self, name: str) -> Scene:
        """Return the scene registered under that name."""
        if name not in self._scenes:
            raise ValueError("Cannot get scenes that aren't added.")
        return self._scenes[name]

    def screen_size(self) -> Point:
        """Return the window size as a point."""
        return Point(self.screen_w, self.screen_h)

    def screen_width(self) -> int:
        return self.screen_w

    def screen_height(self) -> int:
        return self.screen_h

    def mouse_position(self) -> Point:
        """Return the mouse position in window coordinates."""
        mx, my = pygame.mouse.get_pos()
        return Point(mx, my)

    def is_key_down(self, key_code: int) -> bool:
        """Return whether the key is currently held down."""
        return bool(pygame.key.get_pressed()[key_code])

    def update(self, delta_time: float) -> None:
        """Apply a pending scene change, then update the active scene.

        The time step is capped at the delta-time threshold so that fast
        objects cannot skip past what they should hit after a lag spike.
        """
        if self._next_scene:
            name, self._next_scene = self._next_scene, ""
            self._change_scene(name)
        delta_time = min(delta_time, self.delta_time_threshold)
        self._require_active().update(delta_time)

    def draw(self) -> None:
        """Draw the active scene onto the display and show it."""
        self._require_active().draw(self.display)
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            pygame.display.flip()


@functools.lru_cache(maxsize=None)
def get_engine() -> GameEngine:
    """Return the shared game engine."""
    return GameEngine()