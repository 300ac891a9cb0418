"""The game engine: window, event loop, scene management and timing."""

from __future__ import annotations

import functools
from typing import Any

import pygame

from .errors import EngineError
from .log import LogType, log
from .objects import Scene
from .point import Point
from .resources import Resources, default_resources
from .userdata import GameData

# pygame numbers the middle button 2 and the right button 3; scenes expect
# left = 1, right = 2, middle = 3. Wheel "buttons" arrive as MOUSEWHEEL instead.
_BUTTON_MAP = {1: 1, 3: 2, 2: 3}
_WINDOW_LEAVE = getattr(pygame, "WINDOWLEAVE", None)
_WINDOW_ENTER = getattr(pygame, "WINDOWENTER", None)


class GameEngine:
    """Owns the window and the scenes, and drives updates, drawing and events."""

    def __init__(self, resources: Resources | None = None) -> None:
        self.resources = resources if resources is not None else default_resources()
        self.data = GameData()
        self.fps = 0
        self.screen_w = 0
        self.screen_h = 0
        self.reserve_samples = 0
        self.title = ""
        self.icon: str | None = None
        self.free_memory_on_scene_changed = False
        self.delta_time_threshold = 0.05
        self._scenes: dict[str, Scene] = {}
        self._active_scene: Scene | None = None
        self._next_scene = ""
        self._surface: Any = None
        self._mouse_pos = Point(-1, -1)

    # -- set-up and main loop ------------------------------------------------

    def _init_backend(self) -> None:
        passed, failed = pygame.init()
        if not pygame.display.get_init():
            raise EngineError("failed to initialize display")
        if not pygame.font.get_init():
            raise EngineError("failed to initialize font module")
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            pygame.mixer.set_num_channels(self.reserve_samples)
        except pygame.error as exc:
            raise EngineError("failed to initialize audio") from exc
        try:
            self._surface = pygame.display.set_mode((self.screen_w, self.screen_h))
        except pygame.error as exc:
            raise EngineError("failed to create display") from exc
        pygame.display.set_caption(self.title)
        if self.icon:
            pygame.display.set_icon(self.resources.get_bitmap(self.icon))
            log(LogType.INFO, "Loaded window icon from: ", self.icon)
        log(LogType.INFO, "There are total ", 5, " supported mouse buttons")

    def _event_loop(self) -> None:
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if not self.dispatch(event):
                    running = False
                    break
            if not running:
                break
            elapsed = clock.tick(self.fps) / 1000.0
            self.update(elapsed)
            self._draw()

    def _draw(self) -> None:
        if self._active_scene is not None:
            self._active_scene.draw(self._surface)
        pygame.display.flip()

    def _destroy(self) -> None:
        self._surface = None
        pygame.quit()

    def _change_scene(self, name: str) -> None:
        if name not in self._scenes:
            raise ValueError("Cannot change to a unknown scene.")
        if self._active_scene is not None:
            self._active_scene.terminate()
        self._active_scene = self._scenes[name]
        if self.free_memory_on_scene_changed:
            self.resources.release_unused()
        self._active_scene.initialize()
        log(LogType.INFO, "Changed to ", name, " scene")

    def start(
        self,
        first_scene_name: str,
        fps: int = 60,
        screen_w: int = 600,
        screen_h: int = 1200,
        reserve_samples: int = 1000,
        title: str = "Arena Legends",
        icon: str | None = "icon.png",
        free_memory_on_scene_changed: bool = False,
        delta_time_threshold: float = 0.05,
    ) -> None:
        """Open the window and run the game until it is closed."""
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
        self._active_scene = self._scenes[first_scene_name]

        self._init_backend()
        log(LogType.INFO, "Backend initialized")
        try:
            self._active_scene.initialize()
            log(LogType.INFO, "Game initialized")
            self._draw()
            log(LogType.INFO, "Game start event loop")
            self._event_loop()
            log(LogType.INFO, "Game Terminating...")
            self._active_scene.terminate()
            log(LogType.INFO, "Game terminated")
            log(LogType.INFO, "Game end")
        finally:
            self._destroy()

    # -- scenes --------------------------------------------------------------

    def add_new_scene(self, name: str, scene: Scene) -> None:
        """Register a scene under a unique name."""
        if name in self._scenes:
            raise ValueError("Cannot add scenes with the same name.")
        self._scenes[name] = scene

    def change_scene(self, name: str) -> None:
        """Switch to the named scene at the next update."""
        self._next_scene = name

    def get_active_scene(self) -> Scene | None:
        return self._active_scene

    def get_scene(self, name: str) -> Scene:
        if name not in self._scenes:
            raise ValueError("Cannot get scenes that aren't added.")
        return self._scenes[name]

    # -- queries -------------------------------------------------------------

    def get_screen_size(self) -> Point:
        return Point(self.screen_w, self.screen_h)

    @property
    def screen_width(self) -> int:
        return self.screen_w

    @property
    def screen_height(self) -> int:
        return self.screen_h

    def get_mouse_position(self) -> Point:
        """Return the mouse position in window coordinates."""
        if pygame.display.get_surface() is None:
            return Point(self._mouse_pos.x, self._mouse_pos.y)
        x, y = pygame.mouse.get_pos()
        return Point(x, y)

    def is_key_down(self, key_code: int) -> bool:
        return bool(pygame.key.get_pressed()[key_code])

    # -- per-frame work ------------------------------------------------------

    def update(self, delta_time: float) -> None:
        """Apply a pending scene change, then update the active scene."""
        if self._next_scene:
            name, self._next_scene = self._next_scene, ""
            self._change_scene(name)
        # Cap the step to avoid objects tunnelling through each other after a lag.
        if delta_time >= self.delta_time_threshold:
            delta_time = self.delta_time_threshold
        if self._active_scene is None:
            raise RuntimeError("there is no active scene")
        self._active_scene.update(delta_time)

    def dispatch(self, event: Any) -> bool:
        """Forward one pygame event to the active scene; return False when the window closes."""
        kind = event.type
        if kind == pygame.QUIT:
            log(LogType.VERBOSE, "Window close button clicked")
            return False
        scene = self._active_scene
        if kind in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP, pygame.MOUSEMOTION):
            x, y = event.pos
            self._mouse_pos = Point(x, y)
        if scene is None:
            return True
        if kind == pygame.KEYDOWN:
            log(LogType.VERBOSE, "Key with keycode ", event.key, " down")
            scene.on_key_down(event.key)
        elif kind == pygame.KEYUP:
            log(LogType.VERBOSE, "Key with keycode ", event.key, " up")
            scene.on_key_up(event.key)
        elif kind in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            button = _BUTTON_MAP.get(event.button)
            if button is None:
                return True
            x, y = event.pos
            if kind == pygame.MOUSEBUTTONDOWN:
                log(LogType.VERBOSE, "Mouse button ", button, " down at (", x, ", ", y, ")")
                scene.on_mouse_down(button, x, y)
            else:
                log(LogType.VERBOSE, "Mouse button ", button, " up at (", x, ", ", y, ")")
                scene.on_mouse_up(button, x, y)
        elif kind == pygame.MOUSEMOTION:
            dx, dy = event.rel
            if dx or dy:
                x, y = event.pos
                log(LogType.VERBOSE, "Mouse move to (", x, ", ", y, ")")
                scene.on_mouse_move(x, y)
        elif kind == pygame.MOUSEWHEEL:
            if event.y:
                mouse = self.get_mouse_position()
                mx, my = int(mouse.x), int(mouse.y)
                log(LogType.VERBOSE, "Mouse scroll at (", mx, ", ", my, ") with delta ", event.y)
                scene.on_mouse_scroll(mx, my, event.y)
        elif _WINDOW_LEAVE is not None and kind == _WINDOW_LEAVE:
            log(LogType.VERBOSE, "Mouse leave display.")
            scene.on_mouse_move(-1, -1)
        elif _WINDOW_ENTER is not None and kind == _WINDOW_ENTER:
            log(LogType.VERBOSE, "Mouse enter display.")
        return True


@functools.lru_cache(maxsize=None)
def get_engine() -> GameEngine:
    """Return the one engine of the program."""
    return GameEngine()