import pygame
import pytest

from arenalegends.engine import GameEngine, get_engine
from arenalegends.objects import Scene
from arenalegends.point import Point


class RecordingScene(Scene):
    def __init__(self):
        super().__init__()
        self.calls = []

    def initialize(self):
        self.calls.append(("initialize",))

    def terminate(self):
        self.calls.append(("terminate",))
        super().terminate()

    def update(self, delta_time):
        self.calls.append(("update", delta_time))

    def on_key_down(self, key_code):
        self.calls.append(("key_down", key_code))

    def on_key_up(self, key_code):
        self.calls.append(("key_up", key_code))

    def on_mouse_down(self, button, mx, my):
        self.calls.append(("mouse_down", button, mx, my))

    def on_mouse_up(self, button, mx, my):
        self.calls.append(("mouse_up", button, mx, my))

    def on_mouse_move(self, mx, my):
        self.calls.append(("mouse_move", mx, my))

    def on_mouse_scroll(self, mx, my, delta):
        self.calls.append(("mouse_scroll", mx, my, delta))


class CountingResources:
    def __init__(self):
        self.released = 0

    def release_unused(self):
        self.released += 1


@pytest.fixture
def engine():
    return GameEngine(resources=CountingResources())


@pytest.fixture
def active(engine):
    scene = RecordingScene()
    engine.add_new_scene("play", scene)
    engine.change_scene("play")
    engine.update(0.01)
    scene.calls.clear()
    return scene


def test_duplicate_scene_name_rejected(engine):
    engine.add_new_scene("a", RecordingScene())
    with pytest.raises(ValueError):
        engine.add_new_scene("a", RecordingScene())


def test_get_scene(engine):
    scene = RecordingScene()
    engine.add_new_scene("a", scene)
    assert engine.get_scene("a") is scene
    with pytest.raises(ValueError):
        engine.get_scene("missing")


def test_no_active_scene_initially(engine):
    engine.add_new_scene("a", RecordingScene())
    assert engine.get_active_scene() is None


def test_change_scene_happens_on_update(engine):
    a, b = RecordingScene(), RecordingScene()
    engine.add_new_scene("a", a)
    engine.add_new_scene("b", b)
    engine.change_scene("a")
    assert engine.get_active_scene() is None
    engine.update(0.01)
    assert engine.get_active_scene() is a
    assert a.calls == [("initialize",), ("update", 0.01)]
    engine.change_scene("b")
    engine.update(0.02)
    assert engine.get_active_scene() is b
    assert a.calls[-1] == ("terminate",)
    assert b.calls == [("initialize",), ("update", 0.02)]


def test_change_to_unknown_scene_raises(engine):
    engine.add_new_scene("a", RecordingScene())
    engine.change_scene("nowhere")
    with pytest.raises(ValueError):
        engine.update(0.01)


def test_delta_time_is_capped(engine, active):
    engine.update(1.0)
    assert active.calls == [("update", engine.delta_time_threshold)]


def test_release_unused_only_when_enabled(engine):
    engine.add_new_scene("a", RecordingScene())
    engine.add_new_scene("b", RecordingScene())
    engine.change_scene("a")
    engine.update(0.01)
    assert engine.resources.released == 0
    engine.free_memory_on_scene_changed = True
    engine.change_scene("b")
    engine.update(0.01)
    assert engine.resources.released == 1


def test_quit_stops_loop(engine, active):
    assert engine.dispatch(pygame.event.Event(pygame.QUIT)) is False


def test_key_events_forwarded(engine, active):
    assert engine.dispatch(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a)) is True
    engine.dispatch(pygame.event.Event(pygame.KEYUP, key=pygame.K_a))
    assert active.calls == [("key_down", pygame.K_a), ("key_up", pygame.K_a)]


def test_mouse_buttons_mapped(engine, active):
    engine.dispatch(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 20)))
    engine.dispatch(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(10, 20)))
    engine.dispatch(pygame.event.Event(pygame.MOUSEBUTTONUP, button=2, pos=(11, 21)))
    assert active.calls == [
        ("mouse_down", 1, 10, 20),
        ("mouse_down", 2, 10, 20),
        ("mouse_up", 3, 11, 21),
    ]


def test_mouse_motion_without_movement_ignored(engine, active):
    engine.dispatch(pygame.event.Event(pygame.MOUSEMOTION, pos=(5, 6), rel=(0, 0), buttons=(0, 0, 0)))
    engine.dispatch(pygame.event.Event(pygame.MOUSEMOTION, pos=(7, 8), rel=(2, 2), buttons=(0, 0, 0)))
    assert active.calls == [("mouse_move", 7, 8)]


def test_mouse_position_tracked_without_window(engine, active):
    engine.dispatch(pygame.event.Event(pygame.MOUSEMOTION, pos=(30, 40), rel=(1, 1), buttons=(0, 0, 0)))
    assert engine.get_mouse_position() == Point(30, 40)


def test_scroll_uses_last_position(engine, active):
    engine.dispatch(pygame.event.Event(pygame.MOUSEMOTION, pos=(30, 40), rel=(1, 1), buttons=(0, 0, 0)))
    active.calls.clear()
    engine.dispatch(pygame.event.Event(pygame.MOUSEWHEEL, x=0, y=-1))
    assert active.calls == [("mouse_scroll", 30, 40, -1)]


def test_window_leave_moves_mouse_outside(engine, active):
    engine.dispatch(pygame.event.Event(pygame.WINDOWLEAVE))
    assert active.calls == [("mouse_move", -1, -1)]


def test_screen_size_reflects_settings(engine):
    engine.screen_w, engine.screen_h = 600, 1200
    assert engine.get_screen_size() == Point(600, 1200)
    assert engine.screen_width == 600


def test_start_requires_known_scene(engine):
    with pytest.raises(ValueError):
        engine.start("missing")


def test_get_engine_is_shared():
    scene = RecordingScene()
    get_engine().add_new_scene("shared-engine-test", scene)
    assert get_engine().get_scene("shared-engine-test") is scene