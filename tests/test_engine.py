import pygame
import pytest

from towerengine.engine import GameEngine, get_engine
from towerengine.objects import GameObject
from towerengine.point import Point
from towerengine.scene import Scene


class RecordingScene(Scene):
    def __init__(self):
        super().__init__()
        self.calls = []

    def initialize(self):
        self.calls.append("initialize")

    def terminate(self):
        self.calls.append("terminate")
        super().terminate()

    def update(self, delta_time):
        self.calls.append(("update", delta_time))
        super().update(delta_time)


class Painter(GameObject):
    def __init__(self):
        super().__init__()
        self.surfaces = []

    def draw(self, surface):
        self.surfaces.append(surface)


@pytest.fixture
def engine():
    return GameEngine()


def test_add_duplicate_scene_raises(engine):
    engine.add_new_scene("play", RecordingScene())
    with pytest.raises(ValueError):
        engine.add_new_scene("play", RecordingScene())


def test_get_scene_returns_registered_scene(engine):
    scene = RecordingScene()
    engine.add_new_scene("play", scene)
    assert engine.get_scene("play") is scene


def test_get_unknown_scene_raises(engine):
    with pytest.raises(ValueError):
        engine.get_scene("missing")


def test_start_with_unknown_scene_raises(engine):
    with pytest.raises(ValueError):
        engine.start("missing")


def test_change_scene_is_deferred_until_update(engine):
    first, second = RecordingScene(), RecordingScene()
    engine.add_new_scene("first", first)
    engine.add_new_scene("second", second)
    engine.change_scene("first")
    assert engine.active_scene() is None
    engine.update(0.01)
    assert engine.active_scene() is first
    assert first.calls == ["initialize", ("update", 0.01)]

    engine.change_scene("second")
    assert engine.active_scene() is first
    engine.update(0.02)
    assert engine.active_scene() is second
    assert first.calls[-1] == "terminate"
    assert second.calls == ["initialize", ("update", 0.02)]


def test_change_to_unknown_scene_raises_on_update(engine):
    engine.change_scene("nowhere")
    with pytest.raises(ValueError):
        engine.update(0.01)


def test_update_without_active_scene_raises(engine):
    with pytest.raises(RuntimeError):
        engine.update(0.01)


def test_update_caps_delta_time_at_threshold(engine):
    scene = RecordingScene()
    engine.add_new_scene("play", scene)
    engine.change_scene("play")
    engine.update(1.0)
    engine.update(0.01)
    assert scene.calls[1:] == [("update", 0.05), ("update", 0.01)]


def test_update_respects_custom_threshold(engine):
    scene = RecordingScene()
    engine.add_new_scene("play", scene)
    engine.delta_time_threshold = 0.1
    engine.change_scene("play")
    engine.update(0.5)
    assert scene.calls[-1] == ("update", 0.1)


def test_default_screen_size(engine):
    assert engine.screen_size() == Point(800, 600)
    assert engine.screen_width() == 800
    assert engine.screen_height() == 600


def test_screen_size_follows_dimensions(engine):
    engine.screen_w, engine.screen_h = 320, 240
    assert engine.screen_size() == Point(engine.screen_width(), engine.screen_height())
    assert engine.screen_width() == 320


def test_draw_paints_active_scene_on_display(engine):
    scene = RecordingScene()
    painter = Painter()
    engine.add_new_scene("play", scene)
    engine.change_scene("play")
    engine.update(0.0)
    scene.add_object(painter)
    surface = pygame.Surface((4, 4))
    surface.fill((255, 255, 255))
    engine.display = surface
    engine.draw()
    assert painter.surfaces == [surface]
    assert tuple(surface.get_at((0, 0)))[:3] == (0, 0, 0)


def test_draw_without_active_scene_raises(engine):
    with pytest.raises(RuntimeError):
        engine.draw()


def test_get_engine_is_shared():
    shared = get_engine()
    assert shared is get_engine()
    assert shared.screen_size() == Point(800, 600)
    with pytest.raises(ValueError):
        shared.get_scene("scene-that-was-never-added")