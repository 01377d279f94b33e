import pygame
import pytest

from towerengine.objects import Control, GameObject
from towerengine.scene import Scene


class _Marker(GameObject):
    def __init__(self, pixel, colour, visible=True):
        super().__init__()
        self.pixel = pixel
        self.colour = colour
        self.visible = visible

    def draw(self, surface):
        surface.set_at(self.pixel, self.colour)


class _DemoScene(Scene):
    def __init__(self):
        super().__init__()
        self.initialized = 0

    def initialize(self):
        self.initialized += 1
        self.add_object(_Marker((1, 1), (255, 0, 0)))
        self.add_control(Control())


def _white_surface():
    surface = pygame.Surface((4, 4))
    surface.fill((255, 255, 255))
    return surface


def test_scene_cannot_be_instantiated_directly():
    with pytest.raises(TypeError):
        Scene()


def test_initialize_populates_scene():
    scene = _DemoScene()
    scene.initialize()
    extra = GameObject()
    scene.add_object(extra)
    assert scene.initialized == 1
    assert len(scene.objects()) == 2
    assert scene.objects()[1] is extra
    assert len(scene.controls()) == 1


def test_terminate_clears_children():
    scene = _DemoScene()
    scene.initialize()
    Scene.terminate(scene)
    assert scene.objects() == []
    assert scene.controls() == []


def test_draw_clears_to_black_before_children():
    scene = _DemoScene()
    scene.initialize()
    surface = _white_surface()
    Scene.draw(scene, surface)
    assert surface.get_at((0, 0)) == pygame.Color(0, 0, 0, 255)
    assert surface.get_at((1, 1)) == pygame.Color(255, 0, 0, 255)


def test_draw_skips_invisible_children():
    scene = _DemoScene()
    scene.add_object(_Marker((2, 2), (0, 255, 0), visible=False))
    surface = _white_surface()
    Scene.draw(scene, surface)
    assert surface.get_at((2, 2)) == pygame.Color(0, 0, 0, 255)


def test_scene_can_be_reinitialized_after_terminate():
    scene = _DemoScene()
    scene.initialize()
    Scene.terminate(scene)
    scene.initialize()
    assert scene.initialized == 2
    assert len(scene.objects()) == 1