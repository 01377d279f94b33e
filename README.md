# towerengine

A small, scene-based 2D game engine for tower defense style games, built on
pygame. It provides vector maths, collision helpers, object and control
groups, scenes, a cached resource loader, audio helpers and a game loop.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `towerengine.point` – `Point`, a 2D point and vector dataclass supporting
  `+`, `-`, multiplication and division by a number, iteration as `(x, y)`,
  and the methods `normalize()` (a zero vector stays `(0, 0)`), `dot()`,
  `magnitude()` and `magnitude_squared()`.
- `towerengine.collider` – `is_point_in_rect` (half-open rectangle given by
  its top-left corner and size), `is_rect_overlap` (rectangles given by their
  two corners), `is_circle_overlap` (touching circles do not overlap) and
  `is_point_in_bitmap` (whether the surface pixel at a point has a non-zero
  alpha).
- `towerengine.errors` – `EngineError`, raised when pygame fails to load an
  image, font or sound, create the display, or set up audio.
- `towerengine.log` – the `LogType` levels (`VERBOSE`, `DEBUGGING`, `INFO`,
  `WARN`, `ERROR`), `set_config(enabled, log_verbose, file_path)`, which sets
  the global options and empties the log file, and `log(log_type, *args)`,
  which writes one `[LABEL] ...` line to standard output and appends it to
  the log file. Logging is off until enabled; verbose messages need
  `log_verbose` as well.
- `towerengine.objects` – `GameObject`, with `position`, `size`, `anchor`
  and `visible`, plus `draw(surface)` and `update(delta_time)`; and
  `Control`, with do-nothing keyboard and mouse handlers
  (`on_key_down`, `on_key_up`, `on_mouse_down`, `on_mouse_up`,
  `on_mouse_move`, `on_mouse_scroll`) for subclasses to override.
- `towerengine.group` – `Group`, both an object and a control, holding
  objects and controls in order. It updates and draws its visible objects
  and passes events to its controls; children may remove themselves while
  being updated or notified. Objects are added with `add_object`,
  `insert_object(obj, before)` or, for things that are both, with
  `add_control_object`; removing something not in the group raises
  `ValueError`, and `add_control_object` raises `TypeError` for a control
  that is not also a `GameObject`.
- `towerengine.scene` – `Scene`, an abstract `Group` with `initialize()`
  (to implement) and `terminate()` (clears the scene). Its `draw` fills the
  surface with black before drawing its children.
- `towerengine.resources` – `Resources`, a cache of images (`get_bitmap`,
  optionally resized to a given width and height), fonts (`get_font`) and
  sounds (`get_sample`, `get_sample_instance`) read from `images/`,
  `fonts/` and `audios/` under a root directory (`Resource` by default).
  `release_unused()` drops cached entries that nothing else refers to.
  `default_resources()` returns the shared instance.
- `towerengine.audio` – `play_audio` (once, at the effect volume),
  `play_bgm` (looping, at the music volume) and `stop_bgm`; `play_sample`,
  `stop_sample`, `change_sample_volume`, `change_sample_position` and
  `get_sample_length` (whole seconds) for controllable sample instances.
  Volumes live in the module-level `volumes`, a `Volumes` instance with
  `bgm` and `sfx` both defaulting to 0.1.
- `towerengine.engine` – `GameEngine` registers scenes by name, opens the
  window and runs the event loop; `get_engine()` returns the shared
  instance.

## Example

```python
from towerengine.engine import get_engine
from towerengine.scene import Scene


class TitleScene(Scene):
    def initialize(self):
        # add objects and controls here
        pass


engine = get_engine()
engine.add_new_scene("title", TitleScene())
engine.start("title", 60, 800, 600, 1000, "Tower Defense", None, False, 0.05)
```

`start` blocks until the window is closed. Scenes are switched with
`engine.change_scene("name")`; the change takes effect at the start of the
next `update`, which first terminates the old scene and then initializes the
new one. Time steps larger than the threshold passed to `start` are capped
at it. Adding two scenes under one name, starting with or switching to an
unknown scene, or asking `get_scene` for one that was not added raises
`ValueError`.

## What this package does not do

This is the engine only. It contains no game: no towers, enemies, bullets,
maps, menus or other scenes, and no images, fonts or sounds. It installs no
command; a game is built by subclassing `Scene` and calling
`GameEngine.start` from your own code.