"""A cache of images, fonts and sounds loaded from the resource directory."""

from __future__ import annotations

import functools
import sys
from pathlib import Path
from typing import Any, Callable

import pygame

from .errors import EngineError
from .log import LogType, log


def _refcount(cache: dict[str, Any], key: str) -> int:
    return sys.getrefcount(cache[key])


# Reference count of a value that nothing but its cache holds.
_UNREFERENCED = _refcount({"probe": object()}, "probe")


def _load_image(path: str) -> Any:
    return pygame.image.load(path)


def _load_font(path: str, size: int) -> Any:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(path, size)


def _load_sound(path: str) -> Any:
    return pygame.mixer.Sound(path)


def _scale(surface: Any, size: tuple[int, int]) -> Any:
    try:
        return pygame.transform.smoothscale(surface, size)
    except ValueError:
        # smoothscale only handles 24- and 32-bit surfaces.
        return pygame.transform.scale(surface, size)


def _mixer_format() -> tuple[int, int, int]:
    init = pygame.mixer.get_init()
    if init is None:
        raise EngineError("audio mixer is not initialised")
    return init


class _SampleInstance:
    """A playable handle on a loaded sound with its own volume, position and loop mode."""

    def __init__(self, name: str, sound: Any) -> None:
        self.name = name
        self.sound = sound
        self.loop = False
        self.volume = 1.0
        self.frame = 0
        self.channel: Any = None
        self._playing_sound: Any = None

    @property
    def frequency(self) -> int:
        """Frames per second of the mixer the sound plays through."""
        return _mixer_format()[0]

    @staticmethod
    def _frame_bytes() -> int:
        _, size, channels = _mixer_format()
        return abs(size) // 8 * channels

    @property
    def length(self) -> int:
        """Length of the sound in frames."""
        return len(self.sound.get_raw()) // self._frame_bytes()

    @property
    def playing(self) -> bool:
        return (
            self.channel is not None
            and self.channel.get_busy()
            and self.channel.get_sound() is self._playing_sound
        )

    def set_volume(self, volume: float) -> None:
        self.volume = volume
        if self.playing:
            self.channel.set_volume(volume)

    def set_position(self, seconds: float) -> bool:
        """Move the start position; return False if it lies outside the sound."""
        frame = int(self.frequency * seconds)
        if not 0 <= frame < self.length:
            return False
        self.frame = frame
        return True

    def play(self) -> bool:
        """Start playing from the current position; return whether a channel was free."""
        playable = self.sound
        if self.frame:
            raw = self.sound.get_raw()
            playable = pygame.mixer.Sound(buffer=raw[self.frame * self._frame_bytes():])
        channel = playable.play(loops=-1 if self.loop else 0)
        if channel is None:
            return False
        channel.set_volume(self.volume)
        self.channel = channel
        self._playing_sound = playable
        return True

    def stop(self) -> None:
        if self.channel is not None:
            self.channel.stop()
        self.channel = None
        self._playing_sound = None


class Resources:
    """Loads resources on first use and keeps them until they are no longer referenced.

    Images live under ``<root>/images``, fonts under ``<root>/fonts`` and
    sounds under ``<root>/audios``.
    """

    def __init__(
        self,
        root: str | Path = "Resource",
        *,
        load_image: Callable[[str], Any] = _load_image,
        load_font: Callable[[str, int], Any] = _load_font,
        load_sound: Callable[[str], Any] = _load_sound,
        scale: Callable[[Any, tuple[int, int]], Any] = _scale,
    ) -> None:
        root = Path(root)
        self.image_dir = root / "images"
        self.font_dir = root / "fonts"
        self.audio_dir = root / "audios"
        self._load_image = load_image
        self._load_font = load_font
        self._load_sound = load_sound
        self._scale = scale
        self._bitmaps: dict[str, Any] = {}
        self._fonts: dict[str, Any] = {}
        self._samples: dict[str, Any] = {}
        self._sample_instances: dict[str, _SampleInstance] = {}

    def release_unused(self) -> None:
        """Drop every cached resource that nothing outside the cache refers to."""
        caches = (
            ("Destroyed Resource<image>: ", self._bitmaps),
            ("Destroyed Resource<font>: ", self._fonts),
            ("Destroyed<sample_instance>: ", self._sample_instances),
            ("Destroyed Resource<audio>: ", self._samples),
        )
        for message, cache in caches:
            for key in list(cache):
                if _refcount(cache, key) <= _UNREFERENCED:
                    log(LogType.INFO, message, key)
                    del cache[key]

    def _read_image(self, path: str) -> Any:
        try:
            return self._load_image(path)
        except (pygame.error, OSError) as exc:
            raise EngineError(f"failed to load image: {path}") from exc

    def get_bitmap(self, name: str, width: int | None = None, height: int | None = None) -> Any:
        """Return the image of that name, resized to width x height if they are given."""
        if (width is None) != (height is None):
            raise ValueError("width and height must be given together")
        path = str(self.image_dir / name)
        if width is None:
            if name not in self._bitmaps:
                self._bitmaps[name] = self._read_image(path)
                log(LogType.INFO, "Loaded Resource<image>: ", path)
            return self._bitmaps[name]
        key = f"{name}?{width}x{height}"
        if key not in self._bitmaps:
            image = self._read_image(path)
            try:
                resized = self._scale(image, (width, height))
            except (pygame.error, ValueError) as exc:
                raise EngineError(
                    f"failed to create bitmap when creating resized image: {path}"
                ) from exc
            self._bitmaps[key] = resized
            log(LogType.INFO, "Loaded Resource<image>: ", path, " scaled to ", width, "x", height)
        return self._bitmaps[key]

    def get_font(self, name: str, font_size: int) -> Any:
        """Return the font of that name at the given size."""
        key = f"{name}?{font_size}"
        if key not in self._fonts:
            path = str(self.font_dir / name)
            try:
                font = self._load_font(path, font_size)
            except (pygame.error, OSError) as exc:
                raise EngineError(f"failed to load font: {path}") from exc
            log(LogType.INFO, "Loaded Resource<font>: ", path, " with size ", font_size)
            self._fonts[key] = font
        return self._fonts[key]

    def get_sample(self, name: str) -> Any:
        """Return the sound of that name."""
        if name not in self._samples:
            path = str(self.audio_dir / name)
            try:
                sound = self._load_sound(path)
            except (pygame.error, OSError) as exc:
                raise EngineError(f"failed to load audio: {path}") from exc
            log(LogType.INFO, "Loaded Resource<audio>: ", path)
            self._samples[name] = sound
        return self._samples[name]

    def get_sample_instance(self, name: str) -> _SampleInstance:
        """Return a new playable instance of the sound of that name."""
        sample = self.get_sample(name)
        instance = _SampleInstance(name, sample)
        log(LogType.INFO, "Created<sample_instance>: ", self.audio_dir / name)
        self._sample_instances[name] = instance
        return instance


@functools.lru_cache(maxsize=None)
def default_resources() -> Resources:
    """Return the shared resource cache rooted at ``Resource``."""
    return Resources()