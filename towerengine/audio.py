"""Playing sound effects, background music and controllable samples."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pygame

from .errors import EngineError
from .log import LogType, log
from .resources import default_resources


@dataclass
class Volumes:
    """Volume levels for background music and sound effects, from 0 to 1."""

    bgm: float = 0.1
    sfx: float = 0.1


volumes = Volumes()


def _play(name: str, loops: int, volume: float, kind: str) -> Any:
    sound = default_resources().get_sample(name)
    channel = sound.play(loops=loops)
    if channel is None:
        log(LogType.INFO, f"failed to play audio ({kind})")
        return None
    channel.set_volume(volume)
    log(LogType.VERBOSE, f"played audio ({kind})")
    return channel


def play_audio(name: str) -> Any:
    """Play a sound effect once at the effect volume; return its channel or None."""
    return _play(name, 0, volumes.sfx, "once")


def play_bgm(name: str) -> Any:
    """Loop background music at the music volume; return its channel or None."""
    return _play(name, -1, volumes.bgm, "bgm")


def stop_bgm(channel: Any) -> None:
    """Stop background music started by play_bgm."""
    if channel is not None:
        channel.stop()
    log(LogType.INFO, "stopped audio (bgm)")


def play_sample(name: str, loop: bool = False, volume: float = 1.0, position: float = 0.0) -> Any:
    """Create and start a sample instance of the named sound and return it."""
    sample = default_resources().get_sample_instance(name)
    sample.loop = loop
    if pygame.mixer.get_init() is None:
        raise EngineError("failed to attach mixer to audio (sample)")
    if volume != 1:
        change_sample_volume(sample, volume)
    if position != 0:
        change_sample_position(sample, position)
    if sample.play():
        log(LogType.VERBOSE, "played audio (sample)")
    else:
        log(LogType.INFO, "failed to play audio (sample)")
    return sample


def stop_sample(sample: Any) -> None:
    """Stop a sample instance if it is playing."""
    if not sample.playing:
        return
    sample.stop()
    log(LogType.INFO, "stopped audio (sample)")


def change_sample_volume(sample: Any, volume: float) -> None:
    """Set the volume of a sample instance."""
    if volume < 0:
        raise EngineError(f"failed to change sample volume to {volume:f}")
    sample.set_volume(volume)


def change_sample_position(sample: Any, position: float) -> None:
    """Set where, in seconds, a sample instance starts playing."""
    if not sample.set_position(position):
        raise EngineError(f"failed to change sample position to {position:f} s")


def get_sample_length(sample: Any) -> int:
    """Return the length of a sample instance in whole seconds."""
    return sample.length // sample.frequency