"""A narrow interface through which animation nodes steer a playing clip."""

from __future__ import annotations

from typing import Protocol


class _AnimControl(Protocol):
    """The playback controller of a single animation clip."""

    num_frames: int
    play_rate: float

    def is_playing(self) -> bool: ...

    def loop(self, restart: bool) -> None: ...

    def play(self) -> None: ...

    def stop(self) -> None: ...

    def pose(self, frame: float) -> None: ...


class CurrentAnim:
    """Lets an animation graph control one clip without knowing its controller."""

    def __init__(self, anim: _AnimControl) -> None:
        self._anim = anim

    def play_anim(self, looping: bool) -> None:
        """Start the clip unless it is already playing."""
        if self._anim.is_playing():
            return
        if looping:
            self._anim.loop(True)
        else:
            self._anim.play()

    def stop_anim(self) -> None:
        """Stop the clip."""
        self._anim.stop()

    def set_anim_speed(self, speed: float) -> None:
        """Change the playback rate of the clip."""
        self._anim.play_rate = speed

    def set_anim_relative_time(self, relative_time: float) -> None:
        """Hold the clip at a position given as a fraction of its length."""
        self._anim.pose(relative_time * self._anim.num_frames)