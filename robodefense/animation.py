"""Sprite-sheet animations and a player that steps through their frames."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

DEFAULT_CELL_HEIGHT = 100.0
SPRITE_Y_OFFSET = 35.0
_FLIPPED_NAMES = ("FireRobot", "BasicRobot", "RockRobot", "StealthRobot")
_DEATH_MARKERS = ("Death", "Dead")

Point = tuple[float, float]


@dataclass(frozen=True)
class FrameRect:
    """A rectangle of a sprite sheet."""

    left: int
    top: int
    width: int
    height: int


class Animation:
    """Frames laid out row by row on a sprite sheet, played over a duration."""

    def __init__(
        self,
        texture_size: tuple[int, int],
        frame_width: int,
        frame_height: int,
        frame_count: int,
        duration: float,
    ) -> None:
        if frame_width <= 0 or frame_height <= 0:
            raise ValueError("frame size must be positive")
        if frame_count <= 0:
            raise ValueError("an animation needs at least one frame")
        if duration <= 0:
            raise ValueError("duration must be positive")
        frames_per_row = texture_size[0] // frame_width
        if frames_per_row <= 0:
            raise ValueError("texture is narrower than one frame")

        self.texture_size = texture_size
        self.duration = float(duration)
        self.frames = tuple(
            FrameRect(col * frame_width, row * frame_height, frame_width, frame_height)
            for row, col in (divmod(i, frames_per_row) for i in range(frame_count))
        )

    @property
    def frame_count(self) -> int:
        return len(self.frames)

    def frame(self, index: int) -> FrameRect:
        """The frame at index; raises IndexError outside the animation."""
        if not 0 <= index < len(self.frames):
            raise IndexError(f"frame {index} out of range")
        return self.frames[index]


@dataclass
class AnimationPlayer:
    """Plays one animation at a time and reports frame changes and completion."""

    cell_height: float = DEFAULT_CELL_HEIGHT
    speed: float = 1.0
    paused: bool = False
    position: Point = (0.0, 0.0)
    animation: Animation | None = field(default=None, init=False)
    name: str = field(default="", init=False)
    time: float = field(default=0.0, init=False)
    current_frame: int = field(default=0, init=False)
    previous_frame: int = field(default=-1, init=False)
    rect: FrameRect | None = field(default=None, init=False)
    origin: Point = field(default=(0.0, 0.0), init=False)
    scale: Point = field(default=(1.0, 1.0), init=False)
    _frame_callbacks: dict[int, Callable[[int], None]] = field(
        default_factory=dict, init=False, repr=False
    )
    _complete_callback: Callable[[], None] | None = field(default=None, init=False, repr=False)

    @property
    def draw_position(self) -> Point:
        """Where the sprite is drawn: slightly above the owner's position."""
        return (self.position[0], self.position[1] - SPRITE_Y_OFFSET)

    def play(self, animation: Animation, name: str = "") -> None:
        """Start an animation from its first frame, scaled to fit a grid cell."""
        self.animation = animation
        self.name = name
        self.time = 0.0
        self.current_frame = 0
        self.previous_frame = -1

        first = animation.frame(0)
        self.rect = first
        self.origin = (first.width / 2.0, first.height / 2.0)
        base = self.cell_height / max(first.width, first.height)
        self.scale = (-base if self.needs_horizontal_flip() else base, base)

    def _is_death(self) -> bool:
        return any(marker in self.name for marker in _DEATH_MARKERS)

    def update(self, dt: float) -> None:
        """Advance time; death animations hold their last frame at the end."""
        animation = self.animation
        if animation is None or self.paused:
            return
        self.time += dt * self.speed
        frame_time = animation.duration / animation.frame_count
        new_frame = int(self.time / frame_time) % animation.frame_count

        completed = self.time >= animation.duration
        if completed and self._is_death():
            new_frame = animation.frame_count - 1

        if new_frame != self.current_frame:
            self.previous_frame = self.current_frame
            self.current_frame = new_frame
            self.rect = animation.frame(new_frame)
            callback = self._frame_callbacks.get(new_frame)
            if callback is not None:
                callback(new_frame)

        if completed and self._complete_callback is not None:
            self._complete_callback()

    def on_frame(self, index: int, callback: Callable[[int], None]) -> None:
        self._frame_callbacks[index] = callback

    def on_complete(self, callback: Callable[[], None] | None) -> None:
        self._complete_callback = callback

    def clear_callbacks(self) -> None:
        self._frame_callbacks.clear()
        self._complete_callback = None

    def is_last_frame(self) -> bool:
        if self.animation is None:
            return False
        return self.current_frame == self.animation.frame_count - 1

    def is_complete(self) -> bool:
        if self.animation is None:
            return True
        return self.time >= self.animation.duration

    def needs_horizontal_flip(self) -> bool:
        """Robot animations face left and are mirrored."""
        return any(marker in self.name for marker in _FLIPPED_NAMES)