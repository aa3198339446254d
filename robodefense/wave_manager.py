"""Wave progression: countdowns between waves and the spawning of each wave's robots."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Protocol

from robodefense.catalog import RobotType
from robodefense.waves import generate_wave

GRID_ROWS = 5
WAVES_PER_LEVEL = 3
GET_READY_DURATION = 2.0
COUNTDOWN_DURATION = 1.0
FADE_DURATION = 0.25
COUNTDOWN_START = 5
NEXT_WAVE_COUNTDOWN = 5.0
FIRST_SPAWN_DELAY = 0.5
SPAWN_INTERVAL_RANGE = (4.0, 5.0)
FINAL_WAVE_BONUS = 100
GET_READY_TEXT = "GET READY FOR COMBAT!"


class WaveState(Enum):
    """Where the current wave stands."""

    PREPARING = "preparing"
    ACTIVE = "active"
    COMPLETED = "completed"
    ALL_COMPLETED = "all_completed"


class CountdownPhase(Enum):
    """Stages of the on-screen countdown before a wave."""

    NONE = "none"
    GET_READY = "get_ready"
    WAVE_DISPLAY = "wave_display"
    COMPLETE = "complete"


class Spawner(Protocol):
    """What the wave manager needs from the robot side of the game."""

    def spawn_robot(self, robot_type: RobotType, lane: int) -> Any: ...

    def active_count(self) -> int: ...


@dataclass
class WaveData:
    """Everything known about one wave of a level."""

    wave_number: int
    preparation_time: float = 5.0
    spawn_interval: float = 4.5
    bonus_reward: int = 0
    is_boss_wave: bool = False
    robot_types: list[RobotType] = field(default_factory=list)
    robot_counts: list[int] = field(default_factory=list)
    spawn_order: list[RobotType] = field(default_factory=list)

    @property
    def enemy_count(self) -> int:
        if self.spawn_order:
            return len(self.spawn_order)
        return sum(self.robot_counts)


def create_wave(level: int, wave_number: int, rng: random.Random | None = None) -> WaveData:
    """Build the data of one wave of a level from its generated composition."""
    composition = generate_wave(level, wave_number, rng)
    wave = WaveData(
        wave_number=wave_number,
        preparation_time=5.0,
        spawn_interval=max(2.0, 4.5 - level * 0.2),
        bonus_reward=50 + level * 25 + wave_number * 10,
        is_boss_wave=wave_number == 3,
    )
    for robot_type, count in (
        (RobotType.BASIC, composition.basic_robots),
        (RobotType.FIRE, composition.fire_robots),
        (RobotType.STEALTH, composition.stealth_robots),
    ):
        if count > 0:
            wave.robot_types.append(robot_type)
            wave.robot_counts.append(count)
    wave.spawn_order = list(composition.spawn_order)
    return wave


@dataclass
class _Timer:
    duration: float = 0.0
    elapsed: float = 0.0

    def update(self, dt: float) -> None:
        self.elapsed += dt

    def restart(self) -> None:
        self.elapsed = 0.0

    @property
    def done(self) -> bool:
        return self.elapsed >= self.duration

    @property
    def remaining(self) -> float:
        return max(0.0, self.duration - self.elapsed)


class WaveManager:
    """Runs the waves of a level: countdown, spawning and completion."""

    def __init__(
        self,
        spawner: Spawner | None = None,
        level: int = 1,
        rng: random.Random | None = None,
    ) -> None:
        self.spawner = spawner
        self.level = level
        self.lanes = GRID_ROWS
        self._rng = rng or random.Random()

        self.waves: list[WaveData] = []
        self.wave_index = 0
        self.state = WaveState.PREPARING
        self.enemies_spawned = 0
        self.spawn_index = 0

        self.countdown_active = False
        self.countdown_time = 0.0
        self.countdown_phase = CountdownPhase.NONE
        self.countdown_number = 0
        self.is_first_wave = True

        self.on_wave_start: Callable[[int], None] | None = None
        self.on_wave_complete: Callable[[int, int], None] | None = None

        self._countdown_timer = _Timer()
        self._display_timer = _Timer()
        self._spawn_timer = _Timer()
        self._load_waves()

    # -- queries -------------------------------------------------------

    @property
    def current_wave(self) -> int:
        return self.wave_index + 1

    @property
    def total_waves(self) -> int:
        return len(self.waves)

    @property
    def enemy_count(self) -> int:
        """Robots in the current wave."""
        if self.wave_index >= len(self.waves):
            return 0
        return self.waves[self.wave_index].enemy_count

    @property
    def time_until_next_wave(self) -> float:
        return self._countdown_timer.remaining if self.countdown_active else 0.0

    @property
    def is_wave_active(self) -> bool:
        return self.state is WaveState.ACTIVE

    @property
    def all_completed(self) -> bool:
        return self.state is WaveState.ALL_COMPLETED

    @property
    def is_showing_countdown(self) -> bool:
        return self.countdown_active or self.countdown_phase is not CountdownPhase.NONE

    def remaining_enemies(self) -> int:
        """Robots of the active wave still to spawn; zero outside a wave."""
        if self.state is not WaveState.ACTIVE or self.wave_index >= len(self.waves):
            return 0
        return self.enemy_count - self.enemies_spawned

    # -- main loop -----------------------------------------------------

    def update(self, dt: float) -> None:
        self._update_countdown(dt)
        self._update_countdown_display(dt)
        self._update_spawning(dt)

    def _update_countdown(self, dt: float) -> None:
        if not self.countdown_active:
            return
        self._countdown_timer.update(dt)
        if self.countdown_phase is CountdownPhase.COMPLETE:
            self.countdown_active = False
            self.start_next_wave()

    def _update_countdown_display(self, dt: float) -> None:
        if self.countdown_phase is CountdownPhase.NONE:
            return
        self._display_timer.update(dt)
        if self._display_timer.done:
            self._next_countdown_phase()

    def _update_spawning(self, dt: float) -> None:
        if self.state is not WaveState.ACTIVE or self.spawner is None:
            return
        self._spawn_timer.update(dt)
        if self._spawn_timer.done and self.spawn_index < self.enemy_count:
            self._spawn_next_enemy()
            self._spawn_timer.duration = self._rng.uniform(*SPAWN_INTERVAL_RANGE)
            self._spawn_timer.restart()
        self._check_completion()

    def _spawn_next_enemy(self) -> None:
        if self.spawner is None or self.wave_index >= len(self.waves):
            return
        order = self.waves[self.wave_index].spawn_order
        if self.spawn_index < len(order):
            lane = self._rng.randrange(self.lanes)
            self.spawner.spawn_robot(order[self.spawn_index], lane)
            self.spawn_index += 1
            self.enemies_spawned += 1

    def _check_completion(self) -> None:
        if self.spawner is None:
            return
        all_spawned = self.enemies_spawned >= self.enemy_count
        all_defeated = self.spawner.active_count() == 0
        if self.state is WaveState.ACTIVE and all_spawned and all_defeated:
            self.complete_current_wave()

    # -- wave transitions ----------------------------------------------

    def start_next_wave(self) -> None:
        """Activate the wave at the current index, or finish when none is left."""
        if self.wave_index >= len(self.waves):
            self.state = WaveState.ALL_COMPLETED
            return
        self.state = WaveState.ACTIVE
        self.enemies_spawned = 0
        self.spawn_index = 0
        self.is_first_wave = False
        self._spawn_timer.duration = FIRST_SPAWN_DELAY
        self._spawn_timer.restart()
        if self.on_wave_start is not None:
            self.on_wave_start(self.current_wave)

    def start_wave(self, wave_number: int) -> None:
        """Jump to a wave, clamped to the waves of the level, and start it."""
        self.wave_index = min(max(wave_number - 1, 0), len(self.waves) - 1)
        self.start_next_wave()

    def _bonus_for_current(self) -> int:
        wave = self.current_wave
        if wave < len(self.waves):
            return self.waves[wave - 1].bonus_reward
        return FINAL_WAVE_BONUS

    def complete_current_wave(self) -> None:
        """Finish the active wave; start the next countdown or end the level."""
        if self.state is not WaveState.ACTIVE:
            return
        self.state = WaveState.COMPLETED

        if self.wave_index + 1 >= len(self.waves):
            self.state = WaveState.ALL_COMPLETED
            if self.on_wave_complete is not None:
                self.on_wave_complete(self.current_wave, self._bonus_for_current())
            return

        self.wave_index += 1
        if self.on_wave_complete is not None:
            self.on_wave_complete(self.current_wave, self._bonus_for_current())
        self.show_countdown(NEXT_WAVE_COUNTDOWN)

    def reset(self) -> None:
        self.wave_index = 0
        self.state = WaveState.PREPARING
        self.enemies_spawned = 0
        self.spawn_index = 0
        self.countdown_active = False
        self.countdown_phase = CountdownPhase.NONE
        self.is_first_wave = True

    def set_level(self, level: int) -> None:
        """Switch level and regenerate its waves."""
        self.level = level
        self._load_waves()

    def _load_waves(self) -> None:
        self.waves = [
            create_wave(self.level, wave, self._rng) for wave in range(1, WAVES_PER_LEVEL + 1)
        ]

    # -- countdown -----------------------------------------------------

    def show_countdown(self, seconds: float) -> None:
        """Begin the countdown; only the first wave shows the get-ready message."""
        self.countdown_time = seconds
        self._countdown_timer.duration = seconds
        self._countdown_timer.restart()
        self.countdown_active = True

        if self.is_first_wave:
            self.countdown_phase = CountdownPhase.GET_READY
            self._display_timer.duration = GET_READY_DURATION
        else:
            self.countdown_phase = CountdownPhase.WAVE_DISPLAY
            self.countdown_number = COUNTDOWN_START
            self._display_timer.duration = COUNTDOWN_DURATION
        self._display_timer.restart()

    def _next_countdown_phase(self) -> None:
        if self.countdown_phase is CountdownPhase.GET_READY:
            self.countdown_phase = CountdownPhase.WAVE_DISPLAY
            self.countdown_number = COUNTDOWN_START
            self._display_timer.duration = COUNTDOWN_DURATION
            self._display_timer.restart()
        elif self.countdown_phase is CountdownPhase.WAVE_DISPLAY:
            self.countdown_number -= 1
            if self.countdown_number >= 0:
                self._display_timer.restart()
            else:
                self.countdown_phase = CountdownPhase.COMPLETE

    def countdown_alpha(self) -> float:
        """Opacity, 0 to 255, of the countdown text: fade in, hold, fade out."""
        if self.countdown_phase is CountdownPhase.NONE:
            return 0.0
        elapsed = self._display_timer.elapsed
        duration = self._display_timer.duration
        stay = duration - 2 * FADE_DURATION
        if elapsed <= FADE_DURATION:
            return elapsed / FADE_DURATION * 255.0
        if elapsed <= FADE_DURATION + stay:
            return 255.0
        fade_out_elapsed = elapsed - FADE_DURATION - stay
        return max(0.0, (1.0 - fade_out_elapsed / FADE_DURATION) * 255.0)

    def countdown_text(self) -> list[str]:
        """The lines the countdown shows in its current phase."""
        if self.countdown_phase is CountdownPhase.GET_READY:
            return [GET_READY_TEXT]
        if self.countdown_phase is CountdownPhase.WAVE_DISPLAY:
            return [f"WAVE {self.current_wave}", str(max(self.countdown_number, 0))]
        return []