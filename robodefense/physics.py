"""Fixed-timestep stepping of a simulation."""

from __future__ import annotations

from typing import Callable

DEFAULT_TIMESTEP = 1.0 / 60.0


class FixedStepWorld:
    """Accumulates frame time and advances a simulation in fixed steps."""

    def __init__(
        self,
        step_callback: Callable[[float], None],
        timestep: float = DEFAULT_TIMESTEP,
    ) -> None:
        if timestep <= 0:
            raise ValueError("timestep must be positive")
        self._step_callback = step_callback
        self.timestep = timestep
        self.accumulator = 0.0

    def step(self, dt: float) -> int:
        """Add dt to the accumulator and run as many whole steps as fit.

        Returns the number of steps run.
        """
        self.accumulator += dt
        steps = 0
        while self.accumulator >= self.timestep:
            self._step_callback(self.timestep)
            self.accumulator -= self.timestep
            steps += 1
        return steps