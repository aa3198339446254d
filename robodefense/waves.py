"""Wave composition: how many robots of each type a wave holds."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from robodefense.catalog import RobotType


@dataclass
class WaveComposition:
    """Robot counts of a wave and the order in which they spawn."""

    total_robots: int = 0
    basic_robots: int = 0
    stealth_robots: int = 0
    fire_robots: int = 0
    spawn_order: list[RobotType] = field(default_factory=list)


def calculate_total_robots(level: int, wave: int) -> int:
    """Number of robots in a wave of a level."""
    base = 3
    level_bonus = level - 1
    wave_bonus = wave - 1
    spike = (level - 5) // 2 if level > 5 else 0
    return base + level_bonus + wave_bonus + spike


def _distribute_early(comp: WaveComposition, level: int, wave: int) -> None:
    total = comp.total_robots
    if level == 1:
        comp.stealth_robots = {1: 0, 2: 1}.get(wave, 2)
        comp.basic_robots = total - comp.stealth_robots
    elif level <= 3:
        share = min(0.2 + level * 0.1 + wave * 0.05, 0.5)
        comp.stealth_robots = max(1, int(total * share))
        comp.basic_robots = total - comp.stealth_robots
    elif level <= 5:
        share = min(0.3 + wave * 0.1, 0.6)
        comp.stealth_robots = int(total * share)
        comp.basic_robots = total - comp.stealth_robots
    else:
        share = min(0.4 + (level - 6) * 0.1 + wave * 0.05, 0.7)
        comp.stealth_robots = int(total * share)
        comp.basic_robots = total - comp.stealth_robots

    if comp.basic_robots < 1 and total > 1:
        comp.basic_robots = 1
        comp.stealth_robots = total - 1


def _distribute_later(comp: WaveComposition, level: int, wave: int) -> None:
    total = comp.total_robots
    fire_share = min(0.15 + (level - 9) * 0.03 + wave * 0.02, 0.35)
    stealth_share = min(0.35 + wave * 0.03, 0.5)

    comp.fire_robots = max(1, int(total * fire_share))
    comp.stealth_robots = int((total - comp.fire_robots) * (stealth_share / (1.0 - fire_share)))
    comp.basic_robots = total - comp.fire_robots - comp.stealth_robots

    if comp.basic_robots < 1:
        comp.basic_robots = 1
        if comp.stealth_robots > 1:
            comp.stealth_robots -= 1
        elif comp.fire_robots > 1:
            comp.fire_robots -= 1


def generate_wave(level: int, wave: int, rng: random.Random | None = None) -> WaveComposition:
    """Build the composition of a wave with a shuffled spawn order.

    Levels up to 8 use basic and stealth robots only; later levels add fire robots.
    """
    comp = WaveComposition(total_robots=calculate_total_robots(level, wave))
    if level <= 8:
        _distribute_early(comp, level, wave)
    else:
        _distribute_later(comp, level, wave)

    comp.spawn_order = (
        [RobotType.BASIC] * comp.basic_robots
        + [RobotType.STEALTH] * comp.stealth_robots
        + [RobotType.FIRE] * comp.fire_robots
    )
    (rng or random).shuffle(comp.spawn_order)
    return comp