"""Collectibles dropped by destroyed robots."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from robodefense.catalog import RobotType

DEFAULT_COIN_VALUE = 30
DEFAULT_HEAL_PERCENTAGE = 50
DEFAULT_DROP_CHANCE = 0.3

Point = tuple[float, float]


class CollectibleType(Enum):
    """Kinds of collectibles."""

    COIN = "coin"
    HEALTH_PACK = "health_pack"


class DropOutcome(Enum):
    """What a destroyed robot leaves behind."""

    COIN = "coin"
    HEALTH_PACK = "health_pack"
    NOTHING = "nothing"


@dataclass(frozen=True)
class DropRates:
    """Chances of each drop outcome for one robot type."""

    coin: float
    health_pack: float
    nothing: float

    @property
    def valid(self) -> bool:
        return self.coin >= 0.0 and self.health_pack >= 0.0 and self.nothing >= 0.0


_FALLBACK_RATES: dict[RobotType, DropRates] = {
    RobotType.BASIC: DropRates(0.6, 0.4, 0.0),
    RobotType.FIRE: DropRates(0.5, 0.3, 0.2),
    RobotType.STEALTH: DropRates(0.5, 0.4, 0.1),
}
_DEFAULT_FALLBACK = DropRates(0.5, 0.3, 0.2)

_DEFAULT_DROP_CHANCES: dict[RobotType, float] = {
    RobotType.BASIC: 1.0,
    RobotType.FIRE: 0.8,
    RobotType.STEALTH: 0.9,
}


@dataclass
class Collectible:
    """A coin or health pack lying in the world."""

    kind: CollectibleType
    value: int
    position: Point | None = None
    collected: bool = False

    def spawn(self, position: Point) -> None:
        self.position = position

    def auto_collect(self) -> None:
        self.collected = True


class CollectibleFactory:
    """Creates collectibles and decides what robots drop."""

    def __init__(
        self,
        drop_rates: Mapping[RobotType, DropRates] | None = None,
        robot_rewards: Mapping[RobotType, int] | None = None,
        heal_percentage: int = DEFAULT_HEAL_PERCENTAGE,
    ) -> None:
        self._drop_rates = dict(drop_rates or {})
        self._robot_rewards = dict(robot_rewards or {})
        self.heal_percentage = int(heal_percentage)
        self._drop_chances = dict(_DEFAULT_DROP_CHANCES)

    def create(self, collectible_type: CollectibleType, value: int | None = None) -> Collectible:
        """Create a collectible; coins default to the standard reward."""
        if value is None:
            value = (
                DEFAULT_COIN_VALUE
                if collectible_type is CollectibleType.COIN
                else self.heal_percentage
            )
        return Collectible(collectible_type, value)

    def _rates_for(self, robot_type: RobotType) -> DropRates:
        rates = self._drop_rates.get(robot_type)
        if rates is not None and rates.valid:
            return rates
        return _FALLBACK_RATES.get(robot_type, _DEFAULT_FALLBACK)

    def determine_outcome(self, robot_type: RobotType, roll: float) -> DropOutcome:
        """Map a roll in [0, 1) to a drop outcome for the robot type."""
        rates = self._rates_for(robot_type)
        if roll < rates.coin:
            return DropOutcome.COIN
        if roll < rates.coin + rates.health_pack:
            return DropOutcome.HEALTH_PACK
        return DropOutcome.NOTHING

    def reward_for(self, robot_type: RobotType) -> int:
        return self._robot_rewards.get(robot_type, DEFAULT_COIN_VALUE)

    def drops_for_robot(
        self,
        robot_type: RobotType,
        position: Point,
        rng: random.Random | None = None,
    ) -> list[Collectible]:
        """Roll the drop of a destroyed robot; coins are collected at once."""
        outcome = self.determine_outcome(robot_type, (rng or random).random())
        if outcome is DropOutcome.COIN:
            coin = self.create(CollectibleType.COIN, self.reward_for(robot_type))
            coin.spawn(position)
            coin.auto_collect()
            return [coin]
        if outcome is DropOutcome.HEALTH_PACK:
            pack = self.create(CollectibleType.HEALTH_PACK, self.heal_percentage)
            pack.spawn(position)
            return [pack]
        return []

    def set_drop_chance(self, robot_type: RobotType, chance: float) -> None:
        self._drop_chances[robot_type] = min(max(chance, 0.0), 1.0)

    def drop_chance(self, robot_type: RobotType) -> float:
        return self._drop_chances.get(robot_type, DEFAULT_DROP_CHANCE)

    def random_position_near(
        self,
        center: Point,
        spread: float,
        rng: random.Random | None = None,
    ) -> Point:
        """A point within spread of center on each axis."""
        source = rng or random
        return (
            center[0] + source.uniform(-spread, spread),
            center[1] + source.uniform(-spread, spread),
        )