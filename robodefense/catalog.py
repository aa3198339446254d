"""Unit type catalogs: names, availability, costs and random selection."""

from __future__ import annotations

import random
from enum import Enum
from typing import Any, Mapping

UPGRADE_COST_MULTIPLIER = 1.5
DEFAULT_SQUAD_COST = 100


class RobotType(Enum):
    """Kinds of enemy robots."""

    BASIC = "basic"
    FIRE = "fire"
    STEALTH = "stealth"


class SquadMemberType(Enum):
    """Kinds of player squad members."""

    HEAVY_GUNNER = "heavy_gunner"
    SNIPER = "sniper"
    SHIELD_BEARER = "shield_bearer"


class ProjectileType(Enum):
    """Kinds of projectiles."""

    BULLET = "bullet"
    ROBOT_BULLET = "robot_bullet"
    SNIPER_BULLET = "sniper_bullet"


_ROBOT_NAMES: dict[RobotType, str] = {
    RobotType.BASIC: "BasicRobot",
    RobotType.FIRE: "FireRobot",
    RobotType.STEALTH: "StealthRobot",
}
_ROBOTS_BY_NAME = {name: kind for kind, name in _ROBOT_NAMES.items()}

_SQUAD_NAMES: dict[SquadMemberType, str] = {
    SquadMemberType.HEAVY_GUNNER: "HeavyGunner",
    SquadMemberType.SNIPER: "Sniper",
    SquadMemberType.SHIELD_BEARER: "ShieldBearer",
}
_SQUAD_BY_NAME = {name: kind for kind, name in _SQUAD_NAMES.items()}


class RobotCatalog:
    """Known robot types and the configuration loaded for each."""

    def __init__(self, configs: Mapping[RobotType, Any]) -> None:
        self._configs = dict(configs)

    def type_from_name(self, name: str) -> RobotType:
        """Look up a robot type by name; unknown names map to the basic robot."""
        return _ROBOTS_BY_NAME.get(name, RobotType.BASIC)

    def name_of(self, robot_type: RobotType) -> str:
        return _ROBOT_NAMES[robot_type]

    def can_create(self, robot_type: RobotType) -> bool:
        """A robot can be created only when its configuration is known."""
        return robot_type in self._configs

    def config_for(self, robot_type: RobotType) -> Any:
        """Return the configuration for a type, or None when none was loaded."""
        return self._configs.get(robot_type)

    def available_types(self) -> list[RobotType]:
        """All named robot types, ordered by name."""
        return [_ROBOTS_BY_NAME[name] for name in self.available_names()]

    def available_names(self) -> list[str]:
        return sorted(_ROBOTS_BY_NAME)

    def random_type(self, rng: random.Random | None = None) -> RobotType:
        """Pick one of the available types uniformly."""
        return (rng or random).choice(self.available_types())


def robot_weights_for_wave(wave_number: int) -> dict[RobotType, int]:
    """Spawn weights of the robot types allowed in a wave."""
    weights = {RobotType.BASIC: max(1, 10 - wave_number)}
    if wave_number >= 2:
        weights[RobotType.FIRE] = 3
    if wave_number >= 3:
        weights[RobotType.STEALTH] = 2
    return weights


def random_robot_type_for_wave(wave_number: int, rng: random.Random | None = None) -> RobotType:
    """Pick a robot type for a wave, weighted by robot_weights_for_wave."""
    weights = robot_weights_for_wave(wave_number)
    return (rng or random).choices(list(weights), weights=list(weights.values()))[0]


class SquadCatalog:
    """Squad member names, costs, unlock state and placement rules."""

    def __init__(
        self,
        costs: Mapping[SquadMemberType, int] | None,
        grid_rows: int,
        grid_columns: int,
    ) -> None:
        self._costs = dict(costs or {})
        self.grid_rows = grid_rows
        self.grid_columns = grid_columns
        self._unlocked = {kind: True for kind in SquadMemberType}

    def type_from_name(self, name: str) -> SquadMemberType:
        """Look up a member type by name; unknown names map to the heavy gunner."""
        return _SQUAD_BY_NAME.get(name, SquadMemberType.HEAVY_GUNNER)

    def name_of(self, member_type: SquadMemberType) -> str:
        return _SQUAD_NAMES[member_type]

    def cost(self, member_type: SquadMemberType) -> int:
        return self._costs.get(member_type, DEFAULT_SQUAD_COST)

    def upgrade_cost(self, member_type: SquadMemberType, current_level: int) -> int:
        return int(self.cost(member_type) * UPGRADE_COST_MULTIPLIER**current_level)

    def can_afford(self, member_type: SquadMemberType, coins: int) -> bool:
        return coins >= self.cost(member_type)

    def set_unlocked(self, member_type: SquadMemberType, unlocked: bool) -> None:
        self._unlocked[member_type] = unlocked

    def is_unlocked(self, member_type: SquadMemberType) -> bool:
        return self._unlocked.get(member_type, False)

    def unlocked_types(self) -> list[SquadMemberType]:
        return [kind for kind in SquadMemberType if self._unlocked.get(kind, False)]

    def can_place(self, member_type: SquadMemberType, lane: int, grid_x: int) -> bool:
        """True when the type is unlocked and the cell lies on the grid."""
        return (
            self.is_unlocked(member_type)
            and 0 <= lane < self.grid_rows
            and 0 <= grid_x < self.grid_columns
        )