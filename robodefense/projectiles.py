"""Projectile creation from configuration and projectile lifetime."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from robodefense.catalog import ProjectileType, SquadMemberType

Point = tuple[float, float]

DEFAULT_OFFSET: Point = (25.0, 0.0)
DEFAULT_MAX_PROJECTILES = 100
CLEANUP_INTERVAL = 1.0

_SECTIONS: dict[ProjectileType, str] = {
    ProjectileType.BULLET: "SquadBullet",
    ProjectileType.SNIPER_BULLET: "SniperBullet",
    ProjectileType.ROBOT_BULLET: "RobotBullet",
}
_DEFAULT_DAMAGE: dict[ProjectileType, int] = {
    ProjectileType.BULLET: 30,
    ProjectileType.SNIPER_BULLET: 40,
    ProjectileType.ROBOT_BULLET: 35,
}


@dataclass
class Projectile:
    """A projectile in flight."""

    kind: ProjectileType
    damage: int
    position: Point
    target_position: Point | None = None
    velocity: Point = (0.0, 0.0)
    active: bool = True
    should_remove: bool = False

    @property
    def hits_squad_members(self) -> bool:
        """Robot bullets hit squad members; all others hit robots."""
        return self.kind is ProjectileType.ROBOT_BULLET

    def update(self, dt: float) -> None:
        self.position = (
            self.position[0] + self.velocity[0] * dt,
            self.position[1] + self.velocity[1] * dt,
        )


def projectile_for_squad_member(member_type: SquadMemberType) -> ProjectileType:
    """The projectile a squad member fires."""
    if member_type is SquadMemberType.SNIPER:
        return ProjectileType.SNIPER_BULLET
    return ProjectileType.BULLET


def parse_spawn_offset(text: str) -> Point:
    """Parse an "x,y" offset; malformed text gives the default offset."""
    x_text, comma, y_text = text.partition(",")
    if not comma:
        return DEFAULT_OFFSET
    try:
        return (float(x_text), float(y_text))
    except ValueError:
        return DEFAULT_OFFSET


class ProjectileManager:
    """Creates projectiles from configuration and keeps the live ones."""

    def __init__(
        self,
        config: Mapping[str, Mapping[str, Any]] | None = None,
        max_projectiles: int = DEFAULT_MAX_PROJECTILES,
    ) -> None:
        self._config = {name: dict(values) for name, values in (config or {}).items()}
        self.max_projectiles = max_projectiles
        self.projectiles: list[Projectile] = []
        self._cleanup_elapsed = 0.0

    def _setting(self, projectile_type: ProjectileType, key: str) -> Any:
        return self._config.get(_SECTIONS[projectile_type], {}).get(key)

    def damage_for(self, projectile_type: ProjectileType) -> int:
        value = self._setting(projectile_type, "damage")
        if value is None:
            return _DEFAULT_DAMAGE[projectile_type]
        try:
            return int(value)
        except (TypeError, ValueError):
            return _DEFAULT_DAMAGE[projectile_type]

    def spawn_offset_for(self, projectile_type: ProjectileType) -> Point:
        value = self._setting(projectile_type, "spawnOffset")
        return parse_spawn_offset(str(value) if value is not None else "25,0")

    def _full(self) -> bool:
        return len(self.projectiles) >= self.max_projectiles

    def fire(
        self,
        projectile_type: ProjectileType,
        target_position: Point,
        source_position: Point | None = None,
    ) -> Projectile | None:
        """Fire toward a position from a source, or from the target when no source.

        Returns None when the projectile limit is reached.
        """
        if self._full():
            return None
        origin = source_position if source_position is not None else target_position
        dx, dy = self.spawn_offset_for(projectile_type)
        projectile = Projectile(
            projectile_type,
            self.damage_for(projectile_type),
            (origin[0] + dx, origin[1] + dy),
            target_position,
        )
        self.projectiles.append(projectile)
        return projectile

    def fire_robot_bullet(self, fire_position: Point) -> Projectile | None:
        """Fire an enemy bullet from exactly the given position."""
        if self._full():
            return None
        projectile = Projectile(
            ProjectileType.ROBOT_BULLET,
            self.damage_for(ProjectileType.ROBOT_BULLET),
            fire_position,
            fire_position,
        )
        self.projectiles.append(projectile)
        return projectile

    def update(self, dt: float) -> None:
        """Advance live projectiles and drop finished ones."""
        for projectile in self.projectiles:
            if projectile.active:
                projectile.update(dt)
        self.projectiles = [p for p in self.projectiles if p.active]

        self._cleanup_elapsed += dt
        if self._cleanup_elapsed >= CLEANUP_INTERVAL:
            self.projectiles = [
                p for p in self.projectiles if p.active and not p.should_remove
            ]
            self._cleanup_elapsed = 0.0

    def count(self) -> int:
        return sum(1 for p in self.projectiles if p.active)