"""Named cache of loaded assets such as textures and fonts."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping

BYTES_PER_RESOURCE_ESTIMATE = 1024

FONT_FALLBACKS: tuple[str, ...] = (
    "C:/Windows/Fonts/arial.ttf",
    "C:/Windows/Fonts/Arial.ttf",
)

MENU_TEXTURES: tuple[str, ...] = (
    "menu_background.png",
    "level_btn.png",
    "levelbackground_left.png",
    "levelbackground_middle.png",
    "levelbackground_right.png",
    "select1.png",
    "select2.png",
    "select3.png",
    "select_medkit.png",
    "select-b.png",
    "slider_knob.png",
    "HealthPack.png",
    "Sniper_locked.png",
    "back_to_menu.png",
    "select_level.png",
    "undo.png",
    "redo.png",
)

GAME_TEXTURES: tuple[str, ...] = (
    "level_bg.png",
    "placing_slot.png",
    "bullet.png",
    "SniperBullet.png",
    "robot_bullet.png",
    "bomb.png",
    "coin.png",
    "HealthBag.png",
)

GAME_FONTS: dict[str, str] = {"bruce": "BruceForeverRegular-X3jd2.ttf"}

ANIMATION_TEXTURES: tuple[str, ...] = (
    "explosion.png",
    "HeavyGunner_Idle.png",
    "HeavyGunner_Shot.png",
    "HeavyGunner_Dead.png",
    "ss_Idle.png",
    "Sniper_Shot.png",
    "Sniper_Dead.png",
    "ShieldBearer_Idle.png",
    "ShieldBearer_Block.png",
    "ShieldBearer_Dead.png",
    "StealthRobot_Walk1.png",
    "StealthRobot_Hit.png",
    "StealthRobot_Dead.png",
    "fire_robot_walk.png",
    "fire_robot_death.png",
    "RockRobot_Walk.png",
    "RobotRock_Dead.png",
    "RockRobot_Hit.png",
)


class ResourceCache:
    """Loads assets through a loader on first use and keeps them by name.

    The loader takes a file path and returns the asset, or raises OSError
    (or returns None) when it cannot. Paths in ``fallbacks`` are tried in
    turn when the requested file cannot be loaded.
    """

    fallbacks: tuple[str, ...] = ()

    def __init__(self, loader: Callable[[str], Any]) -> None:
        self._loader = loader
        self._items: dict[str, Any] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, name: object) -> bool:
        return name in self._items

    @property
    def memory_estimate(self) -> int:
        """A rough byte count of the cached assets."""
        return len(self._items) * BYTES_PER_RESOURCE_ESTIMATE

    def load(self, name: str, filename: str) -> bool:
        """Load a file under a name; False when no path could be loaded."""
        for path in (filename, *self.fallbacks):
            try:
                resource = self._loader(path)
            except OSError:
                continue
            if resource is not None:
                self._items[name] = resource
                return True
        return False

    def get(self, name: str) -> Any:
        """The asset of that name, loading the file of that name if needed.

        Raises KeyError when it cannot be loaded.
        """
        if name not in self._items:
            self.load(name, name)
        try:
            return self._items[name]
        except KeyError:
            raise KeyError(f"could not load resource {name!r}") from None

    def has(self, name: str) -> bool:
        return name in self._items

    def unload(self, name: str) -> None:
        self._items.pop(name, None)

    def unload_all(self) -> None:
        self._items.clear()

    def preload(self, names: Iterable[str] | Mapping[str, str]) -> list[str]:
        """Load many assets; a mapping gives name to file, otherwise name is the file.

        Returns the names that could not be loaded.
        """
        pairs = names.items() if isinstance(names, Mapping) else ((n, n) for n in names)
        return [name for name, filename in pairs if not self.load(name, filename)]