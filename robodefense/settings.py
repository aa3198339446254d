"""Game settings: INI serialization and a file-backed settings store."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from robodefense.audio import AudioSettings

Resolution = tuple[int, int]

DEFAULT_PATH = "settings.ini"
DEFAULT_RESOLUTION: Resolution = (1200, 800)
MIN_WIDTH = 800
MIN_HEIGHT = 600
COMMON_RESOLUTIONS: tuple[Resolution, ...] = (
    (800, 600),
    (1024, 768),
    (1200, 800),
    (1280, 720),
    (1366, 768),
    (1440, 900),
    (1600, 900),
    (1920, 1080),
)
# Key codes for W, S, A, D, Space and Escape.
DEFAULT_KEY_BINDINGS: tuple[int, ...] = (22, 18, 0, 3, 57, 36)


@dataclass
class GameSettings:
    """Every persisted setting of the game."""

    audio: AudioSettings = field(default_factory=AudioSettings)
    fullscreen: bool = False
    vsync: bool = True
    resolution_index: int = 0
    key_bindings: list[int] = field(default_factory=lambda: list(DEFAULT_KEY_BINDINGS))
    game_speed: float = 1.0
    show_tutorial: bool = True
    auto_save: bool = True


def _number(value: float) -> str:
    return format(value, "g")


def serialize_settings(settings: GameSettings) -> str:
    """Render settings as INI text with Audio, Graphics, Controls and Gameplay sections."""
    audio = settings.audio
    lines = [
        "[Audio]",
        f"masterVolume={_number(audio.master_volume)}",
        f"musicVolume={_number(audio.music_volume)}",
        f"sfxVolume={_number(audio.sfx_volume)}",
        f"muted={str(bool(audio.muted)).lower()}",
        f"musicEnabled={str(bool(audio.music_enabled)).lower()}",
        f"sfxEnabled={str(bool(audio.sfx_enabled)).lower()}",
        "",
        "[Graphics]",
        f"fullscreen={str(bool(settings.fullscreen)).lower()}",
        f"vsync={str(bool(settings.vsync)).lower()}",
        f"resolutionIndex={settings.resolution_index}",
        "",
        "[Controls]",
        *(f"key{index}={key}" for index, key in enumerate(settings.key_bindings)),
        "",
        "[Gameplay]",
        f"gameSpeed={_number(settings.game_speed)}",
        f"showTutorial={str(bool(settings.show_tutorial)).lower()}",
        f"autoSave={str(bool(settings.auto_save)).lower()}",
    ]
    return "\n".join(lines) + "\n"


def _copy(settings: GameSettings) -> GameSettings:
    return dataclasses.replace(
        settings,
        audio=dataclasses.replace(settings.audio),
        key_bindings=list(settings.key_bindings),
    )


def _apply_audio(audio: AudioSettings, key: str, value: str) -> None:
    if key == "masterVolume":
        audio.master_volume = float(value)
    elif key == "musicVolume":
        audio.music_volume = float(value)
    elif key == "sfxVolume":
        audio.sfx_volume = float(value)
    elif key == "muted":
        audio.muted = value == "true"
    elif key == "musicEnabled":
        audio.music_enabled = value == "true"
    elif key == "sfxEnabled":
        audio.sfx_enabled = value == "true"


def _apply_graphics(settings: GameSettings, key: str, value: str) -> None:
    if key == "fullscreen":
        settings.fullscreen = value == "true"
    elif key == "vsync":
        settings.vsync = value == "true"
    elif key == "resolutionIndex":
        settings.resolution_index = int(value)


def _apply_control(settings: GameSettings, key: str, value: str) -> None:
    index = int(key[3:])
    if 0 <= index < len(settings.key_bindings):
        settings.key_bindings[index] = int(value)


def _apply_gameplay(settings: GameSettings, key: str, value: str) -> None:
    if key == "gameSpeed":
        settings.game_speed = float(value)
    elif key == "showTutorial":
        settings.show_tutorial = value == "true"
    elif key == "autoSave":
        settings.auto_save = value == "true"


def _parse_onto(text: str, base: GameSettings) -> GameSettings:
    settings = _copy(base)
    section = ""
    for raw in text.splitlines():
        line = raw.strip(" \t")
        if not line or line.startswith("#"):
            continue
        if line.startswith("[") and line.endswith("]"):
            section = line[1:-1]
            continue
        key, eq, value = line.partition("=")
        if not eq:
            continue
        if section == "Audio":
            _apply_audio(settings.audio, key, value)
        elif section == "Graphics":
            _apply_graphics(settings, key, value)
        elif section == "Controls" and key.startswith("key"):
            _apply_control(settings, key, value)
        elif section == "Gameplay":
            _apply_gameplay(settings, key, value)
    return settings


def parse_settings(text: str) -> GameSettings:
    """Parse INI text on top of the default settings.

    Unknown sections and keys are ignored. Raises ValueError when a
    numeric value cannot be parsed.
    """
    return _parse_onto(text, GameSettings())


class SettingsStore:
    """Holds the current settings and keeps them in a file."""

    def __init__(
        self,
        path: str | Path = DEFAULT_PATH,
        display_modes: Iterable[Resolution] = (),
    ) -> None:
        self.path = Path(path)
        self._display_modes = [(int(w), int(h)) for w, h in display_modes]
        self.settings = self._defaults()
        self.changed = False

    def _defaults(self) -> GameSettings:
        return GameSettings(resolution_index=self.resolution_index(DEFAULT_RESOLUTION))

    def supported_resolutions(self) -> list[Resolution]:
        """Display modes of at least 800x600 plus common sizes, smallest area first."""
        resolutions = [
            mode for mode in self._display_modes if mode[0] >= MIN_WIDTH and mode[1] >= MIN_HEIGHT
        ]
        resolutions.extend(r for r in COMMON_RESOLUTIONS if r not in resolutions)
        return sorted(resolutions, key=lambda r: r[0] * r[1])

    def resolution_index(self, resolution: Resolution) -> int:
        """Index of a resolution among the supported ones, 0 when absent."""
        try:
            return self.supported_resolutions().index(tuple(resolution))
        except ValueError:
            return 0

    def resolution(self) -> Resolution:
        resolutions = self.supported_resolutions()
        index = self.settings.resolution_index
        if 0 <= index < len(resolutions):
            return resolutions[index]
        return DEFAULT_RESOLUTION

    def set_resolution(self, resolution: Resolution) -> None:
        self.settings.resolution_index = self.resolution_index(resolution)
        self.changed = True

    def load(self) -> GameSettings:
        """Read settings from the file; an absent file gives the defaults.

        Raises ValueError when the file holds a malformed number.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            self.settings = self._defaults()
            return self.settings
        self.settings = _parse_onto(text, self._defaults())
        return self.settings

    def save(self) -> None:
        self.path.write_text(serialize_settings(self.settings), encoding="utf-8")

    def reset(self) -> GameSettings:
        self.settings = self._defaults()
        self.changed = True
        return self.settings

    @staticmethod
    def _clamp_volume(volume: float) -> float:
        return min(max(float(volume), 0.0), 100.0)

    def set_master_volume(self, volume: float) -> None:
        self.settings.audio.master_volume = self._clamp_volume(volume)
        self.changed = True

    def set_music_volume(self, volume: float) -> None:
        self.settings.audio.music_volume = self._clamp_volume(volume)
        self.changed = True

    def set_sfx_volume(self, volume: float) -> None:
        self.settings.audio.sfx_volume = self._clamp_volume(volume)
        self.changed = True