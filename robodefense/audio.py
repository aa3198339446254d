"""Audio volume settings and the mixing rules applied to sounds."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum


class AudioCategory(Enum):
    """Groups of sounds with their own volume."""

    MUSIC = "music"
    SFX = "sfx"
    UI = "ui"


@dataclass
class AudioSettings:
    """Volumes in percent and on/off switches."""

    master_volume: float = 100.0
    music_volume: float = 100.0
    sfx_volume: float = 100.0
    ui_volume: float = 100.0
    muted: bool = False
    music_enabled: bool = True
    sfx_enabled: bool = True


class AudioMixer:
    """Computes the volume a sound plays at from the current settings."""

    def __init__(self, settings: AudioSettings | None = None) -> None:
        self.settings = dataclasses.replace(settings) if settings else AudioSettings()

    def category_volume(self, category: AudioCategory) -> float:
        if category is AudioCategory.MUSIC:
            return self.settings.music_volume
        if category is AudioCategory.SFX:
            return self.settings.sfx_volume
        return self.settings.ui_volume

    def set_category_volume(self, category: AudioCategory, volume: float) -> None:
        if category is AudioCategory.MUSIC:
            self.settings.music_volume = volume
        elif category is AudioCategory.SFX:
            self.settings.sfx_volume = volume
        else:
            self.settings.ui_volume = volume

    def set_master_volume(self, volume: float) -> None:
        self.settings.master_volume = volume

    def set_muted(self, muted: bool) -> None:
        self.settings.muted = muted

    def final_volume(self, category: AudioCategory, volume: float = 1.0) -> float:
        """Volume scaled by the category and master volumes; zero when muted."""
        if self.settings.muted:
            return 0.0
        return (
            volume
            * (self.category_volume(category) / 100.0)
            * (self.settings.master_volume / 100.0)
        )

    def can_play(self, category: AudioCategory) -> bool:
        """Whether sounds of the category may play at all."""
        if self.settings.muted:
            return False
        if category is AudioCategory.SFX:
            return self.settings.sfx_enabled
        if category is AudioCategory.MUSIC:
            return self.settings.music_enabled
        return True

    def apply_settings(self, settings: AudioSettings) -> None:
        self.settings = dataclasses.replace(settings)