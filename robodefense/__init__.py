"""Game logic for a lane-based robot defense game: waves, drops, projectiles, scores, settings, animation and game states."""

__version__ = "0.1.0"