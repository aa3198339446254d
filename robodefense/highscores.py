"""Persistent high score table stored as comma-separated lines."""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

DEFAULT_MAX_SCORES = 10
DEFAULT_PATH = "highscores.txt"

_REASONS = {
    0: "You were defeated!",
    1: "Time ran out!",
    2: "Core destroyed!",
}


def _today() -> str:
    return datetime.date.today().strftime("%Y-%m-%d")


@dataclass
class HighScore:
    """One entry of the high score table."""

    player_name: str
    score: int
    wave: int = 0
    time: float = 0.0
    date: str = field(default_factory=_today)


def _format_line(score: HighScore) -> str:
    return (
        f"{score.player_name},{score.score},{score.wave},"
        f"{format(score.time, 'g')},{score.date}\n"
    )


def serialize_scores(scores: Iterable[HighScore]) -> str:
    """Render scores as "name,score,wave,time,date" lines."""
    return "".join(_format_line(score) for score in scores)


def _parse_line(line: str) -> HighScore | None:
    """Parse one line; None when it has too few fields.

    Raises ValueError when a numeric field is malformed.
    """
    parts = line.split(",", 4)
    if len(parts) < 5:
        return None
    name, score, wave, time, date = parts
    return HighScore(name, int(score), int(wave), float(time), date)


def parse_scores(text: str) -> list[HighScore]:
    """Parse serialized scores, skipping lines with too few fields.

    Raises ValueError when a numeric field cannot be parsed.
    """
    scores = []
    for line in text.splitlines():
        entry = _parse_line(line)
        if entry is not None:
            scores.append(entry)
    return scores


def _parse_leniently(text: str) -> list[HighScore]:
    scores = []
    for line in text.splitlines():
        try:
            entry = _parse_line(line)
        except ValueError:
            continue
        if entry is not None:
            scores.append(entry)
    return scores


def reason_text(reason: int) -> str:
    """Describe why a game ended."""
    return _REASONS.get(reason, "Unknown reason")


class HighScoreTable:
    """A ranked, size-limited list of high scores kept in a file."""

    def __init__(
        self,
        path: str | Path = DEFAULT_PATH,
        max_scores: int = DEFAULT_MAX_SCORES,
    ) -> None:
        self.path = Path(path)
        self.max_scores = max_scores

    def _ranked(self, scores: Iterable[HighScore]) -> list[HighScore]:
        ordered = sorted(scores, key=lambda s: s.score, reverse=True)
        return ordered[: max(self.max_scores, 0)]

    def _write(self, scores: Iterable[HighScore]) -> None:
        self.path.write_text(serialize_scores(scores), encoding="utf-8")

    def load(self) -> list[HighScore]:
        """Scores from the file, best first; an absent file holds none."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        return self._ranked(parse_scores(text))

    def save(self, score: HighScore) -> None:
        """Add a score, keeping only the best max_scores entries."""
        self._write(self._ranked([*self.load(), score]))

    def is_new_high_score(self, score: int) -> bool:
        scores = self.load()
        return len(scores) < self.max_scores or score > self.lowest_high_score()

    def high_score(self) -> int:
        scores = self.load()
        return scores[0].score if scores else 0

    def lowest_high_score(self) -> int:
        scores = self.load()
        return scores[-1].score if scores else 0

    def top_scores(self, count: int) -> list[HighScore]:
        return self.load()[: max(count, 0)]

    def rank_of(self, score: int) -> int:
        """One-based rank the score would take in the table."""
        scores = self.load()
        for rank, entry in enumerate(scores, start=1):
            if score >= entry.score:
                return rank
        return len(scores) + 1

    def is_top_ten(self, score: int) -> bool:
        return self.rank_of(score) <= 10

    def clear(self) -> None:
        """Empty the score file."""
        self.path.write_text("", encoding="utf-8")

    def export(self, path: str | Path) -> None:
        """Write the current scores to another file."""
        Path(path).write_text(serialize_scores(self.load()), encoding="utf-8")

    def import_scores(self, path: str | Path) -> int:
        """Replace the table with the scores read from a file.

        Malformed lines are skipped. Returns the number of scores kept.
        """
        text = Path(path).read_text(encoding="utf-8")
        scores = self._ranked(_parse_leniently(text))
        self._write(scores)
        return len(scores)