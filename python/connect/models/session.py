"""Session counters, game rules, and the HUD snapshot."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rules:
    """Tunable game constants.  Group size comes from the puzzle."""

    reward: int = 100
    mismatch_delay: float = 0.5  # seconds before a wrong guess is cleared


@dataclass
class Session:
    score: int = 0
    best: int = 0
    moves: int = 0
    matched_word_count: int = 0

    def add_reward(self, points: int) -> None:
        self.score += points
        self.best = max(self.best, self.score)

    def reset(self) -> None:
        """Start a fresh game.  ``best`` is kept."""
        self.score = 0
        self.moves = 0
        self.matched_word_count = 0

    def snapshot(self) -> HudSnapshot:
        return HudSnapshot(score=self.score, best=self.best, moves=self.moves)


@dataclass(frozen=True)
class HudSnapshot:
    """The ``{score, best, moves}`` triple reported to the shell."""

    score: int
    best: int
    moves: int

    def as_dict(self) -> dict[str, int]:
        return {"score": self.score, "best": self.best, "moves": self.moves}

    @classmethod
    def from_message(cls, message: object) -> HudSnapshot:
        """Decode a HUD message, tolerating missing or float fields."""
        data = message if isinstance(message, dict) else {}

        def _field(key: str) -> int:
            value = data.get(key, 0)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                return 0
            return int(value)

        return cls(score=_field("score"), best=_field("best"), moves=_field("moves"))
