"""Best-score persistence."""

from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

BEST_SCORE_KEY = "bestScore"


class BestScoreStore:
    """Loads and saves a single best score from a JSON file."""

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath
        self._best: int = 0
        self._load()

    # -- persistence ----------------------------------------------------------

    def _load(self) -> None:
        if not self.filepath.exists():
            return
        try:
            data = json.loads(self.filepath.read_text())
            value = data.get(BEST_SCORE_KEY, 0)
            self._best = max(0, int(value))
        except (OSError, ValueError, TypeError, AttributeError) as exc:
            logger.warning("Ignoring unreadable best score file %s: %s", self.filepath, exc)
            self._best = 0

    def save(self, value: int) -> None:
        self._best = value
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self.filepath.write_text(json.dumps({BEST_SCORE_KEY: value}, indent=2) + "\n")
        logger.debug("Saved best score %d to %s", value, self.filepath)

    # -- queries --------------------------------------------------------------

    @property
    def best(self) -> int:
        return self._best
