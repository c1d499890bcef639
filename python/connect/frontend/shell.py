"""Embedding shell shared by every frontend.

Owns the persisted best score, receives HUD messages from the host
bridge, and is the only place that restarts games.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from connect.bridge import CallbackChannel, Channel, HostBridge, Message
from connect.engine.gameplay import GamePlay
from connect.models.bestscore import BestScoreStore
from connect.models.puzzle import DEFAULT_PUZZLE, Puzzle
from connect.models.session import HudSnapshot

logger = logging.getLogger(__name__)

BEST_SCORE_FILE = "best_score.json"


class Shell:
    """Keeps the displayed HUD and the stored best score in step."""

    def __init__(self, store: BestScoreStore) -> None:
        self.store = store
        self.hud = HudSnapshot(score=0, best=store.best, moves=0)
        self.bridge: HostBridge | None = None

    @classmethod
    def for_data_dir(cls, data_dir: Path) -> Shell:
        return cls(BestScoreStore(data_dir / BEST_SCORE_FILE))

    # -- wiring ---------------------------------------------------------------

    def connect(
        self,
        channel: Channel | None = None,
        puzzle: Puzzle = DEFAULT_PUZZLE,
        **engine_kwargs: Any,
    ) -> GamePlay:
        """Start an engine behind a host bridge and return the engine.

        HUD messages arrive on ``on_hud`` directly unless another
        *channel* is given, in which case the caller delivers them.  A
        ``best`` keyword is raised to the stored best, never lowered.
        """
        if channel is None:
            channel = CallbackChannel(self.on_hud)
        best = max(engine_kwargs.pop("best", 0), self.store.best)
        self.bridge = HostBridge.launch(channel, puzzle, best=best, **engine_kwargs)
        assert self.bridge.engine is not None
        return self.bridge.engine

    def restart(self, seed: int | None = None) -> None:
        if self.bridge is not None:
            self.bridge.new_game(seed)

    # -- HUD ------------------------------------------------------------------

    @property
    def best(self) -> int:
        return self.hud.best

    def on_hud(self, message: Message) -> None:
        """Fold an incoming HUD message with the stored best."""
        snapshot = HudSnapshot.from_message(message)
        saved = self.store.best
        best = max(snapshot.best, snapshot.score, saved)
        if best > saved:
            try:
                self.store.save(best)
            except OSError as exc:
                logger.warning("Could not save best score %d: %s", best, exc)
        self.hud = HudSnapshot(score=snapshot.score, best=best, moves=snapshot.moves)
