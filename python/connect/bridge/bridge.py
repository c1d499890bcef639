"""Adapter between the puzzle engine and the embedding shell."""

from __future__ import annotations

import logging
from typing import Any

from connect.bridge.channel import Channel
from connect.engine.gameplay import GamePlay
from connect.models.puzzle import DEFAULT_PUZZLE, Puzzle
from connect.models.session import HudSnapshot

logger = logging.getLogger(__name__)


class HostBridge:
    """Forwards HUD snapshots to a channel and restarts games on request.

    Holds no game state of its own beyond the last snapshot it forwarded.
    Delivery is best effort: a missing or failing channel drops the
    message and the engine carries on.
    """

    def __init__(self, channel: Channel | None = None) -> None:
        self.channel = channel
        self.engine: GamePlay | None = None
        self.last_snapshot: HudSnapshot | None = None

    @classmethod
    def launch(
        cls, channel: Channel | None, puzzle: Puzzle = DEFAULT_PUZZLE, **engine_kwargs: Any
    ) -> HostBridge:
        """Create a bridge and an engine that reports through it."""
        bridge = cls(channel)
        bridge.attach(GamePlay(puzzle, on_hud=bridge.on_hud, **engine_kwargs))
        return bridge

    def attach(self, engine: GamePlay) -> None:
        self.engine = engine

    # -- engine -> shell ------------------------------------------------------

    def on_hud(self, snapshot: HudSnapshot) -> None:
        self.last_snapshot = snapshot
        if self.channel is None:
            logger.debug("No channel, dropping HUD %s", snapshot)
            return
        try:
            self.channel.post(snapshot.as_dict())
        except Exception as exc:
            logger.debug("HUD delivery failed, dropping %s: %s", snapshot, exc)

    # -- shell -> engine ------------------------------------------------------

    def new_game(self, seed: int | None = None) -> None:
        if self.engine is None:
            logger.debug("new_game(%s) before an engine was attached", seed)
            return
        self.engine.new_game(seed)
