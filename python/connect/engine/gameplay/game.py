"""Core gameplay logic — tile selection, match evaluation, and scoring."""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import Callable

from connect.engine.gamegenerator import GameGenerator
from connect.engine.gamestate import GameState
from connect.engine.scheduler import Schedule, run_now
from connect.models.puzzle import DEFAULT_PUZZLE, GroupSlot, Puzzle, Tile
from connect.models.session import HudSnapshot, Rules, Session

logger = logging.getLogger(__name__)

HudSink = Callable[[HudSnapshot], None]


class Phase(StrEnum):
    IDLE = "idle"
    PENDING_CLEAR = "pending_clear"  # wrong guess shown, waiting to clear
    COMPLETE = "complete"


class GamePlay:
    """Owns one puzzle's game state and drives it from tile taps.

    Every call is a safe no-op when it does not apply: out-of-range
    positions, matched tiles and over-selection never raise.

    *on_hud* receives a ``HudSnapshot`` after every counter-affecting
    transition.  *schedule* is a ``schedule(delay, action)`` callable used
    to clear a wrong guess after ``rules.mismatch_delay`` seconds; by
    default the clear happens immediately.
    """

    def __init__(
        self,
        puzzle: Puzzle = DEFAULT_PUZZLE,
        *,
        on_hud: HudSink | None = None,
        on_complete: Callable[[], None] | None = None,
        schedule: Schedule | None = None,
        rules: Rules | None = None,
        best: int = 0,
        seed: int | None = None,
    ) -> None:
        self.puzzle = puzzle
        self.rules = rules or Rules()
        self.session = Session(best=max(0, best))
        self._on_hud = on_hud
        self._on_complete = on_complete
        self._schedule = schedule or run_now
        self._generation = 0
        self._pending_clear = False
        self._completed = False
        self.state = GameState(puzzle, GameGenerator.generate(puzzle, seed), self.session)
        self._emit()

    # -- commands -------------------------------------------------------------

    def new_game(self, seed: int | None = None) -> None:
        """Reshuffle the grid and reset everything except ``best``."""
        self._generation += 1
        self._pending_clear = False
        self._completed = False
        self.session.reset()
        self.state = GameState(
            self.puzzle, GameGenerator.generate(self.puzzle, seed), self.session
        )
        logger.debug("New game (seed=%s), best=%d", seed, self.session.best)
        self._emit()

    def select_tile(self, position: int) -> bool:
        """Toggle the tile at *position* in the current selection.

        Returns True if the selection changed.  Completing a group of
        ``puzzle.group_size`` tiles evaluates it immediately.
        """
        state = self.state
        if self._pending_clear or not isinstance(position, int):
            return False
        if not state.in_range(position) or state.grid[position].matched:
            return False

        if position in state.selection:
            state.selection.remove(position)
            return True

        if len(state.selection) >= self.puzzle.group_size:
            return False

        state.selection.append(position)
        if len(state.selection) == self.puzzle.group_size:
            self._evaluate()
        return True

    # -- queries --------------------------------------------------------------

    @property
    def grid(self) -> list[Tile]:
        return self.state.grid

    @property
    def selection(self) -> tuple[int, ...]:
        return tuple(self.state.selection)

    @property
    def slots(self) -> list[GroupSlot]:
        return self.state.slots

    @property
    def is_complete(self) -> bool:
        return self.state.is_complete

    @property
    def phase(self) -> Phase:
        if self.is_complete:
            return Phase.COMPLETE
        if self._pending_clear:
            return Phase.PENDING_CLEAR
        return Phase.IDLE

    def snapshot(self) -> HudSnapshot:
        return self.session.snapshot()

    # -- helpers --------------------------------------------------------------

    def _evaluate(self) -> None:
        state = self.state
        self.session.moves += 1
        words = state.selected_words()
        slot = state.open_slot_for(words)

        if slot is None:
            logger.debug("No category for %s (move %d)", words, self.session.moves)
            self._pending_clear = True
            self._emit()
            generation = self._generation
            self._schedule(
                self.rules.mismatch_delay, lambda: self._clear_selection(generation)
            )
            return

        state.reveal(slot)
        self.session.add_reward(self.rules.reward)
        logger.debug(
            "Matched %s (score=%d, move %d)",
            slot.category.name,
            self.session.score,
            self.session.moves,
        )
        self._emit()
        if state.is_complete and not self._completed:
            self._completed = True
            logger.info("Puzzle complete in %d moves", self.session.moves)
            if self._on_complete is not None:
                self._on_complete()

    def _clear_selection(self, generation: int) -> None:
        # A clear scheduled before new_game() must not touch the new grid.
        if generation != self._generation:
            return
        self.state.selection = []
        self._pending_clear = False

    def _emit(self) -> None:
        if self._on_hud is None:
            return
        snapshot = self.session.snapshot()
        try:
            self._on_hud(snapshot)
        except Exception as exc:
            logger.warning("HUD sink failed, dropping %s: %s", snapshot, exc)
