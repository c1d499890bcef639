"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from connect.models.puzzle import GroupSlot, Puzzle, Tile
from connect.models.session import Session


class GameState:
    """Holds the grid, current selection, group rows, and counters."""

    def __init__(self, puzzle: Puzzle, grid: list[Tile], session: Session) -> None:
        self.puzzle = puzzle
        self.grid = grid
        self.session = session
        self.selection: list[int] = []
        self.slots: list[GroupSlot] = [GroupSlot(c) for c in puzzle.categories]

    # -- queries --------------------------------------------------------------

    def in_range(self, position: int) -> bool:
        return 0 <= position < len(self.grid)

    def selected_words(self) -> list[str]:
        return [self.grid[p].word for p in self.selection]

    def open_slot_for(self, words: list[str]) -> GroupSlot | None:
        """Return the unrevealed slot whose category is exactly *words*."""
        chosen = set(words)
        for slot in self.slots:
            if not slot.revealed and slot.category.members == chosen:
                return slot
        return None

    @property
    def is_complete(self) -> bool:
        return self.session.matched_word_count == self.puzzle.size

    # -- mutations ------------------------------------------------------------

    def reveal(self, slot: GroupSlot) -> None:
        """Lock the selected tiles into *slot* and clear the selection."""
        slot.revealed_words = self.selected_words()
        for position in self.selection:
            self.grid[position].matched = True
        self.session.matched_word_count += len(self.selection)
        self.selection = []
