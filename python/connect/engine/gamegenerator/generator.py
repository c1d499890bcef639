"""Generates shuffled tile grids for a puzzle."""

from __future__ import annotations

import random

from connect.models.puzzle import Puzzle, Tile


class GameGenerator:
    """Lays out a puzzle's words as a randomly permuted grid."""

    @staticmethod
    def shuffle(words: list[str], seed: int | None = None) -> list[str]:
        """Return a permutation of *words*.

        The same *seed* always yields the same permutation.  With
        ``seed=None`` the generator is seeded from OS entropy.
        """
        rng = random.Random(seed)
        shuffled = list(words)
        rng.shuffle(shuffled)
        return shuffled

    @staticmethod
    def generate(puzzle: Puzzle, seed: int | None = None) -> list[Tile]:
        """Return a fresh, unmatched grid for *puzzle*."""
        words = GameGenerator.shuffle(puzzle.words, seed)
        return [Tile(word=word, position=i) for i, word in enumerate(words)]
