"""Puzzle model and grid generation."""

from __future__ import annotations

from collections import Counter

import pytest

from connect.engine.gamegenerator import GameGenerator
from connect.models.puzzle import DEFAULT_PUZZLE, Category, Puzzle


def _two_groups() -> Puzzle:
    return Puzzle.from_groups(
        [
            ("Colors", ["RED", "BLUE", "GREEN", "YELLOW"]),
            ("Animals", ["CAT", "DOG", "BIRD", "FISH"]),
        ]
    )


# -- partition invariant ------------------------------------------------------


@pytest.mark.parametrize("puzzle", [DEFAULT_PUZZLE, _two_groups()], ids=["default", "two"])
def test_every_word_in_exactly_one_category(puzzle: Puzzle) -> None:
    counts = Counter(puzzle.words)
    assert all(n == 1 for n in counts.values())
    for category in puzzle.categories:
        assert len(category.members) == puzzle.group_size
        for word in category.words:
            assert puzzle.category_of(word) is category
    assert len(puzzle.words) == puzzle.size


def test_default_puzzle_has_four_groups_of_four() -> None:
    assert [c.name for c in DEFAULT_PUZZLE.categories] == [
        "Colors",
        "Animals",
        "Fruits",
        "Sports",
    ]
    assert DEFAULT_PUZZLE.size == 16


def test_overlapping_categories_rejected() -> None:
    with pytest.raises(ValueError, match="ORANGE"):
        Puzzle.from_groups(
            [
                ("Colors", ["RED", "BLUE", "GREEN", "ORANGE"]),
                ("Fruits", ["APPLE", "BANANA", "ORANGE", "GRAPE"]),
            ]
        )


def test_wrong_group_size_rejected() -> None:
    with pytest.raises(ValueError, match="exactly 4"):
        Category.of("Short", ["A", "B", "C"])


def test_repeated_word_rejected() -> None:
    with pytest.raises(ValueError, match="repeats"):
        Category.of("Dup", ["A", "B", "A", "C"])


def test_empty_puzzle_rejected() -> None:
    with pytest.raises(ValueError):
        Puzzle.from_groups([])


def test_custom_group_size() -> None:
    puzzle = Puzzle.from_groups([("Pair", ["X", "Y"]), ("Duo", ["P", "Q"])], group_size=2)
    assert puzzle.size == 4


def test_unknown_word_has_no_category() -> None:
    assert DEFAULT_PUZZLE.category_of("PURPLE") is None


# -- generation ---------------------------------------------------------------


def test_seeded_shuffle_is_reproducible() -> None:
    words = DEFAULT_PUZZLE.words
    assert GameGenerator.shuffle(words, 42) == GameGenerator.shuffle(words, 42)


def test_shuffle_is_a_permutation_and_leaves_input_alone() -> None:
    words = DEFAULT_PUZZLE.words
    original = list(words)
    shuffled = GameGenerator.shuffle(words, 3)
    assert sorted(shuffled) == sorted(original)
    assert words == original


def test_different_seeds_give_different_layouts() -> None:
    words = DEFAULT_PUZZLE.words
    layouts = {tuple(GameGenerator.shuffle(words, seed)) for seed in range(10)}
    assert len(layouts) > 1


def test_generated_grid_positions_and_flags() -> None:
    grid = GameGenerator.generate(DEFAULT_PUZZLE, seed=1)
    assert [t.position for t in grid] == list(range(16))
    assert not any(t.matched for t in grid)
    assert sorted(t.word for t in grid) == sorted(DEFAULT_PUZZLE.words)
