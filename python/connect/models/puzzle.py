"""Puzzle model — categories, tiles, and revealed group rows."""

from __future__ import annotations

from dataclasses import dataclass, field

GROUP_SIZE = 4


@dataclass(frozen=True)
class Category:
    """A hidden group of words that belong together.

    ``words`` keeps the declared order; matching only ever compares
    ``members`` as a set.
    """

    name: str
    words: tuple[str, ...]

    @classmethod
    def of(cls, name: str, words: list[str], group_size: int = GROUP_SIZE) -> Category:
        """Create a category from a word list.

        Example::

            Category.of("Colors", ["RED", "BLUE", "GREEN", "YELLOW"])
        """
        if len(set(words)) != len(words):
            raise ValueError(f"Category {name!r} repeats a word: {words}.")
        if len(words) != group_size:
            raise ValueError(
                f"Category {name!r} needs exactly {group_size} words, "
                f"got {len(words)}."
            )
        return cls(name=name, words=tuple(words))

    @property
    def members(self) -> frozenset[str]:
        return frozenset(self.words)


@dataclass(frozen=True)
class Puzzle:
    """An ordered set of categories with pairwise disjoint words."""

    categories: tuple[Category, ...]
    group_size: int = GROUP_SIZE

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_groups(
        cls, groups: list[tuple[str, list[str]]], group_size: int = GROUP_SIZE
    ) -> Puzzle:
        """Create a puzzle from ``(name, words)`` pairs.

        Raises ``ValueError`` if a category has the wrong size or if a
        word appears in more than one category.
        """
        if not groups:
            raise ValueError("A puzzle needs at least one category.")

        categories: list[Category] = []
        owner: dict[str, str] = {}
        for name, words in groups:
            category = Category.of(name, words, group_size)
            for word in category.words:
                if word in owner:
                    raise ValueError(
                        f"Word {word!r} is in both {owner[word]!r} and {name!r}."
                    )
                owner[word] = name
            categories.append(category)

        return cls(categories=tuple(categories), group_size=group_size)

    # -- queries --------------------------------------------------------------

    @property
    def words(self) -> list[str]:
        """All words, category by category, in declared order."""
        return [word for category in self.categories for word in category.words]

    @property
    def size(self) -> int:
        """Total number of tiles (``C·G``)."""
        return len(self.categories) * self.group_size

    def category_of(self, word: str) -> Category | None:
        for category in self.categories:
            if word in category.words:
                return category
        return None


@dataclass
class Tile:
    """A single word shown at a grid position."""

    word: str
    position: int
    matched: bool = False


@dataclass
class GroupSlot:
    """Revealed words of one category; empty until it is matched."""

    category: Category
    revealed_words: list[str] = field(default_factory=list)

    @property
    def revealed(self) -> bool:
        return bool(self.revealed_words)


DEFAULT_PUZZLE = Puzzle.from_groups(
    [
        ("Colors", ["RED", "BLUE", "GREEN", "YELLOW"]),
        ("Animals", ["CAT", "DOG", "BIRD", "FISH"]),
        ("Fruits", ["APPLE", "BANANA", "ORANGE", "GRAPE"]),
        ("Sports", ["SOCCER", "BASKETBALL", "TENNIS", "GOLF"]),
    ]
)
