from connect.models.bestscore import BEST_SCORE_KEY, BestScoreStore
from connect.models.puzzle import DEFAULT_PUZZLE, Category, GroupSlot, Puzzle, Tile
from connect.models.session import HudSnapshot, Rules, Session

__all__ = [
    "BEST_SCORE_KEY",
    "BestScoreStore",
    "Category",
    "DEFAULT_PUZZLE",
    "GroupSlot",
    "HudSnapshot",
    "Puzzle",
    "Rules",
    "Session",
    "Tile",
]
