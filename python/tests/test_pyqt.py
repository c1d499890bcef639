"""PyQt6 window navigation, run headless on the offscreen platform."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PyQt6.QtWidgets")

pytestmark = pytest.mark.timeout(10)

from connect.engine.gameplay import GamePlay  # noqa: E402
from connect.frontend.gui.pyqt.app import _IDX_GAME, _IDX_WIN, _MainWindow  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


def _solve(game: GamePlay) -> None:
    positions = {t.word: t.position for t in game.grid}
    for category in game.puzzle.categories:
        for word in category.words:
            game.select_tile(positions[word])


def test_win_page_shown_for_completed_game(qapp, tmp_path: Path) -> None:
    window = _MainWindow(tmp_path, seed=0)
    game = window._page.game
    _solve(game)
    assert game.is_complete

    window._show_win()
    assert window._stack.currentIndex() == _IDX_WIN


def test_restart_before_win_delay_keeps_new_game(qapp, tmp_path: Path) -> None:
    window = _MainWindow(tmp_path, seed=0)
    _solve(window._page.game)

    window._new_game()
    window._show_win()

    assert not window._page.game.is_complete
    assert window._stack.currentIndex() == _IDX_GAME
