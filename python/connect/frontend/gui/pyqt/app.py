"""PyQt6 GUI frontend — fully self-contained.

A grid of word buttons, group rows that fill in as categories are
found, and a win page.  Wrong guesses are cleared by ``QTimer``
single-shot callbacks handed to the engine as its scheduler.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QFont, QKeyEvent
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QGridLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QSpacerItem,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from connect.bridge import CallbackChannel, Message
from connect.engine.gameplay import GamePlay
from connect.frontend.shell import Shell

# ---------------------------------------------------------------------------
# Catppuccin Mocha CSS colours
# ---------------------------------------------------------------------------
_BASE = "#1e1e2e"
_MANTLE = "#181825"
_SURFACE0 = "#313244"
_SURFACE1 = "#45475a"
_OVERLAY0 = "#6c7086"
_TEXT = "#cdd6f4"
_SUBTEXT = "#a6adc8"
_BLUE = "#89b4fa"
_BLUE_H = "#a4c4fc"
_GREEN = "#a6e3a1"
_GREEN_H = "#b8ecb4"
_PINK = "#f5c2e7"
_YELLOW = "#f9e2af"
_LAVENDER = "#b4befe"

_GLOBAL_CSS = f"""
    QMainWindow, QWidget#page {{ background: {_BASE}; }}
    QLabel {{ color: {_TEXT}; }}
"""

_COMPLETE_DELAY_MS = 100  # let the last match paint before switching pages


def _styled_btn(
    text: str,
    *,
    bg: str = _SURFACE0,
    hover: str = _SURFACE1,
    fg: str = _TEXT,
    font_size: int = 14,
    min_w: int = 0,
    min_h: int = 44,
    radius: int = 8,
) -> QPushButton:
    btn = QPushButton(text)
    btn.setFont(QFont("Helvetica", font_size, QFont.Weight.Bold))
    btn.setMinimumHeight(min_h)
    if min_w:
        btn.setMinimumWidth(min_w)
    btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    btn.setCursor(Qt.CursorShape.PointingHandCursor)
    btn.setStyleSheet(_btn_css(bg, hover, fg, radius))
    return btn


def _btn_css(bg: str, hover: str, fg: str, radius: int = 8) -> str:
    return (
        f"QPushButton {{ background:{bg}; color:{fg};"
        f" border:none; border-radius:{radius}px; padding:6px 10px; font-weight:bold; }}"
        f" QPushButton:hover {{ background:{hover}; }}"
    )


# ═══════════════════════════════════════════════════════════════════════════
# Pages
# ═══════════════════════════════════════════════════════════════════════════


class _GamePage(QWidget):
    """Word grid, group rows, HUD line, and a New Game button."""

    def __init__(self, game: GamePlay) -> None:
        super().__init__()
        self.setObjectName("page")
        self.game = game
        cols = game.puzzle.group_size

        root = QVBoxLayout(self)
        root.setSpacing(6)
        root.setContentsMargins(16, 10, 16, 10)

        t = QLabel("Connections")
        t.setFont(QFont("Helvetica", 17, QFont.Weight.Bold))
        t.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(t)

        self.stats = QLabel()
        self.stats.setFont(QFont("Helvetica", 13))
        self.stats.setStyleSheet(f"color:{_PINK};")
        self.stats.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self.stats)

        frame = QFrame()
        frame.setStyleSheet(f"background:{_MANTLE}; border-radius:10px;")
        grid = QGridLayout(frame)
        grid.setSpacing(4)
        grid.setContentsMargins(8, 8, 8, 8)
        root.addWidget(frame, alignment=Qt.AlignmentFlag.AlignCenter)

        self._btns: list[QPushButton] = []
        for tile in game.grid:
            b = QPushButton()
            b.setFixedSize(100, 56)
            b.setFont(QFont("Helvetica", 11, QFont.Weight.Bold))
            b.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            b.clicked.connect(lambda _, pos=tile.position: self._click(pos))
            r, c = divmod(tile.position, cols)
            grid.addWidget(b, r, c)
            self._btns.append(b)

        self._rows: list[QLabel] = []
        for _ in game.slots:
            row = QLabel()
            row.setFont(QFont("Helvetica", 12, QFont.Weight.Bold))
            row.setMinimumHeight(36)
            row.setAlignment(Qt.AlignmentFlag.AlignCenter)
            root.addWidget(row)
            self._rows.append(row)

        self.new_btn = _styled_btn(
            "NEW GAME", bg=_BLUE, hover=_LAVENDER, fg=_BASE, min_w=220
        )
        root.addWidget(self.new_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        hint = QLabel("Click tiles to select     R  new game     Esc  quit")
        hint.setFont(QFont("Helvetica", 11))
        hint.setStyleSheet(f"color:{_OVERLAY0};")
        hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(hint)

    def sync(self) -> None:
        selection = set(self.game.selection)
        for tile, b in zip(self.game.grid, self._btns):
            b.setText(tile.word)
            b.setEnabled(not tile.matched)
            if tile.matched:
                b.setStyleSheet(_btn_css(_SURFACE0, _SURFACE0, _OVERLAY0))
            elif tile.position in selection:
                b.setStyleSheet(_btn_css(_BLUE, _BLUE_H, _BASE))
            else:
                b.setStyleSheet(_btn_css(_SURFACE1, _SURFACE0, _TEXT))

        for slot, row in zip(self.game.slots, self._rows):
            if slot.revealed:
                row.setText(f"{slot.category.name}:  {', '.join(slot.revealed_words)}")
                row.setStyleSheet(
                    f"background:{_GREEN}; color:{_BASE}; border-radius:8px;"
                )
            else:
                row.setText("")
                row.setStyleSheet(
                    f"border:2px dashed {_SURFACE1}; border-radius:8px;"
                )

    def _click(self, position: int) -> None:
        self.game.select_tile(position)
        self.sync()


class _WinPage(QWidget):
    """Victory screen with the final HUD and a play-again button."""

    def __init__(self, score: int, best: int, moves: int) -> None:
        super().__init__()
        self.setObjectName("page")

        root = QVBoxLayout(self)
        root.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.setSpacing(10)
        root.setContentsMargins(30, 30, 30, 30)

        star = QLabel("★  S O L V E D  ★")
        star.setFont(QFont("Helvetica", 32, QFont.Weight.Bold))
        star.setStyleSheet(f"color:{_GREEN};")
        star.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(star)

        root.addSpacerItem(QSpacerItem(0, 20))

        for txt, col in [
            (f"Score:  {score}", _YELLOW),
            (f"Best:   {best}", _YELLOW),
            (f"Moves:  {moves}", _SUBTEXT),
        ]:
            lbl = QLabel(txt)
            lbl.setFont(QFont("Helvetica", 20, QFont.Weight.Bold))
            lbl.setStyleSheet(f"color:{col};")
            lbl.setAlignment(Qt.AlignmentFlag.AlignCenter)
            root.addWidget(lbl)

        root.addSpacerItem(QSpacerItem(0, 24))

        self.again_btn = _styled_btn(
            "PLAY AGAIN", bg=_GREEN, hover=_GREEN_H, fg=_BASE,
            font_size=16, min_w=240, min_h=50,
        )
        root.addWidget(self.again_btn, alignment=Qt.AlignmentFlag.AlignCenter)


# ═══════════════════════════════════════════════════════════════════════════
# Main window
# ═══════════════════════════════════════════════════════════════════════════

_IDX_GAME = 0
_IDX_WIN = 1


class _MainWindow(QMainWindow):
    def __init__(self, data_dir: Path, seed: int | None) -> None:
        super().__init__()
        self._shell = Shell.for_data_dir(data_dir)
        self._page: _GamePage | None = None

        self.setWindowTitle("Connections")
        self.setStyleSheet(_GLOBAL_CSS)
        self.setMinimumSize(480, 600)

        self._stack = QStackedWidget()
        self.setCentralWidget(self._stack)

        game = self._shell.connect(
            channel=CallbackChannel(self._on_hud),
            schedule=self._schedule,
            on_complete=self._on_complete,
            seed=seed,
        )
        self._page = _GamePage(game)
        self._page.new_btn.clicked.connect(self._new_game)
        self._stack.addWidget(self._page)  # 0
        self._stack.addWidget(QWidget())  # 1, replaced on win

        self._page.sync()
        self._refresh_stats()
        self._stack.setCurrentIndex(_IDX_GAME)

    # -- engine hooks ---

    def _schedule(self, delay: float, action: Callable[[], None]) -> None:
        def fire() -> None:
            action()
            if self._page is not None:
                self._page.sync()

        QTimer.singleShot(int(delay * 1000), fire)

    def _on_hud(self, message: Message) -> None:
        self._shell.on_hud(message)
        self._refresh_stats()

    def _on_complete(self) -> None:
        QTimer.singleShot(_COMPLETE_DELAY_MS, self._show_win)

    # -- navigation ---

    def _refresh_stats(self) -> None:
        if self._page is None:
            return
        hud = self._shell.hud
        self._page.stats.setText(
            f"Score: {hud.score}    Best: {hud.best}    Moves: {hud.moves}"
        )

    def _new_game(self) -> None:
        self._shell.restart()
        if self._page is not None:
            self._page.sync()
        self._stack.setCurrentIndex(_IDX_GAME)

    def _show_win(self) -> None:
        # A restart inside the completion delay leaves a fresh game on screen.
        if self._page is None or not self._page.game.is_complete:
            return
        hud = self._shell.hud
        page = _WinPage(hud.score, hud.best, hud.moves)
        page.again_btn.clicked.connect(self._new_game)

        old = self._stack.widget(_IDX_WIN)
        self._stack.removeWidget(old)
        old.deleteLater()
        self._stack.insertWidget(_IDX_WIN, page)
        self._stack.setCurrentIndex(_IDX_WIN)

    # -- keyboard ---

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        if key == Qt.Key.Key_Escape:
            self.close()
        elif key in (Qt.Key.Key_R, Qt.Key.Key_Return):
            self._new_game()
        else:
            super().keyPressEvent(event)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(data_dir: Path, seed: int | None = None) -> None:
    """Launch the PyQt6 GUI."""
    qapp = QApplication.instance() or QApplication(sys.argv)
    window = _MainWindow(data_dir, seed)
    window.show()
    qapp.exec()
