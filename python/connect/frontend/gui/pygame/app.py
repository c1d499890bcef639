"""Pygame GUI frontend — fully self-contained.

Click tiles to build a group of four; matched groups fill the rows
below the grid.  HUD messages travel over a ``QueueChannel`` and are
drained once per frame, the same way a native shell would receive them.
"""

from __future__ import annotations

import enum
from pathlib import Path

import pygame

from connect.bridge import QueueChannel
from connect.engine.gameplay import GamePlay
from connect.engine.scheduler import TimerQueue
from connect.frontend.shell import Shell

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_SURFACE0 = (49, 50, 68)
COL_SURFACE1 = (69, 71, 90)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_SUBTEXT = (166, 173, 200)
COL_BLUE = (137, 180, 250)
COL_LAVENDER = (180, 190, 254)
COL_GREEN = (166, 227, 161)
COL_PINK = (245, 194, 231)
COL_YELLOW = (249, 226, 175)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 500, 640
TILE_GAP = 4
TILE_H = 60
ROW_H = 40
MARGIN = 20
GRID_TOP = 76
BOARD_MAX = WIN_W - 2 * MARGIN


class _Screen(enum.Enum):
    PLAYING = "playing"
    WIN = "win"


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "radius", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
        *,
        bg: tuple = COL_SURFACE0,
        hover: tuple = COL_SURFACE1,
        fg: tuple = COL_TEXT,
        radius: int = 8,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.hover = hover
        self.fg = fg
        self.radius = radius
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        c = self.hover if self._hot else self.bg
        pygame.draw.rect(surf, c, self.rect, border_radius=self.radius)
        _blit_in(surf, self.font.render(self.text, True, self.fg), self.rect)

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


# ---------------------------------------------------------------------------
# Centring helpers
# ---------------------------------------------------------------------------
def _cx(w: int) -> int:
    return (WIN_W - w) // 2


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, (_cx(rendered.get_width()), y))


def _blit_in(surf: pygame.Surface, rendered: pygame.Surface, rect: pygame.Rect) -> None:
    surf.blit(
        rendered,
        (
            rect.centerx - rendered.get_width() // 2,
            rect.centery - rendered.get_height() // 2,
        ),
    )


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(self, data_dir: Path, seed: int | None = None) -> None:
        self._shell = Shell.for_data_dir(data_dir)
        self._channel = QueueChannel()
        self._timers = TimerQueue()

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Connections")
        self._clock = pygame.time.Clock()

        self._f_big = pygame.font.SysFont("Helvetica", 38, bold=True)
        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_body = pygame.font.SysFont("Helvetica", 16)
        self._f_tile = pygame.font.SysFont("Helvetica", 15, bold=True)
        self._f_tile_sm = pygame.font.SysFont("Helvetica", 12, bold=True)
        self._f_btn = pygame.font.SysFont("Helvetica", 17, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)

        self._game: GamePlay = self._shell.connect(
            channel=self._channel, schedule=self._timers, seed=seed
        )
        self._screen = _Screen.PLAYING
        self._build_btns()

    # ── layout ──────────────────────────────────────────────────────────────

    def _cols(self) -> int:
        return self._game.puzzle.group_size

    def _tile_w(self) -> int:
        cols = self._cols()
        return (BOARD_MAX - (cols + 1) * TILE_GAP) // cols

    def _tile_rect(self, position: int) -> pygame.Rect:
        r, c = divmod(position, self._cols())
        tw = self._tile_w()
        total = self._cols() * tw + (self._cols() + 1) * TILE_GAP
        ox = _cx(total) + TILE_GAP
        oy = GRID_TOP + TILE_GAP
        return pygame.Rect(ox + c * (tw + TILE_GAP), oy + r * (TILE_H + TILE_GAP), tw, TILE_H)

    def _grid_bottom(self) -> int:
        rows = (len(self._game.grid) + self._cols() - 1) // self._cols()
        return GRID_TOP + rows * (TILE_H + TILE_GAP) + TILE_GAP

    def _build_btns(self) -> None:
        bw = 220
        self._new_btn = _Btn(
            (_cx(bw), WIN_H - 84, bw, 44),
            "NEW GAME (R)",
            self._f_btn,
            bg=COL_BLUE,
            hover=COL_LAVENDER,
            fg=COL_BASE,
        )
        self._again_btn = _Btn(
            (_cx(bw), 420, bw, 50),
            "PLAY AGAIN",
            self._f_btn,
            bg=COL_GREEN,
            hover=(190, 240, 190),
            fg=COL_BASE,
        )

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw_hud(self, y: int) -> None:
        hud = self._shell.hud
        _blit_center(
            self._surf,
            self._f_body.render(
                f"Score: {hud.score}    Best: {hud.best}    Moves: {hud.moves}",
                True,
                COL_PINK,
            ),
            y,
        )

    def _draw_tile_label(self, word: str, rect: pygame.Rect, fg: tuple) -> None:
        lbl = self._f_tile.render(word, True, fg)
        if lbl.get_width() > rect.width - 6:
            lbl = self._f_tile_sm.render(word, True, fg)
        _blit_in(self._surf, lbl, rect)

    def _draw_game(self) -> None:
        self._surf.fill(COL_BASE)
        game = self._game

        _blit_center(self._surf, self._f_title.render("Connections", True, COL_TEXT), 14)
        self._draw_hud(44)

        grid_bottom = self._grid_bottom()
        pygame.draw.rect(
            self._surf,
            COL_MANTLE,
            pygame.Rect(MARGIN, GRID_TOP, BOARD_MAX, grid_bottom - GRID_TOP),
            border_radius=10,
        )

        selection = set(game.selection)
        for tile in game.grid:
            rect = self._tile_rect(tile.position)
            if tile.matched:
                bg, fg = COL_SURFACE0, COL_OVERLAY0
            elif tile.position in selection:
                bg, fg = COL_BLUE, COL_BASE
            else:
                bg, fg = COL_SURFACE1, COL_TEXT
            pygame.draw.rect(self._surf, bg, rect, border_radius=6)
            self._draw_tile_label(tile.word, rect, fg)

        y = grid_bottom + 12
        for slot in game.slots:
            rect = pygame.Rect(MARGIN, y, BOARD_MAX, ROW_H)
            if slot.revealed:
                pygame.draw.rect(self._surf, COL_GREEN, rect, border_radius=8)
                text = f"{slot.category.name}:  {', '.join(slot.revealed_words)}"
                _blit_in(self._surf, self._f_small.render(text, True, COL_BASE), rect)
            else:
                pygame.draw.rect(self._surf, COL_SURFACE1, rect, width=2, border_radius=8)
            y += ROW_H + 6

        self._new_btn.draw(self._surf)
        _blit_center(
            self._surf,
            self._f_small.render("Click tiles to select     R  new game     Esc  quit", True, COL_OVERLAY0),
            WIN_H - 30,
        )

    def _draw_win(self) -> None:
        self._surf.fill(COL_BASE)
        _blit_center(
            self._surf,
            self._f_big.render("★  S O L V E D  ★", True, COL_GREEN),
            100,
        )
        hud = self._shell.hud
        y = 200
        for txt, col in (
            (f"Score:  {hud.score}", COL_YELLOW),
            (f"Best:   {hud.best}", COL_YELLOW),
            (f"Moves:  {hud.moves}", COL_SUBTEXT),
        ):
            _blit_center(self._surf, self._f_title.render(txt, True, col), y)
            y += 44
        self._again_btn.draw(self._surf)

    # ── event handling ──────────────────────────────────────────────────────

    def _ev_game(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            self._new_btn.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._new_btn.hit(ev.pos):
                self._shell.restart()
                return True
            for tile in self._game.grid:
                if self._tile_rect(tile.position).collidepoint(ev.pos):
                    self._game.select_tile(tile.position)
                    return True
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_r:
                self._shell.restart()
            elif ev.key == pygame.K_ESCAPE:
                return False
        return True

    def _ev_win(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            self._again_btn.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._again_btn.hit(ev.pos):
                self._shell.restart()
        elif ev.type == pygame.KEYDOWN:
            if ev.key in (pygame.K_r, pygame.K_RETURN):
                self._shell.restart()
            elif ev.key == pygame.K_ESCAPE:
                return False
        return True

    # ── main loop ───────────────────────────────────────────────────────────

    def _pump(self) -> None:
        """Deliver queued HUD messages and fire due timers."""
        for message in self._channel.drain():
            self._shell.on_hud(message)
        self._timers.run_due()
        self._screen = _Screen.WIN if self._game.is_complete else _Screen.PLAYING

    def run_loop(self) -> None:
        _dispatch = {
            _Screen.PLAYING: self._ev_game,
            _Screen.WIN: self._ev_win,
        }
        _draw = {
            _Screen.PLAYING: self._draw_game,
            _Screen.WIN: self._draw_win,
        }

        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                    break
                if not _dispatch[self._screen](ev):
                    running = False
                    break

            self._pump()
            _draw[self._screen]()
            pygame.display.flip()
            self._clock.tick(30)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(data_dir: Path, seed: int | None = None) -> None:
    """Launch the Pygame GUI."""
    app = PygameApp(data_dir, seed)
    app.run_loop()
