"""Rich terminal frontend — styled grid, group rows, and HUD.

Uses the ``rich`` library for output and the shared single-key input
handler.  Wrong guesses stay highlighted until the engine's deferred
clear fires from a ``TimerQueue`` polled between key reads.
"""

from __future__ import annotations

from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from connect.engine.gameplay import GamePlay, Phase
from connect.engine.scheduler import TimerQueue
from connect.frontend.cli.input_handler import get_key, get_key_timeout
from connect.frontend.shell import Shell
from connect.models.session import HudSnapshot

console = Console()

_POLL = 0.1  # seconds between timer checks while waiting for a key


# -- helpers ------------------------------------------------------------------


def _move_cursor(cursor: int, key: str, cols: int, count: int) -> int:
    """Move *cursor* one cell in a ``cols``-wide grid of *count* cells."""
    row, col = divmod(cursor, cols)
    rows = (count + cols - 1) // cols
    if key == "up":
        row = (row - 1) % rows
    elif key == "down":
        row = (row + 1) % rows
    elif key == "left":
        col = (col - 1) % cols
    elif key == "right":
        col = (col + 1) % cols
    return min(row * cols + col, count - 1)


def _tap(game: GamePlay, position: int) -> str:
    """Tap a tile and describe what happened."""
    if not game.select_tile(position):
        return ""
    if game.phase == Phase.PENDING_CLEAR:
        return "[red]Not a group.[/red]"
    tile = game.grid[position]
    if tile.matched:
        category = game.puzzle.category_of(tile.word)
        if category is not None:
            return f"[bold green]Found {category.name}![/bold green]"
    return ""


# -- rendering ----------------------------------------------------------------


def _render_grid(game: GamePlay, cursor: int) -> Table:
    """Return a Rich Table of the word tiles."""
    cols = game.puzzle.group_size
    width = max(len(tile.word) for tile in game.grid)
    table = Table(
        show_header=False,
        show_edge=True,
        show_lines=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(cols):
        table.add_column(width=width, justify="center")

    selection = set(game.selection)
    cells: list[Text] = []
    for tile in game.grid:
        if tile.matched:
            style = "dim green"
        elif tile.position in selection:
            style = "bold black on cyan"
        else:
            style = "bold white"
        if tile.position == cursor:
            style += " reverse"
        cells.append(Text(tile.word, style=style))

    for start in range(0, len(cells), cols):
        table.add_row(*cells[start : start + cols])
    return table


def _render_groups(game: GamePlay) -> Table:
    table = Table(
        show_header=False,
        box=rich.box.ROUNDED,
        border_style="dim",
        padding=(0, 1),
    )
    table.add_column("Group", style="bold green")
    table.add_column("Words")
    for slot in game.slots:
        if slot.revealed:
            table.add_row(slot.category.name, ", ".join(slot.revealed_words))
        else:
            dots = "  ".join("·" for _ in range(game.puzzle.group_size))
            table.add_row(Text("?", style="dim"), Text(dots, style="dim"))
    return table


def _render_hud(hud: HudSnapshot) -> Text:
    stats = Text()
    stats.append("  Score: ", style="dim")
    stats.append(str(hud.score), style="bold yellow")
    stats.append("    Best: ", style="dim")
    stats.append(str(hud.best), style="bold yellow")
    stats.append("    Moves: ", style="dim")
    stats.append(str(hud.moves), style="bold yellow")
    return stats


def _draw_game(game: GamePlay, shell: Shell, cursor: int, status: str = "") -> None:
    console.clear()

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("Space", style="bold cyan")
    controls.append("  select   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  new game   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    body = Group(
        Align.center(_render_grid(game, cursor)),
        Text(""),
        Align.center(_render_groups(game)),
    )
    panel = Panel(
        body,
        title="[bold cyan]C O N N E C T I O N S[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(_render_hud(shell.hud)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _draw_win(game: GamePlay, shell: Shell) -> None:
    console.clear()

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("CONGRATULATIONS!", style="bold green")
    congrats.append("  You found all connections!  ", style="green")
    congrats.append("★\n", style="bold yellow")

    panel = Panel(
        Group(
            Align.center(_render_groups(game)),
            Align.center(congrats),
            Align.center(_render_hud(shell.hud)),
        ),
        title="[bold green]C O N N E C T I O N S[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(Text("\n  Press R to play again, Q to quit.\n", style="dim"))
    )


# -- game loop ----------------------------------------------------------------


def _play(shell: Shell, seed: int | None) -> None:
    timers = TimerQueue()
    game = shell.connect(schedule=timers, seed=seed)
    cursor = 0
    status = ""
    dirty = True

    while True:
        if game.is_complete:
            _draw_win(game, shell)
            key = get_key()
            if key == "restart":
                shell.restart()
                cursor, status, dirty = 0, "", True
            elif key == "quit":
                return
            continue

        if dirty:
            _draw_game(game, shell, cursor, status)
            status = ""
            dirty = False

        key = get_key_timeout(_POLL)
        if timers.run_due():
            dirty = True
        if key is None:
            continue

        dirty = True
        if key in ("up", "down", "left", "right"):
            cursor = _move_cursor(cursor, key, game.puzzle.group_size, len(game.grid))
        elif key == "select":
            status = _tap(game, cursor)
        elif key == "restart":
            shell.restart()
            cursor = 0
        elif key == "quit":
            return


# -- public entry point -------------------------------------------------------


def run(data_dir: Path, seed: int | None = None) -> None:
    """Launch the Rich terminal game."""
    shell = Shell.for_data_dir(data_dir)
    _play(shell, seed)
    console.clear()
    console.print(
        Align.center(Text(f"\nBest score: {shell.best}\nGoodbye!\n", style="bold cyan"))
    )
