"""Connections word-grouping puzzle.

Usage::

    connect                     # interactive menu
    connect -f rich --seed 7    # Rich terminal, reproducible grid
    connect -f pygame           # Pygame GUI
    connect --best              # print the stored best score
"""

from __future__ import annotations

import importlib
import logging
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

from connect.frontend.shell import Shell

APP_NAME = "connect"


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pygame = "pygame"
    pyqt = "pyqt"


_RUNNERS = {
    Frontend.rich: "connect.frontend.cli.rich.app",
    Frontend.pygame: "connect.frontend.gui.pygame.app",
    Frontend.pyqt: "connect.frontend.gui.pyqt.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=verbose)],
    )


def _print_best(data_dir: Path) -> None:
    shell = Shell.for_data_dir(data_dir)
    print(f"\n  Best score: {shell.best}\n")


def _launch(frontend: Frontend, data_dir: Path, seed: int | None) -> None:
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(data_dir=data_dir, seed=seed)


def _menu_loop(data_dir: Path, seed: int | None) -> None:
    choices = {"1": Frontend.rich, "2": Frontend.pygame, "3": Frontend.pyqt}
    while True:
        print()
        print("  ====================================")
        print("        C O N N E C T I O N S         ")
        print("  ====================================")
        print()
        print("  1.  Play  (Rich Terminal)")
        print("  2.  Play  (Pygame GUI)")
        print("  3.  Play  (PyQt GUI)")
        print("  4.  View Best Score")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return
        if choice in choices:
            _launch(choices[choice], data_dir, seed)
        elif choice == "4":
            _print_best(data_dir)
        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible tile layout.",
    ),
    best: bool = typer.Option(
        False, "--best",
        help="Show the stored best score and exit.",
    ),
    data_dir: Path = typer.Option(
        Path(typer.get_app_dir(APP_NAME)), "--data-dir",
        envvar="CONNECT_DATA_DIR",
        file_okay=False,
        help="Directory holding the best score file.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log engine events.",
    ),
) -> None:
    """Connections word-grouping puzzle."""
    _configure_logging(verbose)

    if best:
        _print_best(data_dir)
        return

    if frontend is None:
        _menu_loop(data_dir, seed)
        return

    _launch(frontend, data_dir, seed)


if __name__ == "__main__":
    app()
