#!/usr/bin/env python3
"""Sliding Puzzle Game.

Usage::

    python main.py                     # interactive menu
    python main.py -f rich             # Rich terminal
    python main.py -f pygame --seed 7  # Pygame GUI, fixed shuffle
    python main.py --solution          # show a shuffled board and its solution
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent
IMAGES_DIR = PROJECT_ROOT / "assets" / "images"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

console = Console()


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pygame = "pygame"


class LogLevel(StrEnum):
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"


_RUNNERS = {
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def _print_solution(seed: Optional[int]) -> None:
    import time

    from backend.engine.gamegenerator import GameGenerator, XorShiftPRNG
    from backend.engine.gamesolver import Solver

    prng = XorShiftPRNG(seed) if seed is not None else XorShiftPRNG.from_clock(time.time())
    board = GameGenerator.generate(prng)

    console.print("\n  [bold]Shuffled board[/bold]")
    for row in board.rows():
        console.print("   " + " ".join(str(v) if v else "·" for v in row))

    moves = Solver.solve(board)
    console.print(f"\n  [bold]Solution[/bold] ({len(moves)} moves)")
    console.print("   " + " ".join(m.name for m in moves) + "\n")


def _launch(frontend: Frontend, seed: Optional[int], fps: int, canvas_size: int) -> None:
    mod = importlib.import_module(_RUNNERS[frontend])
    if frontend is Frontend.pygame:
        mod.run(seed=seed, canvas_size=canvas_size, fps=fps, images_dir=IMAGES_DIR)
    else:
        mod.run(seed=seed, fps=fps)


def _menu_loop(seed: Optional[int], fps: int, canvas_size: int) -> None:
    while True:
        print()
        print("  ====================================")
        print("       S L I D I N G   P U Z Z L E    ")
        print("  ====================================")
        print()
        print("  1.  Play  (Rich Terminal)")
        print("  2.  Play  (Pygame GUI)")
        print("  3.  Show a solution")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice == "1":
            _launch(Frontend.rich, seed, fps, canvas_size)
        elif choice == "2":
            _launch(Frontend.pygame, seed, fps, canvas_size)
        elif choice == "3":
            _print_solution(seed)
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
        min=0, max=2**64 - 1,
        help="Shuffle seed. Defaults to one taken from the clock.",
    ),
    fps: int = typer.Option(
        60, "--fps",
        min=1, max=240,
        help="Frames per second of the game loop.",
    ),
    canvas_size: int = typer.Option(
        800, "--canvas-size",
        min=200, max=4000,
        help="Side length of the square window in pixels (Pygame only).",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        help="Logging verbosity.",
    ),
    solution: bool = typer.Option(
        False, "--solution",
        help="Print the shuffled board and a shortest solution, then exit.",
    ),
) -> None:
    """Sliding Puzzle Game."""
    _configure_logging(log_level)

    if solution:
        _print_solution(seed)
        return

    if frontend is None:
        _menu_loop(seed, fps, canvas_size)
        return

    _launch(frontend, seed, fps, canvas_size)


if __name__ == "__main__":
    app()
