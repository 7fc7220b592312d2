"""Rich terminal frontend — live tables, colours, and progress bars.

Drives the same frame loop as the GUI: each tick waits up to one frame
period for a keypress, forwards it to the game as a key-down event and
steps the game with the monotonic clock. The board is drawn straight
from the game state; the vertex batches are not needed in a terminal.
"""

from __future__ import annotations

import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.live import Live
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from backend.engine.gameinput import DIRECTION_TO_KEY
from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.engine.gamestate import GameState, Phase
from backend.models.board import GRID_DIMENSION, Direction
from frontend.cli.input_handler import LOGICAL_KEYS, get_key_timeout
from frontend.quote import QUOTE_AUTHOR, QUOTE_TEXT

console = Console()

_ARROWS = {
    Direction.UP: "↑",
    Direction.LEFT: "←",
    Direction.DOWN: "↓",
    Direction.RIGHT: "→",
}


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


def _new_game(seed: int | None) -> GamePlay:
    now = time.monotonic()
    if seed is None:
        return GamePlay.from_clock(time.time(), now=now)
    return GamePlay(seed, now=now)


# -- rendering ----------------------------------------------------------------


def _render_board(state: GameState) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="green" if state.is_won else "bright_blue",
        padding=(0, 1),
    )
    for _ in range(GRID_DIMENSION):
        table.add_column(width=3, justify="center")

    for r, row in enumerate(state.board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif val == state.animating_tile and state.tile_fraction < 1.0:
                arrow = _ARROWS[state.animation_direction]
                cells.append(f"[bold magenta]{val}{arrow}[/bold magenta]")
            elif state.board.is_tile_correct(r * GRID_DIMENSION + c):
                cells.append(f"[bold green]{val}[/bold green]")
            else:
                cells.append(f"[bold white]{val}[/bold white]")
        table.add_row(*cells)

    return table


def _render_quote(state: GameState) -> Text:
    # Reveal the quote a character at a time as it fades in.
    shown = round(len(QUOTE_TEXT) * state.quote_fraction)
    text = Text(QUOTE_TEXT[:shown], style="italic bright_white")
    if state.phase is Phase.SETTLED:
        text.append(f"\n— {QUOTE_AUTHOR}", style="dim")
    return text


def _render(game: GamePlay) -> Panel:
    state = game.state

    stats = Text()
    stats.append("Moves: ", style="dim")
    stats.append(str(state.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(state.elapsed_time), style="bold yellow")

    parts = [Align.center(_render_board(state)), Text(""), Align.center(stats)]

    if state.is_won:
        parts += [
            Text(""),
            Align.center(Text("★  S O L V E D  ★", style="bold green")),
            ProgressBar(total=1.0, completed=state.won_fraction, complete_style="green"),
            ProgressBar(total=1.0, completed=state.quote_fraction, complete_style="cyan"),
            Align.center(_render_quote(state)),
        ]

    controls = Text()
    controls.append("↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")
    parts += [Text(""), Align.center(controls)]

    return Panel(
        Group(*parts),
        title="[bold cyan]Sliding Puzzle  3×3[/bold cyan]",
        border_style="green" if state.is_won else "bright_blue",
        padding=(1, 2),
        width=60,
    )


# -- game loop ----------------------------------------------------------------


def _play(seed: int | None, fps: int) -> None:
    frame_time = 1.0 / fps
    game = _new_game(seed)

    with Live(_render(game), console=console, auto_refresh=False) as live:
        while True:
            key = get_key_timeout(frame_time)

            if key == "quit":
                return
            if key == "restart":
                game = _new_game(None)
            elif key == "hint":
                hint = Solver.hint(game.state.board)
                if hint is not None and not game.is_won:
                    game.on_key_down(DIRECTION_TO_KEY[hint])
            elif key in LOGICAL_KEYS:
                game.on_key_down(LOGICAL_KEYS[key])

            game.step(time.monotonic())
            live.update(_render(game), refresh=True)


# -- public entry point -------------------------------------------------------


def run(seed: int | None = None, fps: int = 30) -> None:
    """Launch the Rich terminal game."""
    console.clear()
    _play(seed, fps)
    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))

