"""Rich terminal frontend — study screen with animated scramble and solve.

The board starts solved.  Scrambles and solutions come back from the
engine as whole move lists; this module is the only place that applies
them with a pause between frames.
"""

from __future__ import annotations

import random
import sys
import time

import rich.box
from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.models.board import SENTINEL, BoardState, Direction, SwapMove
from backend.models.errors import NoSolutionFound
from backend.models.settings import PuzzleSettings
from frontend.cli.input_handler import Key, get_key

console = Console()

_DIRECTIONS = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}


# -- board rendering ----------------------------------------------------------


def render_board(board: BoardState) -> Table:
    """Return a Rich Table representing the puzzle grid.

    Tiles are labelled from 1 so the solved board reads 1..N-1.
    """
    width = len(str(board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.width):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            idx = r * board.width + c
            if val == SENTINEL:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(idx):
                cells.append(f"[bold green]{val + 1:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val + 1:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _draw(game: GamePlay, title: str, status: str = "", style: str = "yellow") -> None:
    console.clear()

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("R", style="bold yellow")
    controls.append("  scramble   ", style="dim")
    controls.append("E", style="bold yellow")
    controls.append("  quick scramble   ", style="dim")
    controls.append("C", style="bold cyan")
    controls.append("  click tile   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("V", style="bold cyan")
    controls.append("  solve   ", style="dim")
    controls.append("0", style="bold cyan")
    controls.append("  reset   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.moves), style="bold yellow")

    panel = Panel(
        Align.center(render_board(game.board)),
        title=f"[bold {style}]{title}  {game.width}×{game.height}[/bold {style}]",
        border_style=style,
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))
    sys.stdout.flush()


# -- move replay --------------------------------------------------------------


def _replay(game: GamePlay, moves: list[SwapMove], delay: float, label: str) -> None:
    """Apply *moves* one frame at a time."""
    for i, move in enumerate(moves):
        game.swap(move)
        _draw(
            game,
            label,
            f"[cyan]{label}…[/cyan] move {i + 1}/{len(moves)} "
            f"[dim]({move[0]} ↔ {move[1]})[/dim]",
            style="cyan",
        )
        time.sleep(delay)


def _scramble(game: GamePlay, settings: PuzzleSettings, rng: random.Random) -> str:
    moves = game.scramble_sequence(settings.shuffle_moves, rng)
    _replay(game, moves, settings.shuffle_step_delay, "Scrambling")
    game.moves = 0
    return f"[yellow]Scrambled with {len(moves)} moves.[/yellow]"


def quick_scramble(game: GamePlay, settings: PuzzleSettings, rng: random.Random) -> str:
    """Apply a whole scramble at once, without animation."""
    moves = game.scramble(settings.shuffle_moves, rng)
    return f"[yellow]Quick-scrambled with {len(moves)} moves.[/yellow]"


def click_label(game: GamePlay, raw: str) -> str:
    """Click the tile whose on-screen label is *raw* (labels start at 1)."""
    try:
        label = int(raw.strip())
    except ValueError:
        return f"[red]{escape(raw.strip())} is not a tile number.[/red]"
    value = label - 1
    if not 0 <= value < game.board.size - 1:
        return f"[red]No tile {label} on this board.[/red]"
    if not game.click(game.board.tiles.index(value)):
        return f"[yellow]Tile {label} is not next to the empty cell.[/yellow]"
    return f"[cyan]Moved tile[/cyan] [bold]{label}[/bold]"


def _apply_hint(game: GamePlay) -> str:
    hint = Solver.hint(game.board)
    if hint is None:
        if game.is_won:
            return "[green]Already solved![/green]"
        return "[red]Board is unsolvable.[/red]"
    game.swap(hint)
    return f"[cyan]Hint:[/cyan] swapped [bold]{hint[0]} ↔ {hint[1]}[/bold]"


def _auto_solve(game: GamePlay, settings: PuzzleSettings) -> str:
    if game.is_won:
        return "[green]Already solved![/green]"

    _draw(game, "Study", "[cyan]Searching for the shortest solution…[/cyan]")
    try:
        moves = game.solution()
    except NoSolutionFound:
        return "[red]Board is unsolvable.[/red]"

    _replay(game, moves, settings.solve_step_delay, "Solving")
    return f"[bold green]Solved in {len(moves)} moves![/bold green]"


# -- public entry point -------------------------------------------------------


def run(settings: PuzzleSettings, rng: random.Random | None = None) -> None:
    """Launch the study screen and loop until the user quits."""
    settings.validate()
    rng = rng or random.Random()
    game = GamePlay(settings.width, settings.height)
    status = ""

    while True:
        _draw(game, "Study", status)
        status = ""
        key = get_key()

        if key in _DIRECTIONS:
            game.move(_DIRECTIONS[key])
            if game.is_won and game.moves:
                status = f"[bold green]Solved in {game.moves} moves![/bold green]"
        elif key == Key.SCRAMBLE:
            status = _scramble(game, settings, rng)
        elif key == Key.QUICK_SCRAMBLE:
            status = quick_scramble(game, settings, rng)
        elif key == Key.CLICK:
            status = click_label(game, console.input("  Tile number: "))
        elif key == Key.HINT:
            status = _apply_hint(game)
        elif key == Key.SOLVE:
            status = _auto_solve(game, settings)
        elif key == Key.RESET:
            game = GamePlay(settings.width, settings.height)
            status = "[green]Reset to the solved board.[/green]"
        elif key == Key.QUIT:
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
