#!/usr/bin/env python3
"""Sliding Puzzle Engine.

Usage::

    python main.py play -w 3 -h 3           # Rich study screen
    python main.py shuffle -w 3 -h 3 -m 20  # print a scramble sequence
    python main.py solve -w 2 -h 2 0 1 _ 2  # shortest swap sequence
"""

import logging
import random
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator import GameGenerator  # noqa: E402
from backend.engine.gamesolver import Solver  # noqa: E402
from backend.models.board import MAX_CELLS, SENTINEL, BoardState  # noqa: E402
from backend.models.errors import PuzzleError  # noqa: E402
from backend.models.settings import (  # noqa: E402
    DEFAULT_HEIGHT,
    DEFAULT_SHUFFLE_MOVES,
    DEFAULT_WIDTH,
    PuzzleSettings,
)

EMPTY_MARKERS = {"_", "."}

# Exhaustive search is only practical up to about 4×4.
SEARCH_WARN_CELLS = 16

logger = logging.getLogger(__name__)

console = Console()


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _parse_tiles(raw: List[str]) -> list[int]:
    tiles: list[int] = []
    for token in raw:
        if token in EMPTY_MARKERS:
            tiles.append(SENTINEL)
            continue
        try:
            tiles.append(int(token))
        except ValueError:
            raise typer.BadParameter(
                f"Tile {token!r} is neither an integer nor an empty marker."
            ) from None
    return tiles


def _format_board(board: BoardState) -> str:
    width = len(str(board.size - 1))
    lines = []
    for row in board.rows():
        cells = ["_".rjust(width) if v == SENTINEL else str(v).rjust(width) for v in row]
        lines.append(" ".join(cells))
    return "\n".join(lines)


def _warn_if_large(width: int, height: int) -> bool:
    if width * height <= SEARCH_WARN_CELLS:
        return False
    logger.warning(
        "A %d×%d board has %d cells; exhaustive search may not finish.",
        width, height, width * height,
    )
    return True


def _fail(exc: PuzzleError) -> NoReturn:
    console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    raise typer.Exit(code=1)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, no_args_is_help=True)

_WIDTH = typer.Option(DEFAULT_WIDTH, "-w", "--width", min=1, max=MAX_CELLS, help="Board width.")
_HEIGHT = typer.Option(DEFAULT_HEIGHT, "-h", "--height", min=1, max=MAX_CELLS, help="Board height.")


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log solver and generator diagnostics.",
    ),
) -> None:
    """Sliding Puzzle Engine."""
    _configure_logging(verbose)


@app.command()
def solve(
    tiles: List[str] = typer.Argument(
        ...,
        help="Row-major tiles 0..N-2; use _ (or 255) for the empty cell.",
    ),
    width: int = _WIDTH,
    height: int = _HEIGHT,
) -> None:
    """Print the shortest swap sequence that solves a board."""
    values = _parse_tiles(tiles)
    _warn_if_large(width, height)
    try:
        moves = Solver.solve(values, width, height)
    except PuzzleError as exc:
        _fail(exc)

    if not moves:
        console.print("[green]Already solved.[/green]")
        return
    for a, b in moves:
        console.print(f"{a} {b}")
    console.print(f"[dim]{len(moves)} swaps[/dim]")


@app.command()
def shuffle(
    width: int = _WIDTH,
    height: int = _HEIGHT,
    moves: int = typer.Option(
        DEFAULT_SHUFFLE_MOVES, "-m", "--moves",
        min=0,
        help="Number of random swaps.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible scramble.",
    ),
) -> None:
    """Print a scramble sequence starting from the solved board."""
    rng = random.Random(seed)
    try:
        board = GameGenerator.solved(width, height)
        sequence = GameGenerator.shuffle(width, height, board.empty_index, moves, rng)
    except PuzzleError as exc:
        _fail(exc)

    for a, b in sequence:
        console.print(f"{a} {b}")
    console.print(_format_board(board.apply_all(sequence)), highlight=False)


@app.command()
def play(
    width: int = _WIDTH,
    height: int = _HEIGHT,
    moves: int = typer.Option(
        DEFAULT_SHUFFLE_MOVES, "-m", "--moves",
        min=0,
        help="Swaps per scramble.",
    ),
) -> None:
    """Open the Rich study screen."""
    from frontend.cli.rich.app import run

    _warn_if_large(width, height)
    try:
        settings = PuzzleSettings(width=width, height=height, shuffle_moves=moves).validate()
    except PuzzleError as exc:
        _fail(exc)
    run(settings)


if __name__ == "__main__":
    app()
