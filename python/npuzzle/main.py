"""N-puzzle solver.

Usage::

    npuzzle solve puzzle.txt                      # A* + manhattan, Rich output
    npuzzle solve -a greedy -h hamming < p.txt    # read the layout from stdin
    npuzzle solve -r 3 --seed 7 -f vanilla        # random solvable 3×3
    npuzzle compare -r 3                          # every algorithm, one board
    npuzzle goal 4                                # print the 4×4 goal
"""

import importlib
import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from npuzzle.constants import (
    DEFAULT_ALGORITHM,
    DEFAULT_FRONTEND,
    DEFAULT_HEURISTIC,
    Algorithm,
    Frontend,
    Heuristic,
)
from npuzzle.engine.generator import PuzzleGenerator
from npuzzle.engine.solver import SolveResult, Solver
from npuzzle.errors import NPuzzleError
from npuzzle.io.reader import load_board
from npuzzle.io.writer import format_board
from npuzzle.models.board import Board

err_console = Console(stderr=True)


# -- frontend registry -------------------------------------------------------


_RUNNERS = {
    Frontend.vanilla: "npuzzle.frontend.cli.vanilla.app",
    Frontend.rich: "npuzzle.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    return typer.Exit(code=1)


def _initial_board(
    file: Optional[Path],
    random_size: Optional[int],
    seed: Optional[int],
    heuristic: Heuristic,
) -> Board:
    """Build the validated initial board from a file, stdin, or the generator."""
    if random_size is not None:
        tiles = PuzzleGenerator.generate(random_size, seed)
        return Board.create_from(tiles, heuristic)
    if file is None:
        return load_board(sys.stdin, heuristic)
    with open(file) as f:
        return load_board(f, heuristic)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, help="Sliding-tile puzzle solver.")


@app.command()
def solve(
    file: Optional[Path] = typer.Argument(
        None, help="Puzzle file. Omit to read stdin (or use --random).",
    ),
    algorithm: Algorithm = typer.Option(
        DEFAULT_ALGORITHM, "-a", "--algorithm",
        envvar="NPUZZLE_ALGORITHM",
        help="Search algorithm.",
    ),
    heuristic: Heuristic = typer.Option(
        DEFAULT_HEURISTIC, "-h", "--heuristic",
        envvar="NPUZZLE_HEURISTIC",
        help="Heuristic for greedy/astar (ignored by uniform).",
    ),
    random_size: Optional[int] = typer.Option(
        None, "-r", "--random",
        help="Generate a random solvable puzzle of this size instead of reading one.",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for --random."),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Write the path to this file.",
    ),
    fast: bool = typer.Option(
        False, "--fast", help="One line per board instead of a grid.",
    ),
    frontend: Frontend = typer.Option(
        DEFAULT_FRONTEND, "-f", "--frontend",
        envvar="NPUZZLE_FRONTEND",
        help="Renderer for the solution path.",
    ),
    delay: float = typer.Option(
        0.0, "--delay", min=0.0, help="Animate the path, pausing this many seconds per move.",
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Debug logging."),
) -> None:
    """Solve one puzzle and show the path to the goal."""
    _configure_logging(verbose)
    if algorithm is Algorithm.uniform:
        heuristic = Heuristic.none

    try:
        board = _initial_board(file, random_size, seed, heuristic)
        result = Solver.solve(board, algorithm)
    except OSError as e:
        raise _fail(f"Cannot read input: {e}")
    except NPuzzleError as e:
        raise _fail(str(e))

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(result, fast=fast, output=output, delay=delay)


@app.command()
def compare(
    file: Optional[Path] = typer.Argument(
        None, help="Puzzle file. Omit to read stdin (or use --random).",
    ),
    heuristic: Heuristic = typer.Option(
        DEFAULT_HEURISTIC, "-h", "--heuristic",
        envvar="NPUZZLE_HEURISTIC",
        help="Heuristic for greedy/astar.",
    ),
    random_size: Optional[int] = typer.Option(None, "-r", "--random"),
    seed: Optional[int] = typer.Option(None, "--seed"),
    verbose: bool = typer.Option(False, "-v", "--verbose"),
) -> None:
    """Run every algorithm on the same puzzle and compare them."""
    from npuzzle.frontend.cli.rich.app import show_comparison

    _configure_logging(verbose)
    if heuristic is Heuristic.none:
        raise _fail("compare needs a heuristic for greedy and astar.")

    try:
        board = _initial_board(file, random_size, seed, heuristic)
        results: list[SolveResult] = []
        for algorithm in Algorithm:
            name = Heuristic.none if algorithm is Algorithm.uniform else heuristic
            results.append(Solver.solve(Board.create_from(board.tiles, name), algorithm))
    except OSError as e:
        raise _fail(f"Cannot read input: {e}")
    except NPuzzleError as e:
        raise _fail(str(e))

    show_comparison(results)


@app.command()
def goal(
    size: int = typer.Argument(..., min=2, help="Grid size."),
) -> None:
    """Print the spiral goal layout for SIZE."""
    print(format_board(Board.create_final(size)))


if __name__ == "__main__":
    app()
