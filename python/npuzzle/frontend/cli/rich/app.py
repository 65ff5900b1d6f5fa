"""Rich terminal frontend: tables, colours, and panels.

Uses the ``rich`` library for styled output of solution paths and for the
side-by-side algorithm comparison.
"""

from __future__ import annotations

import time
from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from npuzzle.engine.solver import SolveResult
from npuzzle.io.writer import write_path
from npuzzle.models.board import Board

console = Console()


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.n * board.n - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.n):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.grid()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _board_panel(board: Board, step: int, total: int) -> Panel:
    n = board.n
    return Panel(
        Align.center(render_board(board)),
        title=f"[bold cyan]Move {step}/{total}  {n}×{n}[/bold cyan]",
        subtitle=f"[dim]g={board.path_cost}  f={board.evaluation:g}[/dim]",
        border_style="cyan",
        padding=(0, 2),
    )


def render_summary(result: SolveResult) -> Text:
    text = Text()
    text.append(f"  {result.algorithm.value}", style="bold cyan")
    text.append(f" / {result.heuristic.value}  ", style="dim")
    if result.solved:
        text.append(f"Solved in {result.moves} moves", style="bold green")
    else:
        text.append(
            f"Stopped after {result.moves} moves without reaching the goal",
            style="bold red",
        )
    text.append(f"  ({result.elapsed:.3f}s)", style="dim")
    return text


def render_comparison(results: list[SolveResult]) -> Table:
    """Return a table with one row per algorithm run on the same board."""
    table = Table(
        title="Algorithm comparison",
        title_style="bold cyan",
        box=rich.box.ROUNDED,
        border_style="dim",
    )
    table.add_column("Algorithm", style="bold")
    table.add_column("Heuristic", style="dim")
    table.add_column("Outcome")
    table.add_column("Moves", justify="right", style="yellow")
    table.add_column("Time", justify="right", style="yellow")

    for result in results:
        outcome = "[green]solved[/green]" if result.solved else "[red]stopped[/red]"
        table.add_row(
            result.algorithm.value,
            result.heuristic.value,
            outcome,
            str(result.moves),
            f"{result.elapsed:.3f}s",
        )
    return table


# -- public entry point -------------------------------------------------------


def run(
    result: SolveResult,
    fast: bool = False,
    output: Path | None = None,
    delay: float = 0.0,
) -> None:
    """Show the solution path, animated when *delay* is positive."""
    if output is not None or fast:
        write_path(result.path, fast=fast, filename=output)
    elif delay > 0:
        for i, board in enumerate(result.path):
            console.clear()
            console.print(Align.center(_board_panel(board, i, result.moves)))
            time.sleep(delay)
    else:
        panels = [_board_panel(board, i, result.moves) for i, board in enumerate(result.path)]
        console.print(Group(*panels))
    console.print(render_summary(result))


def show_comparison(results: list[SolveResult]) -> None:
    console.print()
    console.print(Align.center(render_comparison(results)))
