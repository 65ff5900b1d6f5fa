"""Vanilla terminal frontend: no third-party dependencies.

Uses only stdlib (print and ANSI codes) to show a solution path.
"""

from __future__ import annotations

import sys
import time
from pathlib import Path

from npuzzle.engine.solver import SolveResult
from npuzzle.io.writer import write_path
from npuzzle.models.board import Board


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> str:
    """Return an ANSI-coloured text representation of the board."""
    width = len(str(board.n * board.n - 1))  # widest number
    cell_w = width + 2  # padding
    sep = "+" + (("-" * cell_w + "+") * board.n)

    lines: list[str] = [sep]
    for r, row in enumerate(board.grid()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append(f"{_DIM} {'·':>{width}} {_R}")
            elif board.is_tile_correct(r, c):
                cells.append(f"{_G} {val:>{width}} {_R}")
            else:
                cells.append(f" {val:>{width}} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


def summary(result: SolveResult) -> str:
    n = result.initial.n
    head = f"  {_C}{result.algorithm.value}{_R} / {result.heuristic.value}  {n}×{n}"
    if result.solved:
        outcome = f"{_G}Solved in {result.moves} moves{_R}"
    else:
        outcome = f"{_RED}Stopped after {result.moves} moves without reaching the goal{_R}"
    return f"{head}  {outcome}  {_DIM}({result.elapsed:.3f}s){_R}"


# -- public entry point -------------------------------------------------------


def run(
    result: SolveResult,
    fast: bool = False,
    output: Path | None = None,
    delay: float = 0.0,
) -> None:
    """Print the solution path, or write it to *output*."""
    if output is not None or fast:
        write_path(result.path, fast=fast, filename=output)
    elif delay > 0:
        for i, board in enumerate(result.path):
            _clear()
            print(f"  {_C}=== Move {i}/{result.moves} ==={_R}")
            print()
            print(render_board(board))
            sys.stdout.flush()
            time.sleep(delay)
    else:
        for i, board in enumerate(result.path):
            print(f"  {_DIM}move {i}{_R}")
            print(render_board(board))
            print()
    print(summary(result))
