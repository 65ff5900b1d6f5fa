"""Plain-text rendering of boards and paths."""

from __future__ import annotations

from pathlib import Path

from npuzzle.models.board import Board

CELL_WIDTH = 5


def format_board(board: Board) -> str:
    """Return the board as ``n`` lines of right-aligned cells."""
    return "\n".join(
        " ".join(f"{tile:>{CELL_WIDTH}}" for tile in row) for row in board.grid()
    )


def _format_evaluation(value: float) -> str:
    if isinstance(value, int):
        return str(value)
    return f"{value:.15g}"


def format_fast(board: Board) -> str:
    return f"{list(board.tiles)} | evaluation: {_format_evaluation(board.evaluation)}"


def format_path(path: list[Board], fast: bool = False) -> str:
    if fast:
        return "\n".join(format_fast(board) for board in path)
    return "\n\n".join(format_board(board) for board in path)


def write_path(path: list[Board], fast: bool = False, filename: str | Path | None = None) -> None:
    """Print *path*, or write it to *filename* when one is given."""
    text = format_path(path, fast)
    if filename is None:
        print(text)
    else:
        Path(filename).write_text(text + "\n")
