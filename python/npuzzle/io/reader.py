"""Reads and validates puzzle layouts.

Format::

    # comments start with '#'
    3
    1 2 3
    8 0 4   # trailing comments are fine
    7 6 5

The first value line holds the size ``n``; the next ``n`` lines hold ``n``
tiles each.  Blank lines at the end of the input are ignored, blank lines
anywhere else are an error.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from npuzzle.constants import MIN_SIZE, Heuristic
from npuzzle.engine.heuristics.evaluator import GoalRegistry
from npuzzle.errors import Error, InvalidInputError, UnsolvableBoardError
from npuzzle.models.board import Board

logger = logging.getLogger(__name__)

_NUMBER = re.compile(r"\d+")


def _strip_comment(line: str) -> list[str]:
    elements: list[str] = []
    for element in line.split():
        if element.startswith("#"):
            break
        elements.append(element)
    return elements


class _Validator:
    """Accumulates tiles line by line, raising on the first bad line."""

    def __init__(self) -> None:
        self.n: int | None = None
        self.tiles: list[int] = []
        self._seen: set[int] = set()

    def validate_line(self, line: str) -> None:
        if not line.strip():
            raise InvalidInputError(Error.EMPTY)

        elements = _strip_comment(line)
        if not elements:
            return

        bad = [e for e in elements if not _NUMBER.fullmatch(e)]
        if bad:
            raise InvalidInputError(Error.NON_NUMERIC, " ".join(bad))
        values = [int(e) for e in elements]

        if self.n is None:
            self._set_size(values)
            return
        self._check_row(values, self.n)

    def _set_size(self, values: list[int]) -> None:
        if len(values) != 1:
            raise InvalidInputError(Error.NO_SIZE, " ".join(map(str, values)))
        if values[0] < MIN_SIZE:
            raise InvalidInputError(Error.NO_SIZE, f"size must be at least {MIN_SIZE}")
        self.n = values[0]

    def _check_row(self, values: list[int], n: int) -> None:
        if len(self.tiles) >= n * n:
            raise InvalidInputError(Error.TOO_MANY_ROWS, " ".join(map(str, values)))
        over = [v for v in values if v > n * n - 1]
        if over:
            raise InvalidInputError(Error.OVER_MAX, " ".join(map(str, over)))
        if len(values) != n:
            raise InvalidInputError(
                Error.WRONG_AMOUNT, f"expected {n}, got {len(values)}"
            )
        if len(set(values)) != len(values) or self._seen.intersection(values):
            raise InvalidInputError(Error.DUPLICATES, " ".join(map(str, values)))
        self._seen.update(values)
        self.tiles.extend(values)

    def finish(self) -> tuple[int, list[int]]:
        if self.n is None:
            raise InvalidInputError(Error.NO_SIZE)
        missing = self.n * self.n - len(self.tiles)
        if missing:
            raise InvalidInputError(Error.NOT_ENOUGH_TILES, f"{missing} missing")
        return self.n, self.tiles


def read_puzzle(lines: Iterable[str]) -> tuple[int, list[int]]:
    """Parse *lines* and return ``(n, tiles)``.

    Raises :class:`InvalidInputError` tagged with the first problem found.
    """
    content = [line.rstrip("\r\n") for line in lines]
    while content and not content[-1].strip():
        content.pop()

    validator = _Validator()
    for line in content:
        validator.validate_line(line)
    return validator.finish()


def read_puzzle_file(path: str | Path) -> tuple[int, list[int]]:
    with open(path) as f:
        return read_puzzle(f)


def load_board(
    source: TextIO | Iterable[str],
    heuristic: str | Heuristic = Heuristic.manhattan,
    registry: GoalRegistry | None = None,
) -> Board:
    """Read a layout and return the validated, solvable initial board."""
    n, tiles = read_puzzle(source)
    board = Board.create_from(tiles, heuristic, registry)
    if board.is_not_solvable():
        raise UnsolvableBoardError(f"{n}×{n} board {tiles}")
    logger.debug("Loaded %d×%d board %s", n, n, tiles)
    return board
