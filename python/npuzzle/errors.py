"""Exceptions raised by the solver and its loaders."""

from __future__ import annotations

from enum import Enum


class Error(Enum):
    EMPTY = "Empty lines are not allowed"
    NON_NUMERIC = "Only non-negative integers are allowed"
    NO_SIZE = "The first line must contain only the puzzle size"
    OVER_MAX = "Tile value exceeds n*n - 1"
    WRONG_AMOUNT = "Each row must contain exactly n tiles"
    DUPLICATES = "Duplicate tiles are not allowed"
    NOT_ENOUGH_TILES = "Not enough tiles for an n*n puzzle"
    TOO_MANY_ROWS = "Too many rows for an n*n puzzle"
    UNSOLVABLE = "The puzzle is not solvable"
    RANDOM_TOO_SMALL = "Random puzzle size must be at least 2"


class NPuzzleError(Exception):
    """Base class for every error the package raises on purpose."""


class InvalidConfigurationError(NPuzzleError, ValueError):
    """Unknown algorithm/heuristic or a tile layout that is not a square permutation."""


class InvalidInputError(NPuzzleError):
    """Malformed puzzle input, tagged with the :class:`Error` that describes it."""

    def __init__(self, error: Error, detail: str | None = None) -> None:
        self.error = error
        self.detail = detail
        message = error.value if detail is None else f"{error.value}: {detail}"
        super().__init__(message)


class UnsolvableBoardError(InvalidInputError):
    def __init__(self, detail: str | None = None) -> None:
        super().__init__(Error.UNSOLVABLE, detail)
