"""Inversion-parity solvability test against the spiral goal."""

from __future__ import annotations

from collections.abc import Sequence

from npuzzle.constants import NO_TILE
from npuzzle.engine.heuristics.evaluator import GoalRegistry, default_registry
from npuzzle.models.board import Board


def count_inversions(tiles: Sequence[int]) -> int:
    """Count pairs ``i < j`` of non-blank tiles with ``tiles[i] > tiles[j]``."""
    values = [tile for tile in tiles if tile != NO_TILE]
    inversions = 0
    for i, a in enumerate(values):
        for b in values[i + 1 :]:
            if a > b:
                inversions += 1
    return inversions


def parity(tiles: Sequence[int], n: int) -> int:
    """Return the parity that no blank move can change.

    A horizontal move never changes the inversion count.  A vertical move
    jumps the moved tile over ``n - 1`` others, so on odd grids the
    inversion parity is preserved, and on even grids it flips together with
    the blank's row.
    """
    inversions = count_inversions(tiles)
    if n % 2 == 1:
        return inversions % 2
    blank_row = list(tiles).index(NO_TILE) // n
    return (inversions + blank_row) % 2


def is_solvable(board: Board, registry: GoalRegistry | None = None) -> bool:
    """Return True if *board* can reach the spiral goal for its size."""
    goal = (default_registry if registry is None else registry).goal(board.n)
    return parity(board.tiles, board.n) == parity(goal.tiles, goal.n)
