"""Heuristic scoring and the per-size goal registry."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable

from npuzzle.constants import MOVE_WEIGHT, Heuristic
from npuzzle.errors import InvalidConfigurationError
from npuzzle.models.board import Board

logger = logging.getLogger(__name__)


class GoalRegistry:
    """Spiral goal boards and their coordinate tables, one per grid size.

    Entries are built the first time a size is asked for and kept for the
    lifetime of the registry.
    """

    def __init__(self) -> None:
        self._goals: dict[int, Board] = {}
        self._coordinates: dict[int, tuple[tuple[int, int], ...]] = {}

    def _register(self, n: int) -> None:
        if n in self._goals:
            return
        goal = Board.create_final(n)
        coordinates: list[tuple[int, int]] = [(0, 0)] * (n * n)
        for index, tile in enumerate(goal.tiles):
            coordinates[tile] = divmod(index, n)
        self._goals[n] = goal
        self._coordinates[n] = tuple(coordinates)
        logger.debug("Registered %d×%d goal %s", n, n, goal.tiles)

    def goal(self, n: int) -> Board:
        self._register(n)
        return self._goals[n]

    def coordinates(self, n: int) -> tuple[tuple[int, int], ...]:
        """Return ``coordinates[tile] == (row, col)`` of *tile* in the goal."""
        self._register(n)
        return self._coordinates[n]

    def __contains__(self, n: object) -> bool:
        return n in self._goals

    def __len__(self) -> int:
        return len(self._goals)


# Process-wide registry; boards created without an explicit one share it.
default_registry = GoalRegistry()


# -- heuristics ---------------------------------------------------------------

HeuristicFn = Callable[[Board, int, GoalRegistry], float]


def manhattan(board: Board, n: int, registry: GoalRegistry) -> int:
    coordinates = registry.coordinates(n)
    distance = 0
    for index, tile in enumerate(board.tiles):
        row, col = divmod(index, n)
        goal_row, goal_col = coordinates[tile]
        distance += abs(row - goal_row) + abs(col - goal_col)
    return distance


def euclidean(board: Board, n: int, registry: GoalRegistry) -> float:
    coordinates = registry.coordinates(n)
    distance = 0.0
    for index, tile in enumerate(board.tiles):
        row, col = divmod(index, n)
        goal_row, goal_col = coordinates[tile]
        distance += math.hypot(row - goal_row, col - goal_col)
    return distance


def hamming(board: Board, n: int, registry: GoalRegistry) -> int:
    """Count tiles (blank included) that are not in their goal cell."""
    target = registry.goal(n).tiles
    return sum(1 for tile, expected in zip(board.tiles, target) if tile != expected)


_HEURISTICS: dict[Heuristic, HeuristicFn | None] = {
    Heuristic.manhattan: manhattan,
    Heuristic.hamming: hamming,
    Heuristic.euclidean: euclidean,
    Heuristic.none: None,
}


def resolve_heuristic(name: str | Heuristic) -> Heuristic:
    try:
        return Heuristic(str(name).strip().lower())
    except ValueError:
        available = ", ".join(h.value for h in Heuristic)
        raise InvalidConfigurationError(
            f"Unknown heuristic: {name}. Available: {available}"
        ) from None


def get_heuristic(name: str | Heuristic) -> HeuristicFn | None:
    """Return the scoring function for *name*, or ``None`` for ``"none"``."""
    return _HEURISTICS[resolve_heuristic(name)]


class Evaluator:
    """A resolved heuristic bound to the registry it reads goals from."""

    def __init__(
        self,
        heuristic: str | Heuristic = Heuristic.manhattan,
        registry: GoalRegistry | None = None,
    ) -> None:
        self.name = resolve_heuristic(heuristic)
        self.heuristic = _HEURISTICS[self.name]
        self.registry = default_registry if registry is None else registry

    def h(self, board: Board) -> float:
        if self.heuristic is None:
            return 0
        return self.heuristic(board, board.n, self.registry)

    def score(self, board: Board) -> float:
        """Return ``f = h * 10 * g + g``, or plain ``g`` without a heuristic.

        With ``g == 0`` the score is 0 whatever ``h`` is.
        """
        g = board.path_cost
        if self.heuristic is None:
            return g
        return self.h(board) * MOVE_WEIGHT * g + g

    def is_final(self, board: Board) -> bool:
        return board == self.registry.goal(board.n)

    def __repr__(self) -> str:
        return f"Evaluator({self.name.value!r})"
