"""Sliding puzzle solver."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from npuzzle.constants import Algorithm, Heuristic
from npuzzle.engine.search import get_algorithm, resolve_algorithm
from npuzzle.errors import InvalidConfigurationError, UnsolvableBoardError
from npuzzle.models.board import Board, Direction

logger = logging.getLogger(__name__)


@dataclass
class SolveResult:
    algorithm: Algorithm
    heuristic: Heuristic
    path: list[Board]
    solved: bool
    elapsed: float

    @property
    def moves(self) -> int:
        return len(self.path) - 1

    @property
    def initial(self) -> Board:
        return self.path[0]

    @property
    def final(self) -> Board:
        return self.path[-1]


class Solver:
    """Stateless solver; all methods are static."""

    @staticmethod
    def solve(board: Board, algorithm: str | Algorithm = Algorithm.astar) -> SolveResult:
        """Search from *board* and return the path found.

        Raises :class:`UnsolvableBoardError` instead of searching a board
        that cannot reach the goal.  When the search gives up before the
        goal, ``solved`` is False and the path ends at the last board reached.
        """
        algorithm = resolve_algorithm(algorithm)
        if algorithm is not Algorithm.uniform and board.heuristic is Heuristic.none:
            raise InvalidConfigurationError(
                f"The {algorithm.value} search needs a heuristic."
            )
        if board.is_not_solvable():
            raise UnsolvableBoardError(f"{board.n}×{board.n} board {list(board.tiles)}")

        execute = get_algorithm(algorithm)
        start = time.perf_counter()
        path = execute(board)
        elapsed = time.perf_counter() - start

        solved = bool(path) and path[-1].is_final()
        logger.info(
            "%s/%s on %d×%d: %s in %d moves (%.3fs)",
            algorithm.value, board.heuristic.value, board.n, board.n,
            "solved" if solved else "stopped", len(path) - 1, elapsed,
        )
        return SolveResult(
            algorithm=algorithm,
            heuristic=board.heuristic,
            path=path,
            solved=solved,
            elapsed=elapsed,
        )

    @staticmethod
    def moves(path: list[Board]) -> list[Direction]:
        """Return the blank moves leading from each board of *path* to the next."""
        directions: list[Direction] = []
        for before, after in zip(path, path[1:]):
            direction = before.direction_to(after)
            if direction is None:
                raise ValueError(
                    f"Boards {before.tiles} and {after.tiles} are not one move apart."
                )
            directions.append(direction)
        return directions

    @staticmethod
    def hint(board: Board, algorithm: str | Algorithm = Algorithm.astar) -> Direction | None:
        """Return the single best next move, or ``None`` if solved / unsolvable.

        Boards without a heuristic are searched with uniform cost.
        """
        if board.is_final() or board.is_not_solvable():
            return None
        if board.heuristic is Heuristic.none:
            algorithm = Algorithm.uniform

        result = Solver.solve(board, algorithm)
        moves = Solver.moves(result.path)
        return moves[0] if moves else None

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state."""
        return not board.is_not_solvable()
