"""Best-first searches over boards.

Every algorithm maps an initial board to the list of boards from that board
to the goal, or to the last board it expanded when it ran out of options.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Callable

from npuzzle.constants import Algorithm
from npuzzle.errors import InvalidConfigurationError
from npuzzle.models.board import Board

logger = logging.getLogger(__name__)

SearchFn = Callable[[Board], list[Board]]


def execute_greedy(initial: Board) -> list[Board]:
    """Follow the lowest-scored unvisited child until the goal or a dead end.

    Only the children of the current board are compared; there is no
    frontier, so the walk can stall on a solvable board.  Ties go to the
    child generated first (up, down, left, right).
    """
    closed: set[Board] = set()
    current = initial

    while not current.is_final():
        closed.add(current)
        children = [child for child in current.create_children() if child not in closed]
        if not children:
            logger.info(
                "Greedy search stalled after %d boards at depth %d",
                len(closed), current.path_cost,
            )
            break
        current = min(children)

    logger.debug("Greedy expanded %d boards", len(closed))
    return current.collect_path()


def _execute_best_first(
    initial: Board,
    key: Callable[[Board], float],
    name: str,
) -> list[Board]:
    closed: set[Board] = set()
    open_heap: list[tuple[float, int, Board]] = []
    counter = itertools.count()
    current = initial

    while not current.is_final():
        closed.add(current)
        for child in current.create_children():
            if child not in closed:
                heapq.heappush(open_heap, (key(child), next(counter), child))

        # Entries whose content was expanded since they were pushed are stale.
        while open_heap and open_heap[0][2] in closed:
            heapq.heappop(open_heap)
        if not open_heap:
            logger.warning(
                "%s frontier exhausted after %d boards without reaching the goal",
                name, len(closed),
            )
            break
        _, _, current = heapq.heappop(open_heap)

    logger.debug(
        "%s expanded %d boards, %d left open", name, len(closed), len(open_heap)
    )
    return current.collect_path()


def execute_astar(initial: Board) -> list[Board]:
    """Expand the open board with the lowest evaluation first.

    Children are merged into the frontier as they are generated; a board
    that is already open with another score becomes a second entry rather
    than replacing the first.  Equal scores are served in insertion order.
    """
    return _execute_best_first(initial, lambda board: board.evaluation, "A*")


def execute_uniform(initial: Board) -> list[Board]:
    """Expand the open board with the lowest path cost first.

    Any heuristic the boards carry is ignored.  Equal costs are served in
    insertion order, and the goal test happens when a board is selected,
    so the returned path is a shortest one.
    """
    return _execute_best_first(initial, lambda board: board.path_cost, "Uniform-cost")


_ALGORITHMS: dict[Algorithm, SearchFn] = {
    Algorithm.greedy: execute_greedy,
    Algorithm.astar: execute_astar,
    Algorithm.uniform: execute_uniform,
}


def resolve_algorithm(name: str | Algorithm) -> Algorithm:
    try:
        return Algorithm(str(name).strip().lower())
    except ValueError:
        available = ", ".join(a.value for a in Algorithm)
        raise InvalidConfigurationError(
            f"Unknown algorithm: {name}. Available: {available}"
        ) from None


def get_algorithm(name: str | Algorithm) -> SearchFn:
    """Return the search function registered under *name*."""
    return _ALGORITHMS[resolve_algorithm(name)]
