"""Heuristic evaluator and goal registry tests."""

from __future__ import annotations

import math

import pytest

from npuzzle.constants import Heuristic
from npuzzle.engine.heuristics import (
    Evaluator,
    GoalRegistry,
    euclidean,
    get_heuristic,
    hamming,
    manhattan,
)
from npuzzle.errors import InvalidConfigurationError
from npuzzle.models.board import Board, Direction

TEXTBOOK = [2, 8, 3, 1, 6, 4, 7, 0, 5]
ONE_UP = [1, 0, 3, 8, 2, 4, 7, 6, 5]

_FUNCTIONS = [manhattan, euclidean, hamming]


# -- registry -----------------------------------------------------------------


def test_registry_builds_lazily_and_caches() -> None:
    registry = GoalRegistry()
    assert 3 not in registry
    assert len(registry) == 0

    goal = registry.goal(3)
    assert 3 in registry
    assert registry.goal(3) is goal
    assert goal.tiles == Board.create_final(3).tiles
    assert len(registry) == 1


def test_registry_coordinates_match_goal() -> None:
    registry = GoalRegistry()
    for n in range(2, 7):
        goal = registry.goal(n)
        coordinates = registry.coordinates(n)
        assert len(coordinates) == n * n
        for tile, (row, col) in enumerate(coordinates):
            assert goal.get_tile(row, col) == tile


def test_registry_blank_coordinate_3x3() -> None:
    assert GoalRegistry().coordinates(3)[0] == (1, 1)


# -- heuristic functions ------------------------------------------------------


@pytest.mark.parametrize("fn", _FUNCTIONS, ids=lambda f: f.__name__)
@pytest.mark.parametrize("n", range(2, 8))
def test_heuristic_zero_on_goal(fn, n: int) -> None:
    registry = GoalRegistry()
    assert fn(registry.goal(n), n, registry) == 0


def test_manhattan_counts_blank() -> None:
    registry = GoalRegistry()
    board = Board.create_from(ONE_UP, registry=registry)
    # tile 2 and the blank are each one cell away
    assert manhattan(board, 3, registry) == 2


def test_manhattan_textbook() -> None:
    registry = GoalRegistry()
    board = Board.create_from(TEXTBOOK, registry=registry)
    assert manhattan(board, 3, registry) == 6


def test_hamming_textbook() -> None:
    registry = GoalRegistry()
    board = Board.create_from(TEXTBOOK, registry=registry)
    assert hamming(board, 3, registry) == 5


def test_euclidean_uses_straight_line() -> None:
    registry = GoalRegistry()
    # blank and tile 1 swapped vertically
    board = Board.create_from([0, 2, 1, 3], registry=registry)
    assert euclidean(board, 2, registry) == pytest.approx(2.0)

    far = Board.create_from([3, 2, 0, 1], registry=registry)
    # tiles 1 and 3 sit diagonally opposite their goal cells
    assert euclidean(far, 2, registry) == pytest.approx(2 * math.sqrt(2))


def test_euclidean_never_exceeds_manhattan() -> None:
    registry = GoalRegistry()
    board = Board.create_from(TEXTBOOK, registry=registry)
    assert euclidean(board, 3, registry) <= manhattan(board, 3, registry)


# -- resolution ---------------------------------------------------------------


def test_get_heuristic_by_name() -> None:
    assert get_heuristic("manhattan") is manhattan
    assert get_heuristic(" Hamming ") is hamming
    assert get_heuristic(Heuristic.euclidean) is euclidean
    assert get_heuristic("none") is None


def test_get_heuristic_unknown() -> None:
    with pytest.raises(InvalidConfigurationError, match="Available"):
        get_heuristic("linear_conflict")


# -- composite score ----------------------------------------------------------


def test_initial_board_scores_zero() -> None:
    for name in ("manhattan", "hamming", "euclidean", "none"):
        board = Board.create_from(TEXTBOOK, name)
        assert board.evaluation == 0


def test_score_formula() -> None:
    registry = GoalRegistry()
    root = Board.create_from(TEXTBOOK, "manhattan", registry)
    child = root.slide(Direction.UP)
    grandchild = child.slide(Direction.UP)

    h1 = manhattan(child, 3, registry)
    h2 = manhattan(grandchild, 3, registry)
    assert child.evaluation == h1 * 10 * 1 + 1
    assert grandchild.evaluation == h2 * 10 * 2 + 2


def test_score_without_heuristic_is_path_cost() -> None:
    evaluator = Evaluator("none")
    root = Board.create_from(TEXTBOOK, "none")
    child = root.create_children()[0]
    assert evaluator.score(child) == 1
    assert child.evaluation == 1
    assert evaluator.h(child) == 0


def test_evaluator_uses_its_registry() -> None:
    registry = GoalRegistry()
    evaluator = Evaluator("hamming", registry)
    assert evaluator.registry is registry
    assert evaluator.is_final(Board.create_final(4))
    assert 4 in registry
