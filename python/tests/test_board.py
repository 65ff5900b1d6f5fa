"""Board model tests: goal layout, successors, equality vs ordering, paths."""

from __future__ import annotations

import pytest

from npuzzle.constants import Heuristic
from npuzzle.engine.heuristics import Evaluator, GoalRegistry, default_registry
from npuzzle.errors import InvalidConfigurationError
from npuzzle.models.board import Board, Direction

GOAL_3x3 = (1, 2, 3, 8, 0, 4, 7, 6, 5)
GOAL_4x4 = (1, 2, 3, 4, 12, 13, 14, 5, 11, 0, 15, 6, 10, 9, 8, 7)


# -- helpers ------------------------------------------------------------------


def _differing_positions(a: Board, b: Board) -> list[int]:
    return [i for i, (x, y) in enumerate(zip(a.tiles, b.tiles)) if x != y]


class _CountingEvaluator(Evaluator):
    """Evaluator that records how often it is asked for a score."""

    def __init__(self, value: float) -> None:
        super().__init__(Heuristic.manhattan, GoalRegistry())
        self.value = value
        self.calls = 0

    def score(self, board: Board) -> float:
        self.calls += 1
        return self.value


# -- goal layout --------------------------------------------------------------


@pytest.mark.parametrize("n", range(2, 10))
def test_final_is_permutation(n: int) -> None:
    tiles = Board.create_final(n).tiles
    assert sorted(tiles) == list(range(n * n))


def test_final_2x2() -> None:
    board = Board.create_final(2)
    assert board.tiles == (1, 2, 0, 3)
    assert board.grid() == [[1, 2], [0, 3]]
    assert board.blank_index == 2


def test_final_3x3_spiral() -> None:
    assert Board.create_final(3).tiles == GOAL_3x3


def test_final_4x4_spiral() -> None:
    assert Board.create_final(4).tiles == GOAL_4x4


def test_final_5x5_blank_in_centre() -> None:
    board = Board.create_final(5)
    assert board.blank_index == 12
    assert board.grid()[0] == [1, 2, 3, 4, 5]
    assert board.grid()[4] == [13, 12, 11, 10, 9]


def test_final_is_final() -> None:
    for n in range(2, 6):
        assert Board.create_final(n).is_final()
        assert Board.create_from(Board.create_final(n).tiles).is_final()


# -- construction -------------------------------------------------------------


def test_create_from_sets_root_metadata() -> None:
    board = Board.create_from([1, 0, 3, 8, 2, 4, 7, 6, 5], "hamming")
    assert board.n == 3
    assert board.path_cost == 0
    assert board.parent is None
    assert board.heuristic is Heuristic.hamming


@pytest.mark.parametrize(
    "tiles",
    [
        [0, 1, 2],              # not square
        [0],                    # 1×1
        [0, 1, 1, 3],           # duplicate
        [0, 1, 2, 4],           # value out of range
        [],
    ],
)
def test_create_from_rejects_bad_tiles(tiles: list[int]) -> None:
    with pytest.raises(InvalidConfigurationError):
        Board.create_from(tiles)


def test_create_from_rejects_unknown_heuristic() -> None:
    with pytest.raises(InvalidConfigurationError, match="Unknown heuristic"):
        Board.create_from(GOAL_3x3, "chebyshev")


def test_invalid_configuration_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        Board.create_from([3, 2, 1])


# -- successors ---------------------------------------------------------------


@pytest.mark.parametrize(
    "blank, expected",
    [
        (0, 2), (2, 2), (6, 2), (8, 2),   # corners
        (1, 3), (3, 3), (5, 3), (7, 3),   # edges
        (4, 4),                           # interior
    ],
)
def test_children_count_by_blank_position(blank: int, expected: int) -> None:
    tiles = [t for t in range(1, 9)]
    tiles.insert(blank, 0)
    board = Board.create_from(tiles)
    assert len(board.create_children()) == expected


def test_children_differ_by_one_swap() -> None:
    parent = Board.create_from([2, 8, 3, 1, 6, 4, 7, 0, 5])
    for child in parent.create_children():
        diff = _differing_positions(parent, child)
        assert len(diff) == 2
        assert parent.blank_index in diff
        assert child != parent
        assert child.parent is parent
        assert child.path_cost == parent.path_cost + 1
        assert child.evaluator is parent.evaluator


def test_children_order_up_down_left_right() -> None:
    parent = Board.create_from(GOAL_3x3)
    blanks = [child.blank_index for child in parent.create_children()]
    assert blanks == [1, 7, 3, 5]


def test_slide_stops_at_edges() -> None:
    board = Board.create_from([0, 1, 2, 3])
    assert board.slide(Direction.UP) is None
    assert board.slide(Direction.LEFT) is None
    assert board.slide(Direction.RIGHT).tiles == (1, 0, 2, 3)
    assert board.slide("down").tiles == (2, 1, 0, 3)


def test_direction_to() -> None:
    board = Board.create_from(GOAL_3x3)
    child = board.slide(Direction.LEFT)
    assert board.direction_to(child) is Direction.LEFT
    assert child.direction_to(board) is Direction.RIGHT
    assert board.direction_to(board) is None


# -- equality vs ordering -----------------------------------------------------


def test_equality_ignores_search_metadata() -> None:
    root = Board.create_from(GOAL_3x3)
    child = root.slide(Direction.UP)
    back = child.slide(Direction.DOWN)
    assert back == root
    assert hash(back) == hash(root)
    assert back.path_cost == 2
    assert back.parent is child
    assert len({root, child, back}) == 2


def test_ordering_uses_evaluation_only() -> None:
    a = Board.create_from([1, 0, 3, 8, 2, 4, 7, 6, 5])
    b = Board.create_from([0, 1, 3, 8, 2, 4, 7, 6, 5])
    # both roots score 0: neither is smaller, yet they are different states
    assert not a < b and not b < a
    assert a != b

    child = a.slide(Direction.DOWN)
    assert child.is_final()
    assert child.evaluation == 1
    assert a < child


def test_equality_against_other_types() -> None:
    assert Board.create_from(GOAL_3x3) != GOAL_3x3


def test_evaluation_memoized_even_when_zero() -> None:
    evaluator = _CountingEvaluator(0)
    board = Board(tiles=GOAL_3x3, evaluator=evaluator)
    assert board.evaluation == 0
    assert board.evaluation == 0
    assert evaluator.calls == 1


def test_evaluation_without_evaluator_is_path_cost() -> None:
    board = Board.create_final(3)
    child = board.create_children()[0]
    assert board.evaluation == 0
    assert child.evaluation == 1


# -- paths --------------------------------------------------------------------


def test_collect_path_of_root() -> None:
    root = Board.create_from(GOAL_3x3)
    assert root.collect_path() == [root]
    assert root.collect_path()[0] is root


def test_collect_path_follows_parents() -> None:
    root = Board.create_from(GOAL_3x3)
    board = root
    for direction in (Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT):
        board = board.slide(direction)

    path = board.collect_path()
    assert len(path) == board.path_cost + 1 == 5
    assert path[0] is root
    assert path[-1] is board
    assert [b.path_cost for b in path] == [0, 1, 2, 3, 4]


def test_is_tile_correct() -> None:
    board = Board.create_from([1, 0, 3, 8, 2, 4, 7, 6, 5])
    assert board.is_tile_correct(0, 0)
    assert not board.is_tile_correct(0, 1)
    assert not board.is_tile_correct(1, 1)


def test_goal_is_shared_between_boards() -> None:
    board = Board.create_final(3)
    other = board.slide(Direction.UP)
    assert board.goal is other.goal
    assert board.goal is default_registry.goal(3)
    assert board.goal == board
