"""Board model for the sliding puzzle search."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum
from functools import cached_property
from typing import TYPE_CHECKING

from npuzzle.constants import MIN_SIZE, NO_TILE, Heuristic
from npuzzle.errors import InvalidConfigurationError

if TYPE_CHECKING:
    from npuzzle.engine.heuristics.evaluator import Evaluator, GoalRegistry


class Direction(StrEnum):
    """Direction the *blank* moves in."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(eq=False)
class Board:
    """One permutation of tiles plus its search metadata.

    Tiles are stored flat, row-major. 0 represents the blank.

    Equality and hashing look at ``tiles`` only, so a state reached by two
    different paths is still the same state for the closed set.  Ordering
    (``<``) compares the memoized evaluation only.  The two relations
    disagree on purpose: the searches rely on both.
    """

    tiles: tuple[int, ...]
    evaluator: Evaluator | None = field(default=None, repr=False)
    path_cost: int = 0
    parent: Board | None = field(default=None, repr=False)
    n: int = field(init=False)

    def __post_init__(self) -> None:
        self.tiles = tuple(self.tiles)
        self.n = math.isqrt(len(self.tiles))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def create_from(
        cls,
        tiles: Iterable[int],
        heuristic: str | Heuristic = Heuristic.manhattan,
        registry: GoalRegistry | None = None,
    ) -> Board:
        """Create an initial board from a flat row-major tile sequence.

        Example::

            Board.create_from([1, 2, 3, 8, 0, 4, 7, 6, 5], "manhattan")

        Raises :class:`InvalidConfigurationError` if the tiles are not a
        permutation of ``0 … n²−1`` for some ``n >= 2`` or the heuristic
        is unknown.
        """
        from npuzzle.engine.heuristics.evaluator import Evaluator

        flat = tuple(tiles)
        n = math.isqrt(len(flat))
        if n * n != len(flat):
            raise InvalidConfigurationError(
                f"Expected a square number of tiles, got {len(flat)}."
            )
        if n < MIN_SIZE:
            raise InvalidConfigurationError(
                f"Board must be at least {MIN_SIZE}×{MIN_SIZE}, got {n}×{n}."
            )
        if sorted(flat) != list(range(n * n)):
            raise InvalidConfigurationError(
                f"Tiles must be a permutation of 0..{n * n - 1}."
            )
        return cls(tiles=flat, evaluator=Evaluator(heuristic, registry))

    @classmethod
    def create_final(cls, n: int) -> Board:
        """Return the spiral goal for an ``n``×``n`` grid.

        Tiles are laid out ring by ring, clockwise from the top-left corner.
        The single cell the counter never reaches keeps the blank::

            Board.create_final(3).grid()  # [[1, 2, 3], [8, 0, 4], [7, 6, 5]]
        """
        capacity = n * n
        tiles = [NO_TILE] * capacity
        tile = 1
        lo, hi = 0, n - 1
        while tile < capacity:
            ring = (
                [lo * n + c for c in range(lo, hi)]            # top, left to right
                + [r * n + hi for r in range(lo, hi)]          # right, top to bottom
                + [hi * n + c for c in range(hi, lo, -1)]      # bottom, right to left
                + [r * n + lo for r in range(hi, lo, -1)]      # left, bottom to top
            )
            for index in ring:
                if tile < capacity:
                    tiles[index] = tile
                tile += 1
            lo += 1
            hi -= 1
        return cls(tiles=tuple(tiles))

    @classmethod
    def child_of(cls, parent: Board, tiles: tuple[int, ...] | None = None) -> Board:
        return cls(
            tiles=parent.tiles if tiles is None else tiles,
            evaluator=parent.evaluator,
            path_cost=parent.path_cost + 1,
            parent=parent,
        )

    # -- successors -----------------------------------------------------------

    def create_children(self) -> list[Board]:
        """Return one child per legal blank move (up, down, left, right)."""
        children = [
            child
            for direction in Direction
            if (child := self.slide(direction)) is not None
        ]
        # dedup by content, keeping generation order
        return list(dict.fromkeys(children))

    def slide(self, direction: Direction) -> Board | None:
        """Move the blank one cell in *direction*.

        Returns the child board, or ``None`` if the blank would leave the grid.
        """
        direction = Direction(direction)
        blank = self.blank_index
        row, col = divmod(blank, self.n)
        if direction is Direction.UP and row != 0:
            target = blank - self.n
        elif direction is Direction.DOWN and row != self.n - 1:
            target = blank + self.n
        elif direction is Direction.LEFT and col != 0:
            target = blank - 1
        elif direction is Direction.RIGHT and col != self.n - 1:
            target = blank + 1
        else:
            return None

        tiles = list(self.tiles)
        tiles[blank], tiles[target] = tiles[target], NO_TILE
        return Board.child_of(self, tuple(tiles))

    def direction_to(self, other: Board) -> Direction | None:
        """Return the blank move that turns this board into *other*, if any."""
        for direction in Direction:
            child = self.slide(direction)
            if child is not None and child == other:
                return direction
        return None

    # -- queries --------------------------------------------------------------

    @cached_property
    def blank_index(self) -> int:
        return self.tiles.index(NO_TILE)

    @cached_property
    def evaluation(self) -> float:
        """Composite score ``f``, computed once per instance."""
        if self.evaluator is None:
            return self.path_cost
        return self.evaluator.score(self)

    @property
    def heuristic(self) -> Heuristic:
        if self.evaluator is None:
            return Heuristic.none
        return self.evaluator.name

    @property
    def goal(self) -> Board:
        from npuzzle.engine.heuristics.evaluator import default_registry

        registry = default_registry if self.evaluator is None else self.evaluator.registry
        return registry.goal(self.n)

    def is_final(self) -> bool:
        """Check if the tiles match the spiral goal for this size."""
        if self.evaluator is None:
            return self == self.goal
        return self.evaluator.is_final(self)

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        return self.get_tile(row, col) == self.goal.get_tile(row, col)

    def is_not_solvable(self) -> bool:
        from npuzzle.engine.solvability import is_solvable

        registry = None if self.evaluator is None else self.evaluator.registry
        return not is_solvable(self, registry)

    def collect_path(self) -> list[Board]:
        """Return the boards from the root of the parent chain to this one."""
        path: list[Board] = []
        current: Board | None = self
        while current is not None:
            path.append(current)
            current = current.parent
        path.reverse()
        return path

    def grid(self) -> list[list[int]]:
        return [list(self.tiles[r * self.n : (r + 1) * self.n]) for r in range(self.n)]

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row * self.n + col]

    # -- equality / ordering --------------------------------------------------

    @cached_property
    def _hash(self) -> int:
        return hash(self.tiles)

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.tiles == other.tiles

    def __lt__(self, other: Board) -> bool:
        return self.evaluation < other.evaluation
