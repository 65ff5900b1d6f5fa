"""Generates solvable sliding puzzle layouts."""

from __future__ import annotations

import logging
import random

from npuzzle.constants import MIN_SIZE, NO_TILE, SHUFFLES_PER_CELL
from npuzzle.errors import Error, InvalidInputError
from npuzzle.models.board import Board

logger = logging.getLogger(__name__)


class PuzzleGenerator:
    """Creates solvable puzzles by walking the blank away from the goal."""

    @staticmethod
    def scramble(tiles: list[int], n: int, rng: random.Random) -> None:
        """Scramble *tiles* in-place using random valid blank moves."""
        num_shuffles = n * n * SHUFFLES_PER_CELL
        blank = tiles.index(NO_TILE)
        prev: int | None = None

        for _ in range(num_shuffles):
            neighbors = PuzzleGenerator._get_neighbors(blank, n)
            if prev in neighbors and len(neighbors) > 1:
                neighbors.remove(prev)
            target = rng.choice(neighbors)
            tiles[blank], tiles[target] = tiles[target], tiles[blank]
            prev, blank = blank, target

    @staticmethod
    def generate(n: int, seed: int | None = None) -> list[int]:
        """Return a random *solvable* flat layout for an ``n``×``n`` grid."""
        if n < MIN_SIZE:
            raise InvalidInputError(Error.RANDOM_TOO_SMALL, str(n))

        rng = random.Random(seed)
        goal = list(Board.create_final(n).tiles)
        while True:
            tiles = goal[:]
            PuzzleGenerator.scramble(tiles, n, rng)
            # Ensure the board is not already solved
            if tiles != goal:
                break
        logger.debug("Generated %d×%d puzzle %s (seed=%s)", n, n, tiles, seed)
        return tiles

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _get_neighbors(blank: int, n: int) -> list[int]:
        row, col = divmod(blank, n)
        neighbors: list[int] = []
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = row + dr, col + dc
            if 0 <= nr < n and 0 <= nc < n:
                neighbors.append(nr * n + nc)
        return neighbors
