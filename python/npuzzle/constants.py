"""Shared choices and defaults."""

from __future__ import annotations

from enum import StrEnum


class Algorithm(StrEnum):
    greedy = "greedy"
    astar = "astar"
    uniform = "uniform"


class Heuristic(StrEnum):
    manhattan = "manhattan"
    hamming = "hamming"
    euclidean = "euclidean"
    none = "none"


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


NO_TILE = 0

# f = h * MOVE_WEIGHT * g + g
MOVE_WEIGHT = 10

MIN_SIZE = 2

# Random walk length per cell when generating puzzles.
SHUFFLES_PER_CELL = 100

DEFAULT_ALGORITHM = Algorithm.astar
DEFAULT_HEURISTIC = Heuristic.manhattan
DEFAULT_FRONTEND = Frontend.rich
