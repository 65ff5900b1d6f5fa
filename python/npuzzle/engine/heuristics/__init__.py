from npuzzle.engine.heuristics.evaluator import (
    Evaluator,
    GoalRegistry,
    default_registry,
    euclidean,
    get_heuristic,
    hamming,
    manhattan,
)

__all__ = [
    "Evaluator",
    "GoalRegistry",
    "default_registry",
    "euclidean",
    "get_heuristic",
    "hamming",
    "manhattan",
]
