from npuzzle.engine.search.executor import (
    execute_astar,
    execute_greedy,
    execute_uniform,
    get_algorithm,
    resolve_algorithm,
)

__all__ = [
    "execute_astar",
    "execute_greedy",
    "execute_uniform",
    "get_algorithm",
    "resolve_algorithm",
]
