"""Search engine: heuristics, searches, solvability and the solver facade."""
