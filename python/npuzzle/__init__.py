"""N-puzzle solver: spiral-goal sliding-tile search engine."""

__version__ = "0.1.0"
