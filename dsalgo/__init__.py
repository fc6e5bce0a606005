"""Classic data structures and algorithms: trees, containers, graphs, sorting,
dynamic programming, number theory, searching, matrices, puzzles and a calculator."""

__version__ = "0.1.0"