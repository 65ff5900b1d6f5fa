from npuzzle.io.reader import load_board, read_puzzle, read_puzzle_file
from npuzzle.io.writer import format_board, format_fast, format_path, write_path

__all__ = [
    "format_board",
    "format_fast",
    "format_path",
    "load_board",
    "read_puzzle",
    "read_puzzle_file",
    "write_path",
]
