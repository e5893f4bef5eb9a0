"""Classic algorithms and small exercise programs."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "bst",
    "graphs",
    "numbers",
    "sorting",
    "strings",
    "students",
    "tictactoe",
    "usaco",
]