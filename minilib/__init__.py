"""String, memory and output helpers, a tiny printf, a line reader, a signal messenger and a two-stack sorter."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "memory",
    "strings",
    "output",
    "transform",
    "linereader",
    "printf",
    "talk",
    "stacks",
    "parsing",
    "solver",
]