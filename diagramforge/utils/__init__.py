# diagramforge/utils/__init__.py
from .text import first_non_blank_line, join_lines, split_lines

__all__ = [
    "first_non_blank_line",
    "join_lines",
    "split_lines",
]
