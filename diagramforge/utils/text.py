# diagramforge/utils/text.py
from typing import List


def split_lines(text: str) -> List[str]:
    """
    Split on '\\n' only. Unlike str.splitlines this keeps a trailing empty line
    and leaves '\\r' attached, so join_lines(split_lines(t)) == t always holds.
    """
    return text.split("\n")


def join_lines(lines: List[str]) -> str:
    return "\n".join(lines)


def first_non_blank_line(text: str) -> str:
    """Returns the first line with non-whitespace content, stripped; '' if none."""
    if not text:
        return ""
    for line in text.splitlines():
        stripped = line.strip()
        if stripped:
            return stripped
    return ""
