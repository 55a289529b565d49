"""
Pre-render gate for diagram source.

Nothing reaches the sandboxed renderer unless it passes here. The checks run
in a fixed order and the unsafe-content check wins over type recognition, so
a recognizable diagram that smuggles a script tag is still rejected.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from ._logging import resolve_logger
from .utils.text import first_non_blank_line

__all__ = ["DIAGRAM_KEYWORDS", "ValidationResult", "validate_diagram_syntax"]

DIAGRAM_KEYWORDS: Tuple[str, ...] = (
    "graph",
    "flowchart",
    "sequenceDiagram",
    "classDiagram",
    "stateDiagram",
    "erDiagram",
    "journey",
    "gantt",
    "pie",
    "gitGraph",
    "mindmap",
    "timeline",
    "quadrantChart",
)

EMPTY_ERROR = "Empty diagram code"
UNSAFE_ERROR = "Script tags and javascript: URLs are not allowed for security reasons"
UNKNOWN_TYPE_ERROR = "Unknown diagram type. Supported types: " + ", ".join(DIAGRAM_KEYWORDS)

_UNSAFE_RE = re.compile(r"<\s*script\b|javascript\s*:", re.IGNORECASE)


@dataclass
class ValidationResult:
    valid: bool
    error: Optional[str] = None

    def __bool__(self) -> bool:
        return self.valid


def _contains_unsafe_content(code: str) -> bool:
    return _UNSAFE_RE.search(code) is not None


def _matches_keyword(first_line: str, keyword: str, strict: bool) -> bool:
    keyword = keyword.lower()
    if not strict:
        # Loose: the keyword may appear anywhere on the line.
        return keyword in first_line
    return re.match(rf"{re.escape(keyword)}(?![\w])", first_line) is not None


def validate_diagram_syntax(
    code: str,
    *,
    strict: bool = False,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> ValidationResult:
    """
    Basic syntax validation for a diagram body. Never raises.

    1. blank code is rejected;
    2. script tags and javascript: URLs are rejected;
    3. the first non-blank line must name a supported diagram type.

    With `strict=False` (the default) step 3 is a substring test, so
    "a pie chart of sales" passes. `strict=True` requires the line to start
    with the keyword followed by a non-word character or end of line.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)

    if not code or not code.strip():
        log.debug("Rejected diagram: empty")
        return ValidationResult(valid=False, error=EMPTY_ERROR)

    if _contains_unsafe_content(code):
        log.debug("Rejected diagram: unsafe content")
        return ValidationResult(valid=False, error=UNSAFE_ERROR)

    first_line = first_non_blank_line(code).lower()
    if not any(_matches_keyword(first_line, kw, strict) for kw in DIAGRAM_KEYWORDS):
        log.debug(f"Rejected diagram: unknown type in {first_line!r}")
        return ValidationResult(valid=False, error=UNKNOWN_TYPE_ERROR)

    return ValidationResult(valid=True)
