# diagramforge/extract/scanner.py
"""
Single-pass fenced block scanner.

The scanner walks the document line by line with two states, outside and
inside a block. It is total: malformed input never raises, and a block that
is still open when the document ends is dropped from the result. Callers that
want to surface that case use `scan_document`, which reports the dangling
opener alongside the closed blocks.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .._logging import resolve_logger
from ..models.blocks import CodeBlock
from ..models.fence import DEFAULT_LANGUAGE, FENCE, UnterminatedFence
from ..utils.text import join_lines, split_lines

__all__ = ["ScanReport", "scan_code_blocks", "scan_document"]


@dataclass
class ScanReport:
    """Closed blocks in document order plus the opener left dangling at EOF, if any."""

    blocks: List[CodeBlock] = field(default_factory=list)
    unterminated: Optional[UnterminatedFence] = None

    @property
    def is_clean(self) -> bool:
        return self.unterminated is None


def _language_from_opener(stripped: str) -> str:
    return stripped[len(FENCE):].strip() or DEFAULT_LANGUAGE


def scan_document(
    document: str,
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> ScanReport:
    """
    Scan `document` for fenced blocks.

    A line whose stripped form starts with the fence opens a block; inside a
    block only a line that strips to the bare fence closes it. Fences with an
    info string inside a block are body text (no nesting).
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)
    report = ScanReport()
    if not document:
        return report

    lines = split_lines(document)

    inside = False
    start_line = 0
    language = DEFAULT_LANGUAGE
    opening = ""
    body: List[str] = []

    for i, line in enumerate(lines):
        stripped = line.strip()
        if not inside:
            if stripped.startswith(FENCE):
                inside = True
                start_line = i
                language = _language_from_opener(stripped)
                opening = line
                body = []
            continue

        if stripped == FENCE:
            report.blocks.append(
                CodeBlock(
                    language=language,
                    body=join_lines(body),
                    start_line=start_line,
                    end_line=i,
                    raw=join_lines([opening, *body, line]),
                )
            )
            inside = False
            body = []
        else:
            body.append(line)

    if inside:
        report.unterminated = UnterminatedFence(line=start_line, language=language, opening=opening)
        log.debug(f"Dropping unterminated '{language}' fence opened at line {start_line}")

    log.debug(f"Scanned {len(lines)} lines, found {len(report.blocks)} closed block(s)")
    return report


def scan_code_blocks(
    document: str,
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> List[CodeBlock]:
    """Closed fenced blocks of `document`, ordered by start line."""
    return scan_document(document, logger=logger, log=log).blocks
