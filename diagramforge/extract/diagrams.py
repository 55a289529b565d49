# diagramforge/extract/diagrams.py
from __future__ import annotations

import hashlib
import logging
import time
from typing import Callable, List, Optional

from .._logging import resolve_logger
from ..models.blocks import CodeBlock, DiagramBlock
from ..models.fence import DIAGRAM_LANGUAGE
from .scanner import scan_code_blocks

__all__ = ["IdFactory", "content_hash_id", "extract_diagram_blocks"]

IdFactory = Callable[[int, CodeBlock], str]


def content_hash_id(index: int, block: CodeBlock) -> str:
    """
    Id derived from the block body, stable across re-parses while the body and
    its position among diagram blocks stay the same.
    """
    digest = hashlib.sha1(block.body.encode("utf-8")).hexdigest()[:12]
    return f"{block.language.lower()}-{digest}-{index}"


def extract_diagram_blocks(
    document: str,
    *,
    language: str = DIAGRAM_LANGUAGE,
    id_factory: Optional[IdFactory] = None,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> List[DiagramBlock]:
    """
    Scan `document` and keep the blocks tagged `language` (case-insensitive),
    in document order, each with an id.

    `id_factory(index, block)` overrides the default time-based ids; `index`
    counts diagram blocks only. Uniqueness of custom ids is up to the factory.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)
    wanted = language.lower()

    # Take one timestamp per call so every id of this extraction shares it.
    stamp = int(time.time() * 1000)

    diagrams: List[DiagramBlock] = []
    for block in scan_code_blocks(document, logger=logger, log=log):
        if block.language.lower() != wanted:
            continue
        index = len(diagrams)
        block_id = id_factory(index, block) if id_factory else f"{wanted}-{index}-{stamp}"
        diagrams.append(
            DiagramBlock(
                language=wanted,
                body=block.body,
                start_line=block.start_line,
                end_line=block.end_line,
                raw=block.raw,
                id=block_id,
            )
        )

    lg.debug(f"Kept {len(diagrams)} '{wanted}' block(s)")
    return diagrams
