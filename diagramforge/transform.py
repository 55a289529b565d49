import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ._logging import resolve_logger
from .errors import PlaceholderError
from .extract import IdFactory, extract_diagram_blocks
from .models.blocks import DiagramBlock
from .models.fence import DIAGRAM_LANGUAGE
from .utils.text import join_lines, split_lines

__all__ = ["SubstitutionResult", "default_placeholder", "replace_diagram_blocks"]

PLACEHOLDER_CLASS = "mermaid-placeholder"

Replacement = Callable[[DiagramBlock], str]


@dataclass
class SubstitutionResult:
    """The rewritten document and the diagram blocks that were lifted out of it."""

    processed_document: str
    blocks: List[DiagramBlock] = field(default_factory=list)


def default_placeholder(block: DiagramBlock) -> str:
    """An empty div the preview composer can find again by id."""
    return f'<div class="{PLACEHOLDER_CLASS}" data-mermaid-id="{block.id}"></div>'


def replace_diagram_blocks(
    document: str,
    replacement: Optional[Replacement] = None,
    *,
    language: str = DIAGRAM_LANGUAGE,
    id_factory: Optional[IdFactory] = None,
    logger: Optional[logging.Logger] = None,
    log: bool = False,
) -> SubstitutionResult:
    """
    Replace every diagram block of `document` with a single placeholder line.

    Blocks are rewritten from the bottom of the document upwards. Collapsing a
    block shifts every line below it, so going last-to-first keeps the recorded
    start_line/end_line of the blocks still waiting to be replaced valid.

    Raises:
        PlaceholderError: if `replacement` returns text containing a line break.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)
    replacement = replacement or default_placeholder

    blocks = extract_diagram_blocks(
        document, language=language, id_factory=id_factory, logger=logger, log=log
    )
    if not blocks:
        return SubstitutionResult(processed_document=document, blocks=blocks)

    lines = split_lines(document)
    for block in sorted(blocks, key=lambda b: b.start_line, reverse=True):
        placeholder = replacement(block)
        if "\n" in placeholder or "\r" in placeholder:
            raise PlaceholderError(block.id, placeholder)
        lines[block.start_line:block.end_line + 1] = [placeholder]
        lg.debug(f"Replaced lines {block.start_line}-{block.end_line} with placeholder for '{block.id}'")

    return SubstitutionResult(processed_document=join_lines(lines), blocks=blocks)
