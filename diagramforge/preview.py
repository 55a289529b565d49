"""
Helpers for the preview side of the pipeline.

`compose_preview` walks a document produced by `replace_diagram_blocks` and
cuts it at the default placeholder markers, pairing each marker with its
block and that block's validation outcome. `render_requests` is the only
path towards the renderer: it yields the id, body and type hint of blocks
that passed validation and nothing else from the surrounding document.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Union

from .classify import DiagramType, get_diagram_type
from .models.blocks import DiagramBlock
from .transform import PLACEHOLDER_CLASS
from .validate import ValidationResult, validate_diagram_syntax

__all__ = [
    "DiagramSegment",
    "RenderRequest",
    "TextSegment",
    "compose_preview",
    "render_requests",
]

_PLACEHOLDER_RE = re.compile(
    rf'<div class="{re.escape(PLACEHOLDER_CLASS)}" data-mermaid-id="(?P<id>[^"]+)"></div>'
)


@dataclass
class TextSegment:
    text: str


@dataclass
class DiagramSegment:
    block: DiagramBlock
    validation: ValidationResult
    diagram_type: DiagramType


@dataclass
class RenderRequest:
    """What the sandboxed renderer receives: an opaque id and validated source."""
    id: str
    code: str
    diagram_type: DiagramType


Segment = Union[TextSegment, DiagramSegment]


def compose_preview(
    processed_document: str,
    blocks: Iterable[DiagramBlock],
    *,
    strict: bool = False,
    marker: Optional[Union[str, re.Pattern[str]]] = None,
) -> List[Segment]:
    """
    Split `processed_document` into text and diagram segments in reading order.

    By default only `default_placeholder` markers are recognized. Documents
    built with a custom `replacement` must pass `marker`, a regex (string or
    compiled) with a named group `id` capturing the block id; otherwise no
    diagram segments are found and the whole document comes back as text.

    Markers whose id is not among `blocks` (a stale result from an older parse)
    are dropped. Empty text between markers is not emitted.
    """
    pattern = _PLACEHOLDER_RE if marker is None else re.compile(marker)
    if "id" not in pattern.groupindex:
        raise ValueError("marker pattern needs a named group 'id'")
    by_id: Dict[str, DiagramBlock] = {b.id: b for b in blocks}
    segments: List[Segment] = []
    cursor = 0

    for m in pattern.finditer(processed_document):
        text = processed_document[cursor:m.start()]
        if text.strip():
            segments.append(TextSegment(text))
        cursor = m.end()

        block = by_id.get(m.group("id"))
        if block is None:
            continue
        segments.append(
            DiagramSegment(
                block=block,
                validation=validate_diagram_syntax(block.body, strict=strict),
                diagram_type=get_diagram_type(block.body),
            )
        )

    tail = processed_document[cursor:]
    if tail.strip():
        segments.append(TextSegment(tail))
    return segments


def render_requests(blocks: Iterable[DiagramBlock], *, strict: bool = False) -> Iterator[RenderRequest]:
    for block in blocks:
        if not validate_diagram_syntax(block.body, strict=strict).valid:
            continue
        yield RenderRequest(id=block.id, code=block.body, diagram_type=get_diagram_type(block.body))
