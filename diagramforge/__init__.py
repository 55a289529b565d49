from .classify import DiagramType, describe_diagram, get_diagram_type
from .errors import DiagramForgeError, PlaceholderError
from .extract import (
    ScanReport,
    content_hash_id,
    extract_diagram_blocks,
    scan_code_blocks,
    scan_document,
)
from .models import CodeBlock, DiagramBlock, UnterminatedFence
from .preview import DiagramSegment, RenderRequest, TextSegment, compose_preview, render_requests
from .samples import SAMPLE_DIAGRAMS, sample_document
from .transform import SubstitutionResult, default_placeholder, replace_diagram_blocks
from .validate import DIAGRAM_KEYWORDS, ValidationResult, validate_diagram_syntax

__all__ = [
    "scan_code_blocks",
    "scan_document",
    "extract_diagram_blocks",
    "content_hash_id",
    "replace_diagram_blocks",
    "default_placeholder",
    "validate_diagram_syntax",
    "get_diagram_type",
    "describe_diagram",
    "compose_preview",
    "render_requests",
    "sample_document",
    "CodeBlock",
    "DiagramBlock",
    "UnterminatedFence",
    "ScanReport",
    "SubstitutionResult",
    "ValidationResult",
    "DiagramType",
    "DiagramSegment",
    "TextSegment",
    "RenderRequest",
    "DIAGRAM_KEYWORDS",
    "SAMPLE_DIAGRAMS",
    "DiagramForgeError",
    "PlaceholderError",
]
