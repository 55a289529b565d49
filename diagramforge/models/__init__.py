from .blocks import CodeBlock, DiagramBlock
from .fence import DEFAULT_LANGUAGE, DIAGRAM_LANGUAGE, FENCE, UnterminatedFence

__all__ = [
    "CodeBlock",
    "DiagramBlock",
    "UnterminatedFence",
    "FENCE",
    "DEFAULT_LANGUAGE",
    "DIAGRAM_LANGUAGE",
]
