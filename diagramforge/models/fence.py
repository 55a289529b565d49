from dataclasses import dataclass

FENCE = "```"
DEFAULT_LANGUAGE = "plain"
DIAGRAM_LANGUAGE = "mermaid"


@dataclass
class UnterminatedFence:
    """An opening fence that never saw its bare closing delimiter."""
    line: int             # 0-based index of the opening fence line
    language: str         # info string after the fence, or DEFAULT_LANGUAGE
    opening: str          # the opening line exactly as written
