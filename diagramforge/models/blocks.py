from dataclasses import dataclass


@dataclass
class CodeBlock:
    """A closed fenced block, located by 0-based line indices of the document."""

    language: str
    body: str
    start_line: int       # line holding the opening fence
    end_line: int         # line holding the closing fence
    raw: str              # opening line + body lines + closing line, as written

    @property
    def line_count(self) -> int:
        return self.end_line - self.start_line + 1


@dataclass
class DiagramBlock(CodeBlock):
    """A fenced block tagged as diagram source, with a per-extraction handle."""

    id: str
