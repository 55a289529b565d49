# tests/diagramforge/extract/test_scanner.py
import textwrap

from diagramforge.extract import scan_code_blocks, scan_document
from diagramforge.models import CodeBlock, UnterminatedFence


def _reassemble(document, blocks):
    """Rebuild a document from its lines, substituting each block's raw at its range."""
    lines = document.split("\n")
    out, cursor = [], 0
    for b in blocks:
        out.extend(lines[cursor:b.start_line])
        out.append(b.raw)
        cursor = b.end_line + 1
    out.extend(lines[cursor:])
    return "\n".join(out)


def test_end_to_end_pie_block(pie_document):
    blocks = scan_code_blocks(pie_document)
    assert blocks == [
        CodeBlock(
            language="mermaid",
            body='pie title T\n"A":1',
            start_line=1,
            end_line=4,
            raw='```mermaid\npie title T\n"A":1\n```',
        )
    ]


def test_mixed_document_finds_all_blocks_in_order(mixed_document):
    blocks = scan_code_blocks(mixed_document)
    assert [(b.language, b.start_line, b.end_line) for b in blocks] == [
        ("python", 2, 4),
        ("mermaid", 6, 9),
        ("MERMAID", 13, 16),
        ("plain", 18, 20),
    ]
    assert blocks[1].body == "flowchart TD\n    A --> B"


def test_blocks_are_ordered_and_non_overlapping(mixed_document):
    blocks = scan_code_blocks(mixed_document)
    for b in blocks:
        assert b.start_line <= b.end_line
    for prev, nxt in zip(blocks, blocks[1:]):
        assert prev.end_line < nxt.start_line


def test_raw_round_trips_to_original_document(mixed_document):
    blocks = scan_code_blocks(mixed_document)
    assert _reassemble(mixed_document, blocks) == mixed_document


def test_raw_matches_recorded_line_range(mixed_document):
    lines = mixed_document.split("\n")
    for b in scan_code_blocks(mixed_document):
        assert b.raw == "\n".join(lines[b.start_line:b.end_line + 1])
        assert b.line_count == b.end_line - b.start_line + 1


def test_empty_block_raw_has_no_phantom_line():
    doc = "```mermaid\n```"
    [block] = scan_code_blocks(doc)
    assert block.body == ""
    assert block.raw == doc
    assert (block.start_line, block.end_line) == (0, 1)


def test_bare_opener_defaults_to_plain():
    [block] = scan_code_blocks("```\nx\n```")
    assert block.language == "plain"


def test_language_tag_is_trimmed_and_indentation_tolerated():
    doc = "  ```   mermaid   \n  pie title X\n  ```  "
    [block] = scan_code_blocks(doc)
    assert block.language == "mermaid"
    # Body lines are kept verbatim, indentation included.
    assert block.body == "  pie title X"
    assert block.raw == doc


def test_fence_with_info_inside_block_is_body_not_nesting():
    doc = textwrap.dedent("""\
        ```markdown
        ```mermaid
        pie title inner
        ```
        trailing
        ```""")
    blocks = scan_code_blocks(doc)
    assert len(blocks) == 1
    assert blocks[0].language == "markdown"
    assert blocks[0].body == "```mermaid\npie title inner"
    assert blocks[0].end_line == 3


def test_unterminated_fence_yields_no_blocks_and_no_error():
    doc = "Intro\n```mermaid\npie title T\n\"A\":1\n"
    assert scan_code_blocks(doc) == []


def test_unterminated_fence_after_closed_block_keeps_closed_block():
    doc = "```js\nx\n```\n```mermaid\npie"
    blocks = scan_code_blocks(doc)
    assert [b.language for b in blocks] == ["js"]


def test_scan_document_reports_unterminated_fence():
    doc = "```js\nx\n```\nText\n  ```mermaid\npie"
    report = scan_document(doc)
    assert [b.language for b in report.blocks] == ["js"]
    assert report.unterminated == UnterminatedFence(line=4, language="mermaid", opening="  ```mermaid")
    assert not report.is_clean


def test_scan_document_clean_when_all_fences_close(mixed_document):
    report = scan_document(mixed_document)
    assert report.is_clean
    assert report.unterminated is None
    assert report.blocks == scan_code_blocks(mixed_document)


def test_empty_and_fenceless_documents():
    assert scan_code_blocks("") == []
    assert scan_code_blocks("just text\nno fences here") == []
    assert scan_document("").is_clean


def test_crlf_lines_still_close_blocks():
    doc = "```mermaid\r\npie title T\r\n```\r\nafter"
    [block] = scan_code_blocks(doc)
    assert block.language == "mermaid"
    assert block.body == "pie title T\r"
    assert block.raw == "```mermaid\r\npie title T\r\n```\r"
