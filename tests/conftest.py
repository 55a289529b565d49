# conftest.py - shared fixtures
import textwrap

import pytest


@pytest.fixture
def pie_document():
    return "Text\n```mermaid\npie title T\n\"A\":1\n```\nMore"


@pytest.fixture
def mixed_document():
    return textwrap.dedent("""\
        # Notes

        ```python
        print("hi")
        ```

        ```mermaid
        flowchart TD
            A --> B
        ```

        Some prose.

        ```MERMAID
        sequenceDiagram
            Alice->>Bob: Hi
        ```

        ```
        plain block
        ```
        """)
