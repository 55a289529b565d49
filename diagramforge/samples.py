# diagramforge/samples.py
"""Ready-made diagram sources for demos and tests."""

SAMPLE_DIAGRAMS = {
    "flowchart": """flowchart TD
    A[Start] --> B{Is it?}
    B -->|Yes| C[OK]
    C --> D[Rethink]
    D --> B
    B ---->|No| E[End]""",
    "sequence": """sequenceDiagram
    participant Alice
    participant Bob
    Alice->>John: Hello John, how are you?
    loop Healthcheck
        John->>John: Fight against hypochondria
    end
    Note right of John: Rational thoughts <br/>prevail!
    John-->>Alice: Great!
    John->>Bob: How about you?
    Bob-->>John: Jolly good!""",
    "class": """classDiagram
    class Animal {
        +String name
        +int age
        +makeSound()
    }
    class Dog {
        +String breed
        +bark()
    }
    class Cat {
        +String color
        +meow()
    }
    Animal <|-- Dog
    Animal <|-- Cat""",
    "pie": """pie title Pets adopted by volunteers
    "Dogs" : 386
    "Cats" : 85
    "Rats" : 15""",
    "gantt": """gantt
    title A Gantt Diagram
    dateFormat  YYYY-MM-DD
    section Section
    A task           :a1, 2014-01-01, 30d
    Another task     :after a1  , 20d
    section Another
    Task in sec      :2014-01-12  , 12d
    another task      : 24d""",
}


def sample_document(*names: str) -> str:
    """A small Markdown document embedding the named samples (all of them by default)."""
    chosen = names or tuple(SAMPLE_DIAGRAMS)
    parts = ["# Diagram samples"]
    for name in chosen:
        parts.append(f"## {name}\n\n```mermaid\n{SAMPLE_DIAGRAMS[name]}\n```")
    return "\n\n".join(parts) + "\n"
