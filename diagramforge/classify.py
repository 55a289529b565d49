# diagramforge/classify.py
from enum import Enum
from typing import Optional, Tuple, Union

from .utils.text import first_non_blank_line


class DiagramType(str, Enum):
    """Short canonical tags handed to the renderer as a hint."""

    GRAPH = "graph"
    FLOWCHART = "flowchart"
    SEQUENCE = "sequence"
    CLASS = "class"
    STATE = "state"
    ER = "er"
    JOURNEY = "journey"
    GANTT = "gantt"
    PIE = "pie"
    GITGRAPH = "gitgraph"
    MINDMAP = "mindmap"
    TIMELINE = "timeline"
    QUADRANT = "quadrant"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


# Checked in order against the lower-cased first line.
_PREFIXES: Tuple[Tuple[str, DiagramType], ...] = (
    ("graph", DiagramType.GRAPH),
    ("flowchart", DiagramType.FLOWCHART),
    ("sequencediagram", DiagramType.SEQUENCE),
    ("classdiagram", DiagramType.CLASS),
    ("statediagram", DiagramType.STATE),
    ("erdiagram", DiagramType.ER),
    ("journey", DiagramType.JOURNEY),
    ("gantt", DiagramType.GANTT),
    ("pie", DiagramType.PIE),
    ("gitgraph", DiagramType.GITGRAPH),
    ("mindmap", DiagramType.MINDMAP),
    ("timeline", DiagramType.TIMELINE),
    ("quadrantchart", DiagramType.QUADRANT),
)

_LABELS = {
    DiagramType.GRAPH: ("Flowchart diagram", "Process flow visualization"),
    DiagramType.FLOWCHART: ("Flowchart diagram", "Process flow visualization"),
    DiagramType.SEQUENCE: ("Sequence diagram", "Interaction sequence visualization"),
    DiagramType.CLASS: ("Class diagram", "Class relationship visualization"),
    DiagramType.GANTT: ("Gantt chart", "Project timeline visualization"),
    DiagramType.PIE: ("Pie chart", "Data distribution visualization"),
}


def get_diagram_type(code: str) -> DiagramType:
    """Maps the first non-blank line's leading keyword to a DiagramType; UNKNOWN otherwise."""
    first_line = first_non_blank_line(code).lower()
    for prefix, tag in _PREFIXES:
        if first_line.startswith(prefix):
            return tag
    return DiagramType.UNKNOWN


def describe_diagram(code: str, diagram_type: Optional[Union[DiagramType, str]] = None) -> str:
    """
    Accessible alt text for a diagram, e.g. "Pie chart: pie title Pets".

    An explicit `diagram_type` is used verbatim as the label prefix;
    otherwise the type is detected from the code.
    """
    first_line = first_non_blank_line(code)
    if diagram_type is not None:
        return f"{diagram_type} diagram: {first_line or 'Interactive diagram'}"

    label, fallback = _LABELS.get(
        get_diagram_type(code), ("Interactive diagram", "Visual diagram representation")
    )
    return f"{label}: {first_line or fallback}"
