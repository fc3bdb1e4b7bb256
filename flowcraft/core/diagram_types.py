"""
Diagram kind registry: first-line keyword -> DiagramKind.
Single source of truth for what the validator accepts as a diagram header.
Add a diagram type with register_keyword(); no validator change needed.
"""
import threading
from enum import Enum
from typing import Optional


class DiagramKind(Enum):
    FLOWCHART = "flowchart"
    SEQUENCE = "sequence-diagram"
    CLASS = "class-diagram"
    STATE = "state-diagram"
    ENTITY_RELATIONSHIP = "entity-relationship-diagram"
    JOURNEY = "journey"
    GANTT = "gantt"
    PIE = "pie"
    GIT_GRAPH = "git-graph"
    MIND_MAP = "mind-map"
    TIMELINE = "timeline"
    ZEN_UML = "zen-uml"
    SANKEY = "sankey"


# Keywords are stored lower-case; lookups are case-insensitive.
_KEYWORDS: dict[str, DiagramKind] = {
    "graph": DiagramKind.FLOWCHART,
    "flowchart": DiagramKind.FLOWCHART,
    "sequencediagram": DiagramKind.SEQUENCE,
    "classdiagram": DiagramKind.CLASS,
    "statediagram": DiagramKind.STATE,
    "erdiagram": DiagramKind.ENTITY_RELATIONSHIP,
    "journey": DiagramKind.JOURNEY,
    "gantt": DiagramKind.GANTT,
    "pie": DiagramKind.PIE,
    "gitgraph": DiagramKind.GIT_GRAPH,
    "mindmap": DiagramKind.MIND_MAP,
    "timeline": DiagramKind.TIMELINE,
    "zenuml": DiagramKind.ZEN_UML,
    "sankey": DiagramKind.SANKEY,
}
_lock = threading.Lock()


def register_keyword(keyword: str, kind: DiagramKind) -> None:
    """Recognise `keyword` as a header for `kind`. Empty keywords are rejected."""
    key = keyword.strip().lower()
    if not key:
        raise ValueError("Diagram keyword must not be empty")
    with _lock:
        _KEYWORDS[key] = kind


def unregister_keyword(keyword: str) -> None:
    with _lock:
        _KEYWORDS.pop(keyword.strip().lower(), None)


def keywords() -> dict[str, DiagramKind]:
    """Snapshot of the registry."""
    with _lock:
        return dict(_KEYWORDS)


def _matches(header: str, keyword: str) -> bool:
    # header forms: "pie", "pie:", "pie title Pets"
    return header == keyword or header.startswith(keyword + ":") or header.startswith(keyword)


def detect_kind(first_line: str) -> Optional[DiagramKind]:
    """
    Kind declared by a diagram's first line, or None.
    Longest keyword wins so that e.g. 'stateDiagram-v2' is not shadowed by a shorter entry.
    """
    header = first_line.strip().lower()
    if not header:
        return None
    for keyword, kind in sorted(keywords().items(), key=lambda kv: len(kv[0]), reverse=True):
        if _matches(header, keyword):
            return kind
    return None
