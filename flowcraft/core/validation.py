"""
Heuristic Mermaid source checks. Advisory only: findings are warnings, nothing is rejected.
Line-oriented; no grammar, no AST.
"""
import re
from dataclasses import dataclass, field

from .diagram_types import detect_kind

EMPTY_DIAGRAM = "Empty diagram"
UNKNOWN_TYPE = "Diagram type not clearly specified in first line"

OPEN_BRACKETS = "[({"
CLOSE_BRACKETS = "])}"
ARROW_TOKENS = ("-->", "---")
# A side starting with one of these is an inline label, not a node id
LABEL_PREFIXES = ("[", "(")
# Node id ends at the first shape or label delimiter
_ID_DELIMITERS = re.compile(r"[\[\(\{<>|:;]")
_EDGE_LABEL = re.compile(r"^\|[^|]*\|")
_ARROW_SPLIT = re.compile("|".join(re.escape(t) for t in sorted(ARROW_TOKENS, key=len, reverse=True)))
# Only \n and \r\n end a line; form feeds, \x85 and \u2028 stay inside it
_LINE_BREAK = re.compile(r"\r?\n")


@dataclass
class ValidationReport:
    """Result of validate(). is_valid is True iff errors is empty."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        return {"is_valid": self.is_valid, "errors": list(self.errors), "warnings": list(self.warnings)}


def bracket_imbalance(line: str) -> int:
    """Openers minus closers on one line (all bracket kinds pooled)."""
    opened = sum(line.count(c) for c in OPEN_BRACKETS)
    closed = sum(line.count(c) for c in CLOSE_BRACKETS)
    return opened - closed


def node_candidate(side: str) -> str:
    """
    Leading node identifier of one side of an edge, or "" when the side is an
    inline label. 'A b' -> 'A b'; '|Yes| C[Action 1]' -> 'C'; '[*]' -> ''.
    """
    text = side.strip()
    if not text or text.startswith(LABEL_PREFIXES):
        return ""
    text = _EDGE_LABEL.sub("", text, count=1).strip()
    m = _ID_DELIMITERS.search(text)
    if m:
        text = text[: m.start()]
    return text.strip()


def has_arrow(line: str) -> bool:
    return any(token in line for token in ARROW_TOKENS)


def _check_line(line_no: int, line: str, warnings: list[str]) -> None:
    trimmed = line.strip()
    if bracket_imbalance(trimmed) != 0:
        warnings.append("Line %d: Potentially unmatched brackets" % line_no)

    if not has_arrow(trimmed):
        return
    # Split on every arrow token present, so "A --- B --> C" yields three sides
    for side in _ARROW_SPLIT.split(trimmed):
        node_id = node_candidate(side)
        if " " in node_id:
            warnings.append("Line %d: Node ID '%s' contains spaces" % (line_no, node_id))


def split_lines(source: str) -> list[str]:
    """Split on \\n or \\r\\n; a trailing line break does not start an empty line."""
    lines = _LINE_BREAK.split(source)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def validate(source: str) -> ValidationReport:
    """Check diagram header, per-line bracket balance and node ids on edges."""
    report = ValidationReport()
    lines = split_lines(source)
    if not lines:
        report.warnings.append(EMPTY_DIAGRAM)
        return report

    if detect_kind(lines[0]) is None:
        report.warnings.append(UNKNOWN_TYPE)

    for i, line in enumerate(lines, start=1):
        _check_line(i, line, report.warnings)
    return report
