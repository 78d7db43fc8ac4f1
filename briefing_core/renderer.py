"""Plain-text layout of a BriefingDocument."""

from __future__ import annotations

from .briefing import BriefingDocument, BriefingLine
from .policy import DEFAULT_PLACEHOLDER

RULE = "=" * 32


def _render_line(line: BriefingLine, placeholder: str) -> str:
    value = line.value if line.value else placeholder
    if line.detail and line.value:
        return f"{line.label}: {value} ({line.detail})"
    return f"{line.label}: {value}"


def render_briefing(document: BriefingDocument, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
    """Render the briefing; unresolved duties show *placeholder*."""
    out = [f"BRIEFING {document.date}", RULE]
    for i, section in enumerate(document.sections):
        if section.header:
            out.append("")
            out.append(f"--- {section.header} ---")
        elif i:
            out.append("")
        out.extend(_render_line(line, placeholder) for line in section.lines)
    out.append(RULE)
    return "\n".join(out) + "\n"
