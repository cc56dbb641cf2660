"""
Helpers turning an edited summary into email content.
"""

import html
from typing import Iterable, List

from recap.summarization.models import SummaryFields

DEFAULT_SUBJECT = "Meeting Summary"

SECTION_TITLES = (
    ("summary", "Summary"),
    ("action_items", "Action Items"),
    ("decisions", "Decisions"),
    ("follow_ups", "Follow Ups"),
    ("risks", "Risks"),
)


def parse_recipients(raw: str) -> List[str]:
    """Split a comma separated recipient string, dropping blanks."""
    return [part.strip() for part in (raw or "").split(",") if part.strip()]


def to_bullets(items: Iterable[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def escape_html(value: str) -> str:
    return html.escape(value, quote=False)


def compose_text(sections: dict) -> str:
    """Plain-text body with one titled block per section."""
    blocks = []
    for index, (key, title) in enumerate(SECTION_TITLES):
        prefix = "" if index == 0 else "\n"
        blocks.append(f"{prefix}{title}:\n{sections.get(key, '')}")
    return "\n".join(blocks)


def compose_html(sections: dict) -> str:
    """HTML body; section text is escaped and kept preformatted."""
    parts = []
    for index, (key, title) in enumerate(SECTION_TITLES):
        tag = "h2" if index == 0 else "h3"
        parts.append(f"<{tag}>{title}</{tag}><pre>{escape_html(sections.get(key, ''))}</pre>")
    return "\n".join(parts)


def sections_from_summary(result: SummaryFields) -> dict:
    """Editable text sections for a freshly generated summary."""
    return {
        "summary": result.summary,
        "action_items": to_bullets(result.action_items),
        "decisions": to_bullets(result.decisions),
        "follow_ups": to_bullets(result.follow_ups),
        "risks": to_bullets(result.risks),
    }
