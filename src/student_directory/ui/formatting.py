"""Display helpers for the records table"""

import html
from collections.abc import Iterable
from datetime import datetime

from student_directory.search.search_engine import MatchSegment

PLACEHOLDER: str = "N/A"
HIGHLIGHT_STYLE: str = "background-color: #FDE68A; color: #111827;"


def or_na(value: str | None) -> str:
    """Return `value`, or the placeholder when it is missing or empty"""
    return value if value else PLACEHOLDER


def format_date(value: str | None) -> str:
    """
    Format an ISO-8601 timestamp as e.g. "Mar 4, 2024".

    Returns the placeholder when the value is missing or cannot be parsed.
    """
    if not value:
        return PLACEHOLDER
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return PLACEHOLDER
    return f"{parsed:%b} {parsed.day}, {parsed.year}"


def segments_to_html(segments: Iterable[MatchSegment]) -> str:
    """Render segments as rich text, wrapping matches in a highlight span"""
    parts: list[str] = []
    for segment in segments:
        text = html.escape(segment.text)
        if segment.is_match:
            parts.append(f'<span style="{HIGHLIGHT_STYLE}">{text}</span>')
        else:
            parts.append(text)
    return "".join(parts)
