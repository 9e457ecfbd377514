"""
Search module for the Student Directory application.

Provides literal, case-insensitive filtering and highlighting of records.
"""

from student_directory.search.search_engine import (
    MatchSegment,
    SearchEngine,
    SearchField,
    SearchResult,
    filter_records,
    highlight,
    matches,
)

__all__ = [
    "MatchSegment",
    "SearchEngine",
    "SearchField",
    "SearchResult",
    "filter_records",
    "highlight",
    "matches",
]
