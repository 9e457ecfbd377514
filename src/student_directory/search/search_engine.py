"""
Search Engine - client side filtering and highlighting of directory records.

Matching is a case-insensitive literal substring test on name, email and
major. Highlighting splits a field into matched and unmatched segments that
concatenate back to the original text.
"""

import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from student_directory.models.record import Record


class SearchField(Enum):
    """Record fields the search term is matched against."""

    NAME = "name"
    EMAIL = "email"
    MAJOR = "major"

    def value_of(self, record: Record) -> str | None:
        """Read this field from `record`."""
        return getattr(record, self.value)


@dataclass(frozen=True)
class MatchSegment:
    """A piece of field text, flagged when it is an occurrence of the term."""

    text: str
    is_match: bool


@dataclass(frozen=True)
class SearchResult:
    """A record that passed the filter, with its highlighted fields."""

    record: Record
    segments: Mapping[SearchField, tuple[MatchSegment, ...]]


def is_blank(term: str | None) -> bool:
    """True when the term is absent, empty or whitespace only."""
    return term is None or not term.strip()


def term_pattern(term: str) -> re.Pattern[str]:
    """Compile `term` as a literal, case-insensitive pattern."""
    return re.compile(re.escape(term), re.IGNORECASE)


def matches(record: Record, term: str) -> bool:
    """
    Check if any searchable field of `record` contains `term`.

    Args:
        record: The record to test
        term: A non-blank search term, used as typed

    Returns:
        True if name, email or major contains the term, ignoring case
    """
    return _matches_pattern(record, term_pattern(term))


def _matches_pattern(record: Record, pattern: re.Pattern[str]) -> bool:
    for field in SearchField:
        value = field.value_of(record)
        if value and pattern.search(value):
            return True
    return False


def filter_records(records: Sequence[Record], term: str | None) -> list[Record]:
    """
    Keep the records matching `term`, in their original order.

    A blank term keeps every record.
    """
    if is_blank(term):
        return list(records)
    pattern = term_pattern(term)
    return [record for record in records if _matches_pattern(record, pattern)]


def highlight(text: str | None, term: str | None) -> list[MatchSegment]:
    """
    Split `text` into matched and unmatched segments.

    The term is escaped before compiling so it always matches literally,
    with the same case rule `matches` uses.
    Occurrences are found left to right without overlap.

    Args:
        text: The field text, possibly absent
        term: The raw search term

    Returns:
        Segments whose texts concatenate to `text` (or "" when absent)
    """
    if not text or is_blank(term):
        return [MatchSegment(text or "", False)]

    pattern = term_pattern(term)
    segments: list[MatchSegment] = []
    cursor = 0
    for found in pattern.finditer(text):
        start, end = found.span()
        if start > cursor:
            segments.append(MatchSegment(text[cursor:start], False))
        segments.append(MatchSegment(found.group(), True))
        cursor = end
    if cursor < len(text):
        segments.append(MatchSegment(text[cursor:], False))

    return segments


class SearchEngine:
    """
    Derives the filtered, highlighted view of a record set.

    The last `(records, term)` pair and its results are cached, so repeated
    calls with the same inputs (e.g. a re-render) skip the work.
    """

    def __init__(self):
        self.logger = logging.getLogger("SearchEngine")
        self._last_key: tuple[tuple[Record, ...], str] | None = None
        self._last_results: list[SearchResult] = []

    def search(self, records: Sequence[Record], term: str | None) -> list[SearchResult]:
        """
        Filter `records` by `term` and highlight each searchable field.

        Args:
            records: The loaded record set
            term: The current search term

        Returns:
            One SearchResult per matching record, in input order
        """
        key = (tuple(records), term or "")
        if self._is_cached(key):
            return list(self._last_results)

        results = [
            SearchResult(
                record=record,
                segments=MappingProxyType(
                    {
                        field: tuple(highlight(field.value_of(record), term))
                        for field in SearchField
                    }
                ),
            )
            for record in filter_records(key[0], term)
        ]
        self.logger.debug(
            "Search %r: %d of %d records", term, len(results), len(key[0])
        )

        self._last_key = key
        self._last_results = results
        return list(results)

    def _is_cached(self, key: tuple[tuple[Record, ...], str]) -> bool:
        # Records are compared by identity so results never hold stale objects
        if self._last_key is None:
            return False
        last_records, last_term = self._last_key
        records, term = key
        return (
            term == last_term
            and len(records) == len(last_records)
            and all(a is b for a, b in zip(records, last_records))
        )

    def clear_cache(self) -> None:
        self._last_key = None
        self._last_results = []
