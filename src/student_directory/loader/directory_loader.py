"""
Directory Loader - owns the load state of the students directory.

Drives the Idle/Loading/Loaded/Failed machine and notifies listeners on
every transition.
"""

import itertools
import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Protocol

from student_directory.loader.errors import LoadError, UnexpectedError
from student_directory.models.load_state import (
    Failed,
    Idle,
    Loading,
    LoadEvent,
    LoadFailed,
    LoadRequested,
    LoadState,
    LoadSucceeded,
    transition,
)
from student_directory.models.record import Record


class RecordSource(Protocol):
    """Anything that can produce the full record collection"""

    def fetch_records(self) -> tuple[Record, ...]: ...


StateListener = Callable[[LoadState], None]


class DirectoryLoader:
    """
    Single owner of the directory `LoadState`.

    At most one load cycle is in flight at a time: a `load()` issued while
    `Loading` is ignored. Background callers use `begin()` to start a cycle
    and report its outcome with `complete()` or `fail()`; outcomes carrying
    a stale ticket are dropped.
    """

    def __init__(self, source: RecordSource):
        self.logger: logging.Logger = logging.getLogger("DirectoryLoader")
        self._source: RecordSource = source
        self._state: LoadState = Idle()
        self._listeners: list[StateListener] = []
        self._tickets: Iterator[int] = itertools.count(1)
        self._active_ticket: int | None = None

    @property
    def state(self) -> LoadState:
        """The current state, exactly one of Idle/Loading/Loaded/Failed"""
        return self._state

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, Loading)

    def add_listener(self, listener: StateListener) -> None:
        """Call `listener` with the new state after every transition"""
        self._listeners.append(listener)

    def remove_listener(self, listener: StateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def load(self) -> LoadState:
        """
        Fetch the collection synchronously.

        Returns:
            The state after the cycle, or the unchanged state if a cycle was
            already in flight
        """
        ticket = self.begin()
        if ticket is None:
            return self._state

        try:
            records = self._source.fetch_records()
        except LoadError as e:
            self.fail(ticket, e)
        except Exception as e:  # pylint: disable=broad-exception-caught
            self.logger.exception("Unexpected error while fetching records")
            self.fail(ticket, UnexpectedError(e))
        else:
            self.complete(ticket, records)
        return self._state

    def retry(self) -> LoadState:
        """Load again after a failure. Same as `load()`."""
        if not isinstance(self._state, Failed):
            self.logger.debug("Retry requested while %s", type(self._state).__name__)
        return self.load()

    def begin(self) -> int | None:
        """
        Move to Loading and open a new cycle.

        Returns:
            The ticket of the new cycle, or None if one is already running
        """
        if self.is_loading:
            self.logger.debug("Load already in progress, ignoring request")
            return None

        self._active_ticket = next(self._tickets)
        self._apply(LoadRequested())
        return self._active_ticket

    def complete(self, ticket: int, records: Iterable[Record]) -> None:
        """Finish cycle `ticket` successfully"""
        if not self._close_cycle(ticket):
            return
        self._apply(LoadSucceeded(tuple(records)))

    def fail(self, ticket: int, error: LoadError) -> None:
        """Finish cycle `ticket` with `error`"""
        if not self._close_cycle(ticket):
            return
        self.logger.warning("Load failed (%s): %s", error.kind.value, error.detail)
        self._apply(LoadFailed(kind=error.kind, message=error.message))

    def _close_cycle(self, ticket: int) -> bool:
        if ticket != self._active_ticket:
            self.logger.debug("Dropping outcome of stale load cycle %d", ticket)
            return False
        self._active_ticket = None
        return True

    def _apply(self, event: LoadEvent) -> None:
        previous = self._state
        self._state = transition(previous, event)
        if self._state is previous:
            return

        self.logger.debug(
            "%s -> %s", type(previous).__name__, type(self._state).__name__
        )
        for listener in list(self._listeners):
            listener(self._state)
