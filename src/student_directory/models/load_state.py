"""
Load state of the directory and the pure transition function driving it.

The loader feeds events into `transition` and publishes whatever state comes
out. Exactly one state is active at a time.
"""

from dataclasses import dataclass
from enum import Enum

from student_directory.models.record import Record


class FailureKind(Enum):
    """Why a load ended in the Failed state"""

    NETWORK = "network"
    HTTP = "http"
    DECODE = "decode"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class Idle:
    """Nothing has been requested yet"""


@dataclass(frozen=True)
class Loading:
    """A fetch is in flight"""


@dataclass(frozen=True)
class Loaded:
    """The last fetch succeeded"""

    records: tuple[Record, ...]


@dataclass(frozen=True)
class Failed:
    """The last fetch failed; `message` is meant for display"""

    message: str
    kind: FailureKind


LoadState = Idle | Loading | Loaded | Failed


@dataclass(frozen=True)
class LoadRequested:
    pass


@dataclass(frozen=True)
class LoadSucceeded:
    records: tuple[Record, ...]


@dataclass(frozen=True)
class LoadFailed:
    kind: FailureKind
    message: str


LoadEvent = LoadRequested | LoadSucceeded | LoadFailed


def transition(state: LoadState, event: LoadEvent) -> LoadState:
    """
    Compute the state that follows `state` when `event` happens.

    Combinations that make no sense (a completion while not loading, a
    request while already loading) return `state` unchanged.
    """
    match state, event:
        case Loading(), LoadRequested():
            return state
        case _, LoadRequested():
            return Loading()
        case Loading(), LoadSucceeded(records=records):
            return Loaded(tuple(records))
        case Loading(), LoadFailed(kind=kind, message=message):
            return Failed(message=message, kind=kind)
        case _:
            return state
