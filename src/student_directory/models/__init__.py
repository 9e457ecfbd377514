"""The models used to represent the directory and its load lifecycle"""

__all__ = [
    "Failed",
    "FailureKind",
    "Idle",
    "Loaded",
    "Loading",
    "LoadEvent",
    "LoadFailed",
    "LoadRequested",
    "LoadState",
    "LoadSucceeded",
    "Record",
    "RecordDecodeError",
    "parse_records",
    "transition",
]

from .record import Record, RecordDecodeError, parse_records
from .load_state import (
    Failed,
    FailureKind,
    Idle,
    Loaded,
    Loading,
    LoadEvent,
    LoadFailed,
    LoadRequested,
    LoadState,
    LoadSucceeded,
    transition,
)
