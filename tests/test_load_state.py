"""Tests for the load state transition function"""

from student_directory.models.load_state import (
    Failed,
    FailureKind,
    Idle,
    Loaded,
    Loading,
    LoadFailed,
    LoadRequested,
    LoadSucceeded,
    transition,
)
from student_directory.models.record import Record

RECORDS = (Record(id="1", name="Ana"),)


def test_request_from_idle():
    """Test that a request moves Idle to Loading"""
    assert transition(Idle(), LoadRequested()) == Loading()


def test_request_while_loading_is_ignored():
    """Test that a request while Loading keeps the same state"""
    state = Loading()

    assert transition(state, LoadRequested()) is state


def test_success_while_loading():
    """Test that a success moves Loading to Loaded"""
    state = transition(Loading(), LoadSucceeded(RECORDS))

    assert state == Loaded(RECORDS)


def test_failure_while_loading():
    """Test that a failure moves Loading to Failed"""
    state = transition(Loading(), LoadFailed(FailureKind.HTTP, "boom"))

    assert state == Failed(message="boom", kind=FailureKind.HTTP)


def test_reload_from_loaded_hides_records():
    """Test that reloading exposes Loading, not the previous records"""
    assert transition(Loaded(RECORDS), LoadRequested()) == Loading()


def test_retry_from_failed():
    """Test that a request after a failure moves back to Loading"""
    failed = Failed(message="boom", kind=FailureKind.NETWORK)

    assert transition(failed, LoadRequested()) == Loading()


def test_completion_outside_loading_is_ignored():
    """Test that outcomes arriving when not Loading change nothing"""
    idle = Idle()
    loaded = Loaded(RECORDS)
    failed = Failed(message="boom", kind=FailureKind.DECODE)

    assert transition(idle, LoadSucceeded(RECORDS)) is idle
    assert transition(loaded, LoadFailed(FailureKind.HTTP, "x")) is loaded
    assert transition(failed, LoadSucceeded(RECORDS)) is failed


def test_full_failure_then_retry_sequence():
    """Test Idle -> Loading -> Failed -> Loading -> Loaded"""
    events = [
        LoadRequested(),
        LoadFailed(FailureKind.NETWORK, "offline"),
        LoadRequested(),
        LoadSucceeded(RECORDS),
    ]
    state = Idle()
    seen = [type(state)]
    for event in events:
        state = transition(state, event)
        seen.append(type(state))

    assert seen == [Idle, Loading, Failed, Loading, Loaded]
    assert state == Loaded(RECORDS)
