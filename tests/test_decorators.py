"""
Copyright 2025 LogManager Contributors
SPDX-License-Identifier: Apache-2.0

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

This file was created or modified with the assistance of an AI (Large Language Model).
Review required for correctness, security, and licensing.
"""

from __future__ import annotations

import datetime
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from log_manager import (  # pylint: disable=wrong-import-position
    EventLog,
    EventLogEntryType,
    ExceptionDetails,
    LogArgumentError,
    LogManager,
)
from log_manager.decorators import log_exceptions  # pylint: disable=wrong-import-position


def _event_manager(host) -> LogManager:
    return LogManager.for_event_log(EventLog(source="App", log="Application", host=host))


def test_log_exceptions_logs_and_reraises(recording_host) -> None:
    """Exceptions are written as details and still reach the caller."""
    manager = _event_manager(recording_host)

    @log_exceptions(manager, note="nightly import", special_id="job-7")
    def load_batch():
        raise ValueError("bad input")

    with pytest.raises(ValueError, match="bad input"):
        load_batch()

    [(_, _, message, entry_type)] = recording_host.entries
    assert entry_type is EventLogEntryType.ERROR
    assert "load_batch" in message
    assert "Special ID:         job-7\n" in message
    assert "Note:               nightly import\n" in message
    assert "ValueError: bad input" in message


def test_log_exceptions_passes_return_values(recording_host) -> None:
    """Successful calls are untouched and nothing is logged."""
    manager = _event_manager(recording_host)

    @log_exceptions(manager)
    def add(a, b):
        return a + b

    assert add(2, 3) == 5
    assert add.__name__ == "add"
    assert not recording_host.entries


def test_from_exception_captures_traceback() -> None:
    """Details built from an exception carry its message and stack."""
    when = datetime.datetime(2024, 5, 6, 7, 8, 9)
    try:
        raise KeyError("missing")
    except KeyError as exc:
        details = ExceptionDetails.from_exception(
            exc, method_name="lookup", special_id="S", note="N", error_date=when
        )

    assert details.method_name == "lookup"
    assert details.error_message == "'missing'"
    assert details.error_date == when
    assert details.stack_trace.startswith("Traceback (most recent call last):")
    assert details.stack_trace.endswith("KeyError: 'missing'")


def test_from_exception_defaults_error_date_to_now() -> None:
    """Without an explicit date the current time is used."""
    before = datetime.datetime.now()

    details = ExceptionDetails.from_exception(RuntimeError("x"))

    assert before <= details.error_date <= datetime.datetime.now()
    assert details.stack_trace == "RuntimeError: x"


def test_exception_details_defaults() -> None:
    """An empty record is valid and uses empty values."""
    details = ExceptionDetails()

    assert details.special_id == ""
    assert details.method_name == ""
    assert details.error_message == ""
    assert details.note == ""
    assert details.stack_trace == ""
    assert details.error_date == datetime.datetime.min


def test_log_exceptions_accepts_any_log_manager(collecting_manager) -> None:
    """The decorator only needs the log manager interface."""
    manager = collecting_manager

    @log_exceptions(manager)
    def explode():
        raise RuntimeError("nope")

    with pytest.raises(RuntimeError):
        explode()

    [details] = manager.records
    assert isinstance(details, ExceptionDetails)
    assert details.error_message == "nope"


def test_log_exceptions_rejects_non_manager() -> None:
    """Objects without the log manager methods are refused up front."""
    with pytest.raises(LogArgumentError):
        log_exceptions("not a manager")
