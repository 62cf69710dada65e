"""
Copyright 2025 LogManager Contributors
SPDX-License-Identifier: Apache-2.0

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

This file was created or modified with the assistance of an AI (Large Language Model).
Review required for correctness, security, and licensing.

The two backends a LogManager can be bound to.

Each backend validates its own payloads; a LogManager only dispatches.
"""

from __future__ import annotations

import datetime
import logging
import os
from dataclasses import dataclass
from typing import Union

from .details import ExceptionDetails
from .errors import LogArgumentError
from .event_log import EventLog, EventLogEntryType
from .formatting import (
    format_details_block,
    format_event_details,
    format_info_block,
    log_file_path,
)
from .security import validate_log_folder

logger = logging.getLogger("log-manager")


def _require_info(info):
    if not info or not isinstance(info, str):
        raise LogArgumentError("info must be a non-empty string")


def _require_details(details):
    if details is None:
        raise LogArgumentError("exception details must not be None")
    if not isinstance(details, ExceptionDetails):
        raise LogArgumentError(
            f"expected ExceptionDetails, got {type(details).__name__}"
        )
    if not isinstance(details.error_date, datetime.datetime):
        raise LogArgumentError(
            f"error_date must be a datetime, got {type(details.error_date).__name__}"
        )


@dataclass(frozen=True)
class FileBackend:
    """Appends formatted blocks to ErrorLog_DDMMYYYY.txt inside folder."""

    folder: str | os.PathLike

    def __post_init__(self):
        if not validate_log_folder(self.folder):
            raise LogArgumentError(f"Invalid log folder: {self.folder!r}")

    def _append(self, text, now):
        path = log_file_path(self.folder, now)
        # newline="" keeps "\n" as written on every platform
        with open(path, "a", encoding="utf-8", newline="") as handle:
            handle.write(text)
            handle.flush()
        logger.debug("Appended %d characters to %s", len(text), path)

    def write_info(self, info, now):
        """Appends the info block stamped with now."""
        _require_info(info)
        self._append(format_info_block(info, now), now)

    def write_details(self, details, now):
        """Appends the exception details block to the file for now's date."""
        _require_details(details)
        self._append(format_details_block(details), now)


@dataclass(frozen=True)
class EventLogBackend:
    """Writes entries to an event log source."""

    event_log: EventLog

    def __post_init__(self):
        if self.event_log is None:
            raise LogArgumentError("event_log must not be None")
        if not isinstance(self.event_log, EventLog):
            raise LogArgumentError(
                f"expected EventLog, got {type(self.event_log).__name__}"
            )

    def write_info(self, info, now):  # pylint: disable=unused-argument
        """Writes info unmodified as an informational entry."""
        _require_info(info)
        self.event_log.write_entry(info, EventLogEntryType.INFORMATION)

    def write_details(self, details, now):  # pylint: disable=unused-argument
        """Writes the exception details as an error entry."""
        _require_details(details)
        self.event_log.write_entry(
            format_event_details(details), EventLogEntryType.ERROR
        )


Backend = Union[FileBackend, EventLogBackend]
