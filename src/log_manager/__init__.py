"""
Copyright 2025 LogManager Contributors
SPDX-License-Identifier: Apache-2.0

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

This file was created or modified with the assistance of an AI (Large Language Model).
Review required for correctness, security, and licensing.

Minimal logging facade writing to daily text files or the host event log.
"""

from .backends import EventLogBackend, FileBackend
from .details import ExceptionDetails
from .errors import (
    EventLogUnavailableError,
    LogArgumentError,
    LogManagerError,
    LogStateError,
)
from .event_log import EventLog, EventLogEntryType, initialize_event_log
from .logging_config import setup_logging
from .manager import LogManager, LogManagerProtocol

__all__ = [
    "EventLog",
    "EventLogBackend",
    "EventLogEntryType",
    "EventLogUnavailableError",
    "ExceptionDetails",
    "FileBackend",
    "LogArgumentError",
    "LogManager",
    "LogManagerError",
    "LogManagerProtocol",
    "LogStateError",
    "initialize_event_log",
    "setup_logging",
]
