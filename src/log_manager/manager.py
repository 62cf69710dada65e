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

import datetime
import logging
import threading
from typing import Protocol, runtime_checkable

from .backends import EventLogBackend, FileBackend
from .details import ExceptionDetails
from .errors import LogArgumentError, LogStateError
from .event_log import initialize_event_log

logger = logging.getLogger("log-manager")


@runtime_checkable
class LogManagerProtocol(Protocol):
    """
    Interface of a log manager, for callers that should not depend on a
    concrete backend (decorators, framework integrations, test doubles).
    """

    def log(self, entry) -> None:
        """Writes an info string or an ExceptionDetails record."""

    def log_info(self, info: str) -> None:
        """Writes an informational message."""

    def log_exception(self, details: ExceptionDetails) -> None:
        """Writes the details of an exception."""


class LogManager:
    """
    Routes log calls to the single backend it was constructed with.

    Use LogManager.for_folder() for daily text files or
    LogManager.for_event_log() for the host event log. The backend cannot be
    changed afterwards. Writes through one instance are serialized.
    """

    def __init__(self, backend, clock=None):
        if backend is None:
            raise LogArgumentError("backend must not be None")
        if not isinstance(backend, (FileBackend, EventLogBackend)):
            raise LogArgumentError(
                f"expected FileBackend or EventLogBackend, got {type(backend).__name__}"
            )
        self._backend = backend
        self._clock = clock or datetime.datetime.now
        self._lock = threading.Lock()

    @classmethod
    def for_folder(cls, log_folder_path, clock=None):
        """
        Binds a new manager to daily log files inside log_folder_path.

        Raises:
            LogArgumentError: if log_folder_path is None or empty
        """
        if log_folder_path is None:
            raise LogArgumentError("log_folder_path must not be None")
        return cls(FileBackend(log_folder_path), clock=clock)

    @classmethod
    def for_event_log(cls, event_log, clock=None):
        """
        Binds a new manager to an event log handle.

        Raises:
            LogArgumentError: if event_log is None
        """
        if event_log is None:
            raise LogArgumentError("event_log must not be None")
        return cls(EventLogBackend(event_log), clock=clock)

    initialize_event_log = staticmethod(initialize_event_log)

    @property
    def backend(self):
        return self._backend

    def __repr__(self):
        return f"{type(self).__name__}({self._backend!r})"

    def _require_backend(self):
        backend = getattr(self, "_backend", None)
        if backend is None:
            raise LogStateError("One of event log or log folder must be specified.")
        return backend

    def log(self, entry):
        """
        Writes entry to the bound backend.
        ExceptionDetails records are logged as errors, anything else as info.
        """
        if isinstance(entry, ExceptionDetails):
            self.log_exception(entry)
        else:
            self.log_info(entry)

    def log_info(self, info):
        """
        Writes an informational message.

        Raises:
            LogStateError: if no backend is bound
            LogArgumentError: if info is None or empty
        """
        backend = self._require_backend()
        with self._lock:
            backend.write_info(info, self._clock())

    def log_exception(self, details):
        """
        Writes the details of an exception.

        Raises:
            LogStateError: if no backend is bound
            LogArgumentError: if details is None
        """
        backend = self._require_backend()
        with self._lock:
            backend.write_details(details, self._clock())
