"""
Copyright 2025 LogManager Contributors
SPDX-License-Identifier: Apache-2.0

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

This file was created or modified with the assistance of an AI (Large Language Model).
Review required for correctness, security, and licensing.

Event log handles and the host facilities behind them.

A host is anything providing source_exists(source),
create_event_source(source, log) and write_entry(source, log, message,
entry_type). Windows hosts write to the NT event log; every other platform
writes to syslog.
"""

from __future__ import annotations

import enum
import functools
import itertools
import logging
import logging.handlers
import os
import sys
import threading
from dataclasses import dataclass
from typing import Any

from .errors import EventLogUnavailableError, LogArgumentError
from .security import validate_event_name

logger = logging.getLogger("log-manager")

# Registry key holding one subkey per event log, each holding its sources
EVENTLOG_REGISTRY_KEY = r"SYSTEM\CurrentControlSet\Services\EventLog"


class EventLogEntryType(enum.Enum):
    """Severity of an event log entry, valued by its logging level."""

    INFORMATION = logging.INFO
    ERROR = logging.ERROR


@dataclass(frozen=True)
class EventLog:
    """Handle to an event source registered under a named log."""

    source: str
    log: str
    host: Any

    def write_entry(self, message, entry_type=EventLogEntryType.INFORMATION):
        """Writes one entry for this source."""
        self.host.write_entry(self.source, self.log, message, entry_type)


class _RaisingHandlerMixin:
    """Re-raises emit failures instead of printing them to stderr."""

    def handleError(self, record):  # pylint: disable=invalid-name,unused-argument
        raise  # pylint: disable=misplaced-bare-raise


class _RaisingSysLogHandler(_RaisingHandlerMixin, logging.handlers.SysLogHandler):
    pass


class _RaisingNTEventLogHandler(
    _RaisingHandlerMixin, logging.handlers.NTEventLogHandler
):
    pass


class _HandlerEventLogHost:
    """
    Shared plumbing for hosts that write through a logging handler.
    Each (source, log) pair gets one handler owned by this host; records are
    passed to it directly, not through the global logger hierarchy.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._handlers = {}

    def _build_handler(self, source, log):
        raise NotImplementedError

    def _handler_for(self, source, log):
        with self._lock:
            handler = self._handlers.get((source, log))
            if handler is None:
                handler = self._build_handler(source, log)
                handler.setFormatter(logging.Formatter("%(message)s"))
                self._handlers[(source, log)] = handler
            return handler

    def write_entry(self, source, log, message, entry_type):
        """
        Writes message with the logging level matching entry_type.
        Errors raised by the handler propagate to the caller.
        """
        record = logging.LogRecord(
            name=f"log-manager.eventlog.{log}.{source}",
            level=entry_type.value,
            pathname=__file__,
            lineno=0,
            msg="%s",
            args=(message,),
            exc_info=None,
        )
        self._handler_for(source, log).handle(record)

    def close(self):
        """Closes every handler opened by this host."""
        with self._lock:
            for handler in self._handlers.values():
                handler.close()
            self._handlers.clear()


class WindowsEventLogHost(_HandlerEventLogHost):
    """Writes to the Windows event log through NTEventLogHandler."""

    def source_exists(self, source):
        """
        Searches every event log for a registered source with this name.

        Returns:
            True if a matching registry key exists, False otherwise
        """
        import winreg  # pylint: disable=import-outside-toplevel,import-error

        with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, EVENTLOG_REGISTRY_KEY) as root:
            for index in itertools.count():
                try:
                    log_name = winreg.EnumKey(root, index)
                except OSError:
                    return False
                try:
                    with winreg.OpenKey(root, f"{log_name}\\{source}"):
                        return True
                except OSError:
                    continue
        return False

    def create_event_source(self, source, log):
        """Registers source under log; NTEventLogHandler adds the registry entry."""
        self._handler_for(source, log)

    def _build_handler(self, source, log):
        handler = _RaisingNTEventLogHandler(appname=source, logtype=log)
        # NTEventLogHandler turns into a no-op when pywin32 cannot be imported
        if handler._welu is None:  # pylint: disable=protected-access
            handler.close()
            raise EventLogUnavailableError(
                "pywin32 is required to write to the Windows event log"
            )
        return handler


def _default_syslog_address():
    if os.path.exists("/dev/log"):
        return "/dev/log"
    if os.path.exists("/var/run/syslog"):
        return "/var/run/syslog"
    return ("localhost", logging.handlers.SYSLOG_UDP_PORT)


class SyslogEventLogHost(_HandlerEventLogHost):
    """
    Writes to syslog through SysLogHandler.
    Syslog has no source registry, so registered sources are kept in memory
    for the lifetime of the host.
    """

    def __init__(self, address=None):
        super().__init__()
        self.address = address or _default_syslog_address()
        self._sources = {}

    def source_exists(self, source):
        """Returns True once create_event_source has been called for source."""
        with self._lock:
            return source in self._sources

    def create_event_source(self, source, log):
        """Records source as belonging to log."""
        with self._lock:
            self._sources.setdefault(source, log)

    def _build_handler(self, source, log):
        facility_names = logging.handlers.SysLogHandler.facility_names
        facility = facility_names.get(log.lower(), logging.handlers.SysLogHandler.LOG_USER)
        handler = _RaisingSysLogHandler(address=self.address, facility=facility)
        handler.ident = f"{source}: "
        return handler


def host_class_for(platform):
    """Returns the host class used on the given sys.platform value."""
    if platform == "win32":
        return WindowsEventLogHost
    return SyslogEventLogHost


@functools.lru_cache(maxsize=None)
def default_host():
    """Returns the process-wide host for the running platform."""
    return host_class_for(sys.platform)()


def initialize_event_log(source_name, log_name, host=None):
    """
    Returns an event log handle, registering the source first if needed.

    Registration mutates host-wide state and usually needs elevated rights;
    permission errors from the host propagate to the caller.

    Args:
        source_name: Name of the event source
        log_name: Name of the log the source belongs to
        host: Event log host, defaults to default_host()

    Returns:
        EventLog bound to source_name and log_name
    """
    if not validate_event_name(source_name):
        raise LogArgumentError(f"Invalid event source name: {source_name!r}")
    if not validate_event_name(log_name):
        raise LogArgumentError(f"Invalid event log name: {log_name!r}")

    if host is None:
        host = default_host()

    if not host.source_exists(source_name):
        host.create_event_source(source_name, log_name)
        logger.info("Registered event source %s in log %s", source_name, log_name)
    else:
        logger.debug("Event source %s already registered", source_name)

    return EventLog(source=source_name, log=log_name, host=host)
