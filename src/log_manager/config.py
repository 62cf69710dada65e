"""
Copyright 2025 LogManager Contributors
SPDX-License-Identifier: Apache-2.0

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

This file was created or modified with the assistance of an AI (Large Language Model).
Review required for correctness, security, and licensing.

Environment based configuration.

    LOG_MANAGER_FOLDER        folder for daily log files
    LOG_MANAGER_EVENT_SOURCE  event source name for the event log backend
    LOG_MANAGER_EVENT_LOG     event log name (default "Application")
    LOG_MANAGER_DEBUG         "true" turns on debug diagnostics
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .errors import LogArgumentError
from .event_log import initialize_event_log
from .manager import LogManager

logger = logging.getLogger("log-manager")

DEFAULT_EVENT_LOG = "Application"


@dataclass(frozen=True)
class Settings:
    folder: Optional[str] = None
    event_source: Optional[str] = None
    event_log: str = DEFAULT_EVENT_LOG
    debug: bool = False

    @property
    def log_level(self):
        return logging.DEBUG if self.debug else logging.INFO


def load_settings(environ=None):
    """Reads Settings from environ (defaults to os.environ)."""
    if environ is None:
        environ = os.environ
    return Settings(
        folder=environ.get("LOG_MANAGER_FOLDER") or None,
        event_source=environ.get("LOG_MANAGER_EVENT_SOURCE") or None,
        event_log=environ.get("LOG_MANAGER_EVENT_LOG") or DEFAULT_EVENT_LOG,
        debug=environ.get("LOG_MANAGER_DEBUG", "").lower() == "true",
    )


def manager_from_settings(settings, host=None):
    """
    Builds a LogManager for whichever backend settings names.

    Raises:
        LogArgumentError: if both or neither of folder and event_source are set
    """
    if settings.folder and settings.event_source:
        raise LogArgumentError(
            "Set only one of LOG_MANAGER_FOLDER or LOG_MANAGER_EVENT_SOURCE"
        )
    if settings.debug:
        logger.setLevel(settings.log_level)
    if settings.folder:
        logger.info("Logging to folder %s", settings.folder)
        return LogManager.for_folder(settings.folder)
    if settings.event_source:
        logger.info(
            "Logging to event source %s in %s", settings.event_source, settings.event_log
        )
        event_log = initialize_event_log(
            settings.event_source, settings.event_log, host=host
        )
        return LogManager.for_event_log(event_log)
    raise LogArgumentError("Set LOG_MANAGER_FOLDER or LOG_MANAGER_EVENT_SOURCE")


def manager_from_environment(host=None):
    """Shortcut for manager_from_settings(load_settings())."""
    return manager_from_settings(load_settings(), host=host)
