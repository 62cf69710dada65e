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


class LogManagerError(Exception):
    """Base class for errors raised by the log manager."""


class LogArgumentError(LogManagerError, ValueError):
    """A required argument was missing, empty or of the wrong type."""


class LogStateError(LogManagerError, RuntimeError):
    """A log call was made on a manager without a bound backend."""


class EventLogUnavailableError(LogManagerError, OSError):
    """The host event log cannot be written on this machine."""
