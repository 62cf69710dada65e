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

FIXED_NOW = datetime.datetime(2024, 3, 7, 14, 5, 9)


class RecordingHost:
    """Event log host that records registrations and entries in memory."""

    def __init__(self, existing=None):
        self.sources = dict(existing or {})
        self.created = []
        self.entries = []

    def source_exists(self, source):
        return source in self.sources

    def create_event_source(self, source, log):
        self.created.append((source, log))
        self.sources[source] = log

    def write_entry(self, source, log, message, entry_type):
        self.entries.append((source, log, message, entry_type))


class CollectingManager:
    """Log manager double that keeps every entry in memory."""

    def __init__(self):
        self.records = []

    def log(self, entry):
        self.records.append(entry)

    def log_info(self, info):
        self.records.append(info)

    def log_exception(self, details):
        self.records.append(details)


@pytest.fixture
def recording_host() -> RecordingHost:
    return RecordingHost()


@pytest.fixture
def collecting_manager() -> CollectingManager:
    return CollectingManager()


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW
