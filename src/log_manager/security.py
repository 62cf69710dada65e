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

import logging
import os
import re

logger = logging.getLogger("log-manager")


def validate_log_folder(folder):
    """
    Validates a log folder argument before it is bound to a file backend.
    Accepts str and os.PathLike values that are non-empty and free of NUL bytes.

    Args:
        folder: The folder path to validate

    Returns:
        True if valid, False otherwise
    """
    if folder is None:
        return False
    try:
        path = os.fspath(folder)
    except TypeError:
        return False
    if not path or not isinstance(path, str):
        return False
    if "\0" in path:
        logger.warning("Rejected log folder containing a NUL byte")
        return False
    return True


def validate_event_name(name):
    """
    Validates an event source or event log channel name.
    Only allows alphanumeric characters, spaces, dots, hyphens and underscores.
    Blocks registry path separators so a name cannot address another key.

    Args:
        name: The source or log name to validate

    Returns:
        True if valid, False otherwise
    """
    if not name or not isinstance(name, str):
        return False
    if "\\" in name or "/" in name:
        logger.warning("Rejected event name with path separator: %s", name)
        return False
    if not name.strip():
        return False
    if not re.match(r"^[a-zA-Z0-9 ._-]+$", name):
        logger.warning("Rejected event name with invalid characters: %s", name)
        return False
    return True
