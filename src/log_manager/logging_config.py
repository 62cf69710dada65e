"""
Copyright 2025 LogManager Contributors
SPDX-License-Identifier: Apache-2.0

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

This file was created or modified with the assistance of an AI (Large Language Model).
Review required for correctness, security, and licensing.

Diagnostics of the log manager itself. Records written by LogManager never
pass through this logger.
"""

import logging
import logging.handlers
import os

LOGGER_NAME = "log-manager"
LOGS_DIR = "logs"
LOG_FILE_NAME = "log-manager.log"

logger = logging.getLogger(LOGGER_NAME)

# Silent unless the application configures logging
logger.addHandler(logging.NullHandler())


def setup_logging(log_dir=None, level=logging.INFO, console=True):
    """
    Attaches a rotating file handler (10MB max, keep 5 backup files) and an
    optional console handler to the log-manager logger.
    Calling it again does not add duplicate handlers.

    Args:
        log_dir: Directory for log-manager.log, defaults to LOGS_DIR
        level: Level for the logger and its handlers
        console: Also log to stderr when True

    Returns:
        The configured logger
    """
    log_dir = log_dir or LOGS_DIR
    os.makedirs(log_dir, exist_ok=True)
    logger.setLevel(level)

    # Create formatter using lazy % formatting
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if not any(
        isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers
    ):
        log_file = os.path.join(log_dir, LOG_FILE_NAME)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console and not any(type(h) is logging.StreamHandler for h in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    logger.debug("log-manager logging configured in %s", log_dir)
    return logger
