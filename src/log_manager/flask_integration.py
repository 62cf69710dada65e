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

from flask import Flask, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from .details import ExceptionDetails
from .errors import LogArgumentError
from .manager import LogManagerProtocol

logger = logging.getLogger("log-manager")

EXTENSION_KEY = "log_manager"
REQUEST_ID_HEADER = "X-Request-ID"


def init_app(app: Flask, manager: LogManagerProtocol) -> LogManagerProtocol:
    """
    Writes unhandled exceptions raised by app's views to manager.

    HTTP errors (404, 405, ...) are returned untouched. Any other exception
    is logged and answered with a generic 500 JSON body that does not leak
    internal details.
    """
    if not isinstance(manager, LogManagerProtocol):
        raise LogArgumentError(
            f"expected a log manager, got {type(manager).__name__}"
        )
    app.extensions[EXTENSION_KEY] = manager
    app.register_error_handler(Exception, _handle_exception)
    return manager


def get_manager(app: Flask | None = None) -> LogManagerProtocol:
    """Returns the LogManager registered on app (default: current_app)."""
    if app is None:
        app = current_app
    return app.extensions[EXTENSION_KEY]


def _handle_exception(exc):
    if isinstance(exc, HTTPException):
        return exc

    details = ExceptionDetails.from_exception(
        exc,
        method_name=request.endpoint or request.path,
        special_id=request.headers.get(REQUEST_ID_HEADER, ""),
        note=f"{request.method} {request.path}",
    )
    try:
        get_manager().log_exception(details)
    except OSError as write_error:
        logger.error(
            "Failed to log exception for %s: %s", request.path, write_error
        )
    return jsonify({"error": "Internal server error"}), 500
