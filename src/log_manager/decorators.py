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

from functools import wraps

from .details import ExceptionDetails
from .errors import LogArgumentError
from .manager import LogManagerProtocol


def log_exceptions(manager: LogManagerProtocol, note: str = "", special_id: str = ""):
    """
    Decorator that writes any exception raised by the wrapped callable to
    manager as ExceptionDetails, then re-raises it unchanged.

    The method name recorded is the callable's qualified name.
    """
    if not isinstance(manager, LogManagerProtocol):
        raise LogArgumentError(
            f"expected a log manager, got {type(manager).__name__}"
        )

    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except Exception as exc:
                manager.log_exception(
                    ExceptionDetails.from_exception(
                        exc,
                        method_name=f.__qualname__,
                        special_id=special_id,
                        note=note,
                    )
                )
                raise

        return decorated_function

    return decorator
