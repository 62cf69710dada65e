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
import traceback
from dataclasses import dataclass


@dataclass(frozen=True)
class ExceptionDetails:
    """
    Describes one error occurrence to be written by a LogManager.

    Every text field defaults to an empty string and error_date defaults to
    datetime.min, so an empty record is always valid.
    """

    special_id: str = ""
    method_name: str = ""
    error_message: str = ""
    note: str = ""
    error_date: datetime.datetime = datetime.datetime.min
    stack_trace: str = ""

    @classmethod
    def from_exception(
        cls,
        exc: BaseException,
        method_name: str = "",
        special_id: str = "",
        note: str = "",
        error_date: datetime.datetime | None = None,
    ) -> ExceptionDetails:
        """
        Builds a record from a caught exception.

        Args:
            exc: The exception to describe
            method_name: Name of the operation that failed
            special_id: Caller supplied correlation identifier
            note: Free-form annotation
            error_date: When the error happened, defaults to now

        Returns:
            ExceptionDetails carrying str(exc) and the formatted traceback
        """
        stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        return cls(
            special_id=special_id,
            method_name=method_name,
            error_message=str(exc),
            note=note,
            error_date=error_date or datetime.datetime.now(),
            stack_trace=stack.rstrip("\n"),
        )
