"""
Copyright 2025 LogManager Contributors
SPDX-License-Identifier: Apache-2.0

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

This file was created or modified with the assistance of an AI (Large Language Model).
Review required for correctness, security, and licensing.

Text layouts written by the file and event log backends.
"""

import os

BLOCK_START = "-" * 71
BLOCK_END = "=" * 71


def _text(value):
    return "" if value is None else str(value)


def format_timestamp(value):
    """
    Formats a datetime as DD.MM.YYYY HH:MM:SS.
    Padding is done by hand because strftime("%Y") drops leading zeros for
    years below 1000 on some platforms (datetime.min must render as 0001).
    """
    return (
        f"{value.day:02d}.{value.month:02d}.{value.year:04d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )


def log_file_name(now):
    """Returns the daily file name: ErrorLog_DDMMYYYY.txt"""
    return f"ErrorLog_{now.day:02d}{now.month:02d}{now.year:04d}.txt"


def log_file_path(folder, now):
    """Joins the bound folder with the daily file name."""
    return os.path.join(folder, log_file_name(now))


def format_info_block(info, now):
    """Builds the file block for a plain informational message."""
    return (
        f"\n{BLOCK_START}\n"
        f"Info:         {_text(info)}\n"
        f"Date:         {format_timestamp(now)}\n"
        f"\n{BLOCK_END}\n"
    )


def format_details_block(details):
    """Builds the file block for an ExceptionDetails record."""
    return (
        f"\n{BLOCK_START}\n"
        f"Method name:        {_text(details.method_name)}\n"
        f"Special ID:         {_text(details.special_id)}\n"
        f"Error message:\n{_text(details.error_message)}\n"
        f"Note:               {_text(details.note)}\n"
        f"Error date:         {format_timestamp(details.error_date)}\n"
        f"StackTrace:\n{_text(details.stack_trace)}\n"
        f"\n{BLOCK_END}\n"
    )


def format_event_details(details):
    """
    Builds the event log entry for an ExceptionDetails record.
    Unlike the file block there are no separators and no error date line.
    """
    return (
        f"Method name:        {_text(details.method_name)}\n"
        f"Special ID:         {_text(details.special_id)}\n"
        f"Error message:\n{_text(details.error_message)}\n"
        f"Note:               {_text(details.note)}\n"
        f"StackTrace:\n{_text(details.stack_trace)}\n"
    )
