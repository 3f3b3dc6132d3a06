"""
Logging utilities for the StackScript validator.

Messages go to stderr and are filtered by the ValidationContext log level.
The validator logs progress and internals only; diagnostics about the
document are returned to the caller, never logged.
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

import sys
import time
from typing import Optional

from ss_context import ValidationContext, LogLevel


_PREFIXES = {
    LogLevel.ERROR: "[ERROR] ",
    LogLevel.WARNING: "[WARNING] ",
    LogLevel.INFO: "[INFO] ",
    LogLevel.DEBUG: "[DEBUG] ",
}


def log(context: Optional[ValidationContext], log_level: LogLevel, message: str) -> None:
    """
    Log a message if the context's level admits it.

    Args:
        context:    The validation context holding the logging level.
        log_level:  The level of the message to log.
        message:    The message to log.
    """
    if context is None:
        print("No context provided for logging.", file=sys.stderr)
        print(f"{message}", file=sys.stderr)
        return
    if context.log_level < log_level:
        return
    prefix = ""
    if context.log_rich_format:
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        prefix = f"{timestamp} {_PREFIXES.get(log_level, '')}"
    print(f"{prefix}{message}", file=sys.stderr)


def log_error(context: Optional[ValidationContext], message: str) -> None:
    """
    Log at ERROR level, which every level above SILENT admits.

    The ssc CLI prints diagnostics, their source snippets and unreadable
    file errors through here.

    Args:
        context: The validation context holding the logging level.
        message: The message to log.
    """
    log(context, LogLevel.ERROR, message)


def log_info(context: Optional[ValidationContext], message: str) -> None:
    """
    Log pass progress (the document being validated, the final tally).

    Args:
        context: The validation context holding the logging level.
        message: The message to log.
    """
    log(context, LogLevel.INFO, message)


def log_debug(context: Optional[ValidationContext], message: str) -> None:
    """
    Log per-stage counts, resolved module paths and module I/O failures.

    Args:
        context: The validation context holding the logging level.
        message: The message to log.
    """
    log(context, LogLevel.DEBUG, message)


def log_stage(context: Optional[ValidationContext], stage: str, document: Optional[str] = None) -> None:
    """
    Log the start of a validation stage.

    Args:
        context:  The validation context holding logging flags.
        stage:    The name of the stage (e.g. "Scanning lines", "Resolving modules").
        document: Optional identity of the document being processed.
    """
    if document:
        log(context, LogLevel.INFO, f"{stage} for '{document}'")
    else:
        log(context, LogLevel.INFO, f"{stage}...")
