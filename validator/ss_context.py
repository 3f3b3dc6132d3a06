"""
Validation context for cross-cutting validator options.

This module defines the ValidationContext dataclass which holds options that
affect several stages of a validation pass (module lookup, logging, keyword
suggestions).
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from dataclasses import dataclass, field
from enum import IntEnum

from ss_keywords import KeywordTable


class LogLevel(IntEnum):
    """Hierarchical logging levels for the StackScript validator."""
    SILENT = 0      # No logging
    ERROR = 3       # Error messages only
    WARNING = 6     # Warning messages (default)
    INFO = 10       # General progress messages (-v)
    DEBUG = 30      # Detailed diagnostic information (-vv)


@dataclass
class ValidationContext:
    """
    Holds cross-cutting options that affect multiple validation stages.

    Attributes:
        language_id:            Documents with another language id are ignored by the trigger API.
        encoding:               Encoding used to read module files.
        metadata_suffix:        Suffix of module metadata files (EXTERN declarations).
        implementation_suffix:  Suffix of module implementation files (labels).
        keywords:               Opcode table used for completion candidates.
        log_rich_format:        If True, emit logs in rich format: timestamps and log level.
        log_level:              Current logging level.
    """
    language_id: str = "stackscript"
    encoding: str = "utf-8"
    metadata_suffix: str = ".stackm"
    implementation_suffix: str = ".stack"
    keywords: KeywordTable = field(default_factory=KeywordTable.default)
    log_rich_format: bool = False
    log_level: LogLevel = LogLevel.WARNING

    @staticmethod
    def default() -> 'ValidationContext':
        """Create a ValidationContext with default settings."""
        return ValidationContext(log_level=LogLevel.WARNING)
