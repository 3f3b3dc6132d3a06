#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ss_lines import Line


DIAGNOSTIC_CODE_FAMILIES = {
    "SYN": [
        "SYN-0010",  # invalid LOAD syntax
        "SYN-0020",  # invalid CALL syntax
        "SYN-0030",  # SET without variable name
        "SYN-0040",  # EXTERN outside a module file
    ],
    "RES": [
        "RES-0010",  # missing module metadata file
        "RES-0011",  # missing module implementation file
        "RES-0020",  # module not loaded
        "RES-0021",  # function not exported by module
        "RES-0030",  # undefined function
        "RES-0040",  # undefined variable
    ],
    "IO": [
        "IO-0010",  # module file unreadable
    ],
    "STY": [
        "STY-0010",  # no HALT instruction
    ],
}


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    severity: Severity
    message: str
    code: Optional[str] = None
    filename: Optional[str] = None

    # 0-based positions; end_column is exclusive
    line: int = 0
    column: int = 0
    end_line: int = 0
    end_column: int = 0

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    # Return the one-line header (1-based positions); snippets are printed at the call site
    def format(self) -> str:
        loc = ""
        if self.filename is not None:
            loc = f"{os.path.abspath(str(self.filename))}:{self.line + 1}:{self.column + 1}: "
        code = f"[{self.code}] " if self.code else ""
        return f"{loc}{self.severity.value}: {code}{self.message}"


def diag_from_line(
        severity: Severity,
        message: str,
        *,
        code: Optional[str],
        filename: Optional[str],
        line: Line,
) -> Diagnostic:
    """Diagnostic spanning the full raw text of a line."""
    return Diagnostic(
        severity=severity,
        message=message,
        code=code,
        filename=filename,
        line=line.index,
        column=0,
        end_line=line.index,
        end_column=line.length,
    )


def diag_from_range(
        severity: Severity,
        message: str,
        *,
        code: Optional[str],
        filename: Optional[str],
        line: Line,
        start: int,
        end: int,
) -> Diagnostic:
    """Diagnostic spanning columns [start, end) of a single line."""
    return Diagnostic(
        severity=severity,
        message=message,
        code=code,
        filename=filename,
        line=line.index,
        column=start,
        end_line=line.index,
        end_column=end,
    )
