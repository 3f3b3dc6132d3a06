#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from typing import List, Optional, Sequence

from ss_diagnostics import Diagnostic, Severity, diag_from_line
from ss_grammar import EXTERN, SET, is_directive, parse_label, parse_set
from ss_lines import Line
from ss_symbols import SymbolTable


class SymbolTableBuilder:
    """
    Collects the entry document's own symbols.

    - Labels (`name:`) become function symbols.
    - SET lines declare variables; a SET without a name is an error.
    - EXTERN is only meaningful in module files; in the entry document it is
      reported and its names are dropped.
    """

    def __init__(self, lines: Sequence[Line], table: SymbolTable, filename: Optional[str] = None):
        self.lines = lines
        self.table = table
        self.filename = filename
        self.diagnostics: List[Diagnostic] = []

    def build(self) -> SymbolTable:
        for line in self.lines:
            trimmed = line.trimmed

            label = parse_label(trimmed)
            if label is not None:
                self.table.define_function(label)

            if is_directive(trimmed, EXTERN):
                self._error(line, "SYN-0040", "EXTERN can only be used in module files")
            elif is_directive(trimmed, SET):
                name = parse_set(trimmed)
                if name is None:
                    self._error(line, "SYN-0030", "SET command missing variable name")
                else:
                    self.table.define_variable(name)

        return self.table

    def _error(self, line: Line, code: str, message: str) -> None:
        self.diagnostics.append(
            diag_from_line(
                Severity.ERROR,
                message,
                code=code,
                filename=self.filename,
                line=line,
            )
        )
