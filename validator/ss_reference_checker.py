#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from typing import AbstractSet, List, Optional, Sequence

from ss_diagnostics import Diagnostic, Severity, diag_from_line, diag_from_range
from ss_grammar import CALL, find_var_refs, is_directive, parse_call, qualified_splits
from ss_lines import Line
from ss_symbols import SymbolTable


HALT = "HALT"


class ReferenceChecker:
    """
    Checks uses against the completed symbol table of a pass.

    - CALL targets: local labels or '<module>.<name>' from loaded modules.
      An unresolved qualified target is "not exported" by the longest
      dot-prefix that names a module seen in a LOAD directive, or else
      "module not loaded" for its first segment.
    - %VAR<name> references: must be declared by a SET somewhere in the
      document (before or after the reference).
    - The document must mention HALT somewhere.

    Each check is independent and only adds diagnostics.
    """

    def __init__(
        self,
        lines: Sequence[Line],
        table: SymbolTable,
        processed_modules: AbstractSet[str],
        text: str,
        filename: Optional[str] = None,
    ):
        self.lines = lines
        self.table = table
        self.processed_modules = processed_modules
        self.text = text
        self.filename = filename
        self.diagnostics: List[Diagnostic] = []

    def check(self) -> List[Diagnostic]:
        self.check_calls()
        self.check_variables()
        self.check_halt()
        return self.diagnostics

    def check_calls(self) -> None:
        for line in self.lines:
            if not is_directive(line.trimmed, CALL):
                continue

            full_name = parse_call(line.trimmed)
            if full_name is None:
                self._error(line, "SYN-0020", "Invalid CALL syntax. Expected CALL [module.]function")
                continue

            if self.table.has_function(full_name):
                continue

            splits = qualified_splits(full_name)
            if not splits:
                self._error(line, "RES-0030", f"Undefined function: {full_name}")
                continue

            for module, local in splits:
                if module in self.processed_modules:
                    self._error(line, "RES-0021", f"Function not exported by module: {local}")
                    break
            else:
                first_module = splits[-1][0]
                self._error(line, "RES-0020", f"Module not loaded: {first_module}")

    def check_variables(self) -> None:
        for line in self.lines:
            for ref in find_var_refs(line.raw):
                if self.table.has_variable(ref.name):
                    continue
                self.diagnostics.append(
                    diag_from_range(
                        Severity.ERROR,
                        f"Undefined variable: {ref.name}",
                        code="RES-0040",
                        filename=self.filename,
                        line=line,
                        start=ref.start,
                        end=ref.end,
                    )
                )

    def check_halt(self) -> None:
        if HALT in self.text or not self.lines:
            return
        self.diagnostics.append(
            diag_from_line(
                Severity.WARNING,
                "No HALT instruction found",
                code="STY-0010",
                filename=self.filename,
                line=self.lines[-1],
            )
        )

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
