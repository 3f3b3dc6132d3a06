#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from ss_context import ValidationContext
from ss_diagnostics import Diagnostic, Severity
from ss_lines import Line
from ss_module_resolver import Module
from ss_symbols import SymbolTable


@dataclass
class ValidationResult:
    """
    Everything one validation pass produced for one document.

    Contains:
      - document identity and the scanned lines
      - validation context (cross-cutting options)
      - symbol table (local labels, SET variables, qualified module exports)
      - modules named by LOAD, keyed by module name, in LOAD order
      - diagnostics accumulated from all stages, in stage order

    Nothing here is reused by a later pass.
    """
    identity: Optional[str] = None
    context: ValidationContext = field(default_factory=ValidationContext.default)

    lines: List[Line] = field(default_factory=list)
    symbols: SymbolTable = field(default_factory=SymbolTable)
    modules: Dict[str, Module] = field(default_factory=dict)

    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def processed_modules(self) -> Set[str]:
        return set(self.modules.keys())

    def errors(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.ERROR]

    def warnings(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.WARNING]

    def has_errors(self) -> bool:
        return any(d.severity is Severity.ERROR for d in self.diagnostics)

    def has_warnings(self) -> bool:
        return any(d.severity is Severity.WARNING for d in self.diagnostics)
