#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from pathlib import Path
from typing import List, Optional

from ss_analysis import ValidationResult
from ss_context import ValidationContext
from ss_diagnostics import Diagnostic
from ss_document import TextDocument
from ss_logger import log_debug, log_info, log_stage
from ss_module_resolver import ModuleResolver
from ss_paths import ModulePaths
from ss_publish import DiagnosticSink
from ss_reference_checker import ReferenceChecker
from ss_symbol_builder import SymbolTableBuilder
from ss_symbols import SymbolTable


class StackScriptValidator:
    """
    Validation pipeline for one StackScript document:

      1. Scan lines.
      2. Collect labels and SET variables; flag EXTERN and malformed SET.
      3. Resolve LOAD directives against module files next to the document.
      4. Check CALL targets, %VAR<...> references and HALT.

    Each call to validate() is a fresh pass; the validator keeps no state
    between passes.
    """

    def __init__(self, context: ValidationContext | None = None):
        self.context = context or ValidationContext.default()

    def validate(self, document: TextDocument) -> ValidationResult:
        identity = document.identity
        log_info(self.context, f"Validating '{identity}'")
        result = ValidationResult(identity=identity, context=self.context)
        text = document.get_text()

        # 1. Lines
        log_stage(self.context, "Scanning lines", identity)
        lines = document.lines
        result.lines = lines
        log_debug(self.context, f"Scanned {len(lines)} line(s)")

        # 2. Local symbols
        log_stage(self.context, "Collecting local symbols", identity)
        table = SymbolTable()
        builder = SymbolTableBuilder(lines, table, filename=identity)
        builder.build()
        result.symbols = table
        result.diagnostics.extend(builder.diagnostics)
        log_debug(self.context, f"Collected {len(table.functions)} function(s), {len(table.variables)} variable(s)")

        # 3. Modules
        log_stage(self.context, "Resolving modules", identity)
        paths = ModulePaths(
            root=document.directory,
            metadata_suffix=self.context.metadata_suffix,
            implementation_suffix=self.context.implementation_suffix,
        )
        resolver = ModuleResolver(lines, table, paths, self.context, filename=identity)
        result.modules = resolver.resolve()
        result.diagnostics.extend(resolver.diagnostics)
        log_debug(self.context, f"Module resolution processed {len(result.modules)} module(s) with {len(resolver.diagnostics)} diagnostic(s)")

        # 4. References
        log_stage(self.context, "Checking references", identity)
        checker = ReferenceChecker(lines, table, result.processed_modules, text, filename=identity)
        checker.check()
        result.diagnostics.extend(checker.diagnostics)
        log_debug(self.context, f"Reference checking produced {len(checker.diagnostics)} diagnostic(s)")

        log_info(self.context, f"Validation complete: {len(result.diagnostics)} total diagnostic(s), {len(result.errors())} error(s)")
        return result

    def validate_source(self, text: str, path: str | Path) -> ValidationResult:
        """Validate unsaved text as if it were the document at `path`."""
        return self.validate(TextDocument(path=Path(path), text=text, language_id=self.context.language_id))


class ValidationService:
    """
    Trigger API for a host editor.

    on_open / on_save / on_change each run one full pass synchronously and
    replace the document's diagnostics in the sink. Documents of another
    language are ignored.
    """

    def __init__(self, sink: DiagnosticSink, context: ValidationContext | None = None):
        self.sink = sink
        self.context = context or ValidationContext.default()
        self.validator = StackScriptValidator(self.context)

    def on_open(self, document: TextDocument) -> Optional[List[Diagnostic]]:
        return self._revalidate(document)

    def on_save(self, document: TextDocument) -> Optional[List[Diagnostic]]:
        return self._revalidate(document)

    def on_change(self, document: TextDocument) -> Optional[List[Diagnostic]]:
        return self._revalidate(document)

    def _revalidate(self, document: TextDocument) -> Optional[List[Diagnostic]]:
        if document.language_id != self.context.language_id:
            log_debug(self.context, f"Skipping '{document.identity}' (language '{document.language_id}')")
            return None
        result = self.validator.validate(document)
        self.sink.set(document.identity, result.diagnostics)
        return result.diagnostics
