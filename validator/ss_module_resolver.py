#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from ss_context import ValidationContext
from ss_diagnostics import Diagnostic, Severity, diag_from_line
from ss_grammar import EXTERN, LOAD, is_directive, parse_extern, parse_label, parse_load, qualify
from ss_lines import Line, scan_lines
from ss_logger import log_debug
from ss_paths import ModulePaths
from ss_symbols import SymbolTable


class ModuleStatus(Enum):
    LOADED = auto()
    MISSING_METADATA = auto()
    MISSING_IMPLEMENTATION = auto()
    MISSING_BOTH = auto()
    READ_ERROR = auto()


def _file_exists(path: Path) -> bool:
    """
    False only when nothing is at `path`; any other OSError propagates.

    Path.exists() hides some errors (all of them on newer Pythons), which
    would turn an unreachable module into a "missing file" report.
    """
    try:
        path.stat()
    except (FileNotFoundError, NotADirectoryError):
        return False
    return True


@dataclass
class Module:
    """
    A module named by a LOAD directive.

    exports holds the local (unqualified) names found in either file, in
    discovery order: metadata EXTERNs first, then implementation labels.
    """
    name: str
    metadata_path: Path
    implementation_path: Path
    line: Line  # first LOAD line naming this module
    status: ModuleStatus = ModuleStatus.LOADED
    exports: List[str] = field(default_factory=list)

    def qualified_exports(self) -> List[str]:
        return [qualify(self.name, local) for local in self.exports]


class ModuleResolver:
    """
    Resolves the LOAD directives of one document.

    For each distinct module name:
      - check that both module files exist next to the document,
      - read EXTERN names from the metadata file and labels from the
        implementation file,
      - define '<module>.<name>' function symbols in the pass symbol table.

    Every module name seen is recorded in `modules` whatever the outcome, so
    the reference checker can tell "never loaded" from "loaded, name
    missing".
    """

    def __init__(
        self,
        lines: Sequence[Line],
        table: SymbolTable,
        paths: ModulePaths,
        context: ValidationContext,
        filename: Optional[str] = None,
    ):
        self.lines = lines
        self.table = table
        self.paths = paths
        self.context = context
        self.filename = filename
        self.modules: Dict[str, Module] = {}
        self.diagnostics: List[Diagnostic] = []

    def resolve(self) -> Dict[str, Module]:
        for line in self.lines:
            if is_directive(line.trimmed, LOAD):
                self._process_load(line)
        return self.modules

    # --- internal helpers ---

    def _process_load(self, line: Line) -> None:
        name = parse_load(line.trimmed)
        if name is None:
            self._error(line, "SYN-0010", 'Invalid LOAD syntax. Expected LOAD "modulename"')
            return

        if name in self.modules:
            log_debug(self.context, f"Module '{name}' already processed (line {line.index + 1})")
            return

        module = Module(
            name=name,
            metadata_path=self.paths.metadata_path(name),
            implementation_path=self.paths.implementation_path(name),
            line=line,
        )
        self.modules[name] = module
        log_debug(self.context, f"Resolved module '{name}' to {module.metadata_path} + {module.implementation_path}")

        try:
            has_metadata = _file_exists(module.metadata_path)
            has_implementation = _file_exists(module.implementation_path)
        except OSError as e:
            # e.g. ENAMETOOLONG, or EACCES on a directory that cannot be searched
            log_debug(self.context, f"Cannot locate module '{name}': {e}")
            self._error(line, "IO-0010", f"Error reading module: {e}")
            module.status = ModuleStatus.READ_ERROR
            return

        if not has_metadata:
            self._error(line, "RES-0010", f"Missing module metadata file: {name}{self.paths.metadata_suffix}")
        if not has_implementation:
            self._error(line, "RES-0011", f"Missing module implementation file: {name}{self.paths.implementation_suffix}")

        read_failed = False

        if has_metadata:
            metadata = self._read_lines(module.metadata_path, line)
            if metadata is None:
                read_failed = True
            else:
                for mline in metadata:
                    if is_directive(mline.trimmed, EXTERN):
                        self._add_export(module, parse_extern(mline.trimmed))

        if has_implementation:
            implementation = self._read_lines(module.implementation_path, line)
            if implementation is None:
                read_failed = True
            else:
                for iline in implementation:
                    label = parse_label(iline.trimmed)
                    if label is not None:
                        self._add_export(module, [label])

        if read_failed:
            module.status = ModuleStatus.READ_ERROR
        elif not has_metadata and not has_implementation:
            module.status = ModuleStatus.MISSING_BOTH
        elif not has_metadata:
            module.status = ModuleStatus.MISSING_METADATA
        elif not has_implementation:
            module.status = ModuleStatus.MISSING_IMPLEMENTATION

        for qualified in module.qualified_exports():
            self.table.define_function(qualified, module=name)

        log_debug(self.context, f"Module '{name}': {module.status.name}, {len(module.exports)} export(s)")

    def _add_export(self, module: Module, names: List[str]) -> None:
        for local in names:
            if local not in module.exports:
                module.exports.append(local)

    def _read_lines(self, path: Path, load_line: Line) -> Optional[List[Line]]:
        try:
            text = path.read_text(encoding=self.context.encoding)
        except (OSError, UnicodeDecodeError) as e:
            log_debug(self.context, f"Cannot read {path}: {e}")
            self._error(load_line, "IO-0010", f"Error reading module: {e}")
            return None
        return scan_lines(text)

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
