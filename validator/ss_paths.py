#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ModulePaths:
    """
    Locates the two files of a StackScript module.

    A module named 'mathlib' loaded from a document in `root` lives in:

      root/mathlib.stackm   metadata (EXTERN declarations)
      root/mathlib.stack    implementation (labels)

    Only the document's own directory is searched.
    """
    root: Path
    metadata_suffix: str = ".stackm"
    implementation_suffix: str = ".stack"

    def module_base(self, module_name: str) -> Path:
        return self.root / module_name

    def metadata_path(self, module_name: str) -> Path:
        return self._with_suffix(module_name, self.metadata_suffix)

    def implementation_path(self, module_name: str) -> Path:
        return self._with_suffix(module_name, self.implementation_suffix)

    def _with_suffix(self, module_name: str, suffix: str) -> Path:
        # Not Path.with_suffix: module names may contain dots.
        base = self.module_base(module_name)
        return base.parent / f"{base.name}{suffix}"
