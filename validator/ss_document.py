#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from dataclasses import dataclass
from functools import cached_property
from pathlib import Path
from typing import List

from ss_lines import Line, scan_lines


@dataclass(frozen=True)
class TextDocument:
    """
    Read-only view of an open document, as a host editor would provide it.

    The identity is the absolute path; module files are looked up in the
    document's directory.
    """
    path: Path
    text: str
    language_id: str = "stackscript"

    @classmethod
    def from_file(cls, path: str | Path, language_id: str = "stackscript", encoding: str = "utf-8") -> "TextDocument":
        path = Path(path)
        return cls(path=path, text=path.read_text(encoding=encoding), language_id=language_id)

    @property
    def identity(self) -> str:
        return str(self.path.absolute())

    @property
    def directory(self) -> Path:
        return self.path.absolute().parent

    def get_text(self) -> str:
        return self.text

    @cached_property
    def lines(self) -> List[Line]:
        # scanned on first access, then shared by every reader
        return scan_lines(self.text)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def line_at(self, index: int) -> Line:
        return self.lines[index]
