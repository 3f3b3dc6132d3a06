#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Line:
    index: int  # 0-based
    raw: str  # without the line terminator
    trimmed: str

    @property
    def length(self) -> int:
        return len(self.raw)


def scan_lines(text: str) -> List[Line]:
    """
    Split document text into Lines.

    Lines are split on '\\n' and a trailing '\\r' is dropped, so CRLF text
    reports the same columns an editor shows. Empty text still yields one
    (empty) line.
    """
    lines: List[Line] = []
    for index, raw in enumerate(text.split("\n")):
        if raw.endswith("\r"):
            raw = raw[:-1]
        lines.append(Line(index=index, raw=raw, trimmed=raw.strip()))
    return lines
