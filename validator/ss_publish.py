#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from typing import Dict, List, Protocol, Sequence

from ss_diagnostics import Diagnostic


class DiagnosticSink(Protocol):
    def set(self, identity: str, diagnostics: Sequence[Diagnostic]) -> None:
        ...


class DiagnosticStore:
    """
    In-memory diagnostic sink keyed by document identity.

    `set` replaces the whole list for a document; lists are never merged.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, List[Diagnostic]] = {}

    def set(self, identity: str, diagnostics: Sequence[Diagnostic]) -> None:
        self._entries[identity] = list(diagnostics)

    def get(self, identity: str) -> List[Diagnostic]:
        return list(self._entries.get(identity, []))

    def delete(self, identity: str) -> None:
        self._entries.pop(identity, None)

    def clear(self) -> None:
        self._entries.clear()

    def identities(self) -> List[str]:
        return sorted(self._entries.keys())

    def __contains__(self, identity: str) -> bool:
        return identity in self._entries
