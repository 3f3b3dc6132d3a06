#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, Optional


class SymbolKind(Enum):
    FUNCTION = auto()
    VARIABLE = auto()


@dataclass(frozen=True)
class Symbol:
    """
    A symbol visible in the document being validated.

    Functions imported from a module are qualified ('mathlib.add') and keep
    the module name in `module`.
    """
    name: str
    kind: SymbolKind
    module: Optional[str] = None


@dataclass
class SymbolTable:
    """
    Per-pass symbol table.

    functions : labels of the document + qualified names from loaded modules
    variables : names declared by SET anywhere in the document

    Names are unique within each kind; the first definition is kept and
    later ones are ignored without a diagnostic.
    """
    functions: Dict[str, Symbol] = field(default_factory=dict)
    variables: Dict[str, Symbol] = field(default_factory=dict)

    def _namespace(self, kind: SymbolKind) -> Dict[str, Symbol]:
        if kind is SymbolKind.FUNCTION:
            return self.functions
        return self.variables

    def define(self, sym: Symbol) -> bool:
        """Add sym unless its name is taken; return True if it was added."""
        namespace = self._namespace(sym.kind)
        if sym.name in namespace:
            return False
        namespace[sym.name] = sym
        return True

    def define_function(self, name: str, module: Optional[str] = None) -> bool:
        return self.define(Symbol(name, SymbolKind.FUNCTION, module))

    def define_variable(self, name: str) -> bool:
        return self.define(Symbol(name, SymbolKind.VARIABLE))

    def has_function(self, name: str) -> bool:
        return name in self.functions

    def has_variable(self, name: str) -> bool:
        return name in self.variables

    def __len__(self) -> int:
        return len(self.functions) + len(self.variables)
