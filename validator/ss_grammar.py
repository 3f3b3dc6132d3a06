"""
Directive grammar for StackScript lines.

Each recognizer works on the trimmed form of one line and implements the
grammar below by scanning characters; no pattern library is involved.

    directive   := KEYWORD (end | ws ...)          (LOAD also allows '"' right after the keyword)
    label       := text ':'                        (text non-empty after trimming)
    load        := 'LOAD' ws* '"' name '"' ws*
                 | 'LOAD' ws+ bare
    call        := 'CALL' ws+ target               (nothing may follow target)
    target      := word ('.' word)*                (word = (A-Z a-z 0-9 _)+)
    set         := 'SET' (ws+ token)*              (second token is the variable name)
    extern      := 'EXTERN' (ws+ name)*
    var_ref     := '%VAR<' ident '>'
    ident       := (letter | '_') (letter | digit | '_')*
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

import string
from dataclasses import dataclass
from typing import List, Optional, Tuple

LOAD = "LOAD"
CALL = "CALL"
SET = "SET"
EXTERN = "EXTERN"

VAR_REF_OPEN = "%VAR<"
VAR_REF_CLOSE = ">"

IDENT_START_CHARS = string.ascii_letters + "_"
IDENT_CHARS = IDENT_START_CHARS + string.digits
CALL_TARGET_CHARS = IDENT_CHARS + "."


@dataclass(frozen=True)
class VarRef:
    name: str
    start: int  # column of '%'
    end: int  # column just past '>'


def is_directive(trimmed: str, keyword: str) -> bool:
    """True if the trimmed line starts with `keyword` as a whole word."""
    if not trimmed.startswith(keyword):
        return False
    rest = trimmed[len(keyword):]
    if not rest or rest[0].isspace():
        return True
    return keyword == LOAD and rest[0] == '"'


def parse_label(trimmed: str) -> Optional[str]:
    if not trimmed.endswith(":"):
        return None
    name = trimmed[:-1].strip()
    return name or None


def parse_load(trimmed: str) -> Optional[str]:
    """
    Extract the module name of a LOAD line, or None if the syntax is invalid.

    The quoted form is primary; a single bare token is accepted for older
    scripts.
    """
    rest = trimmed[len(LOAD):].strip()
    if not rest:
        return None

    if rest[0] == '"':
        close = rest.find('"', 1)
        if close == -1:
            return None
        if rest[close + 1:].strip():
            return None
        name = rest[1:close].strip()
        return name or None

    for c in rest:
        if c.isspace() or c == '"':
            return None
    return rest


def parse_call(trimmed: str) -> Optional[str]:
    """Return the call target, or None if the line is not `CALL <target>`."""
    rest = trimmed[len(CALL):]
    if not rest or not rest[0].isspace():
        return None
    target = rest.lstrip()
    if not target:
        return None
    for c in target:
        if c not in CALL_TARGET_CHARS:
            return None
    # '.f', 'm.' and 'a..b' name no module or no function
    if "" in target.split("."):
        return None
    return target


def parse_set(trimmed: str) -> Optional[str]:
    """Return the variable name declared by a SET line, or None when missing."""
    tokens = trimmed.split()
    if len(tokens) < 2:
        return None
    return tokens[1]


def parse_extern(trimmed: str) -> List[str]:
    """Names declared by an EXTERN line (may be empty)."""
    return trimmed[len(EXTERN):].split()


def qualified_splits(name: str) -> List[Tuple[str, str]]:
    """
    Every (module, local) reading of a dotted name, longest module first.

    Module names may themselves contain dots, so 'a.b.f' reads as
    ('a.b', 'f') or ('a', 'b.f'). Unqualified names have no readings.
    """
    parts = name.split(".")
    return [
        (".".join(parts[:i]), ".".join(parts[i:]))
        for i in range(len(parts) - 1, 0, -1)
    ]


def qualify(module: str, local: str) -> str:
    return f"{module}.{local}"


def _scan_ident(text: str, pos: int) -> int:
    """Return the index just past an identifier starting at pos (pos if none)."""
    if pos >= len(text) or text[pos] not in IDENT_START_CHARS:
        return pos
    pos += 1
    while pos < len(text) and text[pos] in IDENT_CHARS:
        pos += 1
    return pos


def find_var_refs(raw: str) -> List[VarRef]:
    """
    Find every `%VAR<ident>` in a raw line, left to right, without overlaps.

    Columns refer to the raw (untrimmed) line.
    """
    refs: List[VarRef] = []
    pos = raw.find(VAR_REF_OPEN)
    while pos != -1:
        ident_start = pos + len(VAR_REF_OPEN)
        ident_end = _scan_ident(raw, ident_start)
        if ident_end > ident_start and raw.startswith(VAR_REF_CLOSE, ident_end):
            end = ident_end + len(VAR_REF_CLOSE)
            refs.append(VarRef(name=raw[ident_start:ident_end], start=pos, end=end))
            pos = raw.find(VAR_REF_OPEN, end)
        else:
            pos = raw.find(VAR_REF_OPEN, pos + 1)
    return refs
