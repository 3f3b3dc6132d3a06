#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from dataclasses import dataclass, field
from typing import Dict, List, Optional


# Opcode token -> human readable category.
OPCODE_CATEGORIES = {
    "ADD": "Arithmetic",
    "SUB": "Arithmetic",
    "MUL": "Arithmetic",
    "DIV": "Arithmetic",
    "EXP": "Arithmetic",
    "PUSH": "Stack",
    "POP": "Stack",
    "OUT": "Output",
    "HALT": "Control flow",
    "CALL": "Functions",
    "READ": "Input",
    "SPREAD": "Input",
    "JMP": "Control flow",
    "JMPGT": "Control flow",
    "JMPLT": "Control flow",
    "JMPEQ": "Control flow",
    "BOTOP": "Stack",
    "CLEAR": "Stack",
    "COPY": "Stack",
    "DUP": "Stack",
    "SPUSH": "Stack",
    "PUD": "Stack",
    "SWAP": "Stack",
    "SPOUTV": "Output",
    "S-SWAP": "Stack",
    "READFILE": "File system",
    "WRITEFILE": "File system",
    "APPENDFILE": "File system",
    "DELETEFILE": "File system",
    "CREATEFILE": "File system",
    "CREATEFOLDER": "File system",
    "DELETEFOLDER": "File system",
    "SWAPMEM": "Memory",
    "CHOICE-1": "Input",
    "CHOICE-2": "Input",
    "RANDINT": "Random",
    "RANDOM": "Random",
    "SYSTEM": "System",
    "OUTV": "Output",
    "TOP": "Stack",
    "LOAD": "Modules",
    "ENDFUNC": "Functions",
    "BREAKPOINT": "Debugging",
}


@dataclass(frozen=True)
class CompletionItem:
    label: str
    kind: str = "keyword"
    detail: str = ""


@dataclass
class KeywordTable:
    """
    Static opcode table backing keyword completion.

    The table is plain data passed in through ValidationContext; it carries
    no document context and every candidate is offered everywhere.
    """
    categories: Dict[str, str] = field(default_factory=dict)

    @staticmethod
    def default() -> 'KeywordTable':
        return KeywordTable(categories=dict(OPCODE_CATEGORIES))

    def __contains__(self, token: str) -> bool:
        return token in self.categories

    def __len__(self) -> int:
        return len(self.categories)

    def category(self, token: str) -> Optional[str]:
        return self.categories.get(token)

    def completion_candidates(self) -> List[CompletionItem]:
        """Return one keyword completion item per opcode, in table order."""
        return [
            CompletionItem(label=token, detail=f"StackScript Opcode: {category}")
            for token, category in self.categories.items()
        ]
