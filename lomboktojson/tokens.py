"""Token types and tokens produced by the scanner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional


class TokenType(str, Enum):
    """Kinds of token found in a Lombok ``toString()`` rendering."""

    PAREN_OPEN = "PAREN_OPEN"
    PAREN_CLOSE = "PAREN_CLOSE"
    EQUALS = "EQUALS"
    COMMA = "COMMA"
    EOF = "EOF"
    STRING_LITERAL = "STRING_LITERAL"
    NUM_LITERAL = "NUM_LITERAL"
    CLASS_NAME = "CLASS_NAME"
    KEY = "KEY"
    VALUE = "VALUE"
    ARRAY_OPEN = "ARRAY_OPEN"
    ARRAY_CLOSE = "ARRAY_CLOSE"


@dataclass
class Token:
    """A single lexical token."""

    type: TokenType
    lexeme: str = ""
    literal: Optional[Mapping[str, str]] = None
    line: int = 1

    def __str__(self) -> str:
        entries = " ".join(
            f"{key}:{value}" for key, value in sorted((self.literal or {}).items())
        )
        return f"{self.type.value} {self.lexeme} map[{entries}]"