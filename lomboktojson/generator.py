"""Renders scanner tokens as JSON text."""

from __future__ import annotations

import re
from typing import Iterable, Optional

from .tokens import Token, TokenType

_NUMBER = re.compile(r"-?\d+(?:\.\d+)?", re.ASCII)

_FIXED = {
    TokenType.EQUALS: ":",
    TokenType.COMMA: ",",
    TokenType.PAREN_CLOSE: "}",
    TokenType.ARRAY_OPEN: "[",
    TokenType.ARRAY_CLOSE: "]",
}


def _json_scalar(text: str) -> str:
    if text in ("null", "true", "false") or _NUMBER.fullmatch(text):
        return text
    return f'"{text}"'


def _fragment(token: Token, previous: Optional[Token]) -> str:
    if token.type in (TokenType.KEY, TokenType.VALUE):
        return _json_scalar(token.lexeme)
    if token.type is TokenType.PAREN_OPEN:
        if previous is not None and previous.type is TokenType.CLASS_NAME:
            return "{"
        return ""
    return _FIXED.get(token.type, "")


def generate(tokens: Iterable[Token]) -> str:
    """Return the JSON text for ``tokens``, or ``{}`` if nothing renders."""
    parts = []
    previous: Optional[Token] = None
    for token in tokens:
        parts.append(_fragment(token, previous))
        previous = token
    return "".join(parts) or "{}"