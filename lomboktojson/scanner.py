"""Splits a Lombok ``toString()`` rendering into tokens."""

from __future__ import annotations

from typing import BinaryIO, List, Optional, TextIO, Union

from .tokens import Token, TokenType

Source = Union[str, bytes, bytearray, BinaryIO, TextIO]

_STRUCTURAL = {
    ord("("): TokenType.PAREN_OPEN,
    ord(")"): TokenType.PAREN_CLOSE,
    ord("="): TokenType.EQUALS,
    ord(","): TokenType.COMMA,
    ord("["): TokenType.ARRAY_OPEN,
    ord("]"): TokenType.ARRAY_CLOSE,
}

_LINE = 1


def _is_literal(byte: int) -> bool:
    char = chr(byte)
    return char.isalpha() or "0" <= char <= "9"


def _to_bytes(source: Source) -> bytes:
    if isinstance(source, str):
        return source.encode("utf-8")
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    data = source.read()
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


class Scanner:
    """Tokenizer over a complete input text."""

    def __init__(self, source: Source) -> None:
        self._data = _to_bytes(source)

    def scan(self) -> List[Token]:
        """Return the tokens of the input, ending with an EOF token.

        Raises ValueError for literals the tokenizer cannot delimit:
        one-character literals, and a leading literal that is neither a
        class name nor a key.
        """
        tokens: List[Token] = []
        start: Optional[int] = None
        end = -1
        for index, byte in enumerate(self._data):
            token_type = _STRUCTURAL.get(byte)
            if token_type is not None:
                if start is not None:
                    tokens.append(self._literal_token(start, end))
                    start = None
                tokens.append(Token(token_type, chr(byte), None, _LINE))
            elif _is_literal(byte):
                if start is None:
                    start = index
                else:
                    end = index
        tokens.append(Token(TokenType.EOF, "", None, _LINE))
        return tokens

    def _literal_token(self, start: int, end: int) -> Token:
        if end + 1 < start:
            raise ValueError(f"cannot delimit the literal at offset {start}")
        data = self._data
        lexeme = data[start : end + 1].decode("utf-8", errors="replace")
        following = data[end + 1]
        if following == ord("("):
            token_type = TokenType.CLASS_NAME
        elif following == ord("="):
            token_type = TokenType.KEY
        elif start == 0:
            raise ValueError("leading literal is neither a class name nor a key")
        elif data[start - 1] == ord("="):
            token_type = TokenType.VALUE
        else:
            token_type = TokenType.STRING_LITERAL
        return Token(token_type, lexeme, None, _LINE)


def scan(source: Source) -> List[Token]:
    """Tokenize ``source`` in one call."""
    return Scanner(source).scan()