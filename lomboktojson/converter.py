"""Conversion of Lombok ``toString()`` output to JSON."""

from __future__ import annotations

from typing import Union

from .generator import generate
from .scanner import scan


class ConversionError(ValueError):
    """Raised when the input cannot be converted."""


def lombok_to_json(text: Union[str, bytes]) -> str:
    """Convert a Lombok ``toString()`` rendering into JSON text."""
    try:
        tokens = scan(text)
    except ValueError as exc:
        raise ConversionError("Unable to convert at the moment") from exc
    return generate(tokens)