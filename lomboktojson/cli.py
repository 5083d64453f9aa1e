"""Command line entry point: convert Lombok ``toString()`` output to JSON."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence, Union

from .converter import ConversionError, lombok_to_json

_PROMPT = "Enter input text (press Ctrl+D when done):"


def _read_prompted() -> str:
    print(_PROMPT)
    return "".join(
        line.removesuffix("\n").removesuffix("\r") + "\n" for line in sys.stdin
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the converter and return the process exit status."""
    parser = argparse.ArgumentParser(
        prog="l2j", description="Convert Lombok toString() output to JSON."
    )
    parser.add_argument("-i", dest="input_file", default="", help="Input file (optional)")
    parser.add_argument("text", nargs="*", help="Lombok text to convert")
    args = parser.parse_args(argv)

    text: Union[str, bytes]
    if not sys.stdin.isatty():
        try:
            text = sys.stdin.read()
        except OSError as exc:
            print(f"Error reading from stdin: {exc}", file=sys.stderr)
            return 1
    elif args.input_file:
        try:
            text = Path(args.input_file).read_bytes()
        except OSError as exc:
            print(f"Error reading input file: {exc}", file=sys.stderr)
            return 1
    elif args.text:
        text = args.text[0]
    else:
        try:
            text = _read_prompted()
        except OSError as exc:
            print(f"Error reading input: {exc}", file=sys.stderr)
            return 1

    try:
        output = lombok_to_json(text)
    except ConversionError as exc:
        print(f"Error reading input: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())