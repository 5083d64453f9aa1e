"""Convert Lombok toString() output into JSON: tokens, scanner, generator, converter and the l2j command."""

__version__ = "1.0.2"
__all__ = ["tokens", "scanner", "generator", "converter", "cli"]