"""Shell building blocks: string, byte, character, number, output and line-reading helpers."""

__version__ = "0.1.0"