"""Run two commands joined by a pipe between an input file and an output file."""

__version__ = "1.0.0"
__all__ = ["chars", "errors", "fmt", "resolve", "runner", "strtools"]