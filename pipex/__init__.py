"""Run a chain of commands between an input file and an output file, with small C-style helpers."""

__version__ = "1.0.0"