"""Run a chain of commands between an input file and an output file, with helpers for splitting, text and line reading."""

__version__ = "0.1.0"