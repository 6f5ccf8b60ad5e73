"""A small shell with built-in file commands, run interactively or from a batch file."""

__version__ = "0.1.0"