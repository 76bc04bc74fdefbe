"""Command-line task tracker backed by a hand-parsed JSON-like file."""

__version__ = "0.1.0"
