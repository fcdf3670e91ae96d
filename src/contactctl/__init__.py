"""contactctl — validated contact assembly and email verification."""

__version__ = "0.1.0"
