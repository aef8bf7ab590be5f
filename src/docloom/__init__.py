"""Docloom - doc comment extraction, whitespace normalization and cref resolution."""

__version__ = "0.3.0"
