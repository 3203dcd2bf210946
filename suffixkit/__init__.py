"""Suffix trees, repeated-prefix search and terminal text effects."""

__version__ = "0.1.0"
__all__ = ["tree", "display", "animations", "prefix"]