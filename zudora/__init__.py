"""Zudora: TNEA college suggestion assistant."""

__version__ = "0.1.0"
