"""Cultor registry: validated registration and search of cultural practitioners."""

__version__ = "0.1.0"
