"""Utility helpers."""

from .time import clock_for

__all__ = ["clock_for"]
