"""Sliding tile puzzle whose tiles show pieces of a playing video."""

__version__ = "0.1.0"