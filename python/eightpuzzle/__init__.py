"""Greedy best-first 8-puzzle solver."""

__version__ = "0.1.0"
