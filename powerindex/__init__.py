"""Banzhaf power index of weighted voting games: analysis, text reports and bar layout."""

__version__ = "0.1.0"
__all__ = ["analysis", "display", "cli"]