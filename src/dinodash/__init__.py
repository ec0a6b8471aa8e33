"""dinodash: a side-scrolling jump-over-obstacles game."""

__version__ = "0.1.0"
