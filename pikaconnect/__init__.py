"""A tile-matching connect puzzle game with seven levels of shifting boards."""

__version__ = "1.0.0"