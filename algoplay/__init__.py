"""Classic algorithms and data structures, puzzle solutions, a snow animation and a ships game."""

__version__ = "0.1.0"