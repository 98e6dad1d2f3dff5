"""A two-player ships game: board rules and a pygame front end."""

__all__ = ["board", "ui"]