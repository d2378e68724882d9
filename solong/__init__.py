"""A tile game: collect every item on a walled map and reach the exit."""

__version__ = "0.1.0"
__all__ = ["colors", "xpm", "mapfile", "validate", "game", "display"]