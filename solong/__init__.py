"""A tile-based puzzle game with map validation, XPM loading and a pygame front end."""

__version__ = "0.1.0"