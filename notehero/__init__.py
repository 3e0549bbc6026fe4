"""A note-matching rhythm game engine with colour, format, geometry and widget descriptions."""

__version__ = "0.1.0"

__all__ = ["colors", "formats", "geometry", "widgets", "hero"]