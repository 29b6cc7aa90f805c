"""Building blocks of an X11-compatible display server."""

__version__ = "0.1.0"

__all__ = ["core", "graphics", "input", "plugins"]