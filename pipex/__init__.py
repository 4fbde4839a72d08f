"""String helpers, ASCII character tests and a line reader for file descriptors."""

__version__ = "0.1.0"
__all__ = ["charclass", "linereader", "textutil"]