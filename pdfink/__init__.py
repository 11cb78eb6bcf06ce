"""Building blocks for writing PDF documents: units, drawing operators, content streams and PDF objects."""

__version__ = "0.1.0"

__all__ = ["binwrite", "content", "drawing", "fonts", "metrics", "objects", "options", "units"]