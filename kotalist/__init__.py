"""Keep an ordered, in-memory registry of cities and their residents."""

__version__ = "1.0.0"
__all__ = ["model", "registry"]