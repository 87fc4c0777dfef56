"""Blade indexing helpers, file helpers, metric analysis and algebra descriptions."""

__version__ = "0.1.0"
__all__ = ["utility", "files", "metric", "metadata"]