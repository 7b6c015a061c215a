"""Typed header values, comment annotations, header checks and CSV export for Lichess PGN dumps."""

__version__ = "0.1.0"

__all__ = [
    "attributes",
    "checker",
    "collector",
    "comment_iterator",
    "constants",
    "data",
    "serializers",
    "stats",
]