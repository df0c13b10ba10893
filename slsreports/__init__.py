"""Columns, statistics, instance figures, timing and report rows for SLS SAT solver runs."""

__version__ = "0.1.0"

__all__ = [
    "types",
    "literals",
    "timing",
    "columns",
    "stats",
    "instance",
    "runreports",
]