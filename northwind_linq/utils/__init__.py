"""
Utilities package for the Northwind LINQ exercises.

Exports shared helpers for logging and profiling.
Keep this package lightweight and free of domain-specific logic.
"""

from northwind_linq.utils.logging import configure_logging, get_logger
from northwind_linq.utils.profiler import ProfileStats, profile_block

__all__ = [
    "configure_logging",
    "get_logger",
    "ProfileStats",
    "profile_block",
]
