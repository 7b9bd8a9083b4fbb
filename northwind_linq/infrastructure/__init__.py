"""
Infrastructure package for the Northwind LINQ exercises.

Centralizes fixture I/O. Keep this layer focused on reading and validating
static data, decoupled from the query and runner logic.
"""

from northwind_linq.infrastructure.fixtures import Dataset, load_dataset, parse_dataset

__all__ = [
    "Dataset",
    "load_dataset",
    "parse_dataset",
]
