"""
Northwind LINQ exercises - declarative queries over in-memory record collections.

This package provides a small relational-style query library over Customer,
Supplier, Product and Order records, including:

- Filtering customers by order activity and contact data
- Joining customers to suppliers by location
- Grouping products by category and stock, banding them by price
- Per-city aggregates and distinct supplier countries

Alongside the queries it ships a fixture loader with a bundled sample dataset,
a profiling query runner, and a CLI that renders results as a table.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from northwind_linq.config import Settings, get_settings
from northwind_linq.domain import (
    CategoryGroup,
    CityStatistics,
    Customer,
    CustomerEntry,
    CustomerSuppliers,
    FixtureError,
    InvalidArgumentError,
    Order,
    PriceBucket,
    Product,
    Supplier,
    UnitsInStockGroup,
)
from northwind_linq.infrastructure import Dataset, load_dataset
from northwind_linq.orchestrator import available_queries, run_queries
from northwind_linq.queries import (
    linq1,
    linq2,
    linq2_using_group,
    linq3,
    linq4,
    linq5_by_composite,
    linq5_by_date,
    linq6_filter,
    linq6_skip_drop,
    linq7,
    linq7_unsorted,
    linq8,
    linq9,
    linq10,
    linq10_first_seen,
)
from northwind_linq.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Records
    "Customer",
    "Order",
    "Product",
    "Supplier",
    "CategoryGroup",
    "CityStatistics",
    "CustomerEntry",
    "CustomerSuppliers",
    "PriceBucket",
    "UnitsInStockGroup",
    # Errors
    "FixtureError",
    "InvalidArgumentError",
    # Fixtures
    "Dataset",
    "load_dataset",
    # Queries
    "linq1",
    "linq2",
    "linq2_using_group",
    "linq3",
    "linq4",
    "linq5_by_composite",
    "linq5_by_date",
    "linq6_filter",
    "linq6_skip_drop",
    "linq7",
    "linq7_unsorted",
    "linq8",
    "linq9",
    "linq10",
    "linq10_first_seen",
    # Runner
    "available_queries",
    "run_queries",
    # Logging
    "configure_logging",
    "get_logger",
]
