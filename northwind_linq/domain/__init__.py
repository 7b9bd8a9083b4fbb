"""
Domain package for the Northwind LINQ exercises.

Exports the record types the queries consume and produce, plus the error
types. Keep this package focused on data definitions and validation concerns.
"""

from northwind_linq.domain.errors import FixtureError, InvalidArgumentError
from northwind_linq.domain.models import Customer, Order, Product, Supplier
from northwind_linq.domain.results import (
    CategoryGroup,
    CityStatistics,
    CustomerEntry,
    CustomerSuppliers,
    PriceBucket,
    UnitsInStockGroup,
)

__all__ = [
    # Records
    "Customer",
    "Order",
    "Product",
    "Supplier",
    # Results
    "CategoryGroup",
    "CityStatistics",
    "CustomerEntry",
    "CustomerSuppliers",
    "PriceBucket",
    "UnitsInStockGroup",
    # Errors
    "FixtureError",
    "InvalidArgumentError",
]
