"""
Result records returned by the queries.

Each query with a heterogeneous result gets its own small named record rather
than an anonymous tuple. The records only reference the input domain objects;
they never copy them.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Tuple

from northwind_linq.domain.models import Customer, Product, Supplier


@dataclass(frozen=True)
class CustomerSuppliers:
    """A customer paired with the suppliers located in its city and country."""

    customer: Customer
    suppliers: Tuple[Supplier, ...]


@dataclass(frozen=True)
class CustomerEntry:
    """A customer paired with the date of its first order."""

    customer: Customer
    date_of_entry: datetime


@dataclass(frozen=True)
class UnitsInStockGroup:
    units_in_stock: int
    prices: Tuple[Decimal, ...]


@dataclass(frozen=True)
class CategoryGroup:
    """
    Products of one category, sub-grouped by units in stock.

    Example::

        category - Beverages
            units_in_stock - 39
                price - 18.00
                price - 19.00
            units_in_stock - 17
                price - 18.00
    """

    category: str
    units_in_stock_groups: Tuple[UnitsInStockGroup, ...]


@dataclass(frozen=True)
class PriceBucket:
    """Products falling into one price band, tagged with the band's threshold."""

    threshold: Decimal
    products: Tuple[Product, ...]


@dataclass(frozen=True)
class CityStatistics:
    city: str
    average_income: int
    average_intensity: int


__all__ = [
    "CategoryGroup",
    "CityStatistics",
    "CustomerEntry",
    "CustomerSuppliers",
    "PriceBucket",
    "UnitsInStockGroup",
]
