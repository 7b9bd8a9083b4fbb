"""
Supplier queries: matching suppliers to customers by location, and listing
the countries suppliers operate in.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from northwind_linq.domain.models import Customer, Supplier
from northwind_linq.domain.results import CustomerSuppliers
from northwind_linq.queries._guards import require


def linq2(
    customers: Iterable[Customer],
    suppliers: Iterable[Supplier],
) -> List[CustomerSuppliers]:
    """
    Pair every customer with the suppliers sharing its city and country.

    Every customer appears in the result, with an empty tuple when no supplier
    matches. Suppliers keep their input order.
    """
    require(customers=customers, suppliers=suppliers)
    candidates = tuple(suppliers)
    return [
        CustomerSuppliers(
            customer=c,
            suppliers=tuple(s for s in candidates if s.city == c.city and s.country == c.country),
        )
        for c in customers
    ]


def linq2_using_group(
    customers: Iterable[Customer],
    suppliers: Iterable[Supplier],
) -> List[CustomerSuppliers]:
    """
    Same result as `linq2`, computed by grouping suppliers on (city, country) first.
    """
    require(customers=customers, suppliers=suppliers)
    by_location: Dict[Tuple[str, str], List[Supplier]] = {}
    for supplier in suppliers:
        by_location.setdefault((supplier.city, supplier.country), []).append(supplier)

    return [
        CustomerSuppliers(
            customer=c,
            suppliers=tuple(by_location.get((c.city, c.country), ())),
        )
        for c in customers
    ]


def _distinct_countries(suppliers: Iterable[Supplier]) -> List[str]:
    # dict keeps first-seen order
    return list(dict.fromkeys(s.country for s in suppliers))


def linq10(suppliers: Iterable[Supplier]) -> str:
    """
    Distinct supplier countries ordered by name length, then alphabetically,
    concatenated without a separator, e.g. USA, UK, France -> "UKUSAFrance".
    """
    require(suppliers=suppliers)
    countries = sorted(_distinct_countries(suppliers), key=lambda country: (len(country), country))
    return "".join(countries)


def linq10_first_seen(suppliers: Iterable[Supplier]) -> str:
    """Distinct supplier countries in first-seen order, concatenated without a separator."""
    require(suppliers=suppliers)
    return "".join(_distinct_countries(suppliers))


__all__ = ["linq10", "linq10_first_seen", "linq2", "linq2_using_group"]
