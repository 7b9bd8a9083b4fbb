"""
Customer-centric queries: filtering by order activity, entry dates, contact
data checks and per-city aggregates.

All functions are pure. They validate their arguments up front, materialize
their result eagerly, and return the caller's own Customer instances.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List

from northwind_linq.domain.models import Customer
from northwind_linq.domain.results import CityStatistics, CustomerEntry
from northwind_linq.queries._guards import require

_DIGITS_ONLY = re.compile(r"\d+")


def linq1(customers: Iterable[Customer], limit: Decimal) -> List[Customer]:
    """Customers that placed more than `limit` orders."""
    require(customers=customers, limit=limit)
    return [c for c in customers if c.order_count > limit]


def linq3(customers: Iterable[Customer], limit: Decimal) -> List[Customer]:
    """Customers with at least one order whose order totals add up to more than `limit`."""
    require(customers=customers, limit=limit)
    return [c for c in customers if c.orders and c.turnover > limit]


def linq4(customers: Iterable[Customer]) -> List[CustomerEntry]:
    """
    Pair every customer that has orders with the date of its first order.

    Customers without orders are left out. Input order is preserved.
    """
    require(customers=customers)
    return [
        CustomerEntry(customer=c, date_of_entry=c.date_of_entry)
        for c in customers
        if c.orders
    ]


def linq5_by_composite(customers: Iterable[Customer]) -> List[CustomerEntry]:
    """
    Entries as in `linq4`, sorted by entry year, entry month, turnover
    (highest first) and company name.
    """
    require(customers=customers)
    return sorted(
        linq4(customers),
        key=lambda e: (
            e.date_of_entry.year,
            e.date_of_entry.month,
            -e.customer.turnover,
            e.customer.company_name,
        ),
    )


def linq5_by_date(customers: Iterable[Customer]) -> List[CustomerEntry]:
    """Entries as in `linq4`, sorted by entry date only. Ties keep input order."""
    require(customers=customers)
    return sorted(linq4(customers), key=lambda e: e.date_of_entry)


def _has_non_digit_postal_code(customer: Customer) -> bool:
    return customer.postal_code is not None and not _DIGITS_ONLY.fullmatch(customer.postal_code)


def _lacks_operator_code(customer: Customer) -> bool:
    phone = customer.phone
    return phone is None or ("(" not in phone and ")" not in phone)


def linq6_filter(customers: Iterable[Customer]) -> List[Customer]:
    """
    Customers with incomplete or irregular contact data.

    A customer is kept when any of the following holds:
    - the postal code contains a non-digit character
    - the region is undefined or empty
    - the phone number carries no operator code, i.e. has neither "(" nor ")"
    """
    require(customers=customers)
    return [
        c
        for c in customers
        if _has_non_digit_postal_code(c) or not c.region or _lacks_operator_code(c)
    ]


def linq6_skip_drop(customers: Iterable[Customer]) -> List[Customer]:
    """
    Skip the first two customers, then drop the element at index 3 of what remains.

    The index is taken on the already-skipped sequence, so the dropped customer
    is the sixth of the original input.
    """
    require(customers=customers)
    remaining = list(customers)[2:]
    return [c for i, c in enumerate(remaining) if i != 3]


def _round_half_away_from_zero(value: Decimal) -> int:
    # ROUND_HALF_UP in the decimal module rounds ties away from zero.
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _average(values: List[Decimal]) -> Decimal:
    if not values:
        return Decimal("0")
    return sum(values, Decimal("0")) / len(values)


def linq9(customers: Iterable[Customer]) -> List[CityStatistics]:
    """
    Per-city averages of customer income and order intensity.

    Customers are grouped by city in first-seen order. Average income is the
    mean of each customer's order total sum; average intensity is the mean of
    each customer's order count. Both are rounded half away from zero.
    """
    require(customers=customers)
    by_city: Dict[str, List[Customer]] = {}
    for customer in customers:
        by_city.setdefault(customer.city, []).append(customer)

    statistics: List[CityStatistics] = []
    for city, members in by_city.items():
        income = _average([c.turnover for c in members])
        intensity = _average([Decimal(c.order_count) for c in members])
        statistics.append(
            CityStatistics(
                city=city,
                average_income=_round_half_away_from_zero(income),
                average_intensity=_round_half_away_from_zero(intensity),
            )
        )
    return statistics


__all__ = [
    "linq1",
    "linq3",
    "linq4",
    "linq5_by_composite",
    "linq5_by_date",
    "linq6_filter",
    "linq6_skip_drop",
    "linq9",
]
