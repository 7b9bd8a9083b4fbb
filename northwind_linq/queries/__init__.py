"""
Query package for the Northwind LINQ exercises.

Re-exports every query so downstream code can import from
`northwind_linq.queries` directly.
"""

from northwind_linq.queries.customers import (
    linq1,
    linq3,
    linq4,
    linq5_by_composite,
    linq5_by_date,
    linq6_filter,
    linq6_skip_drop,
    linq9,
)
from northwind_linq.queries.products import linq7, linq7_unsorted, linq8
from northwind_linq.queries.suppliers import linq2, linq2_using_group, linq10, linq10_first_seen

__all__ = [
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
]
