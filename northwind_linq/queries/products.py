"""
Product queries: nested category/stock grouping and price banding.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, Iterable, List

from northwind_linq.domain.models import Product
from northwind_linq.domain.results import CategoryGroup, PriceBucket, UnitsInStockGroup
from northwind_linq.queries._guards import require


def _group_by_category_and_stock(
    products: Iterable[Product], sort_prices: bool
) -> List[CategoryGroup]:
    nested: Dict[str, Dict[int, List[Decimal]]] = {}
    for product in products:
        by_stock = nested.setdefault(product.category, {})
        by_stock.setdefault(product.units_in_stock, []).append(product.unit_price)

    return [
        CategoryGroup(
            category=category,
            units_in_stock_groups=tuple(
                UnitsInStockGroup(
                    units_in_stock=units,
                    prices=tuple(sorted(prices)) if sort_prices else tuple(prices),
                )
                for units, prices in by_stock.items()
            ),
        )
        for category, by_stock in nested.items()
    ]


def linq7(products: Iterable[Product]) -> List[CategoryGroup]:
    """
    Group products by category, then by units in stock, listing prices ascending.

    Categories and stock levels appear in first-seen order.
    """
    require(products=products)
    return _group_by_category_and_stock(products, sort_prices=True)


def linq7_unsorted(products: Iterable[Product]) -> List[CategoryGroup]:
    """Same grouping as `linq7`, with prices left in input order."""
    require(products=products)
    return _group_by_category_and_stock(products, sort_prices=False)


def linq8(
    products: Iterable[Product],
    cheap: Decimal,
    middle: Decimal,
    expensive: Decimal,
) -> List[PriceBucket]:
    """
    Split products into cheap, middle and expensive price bands.

    Bands are (-inf, cheap], (cheap, middle] and (middle, +inf), tagged with
    `cheap`, `middle` and `expensive` respectively. `expensive` only labels
    the last band; it does not bound it.
    """
    require(products=products, cheap=cheap, middle=middle, expensive=expensive)
    catalog = tuple(products)
    return [
        PriceBucket(
            threshold=cheap,
            products=tuple(p for p in catalog if p.unit_price <= cheap),
        ),
        PriceBucket(
            threshold=middle,
            products=tuple(p for p in catalog if cheap < p.unit_price <= middle),
        ),
        PriceBucket(
            threshold=expensive,
            products=tuple(p for p in catalog if p.unit_price > middle),
        ),
    ]


__all__ = ["linq7", "linq7_unsorted", "linq8"]
