from __future__ import annotations

from decimal import Decimal

import pytest

from northwind_linq.domain.errors import InvalidArgumentError
from northwind_linq.queries.products import linq7, linq7_unsorted, linq8

CHEAP = Decimal("10")
MIDDLE = Decimal("20")
EXPENSIVE = Decimal("30")


def _as_tree(groups):
    return [
        (g.category, [(s.units_in_stock, [str(p) for p in s.prices]) for s in g.units_in_stock_groups])
        for g in groups
    ]


class TestLinq7:
    def test_groups_by_category_then_stock_with_sorted_prices(self, products):
        assert _as_tree(linq7(products)) == [
            ("Beverages", [(39, ["18.00", "19.00"]), (17, ["4.50"])]),
            ("Condiments", [(13, ["10.00", "22.00"])]),
            ("Seafood", [(31, ["31.00"])]),
        ]

    def test_unsorted_variant_keeps_insertion_order(self, products):
        tree = _as_tree(linq7_unsorted(products))
        assert tree[0] == ("Beverages", [(39, ["19.00", "18.00"]), (17, ["4.50"])])

    def test_duplicate_prices_are_kept(self, product_factory):
        items = [product_factory(1, "Dairy", "5.00", 3), product_factory(2, "Dairy", "5.00", 3)]
        assert _as_tree(linq7(items)) == [("Dairy", [(3, ["5.00", "5.00"])])]

    def test_empty_input(self):
        assert linq7([]) == []

    def test_none_raises(self):
        with pytest.raises(InvalidArgumentError):
            linq7(None)
        with pytest.raises(InvalidArgumentError):
            linq7_unsorted(None)


class TestLinq8:
    def test_buckets_are_tagged_with_thresholds(self, products):
        result = linq8(products, CHEAP, MIDDLE, EXPENSIVE)
        assert [b.threshold for b in result] == [CHEAP, MIDDLE, EXPENSIVE]

    def test_bucket_boundaries(self, products):
        cheap, middle, expensive = linq8(products, CHEAP, MIDDLE, EXPENSIVE)
        assert [p.id for p in cheap.products] == [3, 4]
        assert [p.id for p in middle.products] == [1, 2]
        assert [p.id for p in expensive.products] == [5, 6]

    def test_price_equal_to_threshold_falls_in_lower_bucket(self, product_factory):
        at_middle = product_factory(1, "X", "20", 1)
        _, middle, expensive = linq8([at_middle], CHEAP, MIDDLE, EXPENSIVE)
        assert middle.products == (at_middle,)
        assert expensive.products == ()

    def test_expensive_threshold_does_not_cap_last_bucket(self, product_factory):
        pricey = product_factory(1, "X", "500", 1)
        assert linq8([pricey], CHEAP, MIDDLE, EXPENSIVE)[2].products == (pricey,)

    def test_every_product_lands_in_exactly_one_bucket(self, products):
        buckets = linq8(products, CHEAP, MIDDLE, EXPENSIVE)
        assert sorted(p.id for b in buckets for p in b.products) == [p.id for p in products]

    @pytest.mark.parametrize("missing", ["products", "cheap", "middle", "expensive"])
    def test_none_argument_raises(self, products, missing):
        arguments = {
            "products": products,
            "cheap": CHEAP,
            "middle": MIDDLE,
            "expensive": EXPENSIVE,
        }
        arguments[missing] = None
        with pytest.raises(InvalidArgumentError) as excinfo:
            linq8(**arguments)
        assert excinfo.value.parameter == missing
