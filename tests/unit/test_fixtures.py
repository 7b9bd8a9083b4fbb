from __future__ import annotations

import json
from pathlib import Path

import pytest

from northwind_linq.domain.errors import FixtureError
from northwind_linq.infrastructure.fixtures import load_dataset, parse_dataset

EXPECTED_CUSTOMERS = 12
EXPECTED_SUPPLIERS = 10
EXPECTED_PRODUCTS = 17


def _document(**overrides):
    document = {
        "customers": [
            {
                "id": "ALFKI",
                "company_name": "Alfreds Futterkiste",
                "city": "Berlin",
                "country": "Germany",
                "orders": [{"id": 1, "order_date": "1997-08-25T00:00:00", "total": "814.50"}],
            }
        ],
        "suppliers": [{"id": 1, "company_name": "Exotic Liquids", "city": "London", "country": "UK"}],
        "products": [
            {"id": 1, "category": "Beverages", "unit_price": "18.00", "units_in_stock": 39}
        ],
    }
    document.update(overrides)
    return document


def test_bundled_dataset_counts(bundled_dataset):
    assert len(bundled_dataset.customers) == EXPECTED_CUSTOMERS
    assert len(bundled_dataset.suppliers) == EXPECTED_SUPPLIERS
    assert len(bundled_dataset.products) == EXPECTED_PRODUCTS


def test_bundled_orders_carry_their_customer_id(bundled_dataset):
    for customer in bundled_dataset.customers:
        assert all(o.customer_id == customer.id for o in customer.orders)


def test_load_dataset_from_path(tmp_path: Path):
    path = tmp_path / "fixtures.json"
    path.write_text(json.dumps(_document()), encoding="utf-8")

    dataset = load_dataset(path)

    (customer,) = dataset.customers
    assert customer.orders[0].customer_id == "ALFKI"
    assert str(customer.orders[0].total) == "814.50"
    assert dataset.products[0].name == ""


def test_load_dataset_uses_configured_path(tmp_path: Path, monkeypatch):
    path = tmp_path / "configured.json"
    path.write_text(json.dumps(_document(suppliers=[])), encoding="utf-8")
    monkeypatch.setenv("FIXTURES_PATH", str(path))

    assert load_dataset().suppliers == ()


def test_missing_file_raises_fixture_error(tmp_path: Path):
    with pytest.raises(FixtureError, match="Cannot read"):
        load_dataset(tmp_path / "absent.json")


def test_invalid_json_raises_fixture_error(tmp_path: Path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(FixtureError, match="not valid JSON"):
        load_dataset(path)


def test_negative_price_fails_validation():
    document = _document(
        products=[{"id": 1, "category": "X", "unit_price": "-1", "units_in_stock": 1}]
    )
    with pytest.raises(FixtureError, match="failed validation"):
        parse_dataset(document)


def test_non_object_root_is_rejected():
    with pytest.raises(FixtureError, match="must be an object"):
        parse_dataset([])


def test_missing_sections_default_to_empty():
    dataset = parse_dataset({"customers": []})
    assert dataset.suppliers == ()
    assert dataset.products == ()


@pytest.mark.parametrize(
    "customers",
    [
        [1],
        "abc",
        [{"id": "A", "company_name": "A", "city": "X", "country": "Y", "orders": [5]}],
        [{"id": "A", "company_name": "A", "city": "X", "country": "Y", "orders": "none"}],
    ],
)
def test_malformed_customer_entries_fail_validation(customers):
    with pytest.raises(FixtureError, match="failed validation"):
        parse_dataset(_document(customers=customers))


def test_non_utf8_file_raises_fixture_error(tmp_path: Path):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"customers": "\xff"}')
    with pytest.raises(FixtureError, match="Cannot read"):
        load_dataset(path)
