"""
Pytest configuration for the Northwind LINQ exercises.

Provides fixtures for:
- Small hand-built customer, supplier and product collections
- The dataset bundled with the package
- Settings with test-specific overrides
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Generator, List, Optional, Sequence, Tuple

import pytest

from northwind_linq.config import Settings, get_settings
from northwind_linq.domain.models import Customer, Order, Product, Supplier
from northwind_linq.infrastructure.fixtures import Dataset, load_dataset


def make_customer(
    customer_id: str,
    company_name: Optional[str] = None,
    city: str = "Berlin",
    country: str = "Germany",
    orders: Sequence[Tuple[str, str]] = (),
    region: Optional[str] = None,
    postal_code: Optional[str] = "12209",
    phone: Optional[str] = "(030) 0074321",
) -> Customer:
    """
    Build a customer; `orders` holds (ISO date, total) pairs.
    """
    return Customer(
        id=customer_id,
        company_name=company_name or f"{customer_id} Company",
        city=city,
        country=country,
        region=region,
        postal_code=postal_code,
        phone=phone,
        orders=tuple(
            Order(
                id=index,
                order_date=datetime.fromisoformat(date),
                total=Decimal(total),
                customer_id=customer_id,
            )
            for index, (date, total) in enumerate(orders, start=1)
        ),
    )


def make_product(
    product_id: int, category: str, unit_price: str, units_in_stock: int
) -> Product:
    return Product(
        id=product_id,
        name=f"Product {product_id}",
        category=category,
        unit_price=Decimal(unit_price),
        units_in_stock=units_in_stock,
    )


@pytest.fixture
def customers() -> List[Customer]:
    """
    Five customers covering: no orders, one order, many orders, shared city.
    """
    return [
        make_customer(
            "ALFKI",
            "Alfreds Futterkiste",
            orders=[("1997-08-25", "100.00"), ("1997-10-03", "200.00"), ("1998-01-15", "50.00")],
        ),
        make_customer("BLAUS", "Blauer See", city="Mannheim", orders=[]),
        make_customer(
            "AROUT",
            "Around the Horn",
            city="London",
            country="UK",
            orders=[("1996-11-15", "480.00")],
        ),
        make_customer(
            "SEVES",
            "Seven Seas Imports",
            city="London",
            country="UK",
            orders=[("1996-11-21", "300.00"), ("1996-12-09", "900.00")],
        ),
        make_customer(
            "GREAL",
            "Great Lakes",
            city="Eugene",
            country="USA",
            region="OR",
            orders=[("1997-05-06", "392.20"), ("1997-07-04", "72.00")],
        ),
    ]


@pytest.fixture
def suppliers() -> List[Supplier]:
    return [
        Supplier(id=1, company_name="Exotic Liquids", city="London", country="UK"),
        Supplier(id=2, company_name="New Orleans Cajun", city="New Orleans", country="USA"),
        Supplier(id=3, company_name="Heli Suesswaren", city="Berlin", country="Germany"),
        Supplier(id=4, company_name="London Trading", city="London", country="UK"),
        Supplier(id=5, company_name="Berlin Ontario", city="Berlin", country="Canada"),
    ]


@pytest.fixture
def products() -> List[Product]:
    return [
        make_product(1, "Beverages", "19.00", 39),
        make_product(2, "Beverages", "18.00", 39),
        make_product(3, "Condiments", "10.00", 13),
        make_product(4, "Beverages", "4.50", 17),
        make_product(5, "Condiments", "22.00", 13),
        make_product(6, "Seafood", "31.00", 31),
    ]


@pytest.fixture(scope="session")
def bundled_dataset() -> Dataset:
    """The sample dataset shipped with the package."""
    return load_dataset()


@pytest.fixture
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides.
    """
    return Settings(
        log_level="DEBUG",
        order_count_limit=Decimal("5"),
        turnover_limit=Decimal("1000"),
        price_cheap=Decimal("10"),
        price_middle=Decimal("20"),
        price_expensive=Decimal("30"),
        preview_rows=2,
    )


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Generator[None, None, None]:
    """Ensure env overrides made by a test never leak through the settings cache."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def customer_factory():
    """Expose make_customer to tests that need bespoke customers."""
    return make_customer


@pytest.fixture
def product_factory():
    return make_product
