"""
Domain models for the Northwind LINQ exercises.

Defines the four record types the queries operate on. Records are frozen
pydantic models: they are validated once by the fixture loader and never
mutated afterwards, so queries can hand the same instances back to callers.
"""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional, Tuple

from pydantic import BaseModel, Field

_FROZEN = {
    "frozen": True,
    "populate_by_name": True,
    "arbitrary_types_allowed": False,
}


class Order(BaseModel):
    """
    A single order placed by a customer.
    """

    id: int = Field(..., description="Order identifier.")
    order_date: datetime = Field(..., description="When the order was placed.")
    total: Decimal = Field(..., ge=0, description="Order amount.")
    customer_id: str = Field(..., description="Identifier of the owning customer.")

    model_config = _FROZEN


class Customer(BaseModel):
    """
    A customer and the orders it owns.
    """

    id: str = Field(..., description="Customer identifier.")
    company_name: str = Field(..., description="Company name.")
    city: str = Field(..., description="City.")
    country: str = Field(..., description="Country.")
    region: Optional[str] = Field(None, description="Region, undefined for many countries.")
    postal_code: Optional[str] = Field(None, description="Postal code.")
    phone: Optional[str] = Field(None, description="Phone number, operator code in parentheses.")
    orders: Tuple[Order, ...] = Field((), description="Orders placed by this customer.")

    model_config = _FROZEN

    @property
    def order_count(self) -> int:
        return len(self.orders)

    @property
    def turnover(self) -> Decimal:
        """Sum of all order totals; zero for a customer without orders."""
        return sum((o.total for o in self.orders), Decimal("0"))

    @property
    def date_of_entry(self) -> Optional[datetime]:
        """Earliest order date, or None for a customer without orders."""
        if not self.orders:
            return None
        return min(o.order_date for o in self.orders)


class Supplier(BaseModel):
    """
    A product supplier.
    """

    id: int = Field(..., description="Supplier identifier.")
    company_name: str = Field(..., description="Company name.")
    city: str = Field(..., description="City.")
    country: str = Field(..., description="Country.")

    model_config = _FROZEN


class Product(BaseModel):
    """
    A catalog product.
    """

    id: int = Field(..., description="Product identifier.")
    name: str = Field("", description="Product name.")
    category: str = Field(..., description="Category label.")
    unit_price: Decimal = Field(..., ge=0, description="Price per unit.")
    units_in_stock: int = Field(..., ge=0, description="Units currently in stock.")

    model_config = _FROZEN


__all__ = ["Customer", "Order", "Product", "Supplier"]
