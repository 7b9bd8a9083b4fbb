"""
Fixture loader for the Northwind LINQ exercises.

Reads the static JSON dataset the queries run against and validates it into
frozen domain records. The dataset bundled with the package is used unless a
path is given explicitly or configured via FIXTURES_PATH.

Expected shape:

    {
      "customers": [{"id": "ALFKI", ..., "orders": [{"id": 10643, ...}]}],
      "suppliers": [{"id": 1, ...}],
      "products":  [{"id": 1, ...}]
    }

Orders do not repeat their customer's identifier; it is filled in from the
enclosing customer.
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError

from northwind_linq.config import get_settings
from northwind_linq.domain.errors import FixtureError
from northwind_linq.domain.models import Customer, Product, Supplier
from northwind_linq.utils.logging import get_logger

log = get_logger(__name__)

BUNDLED_FIXTURE = "northwind.json"


class Dataset(BaseModel):
    """
    All record collections loaded from one fixture file.
    """

    customers: Tuple[Customer, ...] = Field((), description="Customers with their orders.")
    suppliers: Tuple[Supplier, ...] = Field((), description="Suppliers.")
    products: Tuple[Product, ...] = Field((), description="Products.")

    model_config = {"frozen": True}


def _attach_customer_ids(raw: Dict[str, Any]) -> Dict[str, Any]:
    # Entries of the wrong shape pass through untouched so validation reports them.
    customers = raw.get("customers")
    if not isinstance(customers, list):
        return raw
    attached = []
    for customer in customers:
        orders = customer.get("orders") if isinstance(customer, dict) else None
        if isinstance(orders, list):
            orders = [
                {**order, "customer_id": customer.get("id")} if isinstance(order, dict) else order
                for order in orders
            ]
            customer = {**customer, "orders": orders}
        attached.append(customer)
    return {**raw, "customers": attached}


def _read_text(path: Optional[Path]) -> Tuple[str, str]:
    """Return (source description, file contents)."""
    if path is None:
        bundled = resources.files("northwind_linq.data").joinpath(BUNDLED_FIXTURE)
        return f"bundled:{BUNDLED_FIXTURE}", bundled.read_text(encoding="utf-8")
    try:
        return str(path), path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FixtureError(f"Cannot read fixture file '{path}': {exc}") from exc


def parse_dataset(raw: Dict[str, Any]) -> Dataset:
    """
    Validate an already-decoded fixture document into a Dataset.
    """
    if not isinstance(raw, dict):
        raise FixtureError(f"Fixture root must be an object, got {type(raw).__name__}.")
    try:
        return Dataset.model_validate(_attach_customer_ids(raw))
    except ValidationError as exc:
        raise FixtureError(f"Fixture data failed validation: {exc}") from exc


def load_dataset(path: Optional[Path | str] = None) -> Dataset:
    """
    Load and validate a fixture dataset.

    Parameters
    ----------
    path : Path | str | None
        Fixture file to read. Defaults to settings.fixtures_path, then to the
        dataset bundled with the package.

    Returns
    -------
    Dataset
        Frozen collections of customers, suppliers and products.
    """
    if path is None:
        path = get_settings().fixtures_path
    source, text = _read_text(Path(path) if path is not None else None)

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise FixtureError(f"Fixture file '{source}' is not valid JSON: {exc}") from exc

    dataset = parse_dataset(raw)
    log.info(
        f"Loaded fixtures from {source}",
        extra={
            "customers": len(dataset.customers),
            "suppliers": len(dataset.suppliers),
            "products": len(dataset.products),
        },
    )
    return dataset


__all__ = ["BUNDLED_FIXTURE", "Dataset", "load_dataset", "parse_dataset"]
