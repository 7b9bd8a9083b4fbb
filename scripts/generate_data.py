"""
Fixture generation script for the Northwind LINQ exercises.

Implements deterministic pseudo-random generation of customers (with orders),
suppliers and products, written in the JSON format `load_dataset` reads.
"""

from __future__ import annotations

import json
import random
import sys
import time
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Dict, List

import typer

app = typer.Typer(help="Generate a synthetic Northwind-style fixture file.")

LOCATIONS = [
    ("Berlin", "Germany", None),
    ("Mannheim", "Germany", None),
    ("London", "UK", None),
    ("Cowes", "UK", "Isle of Wight"),
    ("Paris", "France", None),
    ("Lyon", "France", None),
    ("Madrid", "Spain", None),
    ("Eugene", "USA", "OR"),
    ("Seattle", "USA", "WA"),
    ("Vancouver", "Canada", "BC"),
    ("Sao Paulo", "Brazil", "SP"),
]
CATEGORIES = ["Beverages", "Condiments", "Confections", "Dairy Products", "Seafood"]
FIRST_ORDER_DATE = datetime(1996, 7, 4)


def _postal_code(rng: random.Random) -> str | None:
    roll = rng.random()
    if roll < 0.1:
        return None
    if roll < 0.7:
        return f"{rng.randint(10000, 99999)}"
    return f"{rng.choice('ABCDEFGHKLMNPRSTW')}{rng.randint(1, 99)} {rng.randint(1, 9)}QP"


def _phone(rng: random.Random) -> str | None:
    if rng.random() < 0.05:
        return None
    number = f"555-{rng.randint(1000, 9999)}"
    if rng.random() < 0.6:
        return f"({rng.randint(1, 999)}) {number}"
    return f"{rng.randint(10, 999)}-{number}"


def _generate_customers(rng: random.Random, count: int) -> List[Dict[str, Any]]:
    customers: List[Dict[str, Any]] = []
    order_id = 10248
    for i in range(count):
        city, country, region = rng.choice(LOCATIONS)
        orders = []
        for _ in range(rng.randint(0, 8)):
            placed = FIRST_ORDER_DATE + timedelta(days=rng.randint(0, 700))
            orders.append(
                {
                    "id": order_id,
                    "order_date": placed.isoformat(),
                    "total": f"{rng.uniform(10, 4000):.2f}",
                }
            )
            order_id += 1
        customers.append(
            {
                "id": f"C{i + 1:04d}",
                "company_name": f"Customer {i + 1:04d}",
                "city": city,
                "country": country,
                "region": region,
                "postal_code": _postal_code(rng),
                "phone": _phone(rng),
                "orders": orders,
            }
        )
    return customers


def _generate_suppliers(rng: random.Random, count: int) -> List[Dict[str, Any]]:
    suppliers = []
    for i in range(count):
        city, country, _ = rng.choice(LOCATIONS)
        suppliers.append(
            {"id": i + 1, "company_name": f"Supplier {i + 1:03d}", "city": city, "country": country}
        )
    return suppliers


def _generate_products(rng: random.Random, count: int) -> List[Dict[str, Any]]:
    products = []
    for i in range(count):
        products.append(
            {
                "id": i + 1,
                "name": f"Product {i + 1:03d}",
                "category": rng.choice(CATEGORIES),
                "unit_price": f"{rng.uniform(2, 120):.2f}",
                # Few distinct stock levels so the nested grouping has something to group.
                "units_in_stock": rng.choice([0, 10, 17, 20, 39, 53]),
            }
        )
    return products


def generate_dataset(customers: int, suppliers: int, products: int, seed: int) -> Dict[str, Any]:
    """Build a fixture document; the same seed always yields the same document."""
    rng = random.Random(seed)
    return {
        "customers": _generate_customers(rng, customers),
        "suppliers": _generate_suppliers(rng, suppliers),
        "products": _generate_products(rng, products),
    }


@app.command()
def main(
    customers: int = typer.Option(50, "--customers", "-c", min=0, help="Number of customers."),
    suppliers: int = typer.Option(20, "--suppliers", "-s", min=0, help="Number of suppliers."),
    products: int = typer.Option(40, "--products", "-p", min=0, help="Number of products."),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path = typer.Option(
        Path("fixtures.json"),
        "--output",
        "-o",
        help="Output JSON path.",
    ),
) -> None:
    """
    Generate a synthetic fixture file.
    """
    start = time.perf_counter()
    output.parent.mkdir(parents=True, exist_ok=True)
    document = generate_dataset(customers, suppliers, products, seed)
    with output.open("w", encoding="utf-8") as f:
        json.dump(document, f, indent=2, ensure_ascii=False)
    typer.echo(
        f"Wrote {customers} customers, {suppliers} suppliers, {products} products "
        f"-> {output} in {time.perf_counter() - start:.2f}s (seed={seed})"
    )


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
