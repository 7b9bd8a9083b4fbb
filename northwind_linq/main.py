from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import List, Optional

import typer

from northwind_linq.config import get_settings
from northwind_linq.domain.errors import FixtureError
from northwind_linq.infrastructure.fixtures import load_dataset
from northwind_linq.orchestrator import available_queries, expand_query_names, run_queries
from northwind_linq.reporter import print_results
from northwind_linq.utils.logging import configure_logging

app = typer.Typer(help="Northwind LINQ exercises CLI.")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    fixtures = settings.fixtures_path or "bundled"
    typer.echo(
        f"env={settings.app_env} fixtures={fixtures} | "
        f"order_count_limit={settings.order_count_limit} turnover_limit={settings.turnover_limit} "
        f"prices={settings.price_cheap}/{settings.price_middle}/{settings.price_expensive}"
    )


@app.command("list")
def list_queries() -> None:
    """
    List the available query names.
    """
    typer.echo("\n".join(available_queries()))


@app.command()
def run(
    query: List[str] = typer.Option(
        ["all"],
        "--query",
        "-q",
        help="Query to run, repeatable (e.g., linq1, linq10, all).",
    ),
    fixtures: Optional[Path] = typer.Option(
        None,
        "--fixtures",
        "-f",
        help="Fixture JSON file (default from settings, then the bundled dataset).",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print results as JSON instead of a table.",
    ),
) -> None:
    """
    Run one or all queries against the fixture dataset.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    try:
        names = expand_query_names(query)
        dataset = load_dataset(fixtures)
        results = run_queries(query_names=names, dataset=dataset, settings=settings)
    except (FixtureError, ValueError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(json.dumps(results, indent=2, default=str))
    else:
        print_results(results)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
