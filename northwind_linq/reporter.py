from __future__ import annotations

from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table


def print_results(results: List[Dict[str, Any]], console: Optional[Console] = None) -> None:
    """
    Render query runner results as a rich table.

    Failed queries show their error message in place of the preview.
    """
    console = console or Console()

    if not results:
        console.print("[yellow]No results to display.[/yellow]")
        return

    failed = sum(1 for r in results if r.get("error"))
    caption = f"{len(results)} queries, {failed} failed" if failed else f"{len(results)} queries"

    table = Table(
        title="Northwind LINQ Query Results",
        box=box.ROUNDED,
        caption=caption,
    )

    table.add_column("Query", style="cyan", no_wrap=True)
    table.add_column("Rows", justify="right", style="magenta")
    table.add_column("Duration (ms)", justify="right", style="green")
    table.add_column("Preview", style="white")

    for res in results:
        query = res.get("query", "Unknown")
        rows = f"{res.get('rows', 0):,}"
        duration_str = f"{res.get('duration_seconds', 0.0) * 1000:.3f}"

        if res.get("error"):
            preview = f"[red]{escape(res['error'])}[/red]"
        else:
            preview = "\n".join(escape(line) for line in res.get("preview", [])) or "[dim](empty)[/dim]"

        table.add_row(query, rows, duration_str, preview)

    console.print(table)


__all__ = ["print_results"]
