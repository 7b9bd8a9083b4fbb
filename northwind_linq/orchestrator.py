"""
Query runner: applies the registered queries to a fixture dataset, profiling
each one and summarizing its output.

Usage (example from CLI):
    from northwind_linq.orchestrator import run_queries

    results = run_queries(query_names=["linq1", "linq10"])
    print(results)

Scalar query parameters (limits, price thresholds) come from Settings.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Optional

from northwind_linq.config import Settings, get_settings
from northwind_linq.domain.models import Customer
from northwind_linq.domain.results import (
    CategoryGroup,
    CityStatistics,
    CustomerEntry,
    CustomerSuppliers,
    PriceBucket,
)
from northwind_linq.infrastructure.fixtures import Dataset, load_dataset
from northwind_linq.queries import (
    linq1,
    linq2,
    linq2_using_group,
    linq3,
    linq4,
    linq5_by_composite,
    linq5_by_date,
    linq6_filter,
    linq6_skip_drop,
    linq7,
    linq7_unsorted,
    linq8,
    linq9,
    linq10,
    linq10_first_seen,
)
from northwind_linq.utils.logging import get_logger
from northwind_linq.utils.profiler import ProfileStats, profile_block

log = get_logger(__name__)

QueryRun = Callable[[Dataset, Settings], Any]


def _round_float(value: float, decimals: int = 6) -> float:
    """Round a float to specified decimal places for human-readable output."""
    return round(value, decimals)


def _query_runs() -> Dict[str, QueryRun]:
    """Registry of available query runs."""
    return {
        "linq1": lambda ds, s: linq1(ds.customers, s.order_count_limit),
        "linq2": lambda ds, s: linq2(ds.customers, ds.suppliers),
        "linq2_using_group": lambda ds, s: linq2_using_group(ds.customers, ds.suppliers),
        "linq3": lambda ds, s: linq3(ds.customers, s.turnover_limit),
        "linq4": lambda ds, s: linq4(ds.customers),
        "linq5_by_composite": lambda ds, s: linq5_by_composite(ds.customers),
        "linq5_by_date": lambda ds, s: linq5_by_date(ds.customers),
        "linq6_filter": lambda ds, s: linq6_filter(ds.customers),
        "linq6_skip_drop": lambda ds, s: linq6_skip_drop(ds.customers),
        "linq7": lambda ds, s: linq7(ds.products),
        "linq7_unsorted": lambda ds, s: linq7_unsorted(ds.products),
        "linq8": lambda ds, s: linq8(
            ds.products, s.price_cheap, s.price_middle, s.price_expensive
        ),
        "linq9": lambda ds, s: linq9(ds.customers),
        "linq10": lambda ds, s: linq10(ds.suppliers),
        "linq10_first_seen": lambda ds, s: linq10_first_seen(ds.suppliers),
    }


def available_queries() -> List[str]:
    """List available query names."""
    return sorted(_query_runs().keys())


def _resolve_query(name: str) -> QueryRun:
    runs = _query_runs()
    if name not in runs:
        raise ValueError(f"Unknown query '{name}'. Available: {', '.join(available_queries())}")
    return runs[name]


def describe(item: Any) -> str:
    """Short one-line rendering of a single query result row."""
    if isinstance(item, Customer):
        return item.company_name
    if isinstance(item, CustomerSuppliers):
        names = ", ".join(s.company_name for s in item.suppliers) or "-"
        return f"{item.customer.company_name}: {names}"
    if isinstance(item, CustomerEntry):
        return f"{item.customer.company_name} @ {item.date_of_entry:%Y-%m-%d}"
    if isinstance(item, CategoryGroup):
        stock = ", ".join(
            f"{g.units_in_stock}: [{', '.join(str(p) for p in g.prices)}]"
            for g in item.units_in_stock_groups
        )
        return f"{item.category} -> {stock}"
    if isinstance(item, PriceBucket):
        return f"{item.threshold}: {len(item.products)} product(s)"
    if isinstance(item, CityStatistics):
        return f"{item.city}: income={item.average_income} intensity={item.average_intensity}"
    return str(item)


def _summarize(output: Any, preview_rows: int) -> Dict[str, Any]:
    if isinstance(output, str):
        return {"rows": 1, "preview": [output]}
    rows = list(output)
    return {"rows": len(rows), "preview": [describe(r) for r in rows[:preview_rows]]}


def _merge_result(summary: Dict[str, Any], stats: ProfileStats) -> dict:
    """Merge a query summary with profiler stats, rounding floats for readability."""
    merged = dict(summary)
    merged.setdefault("rows", 0)
    merged.setdefault("preview", [])
    merged["duration_seconds"] = _round_float(stats.duration_seconds)
    merged["rss_bytes"] = stats.rss_bytes
    merged["cpu_percent"] = (
        _round_float(stats.cpu_percent, 1) if stats.cpu_percent is not None else None
    )
    return merged


def _profiled_execute(name: str, run: QueryRun, dataset: Dataset, settings: Settings) -> dict:
    log.debug(f"[QUERY START] {name}", extra={"query": name})
    with profile_block(name) as stats:
        try:
            summary = _summarize(run(dataset, settings), settings.preview_rows)
            log.debug(f"[QUERY SUCCESS] {name}", extra={"query": name, "rows": summary["rows"]})
        except Exception as exc:  # noqa: BLE001 - record the failure, keep running the rest
            log.exception(f"[QUERY FAILED] {name}", extra={"query": name})
            summary = {"rows": 0, "error": str(exc)}

    return _merge_result(summary, stats)


def expand_query_names(query_names: Optional[Iterable[str]] = None) -> List[str]:
    """
    Resolve requested names into the queries to run, in request order.

    "all" may appear anywhere and stands for every available query; repeated
    names run once. Raises ValueError on an unknown name.
    """
    names: List[str] = []
    for name in query_names if query_names is not None else ["all"]:
        for expanded in available_queries() if name == "all" else [name]:
            _resolve_query(expanded)
            if expanded not in names:
                names.append(expanded)
    return names


def run_queries(
    query_names: Optional[Iterable[str]] = None,
    dataset: Optional[Dataset] = None,
    settings: Optional[Settings] = None,
) -> List[dict]:
    """
    Run one or more queries against a dataset.

    Parameters
    ----------
    query_names : iterable[str] | None
        Query names to execute. If None, or wherever "all" appears, executes
        all available.
    dataset : Dataset | None
        Collections to query. Defaults to load_dataset().
    settings : Settings | None
        Source of query parameters. Defaults to get_settings().

    Returns
    -------
    List[dict]
        One summary per query with rows, preview lines and profiler stats,
        plus "error" when the query raised.
    """
    settings = settings or get_settings()
    names = expand_query_names(query_names)
    runs = {name: _resolve_query(name) for name in names}

    if dataset is None:
        dataset = load_dataset(settings.fixtures_path)

    results: List[dict] = []
    for name, run in runs.items():
        result = _profiled_execute(name, run, dataset, settings)
        result["query"] = name
        results.append(result)

    failed = [r["query"] for r in results if "error" in r]
    log.info(
        f"[RUNNER COMPLETE] {len(results)} query/queries executed, {len(failed)} failed",
        extra={"queries": names, "failed": failed},
    )
    return results


__all__ = [
    "available_queries",
    "describe",
    "expand_query_names",
    "run_queries",
]
