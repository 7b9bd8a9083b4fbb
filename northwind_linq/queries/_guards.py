from __future__ import annotations

from typing import Any

from northwind_linq.domain.errors import InvalidArgumentError


def require(**arguments: Any) -> None:
    """
    Raise InvalidArgumentError for the first argument that is None.

    Usage:
        require(customers=customers, limit=limit)
    """
    for name, value in arguments.items():
        if value is None:
            raise InvalidArgumentError(name)


__all__ = ["require"]
