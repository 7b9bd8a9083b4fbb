"""
Exception types raised by the query library and the fixture loader.
"""
from __future__ import annotations


class InvalidArgumentError(ValueError):
    """
    A required collection or scalar argument was None.

    Raised before any output is produced.
    """

    def __init__(self, parameter: str) -> None:
        super().__init__(f"Argument '{parameter}' must not be None.")
        self.parameter = parameter


class FixtureError(RuntimeError):
    """Fixture data could not be read or failed validation."""


__all__ = ["FixtureError", "InvalidArgumentError"]
