"""Exception types raised by the netting engine."""

from __future__ import annotations

from decimal import Decimal


class NettingError(Exception):
    """Base class for every failure a netting run can surface."""


class ValidationError(NettingError, ValueError):
    """Input balances are unusable (non-zero total, float amounts, bad rows)."""

    def __init__(self, message: str, *, total: Decimal | None = None) -> None:
        super().__init__(message)
        self.total = total


class EmptyQueueError(NettingError):
    """Extraction attempted on an empty priority queue."""


class InvariantViolation(NettingError):
    """A run reached a state the zero-sum precondition should make impossible."""
