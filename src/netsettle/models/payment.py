"""Settlement instruction entity."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..errors import ValidationError


@dataclass(frozen=True, slots=True)
class Payment:
    """One transfer from a debtor to a creditor."""

    from_party: int
    to_party: int
    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount <= 0:
            raise ValidationError(f"Payment amount must be positive, got {self.amount}")

    def as_tuple(self) -> tuple[int, int, Decimal]:
        return (self.from_party, self.to_party, self.amount)
