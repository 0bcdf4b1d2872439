"""Domain entities for netting runs."""

from __future__ import annotations

from .balance import NetBalance, exact_context, make_balances, to_decimal, to_party_id
from .payment import Payment

__all__ = ["NetBalance", "Payment", "exact_context", "make_balances", "to_decimal", "to_party_id"]
