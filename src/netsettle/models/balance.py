"""Net balance entity and decimal coercion."""

from __future__ import annotations

from dataclasses import dataclass
import decimal
from decimal import Decimal, InvalidOperation
from typing import Iterable

from ..errors import ValidationError


def exact_context():
    """Context manager for balance arithmetic that never rounds.

    The default context keeps 28 significant digits; sums of large and small
    amounts would silently lose cents under it.
    """

    context = decimal.Context(
        prec=decimal.MAX_PREC,
        Emax=decimal.MAX_EMAX,
        Emin=decimal.MIN_EMIN,
        traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow, decimal.Inexact],
    )
    return decimal.localcontext(context)


def to_party_id(value) -> int:
    """Coerce ``value`` into an integer party id without truncation."""

    if isinstance(value, bool) or isinstance(value, float):
        raise ValidationError(f"Party id must be an integer: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as exc:
            raise ValidationError(f"Invalid party id: {value!r}") from exc
    raise ValidationError(f"Unsupported party id type: {type(value).__name__}")


def to_decimal(value) -> Decimal:
    """Coerce ``value`` into an exact ``Decimal``.

    Accepts ``Decimal``, ``int`` and decimal strings. Floats are rejected
    because they cannot represent most cent values exactly.
    """

    if isinstance(value, bool):
        raise ValidationError(f"Boolean is not a balance: {value!r}")
    if isinstance(value, float):
        raise ValidationError(f"Floating-point balances are not accepted: {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as exc:
            raise ValidationError(f"Not a decimal amount: {value!r}") from exc
    else:
        raise ValidationError(f"Unsupported balance type: {type(value).__name__}")

    if not result.is_finite():
        raise ValidationError(f"Balance must be finite: {value!r}")
    return result


@dataclass(frozen=True, slots=True)
class NetBalance:
    """A party's aggregate signed obligation.

    Positive balances owe money (debtors), negative balances are owed money
    (creditors).
    """

    party_id: int
    balance: Decimal

    @property
    def is_debtor(self) -> bool:
        return self.balance > 0

    @property
    def is_creditor(self) -> bool:
        return self.balance < 0

    def replace_balance(self, balance: Decimal) -> "NetBalance":
        """Return a new entry for the same party carrying ``balance``."""

        return NetBalance(party_id=self.party_id, balance=balance)


def make_balances(pairs: Iterable[tuple[int, object]]) -> list[NetBalance]:
    """Build ``NetBalance`` entries from ``(party_id, amount)`` pairs."""

    return [NetBalance(party_id=to_party_id(party_id), balance=to_decimal(amount)) for party_id, amount in pairs]
