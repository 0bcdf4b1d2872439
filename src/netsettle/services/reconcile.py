"""Check a payment list against the balances it was produced from."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Sequence

from ..errors import InvariantViolation
from ..models.balance import NetBalance, exact_context
from ..models.payment import Payment


def apply_payments(
    debtors: Iterable[NetBalance], creditors: Iterable[NetBalance], payments: Iterable[Payment]
) -> dict[int, Decimal]:
    """Return each party's balance after applying ``payments``.

    A payment lowers the payer's balance and raises the payee's.
    """

    remaining: dict[int, Decimal] = {}
    with exact_context():
        for entry in [*debtors, *creditors]:
            remaining[entry.party_id] = remaining.get(entry.party_id, Decimal(0)) + entry.balance

        for payment in payments:
            if payment.from_party not in remaining or payment.to_party not in remaining:
                raise InvariantViolation(
                    f"payment {payment.from_party} -> {payment.to_party} references an unknown party"
                )
            remaining[payment.from_party] -= payment.amount
            remaining[payment.to_party] += payment.amount
    return remaining


def verify_settlement(
    debtors: Sequence[NetBalance], creditors: Sequence[NetBalance], payments: Sequence[Payment]
) -> None:
    """Raise ``InvariantViolation`` unless ``payments`` settle every balance exactly."""

    for payment in payments:
        if payment.amount <= 0:
            raise InvariantViolation(f"non-positive payment: {format_payment(payment)}")

    entries = sum(1 for entry in [*debtors, *creditors] if entry.balance != 0)
    if entries and len(payments) > 2 * entries - 1:
        raise InvariantViolation(
            f"{len(payments)} payments exceed the bound of {2 * entries - 1} for {entries} balances"
        )

    leftovers = {
        party: balance
        for party, balance in apply_payments(debtors, creditors, payments).items()
        if balance != 0
    }
    if leftovers:
        raise InvariantViolation(f"balances left unsettled: {leftovers}")


def format_payment(payment: Payment) -> str:
    return f"Payment: {payment.from_party} -> {payment.to_party}, amount: {payment.amount}"


def format_payments(payments: Sequence[Payment]) -> str:
    """Multi-line listing headed by ``Payments:``."""

    lines = ["Payments:"]
    lines.extend(f"  {format_payment(p)}" for p in payments)
    return "\n".join(lines)
