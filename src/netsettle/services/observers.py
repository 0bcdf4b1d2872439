"""Observer hooks for tracing a netting run.

The engine calls these after each state transition. Observers only look;
they never change the result of a run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Protocol, Sequence

from ..logging_config import get_logger
from ..models.balance import NetBalance
from ..models.payment import Payment


class NettingObserver(Protocol):
    """Receives state transitions from a netting run."""

    def on_validated(self, total: Decimal) -> None:  # pragma: no cover - interface
        ...

    def on_queues_built(
        self, debtors: Sequence[NetBalance], creditors: Sequence[NetBalance]
    ) -> None:  # pragma: no cover - interface
        ...

    def on_payment(
        self, payment: Payment, debtors: Sequence[NetBalance], creditors: Sequence[NetBalance]
    ) -> None:  # pragma: no cover - interface
        ...

    def on_complete(self, payments: Sequence[Payment]) -> None:  # pragma: no cover - interface
        ...


class NullObserver:
    """Default observer; ignores every event."""

    def on_validated(self, total: Decimal) -> None:
        return None

    def on_queues_built(self, debtors, creditors) -> None:
        return None

    def on_payment(self, payment, debtors, creditors) -> None:
        return None

    def on_complete(self, payments) -> None:
        return None


def describe_queue(label: str, entries: Sequence[NetBalance]) -> str:
    """Render queue contents in backing-heap order."""

    lines = [f"{label}:"]
    for index, entry in enumerate(entries):
        lines.append(f"  [{index}] party_id: {entry.party_id}, balance: {entry.balance}")
    return "\n".join(lines)


class LoggingObserver:
    """Write heap dumps and payments to the ``netsettle.trace`` logger at INFO."""

    def __init__(self, logger: logging.Logger | None = None, *, dump_queues: bool = True) -> None:
        self.logger = logger or get_logger("trace")
        self.dump_queues = dump_queues

    def on_validated(self, total: Decimal) -> None:
        self.logger.debug("Balances validated", extra={"total": str(total)})

    def on_queues_built(self, debtors, creditors) -> None:
        if self.dump_queues:
            self.logger.info(describe_queue("debtor queue", debtors))
            self.logger.info(describe_queue("creditor queue", creditors))

    def on_payment(self, payment, debtors, creditors) -> None:
        self.logger.info(
            "Payment: from_party: %s -> to_party: %s, amount: %s",
            payment.from_party,
            payment.to_party,
            payment.amount,
        )
        if self.dump_queues:
            self.logger.info(describe_queue("debtor queue", debtors))
            self.logger.info(describe_queue("creditor queue", creditors))

    def on_complete(self, payments) -> None:
        self.logger.info("Netting produced %d payment(s)", len(payments))


@dataclass
class RecordingObserver:
    """Keeps every event in memory as ``(event_name, payload)`` tuples."""

    events: list[tuple[str, Any]] = field(default_factory=list)

    def on_validated(self, total: Decimal) -> None:
        self.events.append(("validated", total))

    def on_queues_built(self, debtors, creditors) -> None:
        self.events.append(("queues_built", (list(debtors), list(creditors))))

    def on_payment(self, payment, debtors, creditors) -> None:
        self.events.append(("payment", payment))

    def on_complete(self, payments) -> None:
        self.events.append(("complete", list(payments)))

    def names(self) -> list[str]:
        return [name for name, _ in self.events]

    def payments(self) -> list[Payment]:
        return [payload for name, payload in self.events if name == "payment"]
