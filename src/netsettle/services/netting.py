"""Greedy many-to-many debt netting.

Debtors (positive balances) and creditors (negative balances) each sit in a
priority queue. Every iteration matches the largest debtor against the most
negative creditor, emits one payment for the smaller magnitude, and puts the
remainder back. Each iteration fully discharges at least one party, so a run
over ``n`` entries emits at most ``2n - 1`` payments.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Sequence

from ..config import BaseConfig
from ..errors import EmptyQueueError, InvariantViolation, ValidationError
from ..logging_config import get_logger
from ..models.balance import NetBalance, exact_context
from ..models.payment import Payment
from .observers import LoggingObserver, NettingObserver, NullObserver
from .priority_queue import creditor_queue, debtor_queue

logger = get_logger(__name__)


def sum_balances(*groups: Iterable[NetBalance]) -> Decimal:
    """Exact sum of every balance across ``groups``."""

    total = Decimal(0)
    with exact_context():
        for group in groups:
            for entry in group:
                total += entry.balance
    return total


def validate_zero_sum(debtors: Sequence[NetBalance], creditors: Sequence[NetBalance]) -> Decimal:
    """Raise ``ValidationError`` unless the two sides cancel exactly."""

    total = sum_balances(debtors, creditors)
    if total != 0:
        logger.warning(
            "Balances do not net to zero",
            extra={"total": str(total), "debtors": len(debtors), "creditors": len(creditors)},
        )
        raise ValidationError(f"balances do not net to zero (total {total})", total=total)
    return total


def settle(
    debtors: Iterable[NetBalance],
    creditors: Iterable[NetBalance],
    *,
    observer: NettingObserver | None = None,
) -> list[Payment]:
    """Convert debtor and creditor balances into an ordered payment list.

    Raises ``ValidationError`` before any queue work when the balances do not
    sum to zero. No partial payment list is ever returned.
    """

    observer = observer or NullObserver()
    debtors = list(debtors)
    creditors = list(creditors)

    total = validate_zero_sum(debtors, creditors)
    observer.on_validated(total)

    # Zero entries are already settled and never enter a queue.
    debtor_heap = debtor_queue(entry for entry in debtors if entry.balance != 0)
    creditor_heap = creditor_queue(entry for entry in creditors if entry.balance != 0)
    observer.on_queues_built(debtor_heap.snapshot(), creditor_heap.snapshot())
    logger.info(
        "Netting run started",
        extra={"debtors": len(debtor_heap), "creditors": len(creditor_heap)},
    )

    payments: list[Payment] = []
    while debtor_heap:
        debtor = debtor_heap.extract_extreme()
        try:
            creditor = creditor_heap.extract_extreme()
        except EmptyQueueError as exc:
            raise InvariantViolation(
                f"creditor queue exhausted while party {debtor.party_id} still owes {debtor.balance}"
            ) from exc

        with exact_context():
            delta = creditor.balance + debtor.balance
        amount = min(creditor.balance.copy_abs(), debtor.balance)
        if amount <= 0:
            raise InvariantViolation(
                f"non-positive settlement between parties {debtor.party_id} and {creditor.party_id}"
            )

        if delta < 0:
            creditor_heap.insert(creditor.replace_balance(delta))
        elif delta > 0:
            debtor_heap.insert(debtor.replace_balance(delta))

        payment = Payment(from_party=debtor.party_id, to_party=creditor.party_id, amount=amount)
        payments.append(payment)
        observer.on_payment(payment, debtor_heap.snapshot(), creditor_heap.snapshot())

    if creditor_heap:
        raise InvariantViolation(
            f"{len(creditor_heap)} creditor(s) left unsettled after all debtors were drained"
        )

    observer.on_complete(payments)
    logger.info("Netting run finished", extra={"payments": len(payments)})
    return payments


def split_balances(balances: Iterable[NetBalance]) -> tuple[list[NetBalance], list[NetBalance]]:
    """Partition mixed signed balances into ``(debtors, creditors)``.

    Zero balances belong to neither side and are dropped.
    """

    debtors: list[NetBalance] = []
    creditors: list[NetBalance] = []
    for entry in balances:
        if entry.is_debtor:
            debtors.append(entry)
        elif entry.is_creditor:
            creditors.append(entry)
    return debtors, creditors


def settle_net_balances(
    balances: Iterable[NetBalance], *, observer: NettingObserver | None = None
) -> list[Payment]:
    """Settle a single list of signed balances."""

    debtors, creditors = split_balances(balances)
    return settle(debtors, creditors, observer=observer)


class NettingEngine:
    """Runs netting with an observer chosen from configuration.

    Each call to :meth:`run` builds its own queues; nothing is shared between
    runs.
    """

    def __init__(self, config: BaseConfig | None = None, *, observer: NettingObserver | None = None):
        self.config = config
        if observer is None:
            trace = bool(getattr(config, "TRACE", False)) if config is not None else False
            observer = LoggingObserver() if trace else NullObserver()
        self.observer = observer

    def run(self, debtors: Iterable[NetBalance], creditors: Iterable[NetBalance]) -> list[Payment]:
        return settle(debtors, creditors, observer=self.observer)

    def run_mixed(self, balances: Iterable[NetBalance]) -> list[Payment]:
        return settle_net_balances(balances, observer=self.observer)
