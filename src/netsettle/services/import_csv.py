"""CSV ingestion of net balances."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from ..errors import ValidationError
from ..models.balance import NetBalance, to_decimal, to_party_id
from .netting import split_balances


def normalize_frame(*, file_path: Path, encoding: str = "utf-8") -> pd.DataFrame:
    """Load a CSV file as strings with lower-cased, stripped headers.

    Every cell stays a string so amounts never pass through float parsing.
    """

    frame = pd.read_csv(file_path, encoding=encoding, dtype=str, keep_default_na=False)
    frame.columns = [c.strip().lower() for c in frame.columns]
    return frame


def rows_to_balances(
    rows, *, id_column: str = "party_id", balance_column: str = "balance"
) -> list[NetBalance]:
    """Convert dict-like rows into ``NetBalance`` entries.

    Blank rows are skipped; a row with an unparsable id or amount fails the
    whole load.
    """

    balances: list[NetBalance] = []
    seen: set[int] = set()
    for row_num, row in enumerate(rows, start=2):
        raw_id = str(row.get(id_column, "")).strip()
        raw_balance = str(row.get(balance_column, "")).strip()
        if not raw_id and not raw_balance:
            continue
        try:
            party_id = to_party_id(raw_id)
        except ValidationError as exc:
            raise ValidationError(f"Row {row_num}: invalid party id {raw_id!r}") from exc
        if party_id in seen:
            raise ValidationError(f"Row {row_num}: duplicate party id {party_id}")
        seen.add(party_id)
        try:
            balance = to_decimal(raw_balance)
        except ValidationError as exc:
            raise ValidationError(f"Row {row_num}: {exc}") from exc
        balances.append(NetBalance(party_id=party_id, balance=balance))
    return balances


def load_balances_csv(
    csv_path: Path, *, id_column: str = "party_id", balance_column: str = "balance"
) -> tuple[list[NetBalance], list[NetBalance]]:
    """Read ``csv_path`` and return ``(debtors, creditors)``."""

    frame = normalize_frame(file_path=Path(csv_path))
    id_column = id_column.lower()
    balance_column = balance_column.lower()
    missing = {id_column, balance_column} - set(frame.columns)
    if missing:
        raise ValidationError(f"Balance CSV missing columns: {', '.join(sorted(missing))}")

    rows = frame.to_dict(orient="records")
    return split_balances(rows_to_balances(rows, id_column=id_column, balance_column=balance_column))
