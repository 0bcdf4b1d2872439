"""CSV export of payment lists."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable

from ..models.payment import Payment


def export_payments_csv(*, payments: Iterable[Payment], output_path: Path) -> Path:
    """Write payments to CSV at `output_path`, in emission order.

    Columns are deterministic: from_party, to_party, amount.
    Returns the path written.
    """

    headers = ["from_party", "to_party", "amount"]
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Use newline='' for csv on Windows
    with output_path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(fh, fieldnames=headers, quoting=csv.QUOTE_MINIMAL)
        writer.writeheader()
        for payment in payments:
            writer.writerow(
                {
                    "from_party": payment.from_party,
                    "to_party": payment.to_party,
                    "amount": str(payment.amount),
                }
            )

    return output_path
