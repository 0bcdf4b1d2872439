"""Command-line entry points for netsettle."""

from __future__ import annotations

from pathlib import Path

import click

from .config import BaseConfig
from .errors import NettingError
from .logging_config import setup_logging
from .services.export_csv import export_payments_csv
from .services.import_csv import load_balances_csv
from .services.netting import NettingEngine, validate_zero_sum
from .services.observers import LoggingObserver
from .services.reconcile import format_payments

_CSV_PATH = click.Path(exists=True, dir_okay=False, path_type=Path)


@click.group()
@click.option("--id-column", default="party_id", show_default=True, help="CSV column holding party ids")
@click.option("--balance-column", default="balance", show_default=True, help="CSV column holding balances")
@click.pass_context
def main(ctx: click.Context, id_column: str, balance_column: str) -> None:
    """Net signed balances into a short list of payments."""

    config = BaseConfig()
    setup_logging(config)
    ctx.obj = {"config": config, "id_column": id_column, "balance_column": balance_column}


def _load(ctx: click.Context, csv_path: Path):
    try:
        return load_balances_csv(
            csv_path, id_column=ctx.obj["id_column"], balance_column=ctx.obj["balance_column"]
        )
    except NettingError as exc:
        raise click.ClickException(str(exc)) from exc


@main.command("settle")
@click.argument("csv_path", type=_CSV_PATH)
@click.option("--output", "output", type=click.Path(dir_okay=False, path_type=Path), help="Write payments to CSV")
@click.option("--trace", is_flag=True, default=False, help="Log queue contents after every payment")
@click.pass_context
def settle_command(ctx: click.Context, csv_path: Path, output: Path | None, trace: bool) -> None:
    """Settle the balances in CSV_PATH and print the payments."""

    config: BaseConfig = ctx.obj["config"]
    debtors, creditors = _load(ctx, csv_path)
    engine = NettingEngine(config, observer=LoggingObserver() if trace else None)
    try:
        payments = engine.run(debtors, creditors)
    except NettingError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(format_payments(payments))
    if output is not None:
        path = export_payments_csv(payments=payments, output_path=output)
        click.echo(f"Payments written: {path}")


@main.command("check")
@click.argument("csv_path", type=_CSV_PATH)
@click.pass_context
def check_command(ctx: click.Context, csv_path: Path) -> None:
    """Verify that the balances in CSV_PATH net to zero."""

    debtors, creditors = _load(ctx, csv_path)
    try:
        total = validate_zero_sum(debtors, creditors)
    except NettingError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"OK: {len(debtors)} debtor(s), {len(creditors)} creditor(s), total {total}")


if __name__ == "__main__":  # pragma: no cover
    main()
