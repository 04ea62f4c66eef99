"""Mini README: Entry point CLI for driving the transaction ledger.

This script exposes a Typer CLI that routes requests through the in-process
gateway. ``request`` runs a single call, ``session`` keeps one ledger alive
while reading requests from standard input, and ``summary`` prints the
filtered ledger with its analytics. Settings come from ``TXLEDGER_``
environment variables; ``--seed/--no-seed`` overrides demo seeding.
"""

from __future__ import annotations

import json
from typing import Any, Optional

import typer

from txledger.configuration import get_settings
from txledger.gateway import RequestGateway, ResponseEnvelope
from txledger.ledger import (
    AnalyticsEngine,
    TransactionStore,
    ValidationError,
    filter_and_search,
    format_amount,
)
from txledger.logging_utils import configure_root_logger, get_logger

LOGGER = get_logger(__name__)

cli = typer.Typer(help="Record, query and analyse ledger transactions.")


def _build_gateway(seed: Optional[bool]) -> RequestGateway:
    """Create a gateway over a fresh store using the configured settings."""

    settings = get_settings()
    configure_root_logger(settings.level_number)
    seed_demo = settings.seed_demo_data if seed is None else seed
    LOGGER.debug("Building %s ledger (seed_demo=%s)", settings.environment, seed_demo)
    return RequestGateway(TransactionStore(seed_demo=seed_demo), api_prefix=settings.api_prefix)


def _parse_payload(raw: Optional[str]) -> Any:
    if raw is None or not raw.strip():
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as error:
        raise typer.BadParameter(f"Payload is not valid JSON: {error}") from error


def _echo_envelope(envelope: ResponseEnvelope) -> None:
    typer.echo(json.dumps(envelope.as_dict(), indent=2))


@cli.command()
def request(
    method: str = typer.Argument(..., help="HTTP verb: POST, GET, PUT or DELETE."),
    endpoint: str = typer.Argument(..., help="Endpoint such as /transactions/1."),
    payload: Optional[str] = typer.Option(None, help="JSON payload for POST/PUT or list filters."),
    seed: Optional[bool] = typer.Option(None, "--seed/--no-seed", help="Load the demo transactions."),
) -> None:
    """Run one request against a fresh ledger and print the envelope."""

    gateway = _build_gateway(seed)
    envelope = gateway.handle(method, endpoint, _parse_payload(payload))
    _echo_envelope(envelope)
    if not envelope.ok:
        raise typer.Exit(code=1)


@cli.command()
def session(
    seed: Optional[bool] = typer.Option(None, "--seed/--no-seed", help="Load the demo transactions."),
) -> None:
    """Read ``METHOD ENDPOINT [JSON]`` lines from stdin against one ledger."""

    gateway = _build_gateway(seed)
    stdin = typer.get_text_stream("stdin")
    for line_number, line in enumerate(stdin, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.split(None, 2)
        if len(parts) < 2:
            typer.echo(f"Line {line_number}: expected 'METHOD ENDPOINT [JSON]'", err=True)
            continue
        method, endpoint = parts[0], parts[1]
        try:
            payload = _parse_payload(parts[2] if len(parts) == 3 else None)
        except typer.BadParameter as error:
            typer.echo(f"Line {line_number}: {error}", err=True)
            continue
        envelope = gateway.handle(method, endpoint, payload)
        typer.echo(json.dumps(envelope.as_dict()))


@cli.command()
def summary(
    type_filter: str = typer.Option("all", "--type", help="all, income or expense."),
    search: str = typer.Option("", help="Case-insensitive text matched against description or category."),
    seed: Optional[bool] = typer.Option(None, "--seed/--no-seed", help="Load the demo transactions."),
) -> None:
    """Print the filtered ledger followed by analytics for the whole ledger."""

    store = _build_gateway(seed).store
    try:
        matches = filter_and_search(store.get_all(), type_filter, search)
    except ValidationError as error:
        raise typer.BadParameter(str(error), param_hint="--type") from error

    for transaction in matches:
        tags = f" [{', '.join(transaction.tags)}]" if transaction.tags else ""
        typer.echo(
            f"#{transaction.transaction_id} {transaction.occurred_on.isoformat()} "
            f"{transaction.transaction_type.value:<7} {format_amount(transaction.amount):>10} "
            f"{transaction.category} - {transaction.description}{tags}"
        )
    if not matches:
        typer.echo("No transactions match.")

    analytics = AnalyticsEngine().compute(store.get_all())
    typer.echo(f"Income:  {format_amount(analytics.total_income)}")
    typer.echo(f"Expense: {format_amount(analytics.total_expense)}")
    typer.echo(f"Balance: {format_amount(analytics.balance)}")
    typer.echo(f"Count:   {analytics.transaction_count}")
    for category, total in analytics.category_breakdown.items():
        typer.echo(f"  {category}: {format_amount(total)}")


if __name__ == "__main__":
    cli()
