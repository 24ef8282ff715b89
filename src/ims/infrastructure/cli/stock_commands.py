"""CLI commands for stock movements and their audit history."""

from __future__ import annotations

from uuid import UUID

import click

from ims.application.add_stock import AddStockHandler
from ims.application.remove_stock import RemoveStockHandler
from ims.application.stock_history import StockHistoryHandler
from ims.domain.exceptions import DomainException
from ims.domain.repository.stock_history_repository import DEFAULT_HISTORY_LIMIT
from ims.infrastructure.bootstrap import unit_of_work
from ims.infrastructure.cli.common import parse_when, resolve_actor, user_option


@click.command("add")
@click.option("--product-id", required=True, type=click.UUID, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units received.")
@click.option("--reason", default=None, help="Why the stock changed.")
@user_option
def stock_add(product_id: UUID, quantity: int, reason: str | None, acting_user: str | None) -> None:
    """Receive stock for a product."""
    try:
        with unit_of_work() as repos:
            actor_id = resolve_actor(repos.users, acting_user)
            handler = AddStockHandler(
                product_repo=repos.products, history_repo=repos.stock_history
            )
            new_level = handler.handle(product_id, quantity, actor_id, reason)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Added {quantity} unit(s). Stock is now {new_level}.")


@click.command("remove")
@click.option("--product-id", required=True, type=click.UUID, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units taken out.")
@click.option("--reason", default=None, help="Why the stock changed.")
@user_option
def stock_remove(product_id: UUID, quantity: int, reason: str | None, acting_user: str | None) -> None:
    """Take stock out of a product."""
    try:
        with unit_of_work() as repos:
            actor_id = resolve_actor(repos.users, acting_user)
            handler = RemoveStockHandler(
                product_repo=repos.products, history_repo=repos.stock_history
            )
            new_level = handler.handle(product_id, quantity, actor_id, reason)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Removed {quantity} unit(s). Stock is now {new_level}.")


@click.command("history")
@click.option("--product-id", default=None, type=click.UUID, help="Only this product.")
@click.option("--from", "from_date", default=None, help="Earliest date (YYYY-MM-DD[THH:MM], UTC).")
@click.option("--to", "to_date", default=None, help="Latest date, inclusive.")
@click.option("--limit", default=DEFAULT_HISTORY_LIMIT, show_default=True, type=int,
              help="Maximum number of rows.")
def stock_history(
    product_id: UUID | None, from_date: str | None, to_date: str | None, limit: int
) -> None:
    """Show stock movements, newest first."""
    start = parse_when(from_date)
    end = parse_when(to_date, end_of_day=True)

    try:
        with unit_of_work() as repos:
            handler = StockHistoryHandler(
                history_repo=repos.stock_history,
                product_repo=repos.products,
                user_repo=repos.users,
            )
            rows = handler.handle(product_id=product_id, from_date=start, to_date=end, limit=limit)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not rows:
        click.echo("No stock movements found.")
        return

    click.echo(
        f"{'When':<20} {'Product':<24} {'Change':<8} {'Qty':>6} {'After':>6}  {'By':<22} Reason"
    )
    click.echo("-" * 100)
    for row in rows:
        click.echo(
            f"{row.changed_at:<20} {row.product_name[:24]:<24} {row.change_type:<8} "
            f"{row.quantity_changed:>6} {row.quantity_after:>6}  "
            f"{row.changed_by_name[:22]:<22} {row.reason or ''}"
        )
