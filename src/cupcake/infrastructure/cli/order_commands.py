"""CLI commands for building a cupcake order."""

from __future__ import annotations

from datetime import datetime

import click

from cupcake.application.cancel_order import CancelOrderHandler
from cupcake.application.dto import OrderSummaryDTO
from cupcake.application.show_summary import ShowSummaryHandler
from cupcake.application.submit_order import SubmitOrderHandler
from cupcake.domain.events import FieldChanged
from cupcake.domain.exceptions import DomainException
from cupcake.domain.model.menu import FLAVORS
from cupcake.infrastructure.bootstrap import order_state
from cupcake.infrastructure.formatting import format_currency

_today_option = click.option(
    "--today",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Pretend today is this date (YYYY-MM-DD).",
)


def _today(value: datetime | None):
    return value.date() if value is not None else None


def _echo_change(event: FieldChanged) -> None:
    click.echo(f"  {event.field.value} -> {event.value}")


def _display_summary(dto: OrderSummaryDTO) -> None:
    """Shared formatting for displaying an order summary."""
    click.echo(f"  {'Quantity':<12} {dto.quantity}")
    click.echo(f"  {'Flavor':<12} {dto.flavor or '(none)'}")
    click.echo(f"  {'Pickup date':<12} {dto.pickup_date}{'  (same day)' if dto.same_day else ''}")
    click.echo(f"  {'-'*30}")
    click.echo(f"  {'Total':<12} {dto.total}")


@click.command("dates")
@_today_option
def order_dates(today: datetime | None) -> None:
    """List the pickup dates that can be chosen."""
    order = order_state(_today(today))
    surcharge = format_currency(order.policy.surcharge)
    for i, label in enumerate(order.pickup_date_options):
        note = f"  (same day, +{surcharge})" if i == 0 else ""
        click.echo(f"{label}{note}")


@click.command("flavors")
def order_flavors() -> None:
    """List the flavors on the menu."""
    for flavor in FLAVORS:
        click.echo(flavor)


@click.command("order")
@click.option("--quantity", required=True, type=int, help="Number of cupcakes.")
@click.option(
    "--flavor",
    default=None,
    type=click.Choice(FLAVORS, case_sensitive=False),
    help="Cupcake flavor.",
)
@click.option("--date", "pickup_date", default=None, help="Pickup date label, e.g. 'Wed Jan 3'.")
@_today_option
@click.option("--submit", is_flag=True, default=False, help="Submit the order.")
@click.option("--cancel", is_flag=True, default=False, help="Discard the order after showing it.")
@click.option("--show-changes", is_flag=True, default=False, help="Echo every field change.")
def order_create(
    quantity: int,
    flavor: str | None,
    pickup_date: str | None,
    today: datetime | None,
    submit: bool,
    cancel: bool,
    show_changes: bool,
) -> None:
    """Build an order and show its summary."""
    if submit and cancel:
        raise click.UsageError("--submit and --cancel are mutually exclusive")

    order = order_state(_today(today))

    if pickup_date is not None and pickup_date not in order.pickup_date_options:
        raise click.BadParameter(
            f"'{pickup_date}' is not a pickup option. "
            f"Choose one of: {', '.join(order.pickup_date_options)}",
            param_hint="'--date'",
        )

    if show_changes:
        order.subscribe(_echo_change)

    order.set_quantity(quantity)
    if flavor is not None:
        order.set_flavor(flavor)
    if pickup_date is not None:
        order.set_date(pickup_date)

    if submit:
        try:
            dto = SubmitOrderHandler(order).handle()
        except DomainException as exc:
            raise click.ClickException(str(exc))
        click.echo("Order submitted:")
        click.echo(dto.text)
        click.echo()
        click.echo("Thank you!")
        return

    click.echo("Order summary:")
    _display_summary(ShowSummaryHandler(order).handle())

    if cancel:
        CancelOrderHandler(order).handle()
        click.echo("Order cancelled.")
