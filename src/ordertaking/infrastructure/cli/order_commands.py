"""CLI commands for placing orders."""

from __future__ import annotations

import asyncio
import json
from decimal import Decimal, InvalidOperation
from pathlib import Path

import click

from ordertaking.application.dto import OrderFormDTO
from ordertaking.application.place_order_api import PlaceOrderHandler
from ordertaking.infrastructure.bootstrap import place_order_dependencies


def _load_order_form(path: Path) -> OrderFormDTO:
    """Parse an order form JSON file; decimals stay exact."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"), parse_float=Decimal)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"'{path}' is not valid JSON: {exc}")
    try:
        return OrderFormDTO.from_dict(raw)
    except KeyError as exc:
        raise click.BadParameter(f"Order form is missing field {exc}")
    except InvalidOperation:
        raise click.BadParameter("Order form has a non-numeric quantity.")
    except (TypeError, AttributeError):
        raise click.BadParameter("Order form has an unexpected shape.")


@click.command("place")
@click.option(
    "--file",
    "order_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Order form as JSON.",
)
@click.option(
    "--catalog",
    "catalog_file",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Price catalog JSON (defaults to data/catalog.json).",
)
def order_place(order_file: Path, catalog_file: Path | None) -> None:
    """Place an order and print the resulting events."""
    order_form = _load_order_form(order_file)

    handler = PlaceOrderHandler(place_order_dependencies(catalog_file))
    response = asyncio.run(handler.handle(order_form))

    if not response.ok:
        raise click.ClickException(f"{response.error.code}: {response.error.message}")

    click.echo(f"Order {order_form.order_id} placed  (events={len(response.events)})")
    click.echo(json.dumps(response.events, indent=2))
