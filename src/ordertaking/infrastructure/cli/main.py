import logging

import click

from ordertaking.infrastructure.cli.order_commands import order_place


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log workflow steps.")
def cli(verbose: bool) -> None:
    """Order Taking — place orders through the PlaceOrder workflow"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def order() -> None:
    """Place orders."""


# Register subcommands
order.add_command(order_place)
