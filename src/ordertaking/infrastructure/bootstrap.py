"""Composition root — wires concrete implementations to the workflow's contracts.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from ordertaking.application.place_order import PlaceOrderDependencies
from ordertaking.domain.service.pricing import get_pricing_function
from ordertaking.infrastructure.persistence.json_price_catalog import JsonPriceCatalog
from ordertaking.infrastructure.services.acknowledgment_service import (
    create_acknowledgment_letter,
    send_acknowledgment,
)
from ordertaking.infrastructure.services.address_service import check_address_exists

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def price_catalog(file_path: Path | None = None) -> JsonPriceCatalog:
    return JsonPriceCatalog(file_path or _DATA_DIR / "catalog.json")


def place_order_dependencies(catalog_path: Path | None = None) -> PlaceOrderDependencies:
    catalog = price_catalog(catalog_path)
    return PlaceOrderDependencies(
        check_product_exists=catalog.product_exists,
        check_address_exists=check_address_exists,
        get_pricing_function=get_pricing_function(
            catalog.get_standard_prices, catalog.get_promotion_prices
        ),
        create_acknowledgment_letter=create_acknowledgment_letter,
        send_acknowledgment=send_acknowledgment,
    )
