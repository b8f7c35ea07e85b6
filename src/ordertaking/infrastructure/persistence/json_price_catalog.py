"""JSON-file-backed price catalog.

Supplies the three catalog lookups the workflow needs: whether a
product exists, the standard price list, and a promotion's price list.
The file is only ever read.

Format::

    {
      "standard": {"W1234": "10.00", "G123": "4.20"},
      "promotions": {"HALF": {"W1234": "5.00"}}
    }
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from ordertaking.domain.exceptions import EntityNotFoundError
from ordertaking.domain.model.simple_types import Price, ProductCode, PromotionCode
from ordertaking.domain.ports import GetProductPrice, TryGetProductPrice


class JsonPriceCatalog:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- Catalog lookups ------------------------------------------------------

    def product_exists(self, product_code: ProductCode) -> bool:
        return product_code.value in self._load()["standard"]

    def get_standard_prices(self) -> GetProductPrice:
        prices = self._prices(self._load()["standard"])

        def get_standard_price(product_code: ProductCode) -> Price:
            price = prices.get(product_code.value)
            if price is None:
                raise EntityNotFoundError(
                    f"No standard price for product '{product_code.value}'"
                )
            return price

        return get_standard_price

    def get_promotion_prices(self, promotion_code: PromotionCode) -> TryGetProductPrice:
        promotions = self._load()["promotions"]
        prices = self._prices(promotions.get(promotion_code.value, {}))

        def try_get_promotion_price(product_code: ProductCode) -> Price | None:
            return prices.get(product_code.value)

        return try_get_promotion_price

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            "standard": raw.get("standard", {}),
            "promotions": raw.get("promotions", {}),
        }

    @staticmethod
    def _prices(raw: dict[str, str]) -> dict[str, Price]:
        return {code: Price.unsafe_create(Decimal(price)) for code, price in raw.items()}
