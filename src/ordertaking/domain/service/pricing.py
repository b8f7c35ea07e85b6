"""Domain service: pricing.

Turns the promotion code on the order form into a pricing method, and
builds the function that resolves a pricing method to a price lookup.
"""

from __future__ import annotations

from ordertaking.domain.model.order import PricingMethod, Promotion, Standard
from ordertaking.domain.model.simple_types import Price, ProductCode, PromotionCode
from ordertaking.domain.ports import (
    GetPricingFunction,
    GetProductPrice,
    GetPromotionPrices,
    GetStandardPrices,
    TryGetProductPrice,
)


def create_pricing_method(promotion_code: str | None) -> PricingMethod:
    """No code, or a blank one, means standard pricing."""
    if promotion_code is None or not promotion_code.strip():
        return Standard()
    return Promotion(PromotionCode(promotion_code))


def get_pricing_function(
    get_standard_prices: GetStandardPrices,
    get_promotion_prices: GetPromotionPrices,
) -> GetPricingFunction:
    """Build a ``GetPricingFunction`` on top of the two price sources.

    The standard price list is fetched once, up front.  Each promotion's
    price list is fetched the first time that promotion is used and then
    reused.  Products missing from a promotion keep their standard price.

    The promotion cache lives as long as the returned function, which the
    composition root builds once per set of workflow dependencies; it holds
    one entry per distinct promotion code seen by that instance.
    """
    get_standard_price = get_standard_prices()
    promotion_lookups: dict[str, TryGetProductPrice] = {}

    def get_promotion_price(promotion_code: PromotionCode) -> GetProductPrice:
        lookup = promotion_lookups.get(promotion_code.value)
        if lookup is None:
            lookup = get_promotion_prices(promotion_code)
            promotion_lookups[promotion_code.value] = lookup

        def get_product_price(product_code: ProductCode) -> Price:
            price = lookup(product_code)
            if price is None:
                return get_standard_price(product_code)
            return price

        return get_product_price

    def get_pricing(pricing_method: PricingMethod) -> GetProductPrice:
        match pricing_method:
            case Standard():
                return get_standard_price
            case Promotion(promotion_code=code):
                return get_promotion_price(code)
        raise TypeError(f"Unknown pricing method {pricing_method!r}")

    return get_pricing
