"""Workflow step: price a validated order."""

from __future__ import annotations

from returns.pipeline import is_successful
from returns.result import Result, Success

from ordertaking.domain.errors import PricingError
from ordertaking.domain.model.order import (
    CommentLine,
    PricedOrder,
    PricedOrderLine,
    PricedOrderProductLine,
    PricingMethod,
    Promotion,
    Standard,
    ValidatedOrder,
    ValidatedOrderLine,
)
from ordertaking.domain.model.simple_types import BillingAmount, Price
from ordertaking.domain.ports import GetPricingFunction, GetProductPrice


def to_priced_order_line(
    get_product_price: GetProductPrice,
    line: ValidatedOrderLine,
) -> Result[PricedOrderLine, PricingError]:
    unit_price = get_product_price(line.product_code)
    return (
        Price.multiply(line.quantity.value, unit_price)
        .alt(PricingError)
        .map(
            lambda line_price: PricedOrderProductLine(
                order_line_id=line.order_line_id,
                product_code=line.product_code,
                quantity=line.quantity,
                line_price=line_price,
            )
        )
    )


def add_comment_line(
    pricing_method: PricingMethod, lines: tuple[PricedOrderLine, ...]
) -> tuple[PricedOrderLine, ...]:
    """Record which promotion was applied, if any."""
    match pricing_method:
        case Standard():
            return lines
        case Promotion(promotion_code=code):
            return (*lines, CommentLine(f"Applied promotion {code.value}"))
    raise TypeError(f"Unknown pricing method {pricing_method!r}")


def get_line_price(line: PricedOrderLine) -> Price:
    match line:
        case PricedOrderProductLine(line_price=price):
            return price
        case CommentLine():
            return Price.unsafe_create(0)
    raise TypeError(f"Unknown order line {line!r}")


def price_order(
    get_pricing_function: GetPricingFunction,
    validated_order: ValidatedOrder,
) -> Result[PricedOrder, PricingError]:
    """Price every line, then bill the sum of the line prices.

    The price lookup is resolved once for the whole order.  A line price
    or a total that falls outside its allowed range fails the step.
    """
    get_product_price = get_pricing_function(validated_order.pricing_method)

    priced: list[PricedOrderLine] = []
    for line in validated_order.lines:
        result = to_priced_order_line(get_product_price, line)
        if not is_successful(result):
            return result
        priced.append(result.unwrap())

    lines = add_comment_line(validated_order.pricing_method, tuple(priced))

    return (
        BillingAmount.sum_prices([get_line_price(line) for line in lines])
        .alt(PricingError)
        .map(
            lambda amount_to_bill: PricedOrder(
                order_id=validated_order.order_id,
                customer_info=validated_order.customer_info,
                shipping_address=validated_order.shipping_address,
                billing_address=validated_order.billing_address,
                amount_to_bill=amount_to_bill,
                lines=lines,
                pricing_method=validated_order.pricing_method,
            )
        )
    )
