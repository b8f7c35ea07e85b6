"""The states an order passes through in the PlaceOrder workflow.

Unvalidated -> Validated -> Priced -> Priced with shipping.

Each state is a separate immutable type; a stage never modifies its
input, it builds the next state from it.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Union

from ordertaking.domain.model.compound_types import Address, CustomerInfo
from ordertaking.domain.model.simple_types import (
    BillingAmount,
    OrderId,
    OrderLineId,
    OrderQuantity,
    Price,
    ProductCode,
    PromotionCode,
)


# ---------------------------------------------------------------------------
# Unvalidated (raw input from the order form)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class UnvalidatedCustomerInfo:
    first_name: str
    last_name: str
    email_address: str
    vip_status: str | None = None


@dataclass(frozen=True)
class UnvalidatedAddress:
    address_line1: str
    address_line2: str | None
    address_line3: str | None
    address_line4: str | None
    city: str
    zip_code: str
    state: str
    country: str


@dataclass(frozen=True)
class UnvalidatedOrderLine:
    order_line_id: str
    product_code: str
    quantity: Decimal | float | int


@dataclass(frozen=True)
class UnvalidatedOrder:
    order_id: str
    customer_info: UnvalidatedCustomerInfo
    shipping_address: UnvalidatedAddress
    billing_address: UnvalidatedAddress
    lines: tuple[UnvalidatedOrderLine, ...]
    promotion_code: str | None = None


# ---------------------------------------------------------------------------
# Validated
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Standard:
    """Price from the standard price list."""


@dataclass(frozen=True)
class Promotion:
    """Price from the promotion's price list, falling back to standard."""

    promotion_code: PromotionCode


PricingMethod = Union[Standard, Promotion]


@dataclass(frozen=True)
class ValidatedOrderLine:
    order_line_id: OrderLineId
    product_code: ProductCode
    quantity: OrderQuantity


@dataclass(frozen=True)
class ValidatedOrder:
    order_id: OrderId
    customer_info: CustomerInfo
    shipping_address: Address
    billing_address: Address
    lines: tuple[ValidatedOrderLine, ...]
    pricing_method: PricingMethod


# ---------------------------------------------------------------------------
# Priced
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PricedOrderProductLine:
    order_line_id: OrderLineId
    product_code: ProductCode
    quantity: OrderQuantity
    line_price: Price


@dataclass(frozen=True)
class CommentLine:
    """Free-text line with no product and no price."""

    comment: str


PricedOrderLine = Union[PricedOrderProductLine, CommentLine]


@dataclass(frozen=True)
class PricedOrder:
    order_id: OrderId
    customer_info: CustomerInfo
    shipping_address: Address
    billing_address: Address
    amount_to_bill: BillingAmount
    lines: tuple[PricedOrderLine, ...]
    pricing_method: PricingMethod


# ---------------------------------------------------------------------------
# Shipping
# ---------------------------------------------------------------------------


class ShippingMethod(Enum):
    POSTAL_SERVICE = "PostalService"
    FEDEX24 = "Fedex24"
    FEDEX48 = "Fedex48"
    UPS48 = "Ups48"


@dataclass(frozen=True)
class ShippingInfo:
    shipping_method: ShippingMethod
    shipping_cost: Price


@dataclass(frozen=True)
class PricedOrderWithShippingMethod:
    shipping_info: ShippingInfo
    priced_order: PricedOrder
