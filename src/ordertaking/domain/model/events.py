"""Events emitted by a successful PlaceOrder workflow.

Not every event occurs on every run: billing only happens when there
is something to bill, and the acknowledgment event only when the
letter was actually sent.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ordertaking.domain.model.compound_types import Address
from ordertaking.domain.model.simple_types import (
    BillingAmount,
    EmailAddress,
    OrderId,
    OrderQuantity,
    PdfAttachment,
    ProductCode,
)


@dataclass(frozen=True)
class OrderAcknowledgmentSent:
    order_id: OrderId
    email_address: EmailAddress


@dataclass(frozen=True)
class ShippableOrderLine:
    product_code: ProductCode
    quantity: OrderQuantity


@dataclass(frozen=True)
class ShippableOrderPlaced:
    """Sent to the shipping context."""

    order_id: OrderId
    shipping_address: Address
    shipment_lines: tuple[ShippableOrderLine, ...]
    pdf: PdfAttachment


@dataclass(frozen=True)
class BillableOrderPlaced:
    """Sent to the billing context."""

    order_id: OrderId
    billing_address: Address
    amount_to_bill: BillingAmount


PlaceOrderEvent = Union[OrderAcknowledgmentSent, ShippableOrderPlaced, BillableOrderPlaced]
