"""Workflow step: collect the events to publish for a placed order."""

from __future__ import annotations

from ordertaking.domain.model.events import (
    BillableOrderPlaced,
    OrderAcknowledgmentSent,
    PlaceOrderEvent,
    ShippableOrderLine,
    ShippableOrderPlaced,
)
from ordertaking.domain.model.order import (
    CommentLine,
    PricedOrder,
    PricedOrderLine,
    PricedOrderProductLine,
)
from ordertaking.domain.model.simple_types import PdfAttachment


def make_shipment_line(line: PricedOrderLine) -> ShippableOrderLine | None:
    match line:
        case PricedOrderProductLine(product_code=product_code, quantity=quantity):
            return ShippableOrderLine(product_code=product_code, quantity=quantity)
        case CommentLine():
            return None
    raise TypeError(f"Unknown order line {line!r}")


def create_shipping_event(priced_order: PricedOrder) -> ShippableOrderPlaced:
    shipment_lines = tuple(
        shipment_line
        for shipment_line in map(make_shipment_line, priced_order.lines)
        if shipment_line is not None
    )
    return ShippableOrderPlaced(
        order_id=priced_order.order_id,
        shipping_address=priced_order.shipping_address,
        shipment_lines=shipment_lines,
        # placeholder until the packing slip is rendered
        pdf=PdfAttachment(name=f"Order{priced_order.order_id.value}.pdf", data=b""),
    )


def create_billing_event(priced_order: PricedOrder) -> BillableOrderPlaced | None:
    """Only orders with something to bill go to the billing context."""
    if priced_order.amount_to_bill.value > 0:
        return BillableOrderPlaced(
            order_id=priced_order.order_id,
            billing_address=priced_order.billing_address,
            amount_to_bill=priced_order.amount_to_bill,
        )
    return None


def create_events(
    priced_order: PricedOrder,
    acknowledgment_sent: OrderAcknowledgmentSent | None,
) -> list[PlaceOrderEvent]:
    """Events in a fixed order: acknowledgment, shipping, billing."""
    events: list[PlaceOrderEvent] = []
    if acknowledgment_sent is not None:
        events.append(acknowledgment_sent)
    events.append(create_shipping_event(priced_order))
    billing_event = create_billing_event(priced_order)
    if billing_event is not None:
        events.append(billing_event)
    return events
