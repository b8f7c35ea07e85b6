"""Workflow step: send the customer an acknowledgment letter.

Failing to send is not an error for the workflow.  It only means there
is no ``OrderAcknowledgmentSent`` event to report.  Nothing is retried.
"""

from __future__ import annotations

from ordertaking.domain.model.events import OrderAcknowledgmentSent
from ordertaking.domain.model.order import PricedOrderWithShippingMethod
from ordertaking.domain.ports import (
    CreateOrderAcknowledgmentLetter,
    OrderAcknowledgment,
    SendOrderAcknowledgment,
    SendResult,
)


def acknowledge_order(
    create_acknowledgment_letter: CreateOrderAcknowledgmentLetter,
    send_acknowledgment: SendOrderAcknowledgment,
    order: PricedOrderWithShippingMethod,
) -> OrderAcknowledgmentSent | None:
    priced_order = order.priced_order
    acknowledgment = OrderAcknowledgment(
        email_address=priced_order.customer_info.email_address,
        letter=create_acknowledgment_letter(order),
    )

    match send_acknowledgment(acknowledgment):
        case SendResult.SENT:
            return OrderAcknowledgmentSent(
                order_id=priced_order.order_id,
                email_address=priced_order.customer_info.email_address,
            )
        case SendResult.NOT_SENT:
            return None
    raise TypeError("Unknown send result")
