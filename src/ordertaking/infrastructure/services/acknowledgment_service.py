"""Acknowledgment letters: a minimal HTML template and a sender that only logs."""

from __future__ import annotations

import logging
from html import escape

from ordertaking.domain.model.order import PricedOrderWithShippingMethod
from ordertaking.domain.ports import HtmlString, OrderAcknowledgment, SendResult

logger = logging.getLogger(__name__)


def create_acknowledgment_letter(order: PricedOrderWithShippingMethod) -> HtmlString:
    priced_order = order.priced_order
    name = priced_order.customer_info.name
    return HtmlString(
        "<p>Dear {first} {last},</p>"
        "<p>Thank you for order {order_id}. Amount to bill: ${amount:.2f}, "
        "shipping: ${shipping:.2f}.</p>".format(
            first=escape(name.first_name.value),
            last=escape(name.last_name.value),
            order_id=escape(priced_order.order_id.value),
            amount=priced_order.amount_to_bill.value,
            shipping=order.shipping_info.shipping_cost.value,
        )
    )


def send_acknowledgment(acknowledgment: OrderAcknowledgment) -> SendResult:
    """Log the letter instead of emailing it."""
    logger.info(
        "Acknowledgment to %s: %s",
        acknowledgment.email_address.value,
        acknowledgment.letter.value,
    )
    return SendResult.SENT
