"""Application service: the PlaceOrder workflow.

Runs the steps in a fixed order:

    validate -> price -> add shipping -> VIP shipping -> acknowledge -> events

Validation and pricing can fail; the first failure is returned as is
and nothing after it runs.  The remaining steps cannot fail.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from returns.pipeline import is_successful
from returns.result import Result, Success

from ordertaking.application.acknowledge_order import acknowledge_order
from ordertaking.application.create_events import create_events
from ordertaking.application.price_order import price_order
from ordertaking.application.ship_order import (
    CalculateShippingCost,
    add_shipping_info_to_order,
    calculate_shipping_cost,
    free_vip_shipping,
)
from ordertaking.application.validate_order import validate_order
from ordertaking.domain.errors import PlaceOrderError
from ordertaking.domain.model.events import PlaceOrderEvent
from ordertaking.domain.model.order import UnvalidatedOrder
from ordertaking.domain.ports import (
    CheckAddressExists,
    CheckProductCodeExists,
    CreateOrderAcknowledgmentLetter,
    GetPricingFunction,
    SendOrderAcknowledgment,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlaceOrderDependencies:
    """The outside services the workflow calls, supplied by the host."""

    check_product_exists: CheckProductCodeExists
    check_address_exists: CheckAddressExists
    get_pricing_function: GetPricingFunction
    create_acknowledgment_letter: CreateOrderAcknowledgmentLetter
    send_acknowledgment: SendOrderAcknowledgment
    calculate_shipping_cost: CalculateShippingCost = calculate_shipping_cost


class PlaceOrderWorkflow:
    """Turn an order form into the events to publish, or a single error.

    Holds no state between calls, so one instance can serve any number of
    concurrent orders.
    """

    def __init__(self, dependencies: PlaceOrderDependencies) -> None:
        self._deps = dependencies

    async def __call__(
        self, unvalidated_order: UnvalidatedOrder
    ) -> Result[list[PlaceOrderEvent], PlaceOrderError]:
        deps = self._deps
        logger.debug("Validating order %r", unvalidated_order.order_id)

        validated = await validate_order(
            deps.check_product_exists,
            deps.check_address_exists,
            unvalidated_order,
        )
        if not is_successful(validated):
            logger.info(
                "Order %r failed validation: %s",
                unvalidated_order.order_id,
                validated.failure().message,
            )
            return validated

        logger.debug("Pricing order %r", unvalidated_order.order_id)
        priced = price_order(deps.get_pricing_function, validated.unwrap())
        if not is_successful(priced):
            logger.info(
                "Order %r failed pricing: %s",
                unvalidated_order.order_id,
                priced.failure().message,
            )
            return priced
        priced_order = priced.unwrap()

        with_shipping = free_vip_shipping(
            add_shipping_info_to_order(deps.calculate_shipping_cost, priced_order)
        )

        acknowledgment_sent = acknowledge_order(
            deps.create_acknowledgment_letter,
            deps.send_acknowledgment,
            with_shipping,
        )
        if acknowledgment_sent is None:
            logger.warning(
                "Acknowledgment for order %r was not sent",
                priced_order.order_id.value,
            )

        events = create_events(priced_order, acknowledgment_sent)
        logger.info(
            "Order %r placed with %d event(s)", priced_order.order_id.value, len(events)
        )
        return Success(events)
