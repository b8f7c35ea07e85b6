"""Workflow steps: add shipping to a priced order, then apply VIP free shipping.

Neither step can fail.
"""

from __future__ import annotations

from dataclasses import replace
from enum import Enum
from typing import Callable

from ordertaking.domain.model.compound_types import Address
from ordertaking.domain.model.order import (
    PricedOrder,
    PricedOrderWithShippingMethod,
    ShippingInfo,
    ShippingMethod,
)
from ordertaking.domain.model.simple_types import Price, VipStatus

CalculateShippingCost = Callable[[PricedOrder], Price]

LOCAL_STATES = frozenset({"CA", "OR", "AZ", "NV"})


class ShippingAddressType(Enum):
    US_LOCAL_STATE = "UsLocalState"
    US_REMOTE_STATE = "UsRemoteState"
    INTERNATIONAL = "International"

    @classmethod
    def of(cls, address: Address) -> ShippingAddressType:
        if address.country.value != "US":
            return cls.INTERNATIONAL
        if address.state.value in LOCAL_STATES:
            return cls.US_LOCAL_STATE
        return cls.US_REMOTE_STATE


_SHIPPING_COSTS = {
    ShippingAddressType.US_LOCAL_STATE: Price.unsafe_create("5.00"),
    ShippingAddressType.US_REMOTE_STATE: Price.unsafe_create("10.00"),
    ShippingAddressType.INTERNATIONAL: Price.unsafe_create("20.00"),
}


def calculate_shipping_cost(priced_order: PricedOrder) -> Price:
    return _SHIPPING_COSTS[ShippingAddressType.of(priced_order.shipping_address)]


def add_shipping_info_to_order(
    calculate_shipping_cost: CalculateShippingCost,
    priced_order: PricedOrder,
) -> PricedOrderWithShippingMethod:
    # Carrier selection is not modelled yet; every order ships Fedex24.
    shipping_info = ShippingInfo(
        shipping_method=ShippingMethod.FEDEX24,
        shipping_cost=calculate_shipping_cost(priced_order),
    )
    return PricedOrderWithShippingMethod(
        shipping_info=shipping_info, priced_order=priced_order
    )


def free_vip_shipping(
    order: PricedOrderWithShippingMethod,
) -> PricedOrderWithShippingMethod:
    match order.priced_order.customer_info.vip_status:
        case VipStatus.VIP:
            shipping_info = replace(
                order.shipping_info, shipping_cost=Price.unsafe_create(0)
            )
            return replace(order, shipping_info=shipping_info)
        case VipStatus.NORMAL:
            return order
    raise TypeError(f"Unknown VIP status {order.priced_order.customer_info.vip_status!r}")
