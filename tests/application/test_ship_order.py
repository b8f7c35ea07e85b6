"""Tests for the shipping and VIP free-shipping steps."""

from decimal import Decimal

import pytest

from ordertaking.application.ship_order import (
    ShippingAddressType,
    add_shipping_info_to_order,
    calculate_shipping_cost,
    free_vip_shipping,
)
from ordertaking.domain.model.order import ShippingMethod
from ordertaking.domain.model.simple_types import Price
from tests.fakes import make_address, make_order, make_priced_order


def _priced(state="CA", country="US", vip_status=None):
    order = make_order(
        shipping_address=make_address(state=state, country=country),
        vip_status=vip_status,
    )
    return make_priced_order(order)


class TestShippingCost:

    @pytest.mark.parametrize("state", ["CA", "OR", "AZ", "NV"])
    def test_local_states(self, state):
        priced = _priced(state=state)
        assert ShippingAddressType.of(priced.shipping_address) == ShippingAddressType.US_LOCAL_STATE
        assert calculate_shipping_cost(priced) == Price(Decimal("5.00"))

    def test_remote_state(self):
        assert calculate_shipping_cost(_priced(state="NY")) == Price(Decimal("10.00"))

    def test_international(self):
        assert calculate_shipping_cost(_priced(country="FR")) == Price(Decimal("20.00"))


class TestAddShippingInfo:

    def test_fixed_shipping_method(self):
        priced = _priced()
        with_shipping = add_shipping_info_to_order(calculate_shipping_cost, priced)
        assert with_shipping.shipping_info.shipping_method == ShippingMethod.FEDEX24
        assert with_shipping.shipping_info.shipping_cost == Price(Decimal("5.00"))
        assert with_shipping.priced_order is priced

    def test_uses_supplied_cost_calculator(self):
        flat = Price(Decimal("7.77"))
        with_shipping = add_shipping_info_to_order(lambda _: flat, _priced())
        assert with_shipping.shipping_info.shipping_cost == flat


class TestFreeVipShipping:

    def test_vip_ships_free(self):
        order = add_shipping_info_to_order(
            calculate_shipping_cost, _priced(country="FR", vip_status="VIP")
        )
        updated = free_vip_shipping(order)
        assert updated.shipping_info.shipping_cost == Price(Decimal("0"))
        assert updated.shipping_info.shipping_method == ShippingMethod.FEDEX24

    def test_vip_does_not_modify_input(self):
        order = add_shipping_info_to_order(
            calculate_shipping_cost, _priced(vip_status="VIP")
        )
        free_vip_shipping(order)
        assert order.shipping_info.shipping_cost == Price(Decimal("5.00"))

    def test_normal_customer_unchanged(self):
        order = add_shipping_info_to_order(calculate_shipping_cost, _priced(state="NY"))
        assert free_vip_shipping(order) == order
