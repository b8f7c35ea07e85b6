"""In-memory fakes of the workflow's collaborators, plus order-form builders.

The fakes implement the same contracts as the real services but keep
everything in memory and record how they were called.
"""

from __future__ import annotations

import asyncio
from decimal import Decimal

from returns.result import Failure, Result, Success

from ordertaking.application.place_order import PlaceOrderDependencies
from ordertaking.application.price_order import price_order
from ordertaking.application.validate_order import validate_order
from ordertaking.domain.model.order import (
    PricedOrder,
    PricedOrderWithShippingMethod,
    UnvalidatedAddress,
    UnvalidatedCustomerInfo,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
)
from ordertaking.domain.model.simple_types import Price, ProductCode, PromotionCode
from ordertaking.domain.ports import (
    AddressValidationError,
    CheckedAddress,
    GetProductPrice,
    HtmlString,
    OrderAcknowledgment,
    SendResult,
    TryGetProductPrice,
)
from ordertaking.domain.service.pricing import get_pricing_function


class FakeProductCatalog:

    def __init__(
        self,
        standard: dict[str, str] | None = None,
        promotions: dict[str, dict[str, str]] | None = None,
        default_price: str | None = "10.0",
    ) -> None:
        self._standard = {code: Decimal(p) for code, p in (standard or {}).items()}
        self._promotions = {
            promo: {code: Decimal(p) for code, p in prices.items()}
            for promo, prices in (promotions or {}).items()
        }
        self._default_price = Decimal(default_price) if default_price else None
        self.unknown_products: set[str] = set()
        self.standard_fetches = 0
        self.promotion_fetches: list[str] = []

    def product_exists(self, product_code: ProductCode) -> bool:
        return product_code.value not in self.unknown_products

    def get_standard_prices(self) -> GetProductPrice:
        self.standard_fetches += 1

        def lookup(product_code: ProductCode) -> Price:
            value = self._standard.get(product_code.value, self._default_price)
            return Price(value)

        return lookup

    def get_promotion_prices(self, promotion_code: PromotionCode) -> TryGetProductPrice:
        self.promotion_fetches.append(promotion_code.value)
        prices = self._promotions.get(promotion_code.value, {})

        def lookup(product_code: ProductCode) -> Price | None:
            value = prices.get(product_code.value)
            return Price(value) if value is not None else None

        return lookup


class FakeAddressChecker:

    def __init__(self, errors: dict[str, AddressValidationError] | None = None) -> None:
        # keyed by address_line1
        self._errors = errors or {}
        self.checked: list[UnvalidatedAddress] = []

    async def __call__(
        self, address: UnvalidatedAddress
    ) -> Result[CheckedAddress, AddressValidationError]:
        self.checked.append(address)
        error = self._errors.get(address.address_line1)
        if error is not None:
            return Failure(error)
        return Success(CheckedAddress(address))


class FakeAcknowledgmentSender:

    def __init__(self, result: SendResult = SendResult.SENT) -> None:
        self._result = result
        self.sent: list[OrderAcknowledgment] = []

    def __call__(self, acknowledgment: OrderAcknowledgment) -> SendResult:
        self.sent.append(acknowledgment)
        return self._result


def fake_letter(order: PricedOrderWithShippingMethod) -> HtmlString:
    return HtmlString(f"letter for {order.priced_order.order_id.value}")


def make_dependencies(
    catalog: FakeProductCatalog | None = None,
    address_checker: FakeAddressChecker | None = None,
    sender: FakeAcknowledgmentSender | None = None,
) -> PlaceOrderDependencies:
    catalog = catalog or FakeProductCatalog()
    return PlaceOrderDependencies(
        check_product_exists=catalog.product_exists,
        check_address_exists=address_checker or FakeAddressChecker(),
        get_pricing_function=get_pricing_function(
            catalog.get_standard_prices, catalog.get_promotion_prices
        ),
        create_acknowledgment_letter=fake_letter,
        send_acknowledgment=sender or FakeAcknowledgmentSender(),
    )


# --- Builders ------------------------------------------------------------------


def make_address(
    line1: str = "1 Main St",
    zip_code: str = "12345",
    state: str = "CA",
    country: str = "US",
    line2: str | None = None,
) -> UnvalidatedAddress:
    return UnvalidatedAddress(
        address_line1=line1,
        address_line2=line2,
        address_line3=None,
        address_line4=None,
        city="Springfield",
        zip_code=zip_code,
        state=state,
        country=country,
    )


def make_line(
    line_id: str = "l1", product_code: str = "W1234", quantity: float = 2
) -> UnvalidatedOrderLine:
    return UnvalidatedOrderLine(
        order_line_id=line_id, product_code=product_code, quantity=quantity
    )


def make_order(
    order_id: str = "ord1",
    lines: tuple[UnvalidatedOrderLine, ...] | None = None,
    promotion_code: str | None = None,
    vip_status: str | None = None,
    email: str = "jane@x.com",
    shipping_address: UnvalidatedAddress | None = None,
    billing_address: UnvalidatedAddress | None = None,
) -> UnvalidatedOrder:
    """Jane Doe ordering two W1234 widgets, unless told otherwise."""
    return UnvalidatedOrder(
        order_id=order_id,
        customer_info=UnvalidatedCustomerInfo(
            first_name="Jane",
            last_name="Doe",
            email_address=email,
            vip_status=vip_status,
        ),
        shipping_address=shipping_address or make_address(),
        billing_address=billing_address or make_address(),
        lines=lines if lines is not None else (make_line(),),
        promotion_code=promotion_code,
    )


def make_priced_order(
    order: UnvalidatedOrder | None = None,
    catalog: FakeProductCatalog | None = None,
) -> PricedOrder:
    """Run *order* through validation and pricing with fake collaborators."""
    catalog = catalog or FakeProductCatalog()
    validated = asyncio.run(
        validate_order(catalog.product_exists, FakeAddressChecker(), order or make_order())
    ).unwrap()
    pricing = get_pricing_function(catalog.get_standard_prices, catalog.get_promotion_prices)
    return price_order(pricing, validated).unwrap()
