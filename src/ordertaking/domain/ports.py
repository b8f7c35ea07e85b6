"""Contracts for the services the PlaceOrder workflow depends on.

Defined in the domain layer so the workflow never depends on
infrastructure.  Concrete implementations are supplied by the host
(see ``ordertaking.infrastructure.bootstrap``) and handed to the
workflow through ``PlaceOrderDependencies``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from returns.result import Result

from ordertaking.domain.model.order import (
    PricedOrderWithShippingMethod,
    PricingMethod,
    UnvalidatedAddress,
)
from ordertaking.domain.model.simple_types import (
    EmailAddress,
    Price,
    ProductCode,
    PromotionCode,
)


# --- Validation ----------------------------------------------------------------


class CheckProductCodeExists(Protocol):
    def __call__(self, product_code: ProductCode) -> bool:
        """Return True if the product is in the catalog."""


class AddressValidationError(Enum):
    INVALID_FORMAT = "InvalidFormat"
    ADDRESS_NOT_FOUND = "AddressNotFound"


@dataclass(frozen=True)
class CheckedAddress:
    """An address the address service has confirmed, not yet field-validated."""

    address: UnvalidatedAddress


class CheckAddressExists(Protocol):
    async def __call__(
        self, address: UnvalidatedAddress
    ) -> Result[CheckedAddress, AddressValidationError]:
        """Ask the address service whether *address* exists."""


# --- Pricing -------------------------------------------------------------------


class GetProductPrice(Protocol):
    def __call__(self, product_code: ProductCode) -> Price: ...


class TryGetProductPrice(Protocol):
    def __call__(self, product_code: ProductCode) -> Price | None: ...


class GetStandardPrices(Protocol):
    def __call__(self) -> GetProductPrice: ...


class GetPromotionPrices(Protocol):
    def __call__(self, promotion_code: PromotionCode) -> TryGetProductPrice: ...


class GetPricingFunction(Protocol):
    def __call__(self, pricing_method: PricingMethod) -> GetProductPrice: ...


# --- Acknowledgment ------------------------------------------------------------


@dataclass(frozen=True)
class HtmlString:
    value: str


@dataclass(frozen=True)
class OrderAcknowledgment:
    email_address: EmailAddress
    letter: HtmlString


class SendResult(Enum):
    """Outcome of sending an acknowledgment.

    Not sending is an expected outcome, not an error: the workflow
    carries on without the acknowledgment event.
    """

    SENT = "Sent"
    NOT_SENT = "NotSent"


class CreateOrderAcknowledgmentLetter(Protocol):
    def __call__(self, order: PricedOrderWithShippingMethod) -> HtmlString: ...


class SendOrderAcknowledgment(Protocol):
    def __call__(self, acknowledgment: OrderAcknowledgment) -> SendResult: ...
