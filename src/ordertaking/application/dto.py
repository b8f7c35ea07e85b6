"""Data Transfer Objects — plain containers that cross the workflow boundary.

Input DTOs mirror the order form as it arrives from outside (camelCase
keys) and convert into unvalidated domain objects; that conversion
never fails because nothing is validated yet.  Output mappings turn
events and errors into plain dictionaries ready for ``json.dumps``.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from ordertaking.domain.errors import (
    PlaceOrderError,
    PricingError,
    RemoteServiceError,
    ValidationError,
)
from ordertaking.domain.model.compound_types import Address
from ordertaking.domain.model.events import (
    BillableOrderPlaced,
    OrderAcknowledgmentSent,
    PlaceOrderEvent,
    ShippableOrderPlaced,
)
from ordertaking.domain.model.order import (
    UnvalidatedAddress,
    UnvalidatedCustomerInfo,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
)
from ordertaking.domain.model.simple_types import String50

# ---------------------------------------------------------------------------
# Input: the order form
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CustomerInfoDTO:
    first_name: str
    last_name: str
    email_address: str
    vip_status: str | None = None

    @staticmethod
    def from_dict(data: dict[str, Any]) -> CustomerInfoDTO:
        return CustomerInfoDTO(
            first_name=data["firstName"],
            last_name=data["lastName"],
            email_address=data["emailAddress"],
            vip_status=data.get("vipStatus"),
        )

    def to_unvalidated(self) -> UnvalidatedCustomerInfo:
        return UnvalidatedCustomerInfo(
            first_name=self.first_name,
            last_name=self.last_name,
            email_address=self.email_address,
            vip_status=self.vip_status,
        )


@dataclass(frozen=True)
class AddressDTO:
    address_line1: str
    address_line2: str | None
    address_line3: str | None
    address_line4: str | None
    city: str
    zip_code: str
    state: str
    country: str

    @staticmethod
    def from_dict(data: dict[str, Any]) -> AddressDTO:
        return AddressDTO(
            address_line1=data["addressLine1"],
            address_line2=data.get("addressLine2"),
            address_line3=data.get("addressLine3"),
            address_line4=data.get("addressLine4"),
            city=data["city"],
            zip_code=data["zipCode"],
            state=data["state"],
            country=data["country"],
        )

    @staticmethod
    def from_address(address: Address) -> dict[str, Any]:
        def optional(line: String50 | None) -> str | None:
            return line.value if line is not None else None

        return {
            "addressLine1": address.address_line1.value,
            "addressLine2": optional(address.address_line2),
            "addressLine3": optional(address.address_line3),
            "addressLine4": optional(address.address_line4),
            "city": address.city.value,
            "zipCode": address.zip_code.value,
            "state": address.state.value,
            "country": address.country.value,
        }

    def to_unvalidated(self) -> UnvalidatedAddress:
        return UnvalidatedAddress(
            address_line1=self.address_line1,
            address_line2=self.address_line2,
            address_line3=self.address_line3,
            address_line4=self.address_line4,
            city=self.city,
            zip_code=self.zip_code,
            state=self.state,
            country=self.country,
        )


@dataclass(frozen=True)
class OrderFormLineDTO:
    order_line_id: str
    product_code: str
    quantity: Decimal

    @staticmethod
    def from_dict(data: dict[str, Any]) -> OrderFormLineDTO:
        """Raises KeyError on a missing field and decimal.InvalidOperation
        on a quantity that is not a number."""
        return OrderFormLineDTO(
            order_line_id=data["orderLineId"],
            product_code=data["productCode"],
            quantity=Decimal(str(data["quantity"])),
        )

    def to_unvalidated(self) -> UnvalidatedOrderLine:
        return UnvalidatedOrderLine(
            order_line_id=self.order_line_id,
            product_code=self.product_code,
            quantity=self.quantity,
        )


@dataclass(frozen=True)
class OrderFormDTO:
    order_id: str
    customer_info: CustomerInfoDTO
    shipping_address: AddressDTO
    billing_address: AddressDTO
    lines: tuple[OrderFormLineDTO, ...]
    promotion_code: str | None = None

    @staticmethod
    def from_dict(data: dict[str, Any]) -> OrderFormDTO:
        """Build from decoded JSON; raises KeyError on a missing field."""
        return OrderFormDTO(
            order_id=data["orderId"],
            customer_info=CustomerInfoDTO.from_dict(data["customerInfo"]),
            shipping_address=AddressDTO.from_dict(data["shippingAddress"]),
            billing_address=AddressDTO.from_dict(data["billingAddress"]),
            lines=tuple(OrderFormLineDTO.from_dict(line) for line in data["lines"]),
            promotion_code=data.get("promotionCode"),
        )

    def to_unvalidated_order(self) -> UnvalidatedOrder:
        return UnvalidatedOrder(
            order_id=self.order_id,
            customer_info=self.customer_info.to_unvalidated(),
            shipping_address=self.shipping_address.to_unvalidated(),
            billing_address=self.billing_address.to_unvalidated(),
            lines=tuple(line.to_unvalidated() for line in self.lines),
            promotion_code=self.promotion_code,
        )


# ---------------------------------------------------------------------------
# Output: events and errors
# ---------------------------------------------------------------------------


def event_to_dict(event: PlaceOrderEvent) -> dict[str, Any]:
    """One-key dictionary: the event name mapped to its fields."""
    match event:
        case ShippableOrderPlaced():
            return {
                "ShippableOrderPlaced": {
                    "orderId": event.order_id.value,
                    "shippingAddress": AddressDTO.from_address(event.shipping_address),
                    "shipmentLines": [
                        {
                            "productCode": line.product_code.value,
                            "quantity": str(line.quantity.value),
                        }
                        for line in event.shipment_lines
                    ],
                    "pdf": event.pdf.name,
                }
            }
        case BillableOrderPlaced():
            return {
                "BillableOrderPlaced": {
                    "orderId": event.order_id.value,
                    "billingAddress": AddressDTO.from_address(event.billing_address),
                    "amountToBill": str(event.amount_to_bill.value),
                }
            }
        case OrderAcknowledgmentSent():
            return {
                "OrderAcknowledgmentSent": {
                    "orderId": event.order_id.value,
                    "emailAddress": event.email_address.value,
                }
            }
    raise TypeError(f"Unknown event {event!r}")


@dataclass(frozen=True)
class PlaceOrderErrorDTO:
    code: str
    message: str

    @staticmethod
    def from_domain(error: PlaceOrderError) -> PlaceOrderErrorDTO:
        match error:
            case ValidationError(message=message):
                return PlaceOrderErrorDTO("ValidationError", message)
            case PricingError(message=message):
                return PlaceOrderErrorDTO("PricingError", message)
            case RemoteServiceError():
                return PlaceOrderErrorDTO("RemoteServiceError", error.message)
        raise TypeError(f"Unknown error {error!r}")


@dataclass(frozen=True)
class PlaceOrderResponseDTO:
    """Exactly one of ``events`` and ``error`` is meaningful."""

    events: list[dict[str, Any]]
    error: PlaceOrderErrorDTO | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
