"""Workflow step: validate an unvalidated order.

Fields are checked in a fixed order and the first failure is returned;
no attempt is made to collect every problem with the order form.
The only step that waits on the outside world is the address check.
"""

from __future__ import annotations

from decimal import Decimal

from returns.pipeline import is_successful
from returns.result import Failure, Result, Success

from ordertaking.domain.errors import ValidationError
from ordertaking.domain.model.compound_types import Address, CustomerInfo, PersonalName
from ordertaking.domain.model.order import (
    UnvalidatedAddress,
    UnvalidatedCustomerInfo,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
    ValidatedOrder,
    ValidatedOrderLine,
)
from ordertaking.domain.model.simple_types import (
    EmailAddress,
    OrderId,
    OrderLineId,
    OrderQuantity,
    ProductCode,
    String50,
    UsStateCode,
    VipStatus,
    ZipCode,
    create_order_quantity,
    create_product_code,
)
from ordertaking.domain.ports import (
    AddressValidationError,
    CheckAddressExists,
    CheckedAddress,
    CheckProductCodeExists,
)
from ordertaking.domain.service.pricing import create_pricing_method


def to_order_id(order_id: str) -> Result[OrderId, ValidationError]:
    return OrderId.create("OrderId", order_id).alt(ValidationError)


def to_customer_info(
    customer_info: UnvalidatedCustomerInfo,
) -> Result[CustomerInfo, ValidationError]:
    return Result.do(
        CustomerInfo(
            name=PersonalName(first_name=first_name, last_name=last_name),
            email_address=email_address,
            vip_status=vip_status,
        )
        for first_name in String50.create("FirstName", customer_info.first_name)
        for last_name in String50.create("LastName", customer_info.last_name)
        for email_address in EmailAddress.create(
            "EmailAddress", customer_info.email_address
        )
        for vip_status in VipStatus.create("VipStatus", customer_info.vip_status)
    ).alt(ValidationError)


# --- Addresses -----------------------------------------------------------------


def _address_error(error: AddressValidationError) -> ValidationError:
    # TODO: these two messages look swapped; confirm with the address
    # service owners before changing them.
    match error:
        case AddressValidationError.INVALID_FORMAT:
            return ValidationError("Address not found")
        case AddressValidationError.ADDRESS_NOT_FOUND:
            return ValidationError("Address has bad format")
    raise TypeError(f"Unknown address error {error!r}")


async def to_checked_address(
    check_address_exists: CheckAddressExists,
    address: UnvalidatedAddress,
) -> Result[CheckedAddress, ValidationError]:
    result = await check_address_exists(address)
    return result.alt(_address_error)


def to_address(checked_address: CheckedAddress) -> Result[Address, ValidationError]:
    raw = checked_address.address
    return Result.do(
        Address(
            address_line1=address_line1,
            address_line2=address_line2,
            address_line3=address_line3,
            address_line4=address_line4,
            city=city,
            zip_code=zip_code,
            state=state,
            country=country,
        )
        for address_line1 in String50.create("AddressLine1", raw.address_line1)
        for address_line2 in String50.create_option("AddressLine2", raw.address_line2)
        for address_line3 in String50.create_option("AddressLine3", raw.address_line3)
        for address_line4 in String50.create_option("AddressLine4", raw.address_line4)
        for city in String50.create("City", raw.city)
        for zip_code in ZipCode.create("ZipCode", raw.zip_code)
        for state in UsStateCode.create("State", raw.state)
        for country in String50.create("Country", raw.country)
    ).alt(ValidationError)


async def _to_valid_address(
    check_address_exists: CheckAddressExists,
    address: UnvalidatedAddress,
) -> Result[Address, ValidationError]:
    checked = await to_checked_address(check_address_exists, address)
    return checked.bind(to_address)


# --- Order lines ---------------------------------------------------------------


def to_order_line_id(order_line_id: str) -> Result[OrderLineId, ValidationError]:
    return OrderLineId.create("OrderLineId", order_line_id).alt(ValidationError)


def to_product_code(
    check_product_exists: CheckProductCodeExists,
    product_code: str,
) -> Result[ProductCode, ValidationError]:
    def check_product(code: ProductCode) -> Result[ProductCode, ValidationError]:
        if check_product_exists(code):
            return Success(code)
        return Failure(ValidationError(f"Invalid: {code.value}"))

    return (
        create_product_code("ProductCode", product_code)
        .alt(ValidationError)
        .bind(check_product)
    )


def to_order_quantity(
    product_code: ProductCode, quantity: Decimal | float | int
) -> Result[OrderQuantity, ValidationError]:
    return create_order_quantity(product_code, quantity).alt(ValidationError)


def to_validated_order_line(
    check_product_exists: CheckProductCodeExists,
    line: UnvalidatedOrderLine,
) -> Result[ValidatedOrderLine, ValidationError]:
    return Result.do(
        ValidatedOrderLine(
            order_line_id=order_line_id,
            product_code=product_code,
            quantity=quantity,
        )
        for order_line_id in to_order_line_id(line.order_line_id)
        for product_code in to_product_code(check_product_exists, line.product_code)
        for quantity in to_order_quantity(product_code, line.quantity)
    )


def to_validated_order_lines(
    check_product_exists: CheckProductCodeExists,
    lines: tuple[UnvalidatedOrderLine, ...],
) -> Result[tuple[ValidatedOrderLine, ...], ValidationError]:
    validated: list[ValidatedOrderLine] = []
    for line in lines:
        result = to_validated_order_line(check_product_exists, line)
        if not is_successful(result):
            return result
        validated.append(result.unwrap())
    return Success(tuple(validated))


# --- The step ------------------------------------------------------------------


async def validate_order(
    check_product_exists: CheckProductCodeExists,
    check_address_exists: CheckAddressExists,
    unvalidated_order: UnvalidatedOrder,
) -> Result[ValidatedOrder, ValidationError]:
    """Validate every field of the order form, stopping at the first failure.

    Order of checks: order id, customer, shipping address, billing
    address, order lines.  Addresses are checked one after the other so a
    bad shipping address never triggers a lookup of the billing address.
    """
    header = Result.do(
        (order_id, customer_info)
        for order_id in to_order_id(unvalidated_order.order_id)
        for customer_info in to_customer_info(unvalidated_order.customer_info)
    )
    if not is_successful(header):
        return header

    shipping_address = await _to_valid_address(
        check_address_exists, unvalidated_order.shipping_address
    )
    if not is_successful(shipping_address):
        return shipping_address

    billing_address = await _to_valid_address(
        check_address_exists, unvalidated_order.billing_address
    )
    if not is_successful(billing_address):
        return billing_address

    lines = to_validated_order_lines(check_product_exists, unvalidated_order.lines)

    order_id, customer_info = header.unwrap()
    return lines.map(
        lambda validated_lines: ValidatedOrder(
            order_id=order_id,
            customer_info=customer_info,
            shipping_address=shipping_address.unwrap(),
            billing_address=billing_address.unwrap(),
            lines=validated_lines,
            pricing_method=create_pricing_method(unvalidated_order.promotion_code),
        )
    )
