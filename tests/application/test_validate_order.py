"""Tests for the ValidateOrder step.

Collaborators are in-memory fakes; the async step is driven with
``asyncio.run``.
"""

import asyncio
from decimal import Decimal

from returns.result import Failure

from ordertaking.application.validate_order import validate_order
from ordertaking.domain.errors import ValidationError
from ordertaking.domain.model.order import Promotion, Standard
from ordertaking.domain.model.simple_types import (
    GizmoCode,
    KilogramQuantity,
    PromotionCode,
    String50,
    UnitQuantity,
    VipStatus,
    WidgetCode,
)
from ordertaking.domain.ports import AddressValidationError
from tests.fakes import (
    FakeAddressChecker,
    FakeProductCatalog,
    make_address,
    make_line,
    make_order,
)


def _validate(order, catalog=None, address_checker=None):
    catalog = catalog or FakeProductCatalog()
    address_checker = address_checker or FakeAddressChecker()
    return asyncio.run(
        validate_order(catalog.product_exists, address_checker, order)
    )


class TestValidateOrderHappyPath:

    def test_builds_validated_order(self):
        validated = _validate(make_order()).unwrap()
        assert validated.order_id.value == "ord1"
        assert validated.customer_info.name.first_name == String50("Jane")
        assert validated.customer_info.email_address.value == "jane@x.com"
        assert validated.customer_info.vip_status == VipStatus.NORMAL
        assert validated.shipping_address.zip_code.value == "12345"
        assert len(validated.lines) == 1
        assert validated.pricing_method == Standard()

    def test_widget_line_has_unit_quantity(self):
        line = _validate(make_order()).unwrap().lines[0]
        assert line.product_code == WidgetCode("W1234")
        assert line.quantity == UnitQuantity(2)

    def test_gizmo_line_has_kilogram_quantity(self):
        order = make_order(lines=(make_line(product_code="G123", quantity=2.5),))
        line = _validate(order).unwrap().lines[0]
        assert line.product_code == GizmoCode("G123")
        assert line.quantity == KilogramQuantity(Decimal("2.5"))

    def test_optional_address_lines_absent_or_empty_are_none(self):
        order = make_order(shipping_address=make_address(line2=""))
        address = _validate(order).unwrap().shipping_address
        assert address.address_line2 is None
        assert address.address_line3 is None

    def test_optional_address_line_present(self):
        order = make_order(shipping_address=make_address(line2="Apt 4"))
        address = _validate(order).unwrap().shipping_address
        assert address.address_line2 == String50("Apt 4")

    def test_promotion_code_selects_promotion_pricing(self):
        validated = _validate(make_order(promotion_code="HALF")).unwrap()
        assert validated.pricing_method == Promotion(PromotionCode("HALF"))

    def test_vip_status(self):
        validated = _validate(make_order(vip_status="VIP")).unwrap()
        assert validated.customer_info.vip_status == VipStatus.VIP


class TestValidateOrderFailures:

    def test_empty_order_id(self):
        result = _validate(make_order(order_id=""))
        assert result == Failure(ValidationError("OrderId must not be empty"))

    def test_bad_email(self):
        result = _validate(make_order(email="nope"))
        assert result.failure().message.startswith("EmailAddress:")

    def test_four_digit_zip_names_zip_code(self):
        result = _validate(make_order(shipping_address=make_address(zip_code="1234")))
        assert result.failure().message.startswith("ZipCode:")

    def test_unknown_state(self):
        result = _validate(make_order(billing_address=make_address(state="ZZ")))
        assert result.failure().message.startswith("State:")

    def test_unknown_product(self):
        catalog = FakeProductCatalog()
        catalog.unknown_products.add("W1234")
        result = _validate(make_order(), catalog=catalog)
        assert result == Failure(ValidationError("Invalid: W1234"))

    def test_bad_product_code_format(self):
        result = _validate(make_order(lines=(make_line(product_code="X99"),)))
        assert result == Failure(
            ValidationError("ProductCode: Format not recognized 'X99'")
        )

    def test_too_many_units(self):
        result = _validate(make_order(lines=(make_line(quantity=1001),)))
        assert result == Failure(
            ValidationError("UnitQuantity: Must not be greater than 1000")
        )

    def test_first_failing_line_is_reported(self):
        lines = (
            make_line("l1"),
            make_line("l2", product_code="X1"),
            make_line("l3", quantity=5000),
        )
        result = _validate(make_order(lines=lines))
        assert result.failure().message == "ProductCode: Format not recognized 'X1'"

    def test_order_id_checked_before_customer(self):
        result = _validate(make_order(order_id="", email="nope"))
        assert result.failure().message == "OrderId must not be empty"


class TestAddressCheck:

    def test_invalid_format_maps_to_not_found_message(self):
        checker = FakeAddressChecker({"bad": AddressValidationError.INVALID_FORMAT})
        order = make_order(shipping_address=make_address(line1="bad"))
        result = _validate(order, address_checker=checker)
        assert result == Failure(ValidationError("Address not found"))

    def test_not_found_maps_to_bad_format_message(self):
        checker = FakeAddressChecker({"gone": AddressValidationError.ADDRESS_NOT_FOUND})
        order = make_order(billing_address=make_address(line1="gone"))
        result = _validate(order, address_checker=checker)
        assert result == Failure(ValidationError("Address has bad format"))

    def test_shipping_then_billing_checked_in_order(self):
        checker = FakeAddressChecker()
        order = make_order(
            shipping_address=make_address(line1="ship"),
            billing_address=make_address(line1="bill"),
        )
        _validate(order, address_checker=checker)
        assert [a.address_line1 for a in checker.checked] == ["ship", "bill"]

    def test_failed_shipping_address_skips_billing_check(self):
        checker = FakeAddressChecker({"bad": AddressValidationError.ADDRESS_NOT_FOUND})
        order = make_order(shipping_address=make_address(line1="bad"))
        _validate(order, address_checker=checker)
        assert len(checker.checked) == 1

    def test_invalid_customer_skips_address_check(self):
        checker = FakeAddressChecker()
        _validate(make_order(email="nope"), address_checker=checker)
        assert checker.checked == []
