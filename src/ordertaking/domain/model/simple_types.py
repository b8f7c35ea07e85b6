"""Simple and constrained types of the order-taking domain.

Single-value wrappers, enums and the two small choice types
(``ProductCode`` and ``OrderQuantity``).  Every constrained type is an
immutable dataclass with a ``create`` smart constructor returning a
``Result``; calling the dataclass directly skips validation and is
reserved for values already known to be valid.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Union

from returns.pipeline import is_successful
from returns.result import Failure, Result, Success

from ordertaking.domain.exceptions import ConstraintViolation
from ordertaking.domain.model.constrained_type import (
    create_decimal,
    create_int,
    create_like,
    create_string,
    create_string_option,
)


@dataclass(frozen=True)
class String50:
    """Non-empty string of 50 characters or less."""

    value: str

    @classmethod
    def create(cls, field_name: str, value: str | None) -> Result[String50, str]:
        return create_string(field_name, cls, 50, value)

    @classmethod
    def create_option(
        cls, field_name: str, value: str | None
    ) -> Result[String50 | None, str]:
        return create_string_option(field_name, cls, 50, value)


@dataclass(frozen=True)
class EmailAddress:
    value: str

    # anything separated by an "@"
    _PATTERN = re.compile(r".+@.+")

    @classmethod
    def create(cls, field_name: str, value: str | None) -> Result[EmailAddress, str]:
        return create_like(field_name, cls, cls._PATTERN, value)


class VipStatus(Enum):
    NORMAL = "Normal"
    VIP = "VIP"

    @classmethod
    def create(cls, field_name: str, value: str | None) -> Result[VipStatus, str]:
        """A missing or blank status means an ordinary customer."""
        if value is None:
            return Success(cls.NORMAL)
        if not isinstance(value, str):
            return Failure(f"{field_name}: Must be one of 'Normal', 'VIP'")
        if not value.strip():
            return Success(cls.NORMAL)
        for status in cls:
            if status.value == value:
                return Success(status)
        return Failure(f"{field_name}: Must be one of 'Normal', 'VIP'")


@dataclass(frozen=True)
class ZipCode:
    """US zip code, exactly five digits."""

    value: str

    _PATTERN = re.compile(r"\d{5}")

    @classmethod
    def create(cls, field_name: str, value: str | None) -> Result[ZipCode, str]:
        return create_like(field_name, cls, cls._PATTERN, value)


@dataclass(frozen=True)
class UsStateCode:
    """Two-letter US state abbreviation."""

    value: str

    _PATTERN = re.compile(
        r"A[KLRZ]|C[AOT]|D[CE]|FL|GA|HI|I[ADLN]|K[SY]|LA|M[ADEINOST]"
        r"|N[CDEHJMVY]|O[HKR]|P[AR]|RI|S[CD]|T[NX]|UT|V[AIT]|W[AIVY]"
    )

    @classmethod
    def create(cls, field_name: str, value: str | None) -> Result[UsStateCode, str]:
        return create_like(field_name, cls, cls._PATTERN, value)


@dataclass(frozen=True)
class OrderId:
    value: str

    @classmethod
    def create(cls, field_name: str, value: str | None) -> Result[OrderId, str]:
        return create_string(field_name, cls, 50, value)


@dataclass(frozen=True)
class OrderLineId:
    value: str

    @classmethod
    def create(cls, field_name: str, value: str | None) -> Result[OrderLineId, str]:
        return create_string(field_name, cls, 50, value)


# --- Product codes -------------------------------------------------------------


@dataclass(frozen=True)
class WidgetCode:
    """A "W" followed by four digits."""

    value: str

    _PATTERN = re.compile(r"W\d{4}")

    @classmethod
    def create(cls, field_name: str, value: str | None) -> Result[WidgetCode, str]:
        return create_like(field_name, cls, cls._PATTERN, value)


@dataclass(frozen=True)
class GizmoCode:
    """A "G" followed by three digits."""

    value: str

    _PATTERN = re.compile(r"G\d{3}")

    @classmethod
    def create(cls, field_name: str, value: str | None) -> Result[GizmoCode, str]:
        return create_like(field_name, cls, cls._PATTERN, value)


ProductCode = Union[WidgetCode, GizmoCode]


def create_product_code(field_name: str, code: str | None) -> Result[ProductCode, str]:
    """Pick the product variant from the code's first letter."""
    if code is None:
        return Failure(f"{field_name}: Must not be null")
    if code == "":
        return Failure(f"{field_name}: Must not be empty")
    if code.startswith("W"):
        return WidgetCode.create(field_name, code)
    if code.startswith("G"):
        return GizmoCode.create(field_name, code)
    return Failure(f"{field_name}: Format not recognized '{code}'")


# --- Quantities ----------------------------------------------------------------


@dataclass(frozen=True)
class UnitQuantity:
    """Whole number of units between 1 and 1000."""

    value: int

    @classmethod
    def create(cls, field_name: str, value: int) -> Result[UnitQuantity, str]:
        return create_int(field_name, cls, 1, 1000, value)


@dataclass(frozen=True)
class KilogramQuantity:
    """Weight in kilograms between 0.05 and 100.00."""

    value: Decimal

    @classmethod
    def create(cls, field_name: str, value: Decimal) -> Result[KilogramQuantity, str]:
        return create_decimal(
            field_name, cls, Decimal("0.05"), Decimal("100.00"), value
        )


OrderQuantity = Union[UnitQuantity, KilogramQuantity]


def create_order_quantity(
    product_code: ProductCode, quantity: Decimal | float | int
) -> Result[OrderQuantity, str]:
    """Widgets are counted in units, gizmos are weighed in kilograms.

    Unit quantities are truncated to a whole number before the range check.
    NaN and infinity are rejected for both variants.
    """
    amount = Decimal(str(quantity))
    match product_code:
        case WidgetCode():
            if not amount.is_finite():
                return Failure("UnitQuantity: Must be a finite number")
            return UnitQuantity.create("UnitQuantity", int(amount))
        case GizmoCode():
            if not amount.is_finite():
                return Failure("KilogramQuantity: Must be a finite number")
            return KilogramQuantity.create("KilogramQuantity", amount)
    raise TypeError(f"Unknown product code {product_code!r}")


# --- Money ---------------------------------------------------------------------


@dataclass(frozen=True)
class Price:
    """Unit or line price between 0.00 and 1000.00."""

    value: Decimal

    @classmethod
    def create(cls, value: Decimal) -> Result[Price, str]:
        return create_decimal("Price", cls, Decimal("0.0"), Decimal("1000.00"), value)

    @classmethod
    def unsafe_create(cls, value: Decimal | str | int) -> Price:
        """Only for values known to be in range; raises otherwise."""
        result = cls.create(Decimal(str(value)))
        if not is_successful(result):
            raise ConstraintViolation(
                f"Not expecting Price to be out of bounds: {result.failure()}"
            )
        return result.unwrap()

    @classmethod
    def multiply(cls, quantity: Decimal | int, price: Price) -> Result[Price, str]:
        return cls.create(quantity * price.value)


@dataclass(frozen=True)
class BillingAmount:
    """Total to bill, between 0.00 and 10000.00."""

    value: Decimal

    @classmethod
    def create(cls, value: Decimal) -> Result[BillingAmount, str]:
        return create_decimal(
            "BillingAmount", cls, Decimal("0.0"), Decimal("10000.00"), value
        )

    @classmethod
    def sum_prices(cls, prices: list[Price]) -> Result[BillingAmount, str]:
        return cls.create(sum((price.value for price in prices), Decimal("0")))


# --- Misc ----------------------------------------------------------------------


@dataclass(frozen=True)
class PdfAttachment:
    name: str
    data: bytes


@dataclass(frozen=True)
class PromotionCode:
    value: str
