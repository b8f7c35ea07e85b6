"""Compound types shared across the order-taking domain: customers and addresses."""

from __future__ import annotations

from dataclasses import dataclass

from ordertaking.domain.model.simple_types import (
    EmailAddress,
    String50,
    UsStateCode,
    VipStatus,
    ZipCode,
)


@dataclass(frozen=True)
class PersonalName:
    first_name: String50
    last_name: String50


@dataclass(frozen=True)
class CustomerInfo:
    name: PersonalName
    email_address: EmailAddress
    vip_status: VipStatus = VipStatus.NORMAL


@dataclass(frozen=True)
class Address:
    """A postal address.

    Lines 2 to 4 are optional and are ``None`` when absent.
    """

    address_line1: String50
    address_line2: String50 | None
    address_line3: String50 | None
    address_line4: String50 | None
    city: String50
    zip_code: ZipCode
    state: UsStateCode
    country: String50
