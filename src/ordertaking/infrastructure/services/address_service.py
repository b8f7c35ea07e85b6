"""Stand-in for the remote address verification service."""

from __future__ import annotations

import logging

from returns.result import Result, Success

from ordertaking.domain.model.order import UnvalidatedAddress
from ordertaking.domain.ports import AddressValidationError, CheckedAddress

logger = logging.getLogger(__name__)


async def check_address_exists(
    address: UnvalidatedAddress,
) -> Result[CheckedAddress, AddressValidationError]:
    """Accept every address as found and already normalized."""
    logger.debug("Address check for %s, %s", address.address_line1, address.city)
    return Success(CheckedAddress(address))
