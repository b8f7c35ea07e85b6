"""Application service: Place Order use case, as seen from the host.

Converts the order form DTO into domain input, runs the workflow and
converts whatever comes back into output DTOs.
"""

from __future__ import annotations

import logging

from returns.result import Failure, Success

from ordertaking.application.dto import (
    OrderFormDTO,
    PlaceOrderErrorDTO,
    PlaceOrderResponseDTO,
    event_to_dict,
)
from ordertaking.application.place_order import (
    PlaceOrderDependencies,
    PlaceOrderWorkflow,
)
from ordertaking.domain.errors import RemoteServiceError, ServiceInfo
from ordertaking.domain.exceptions import RemoteServiceUnavailable

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(self, dependencies: PlaceOrderDependencies) -> None:
        self._workflow = PlaceOrderWorkflow(dependencies)

    async def handle(self, order_form: OrderFormDTO) -> PlaceOrderResponseDTO:
        """Place an order.

        Steps:
        1. Turn the form into an unvalidated order (cannot fail).
        2. Run the workflow.  A collaborator that cannot reach its
           service raises ``RemoteServiceUnavailable``; that becomes a
           ``RemoteServiceError`` rather than escaping to the caller.
        3. Map events or the error to DTOs.
        """
        unvalidated_order = order_form.to_unvalidated_order()

        try:
            result = await self._workflow(unvalidated_order)
        except RemoteServiceUnavailable as exc:
            logger.error(
                "Remote service failure placing order %r: %s", order_form.order_id, exc
            )
            result = Failure(
                RemoteServiceError(
                    service=ServiceInfo(name=exc.service_name, endpoint=exc.endpoint),
                    exception=exc.cause,
                )
            )

        match result:
            case Success(events):
                return PlaceOrderResponseDTO(events=[event_to_dict(e) for e in events])
            case Failure(error):
                return PlaceOrderResponseDTO(
                    events=[], error=PlaceOrderErrorDTO.from_domain(error)
                )
        raise TypeError(f"Unexpected workflow result {result!r}")
