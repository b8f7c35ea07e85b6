"""Everything that can go wrong in the PlaceOrder workflow.

These are plain values, returned inside ``returns.result.Failure``;
they are never raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ValidationError:
    message: str


@dataclass(frozen=True)
class PricingError:
    message: str


@dataclass(frozen=True)
class ServiceInfo:
    name: str
    endpoint: str


@dataclass(frozen=True)
class RemoteServiceError:
    service: ServiceInfo
    exception: Exception

    @property
    def message(self) -> str:
        return f"{self.service.name}: {self.exception}"


PlaceOrderError = Union[ValidationError, PricingError, RemoteServiceError]
