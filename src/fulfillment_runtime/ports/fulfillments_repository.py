from __future__ import annotations

from typing import Iterable, Protocol

from fulfillment_runtime.application.run_context import RunContext
from fulfillment_runtime.domain.fulfillment.model import FulfillmentRecord


class FulfillmentsRepository(Protocol):
    def fetch_fulfillments(self, ctx: RunContext) -> Iterable[FulfillmentRecord]: ...
