from __future__ import annotations

from typing import Mapping, Protocol

from fulfillment_runtime.application.run_context import RunContext
from fulfillment_runtime.domain.classification.models import ClassificationResult
from fulfillment_runtime.domain.common.ids import OrderKey
from fulfillment_runtime.domain.fulfillment.model import Order
from fulfillment_runtime.domain.packing.models import PackFitResult


class OutputsRepository(Protocol):
    def write_classification(
        self, ctx: RunContext, result: ClassificationResult, orders: Mapping[OrderKey, Order]
    ) -> None: ...

    def write_pack_fits(self, ctx: RunContext, fits: Mapping[OrderKey, PackFitResult]) -> None: ...
