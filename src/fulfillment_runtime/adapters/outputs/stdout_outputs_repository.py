from __future__ import annotations

import json
from typing import Mapping

from fulfillment_runtime.adapters.outputs.serialization import classification_rows, pack_fit_rows
from fulfillment_runtime.application.run_context import RunContext
from fulfillment_runtime.domain.classification.models import ClassificationResult
from fulfillment_runtime.domain.common.ids import OrderKey
from fulfillment_runtime.domain.fulfillment.model import Order
from fulfillment_runtime.domain.packing.models import PackFitResult
from fulfillment_runtime.ports.outputs_repository import OutputsRepository


class StdoutOutputsRepository(OutputsRepository):
    def write_classification(
        self, ctx: RunContext, result: ClassificationResult, orders: Mapping[OrderKey, Order]
    ) -> None:
        for row in classification_rows(ctx, result, orders):
            print(json.dumps({"type": "classification", **row}))

    def write_pack_fits(self, ctx: RunContext, fits: Mapping[OrderKey, PackFitResult]) -> None:
        for row in pack_fit_rows(ctx, fits):
            print(json.dumps({"type": "pack_fit", **row}))
