from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Mapping

from fulfillment_runtime.adapters.outputs.serialization import classification_rows, pack_fit_rows
from fulfillment_runtime.application.run_context import RunContext
from fulfillment_runtime.domain.classification.models import ClassificationResult
from fulfillment_runtime.domain.common.ids import OrderKey
from fulfillment_runtime.domain.fulfillment.model import Order
from fulfillment_runtime.domain.packing.models import PackFitResult
from fulfillment_runtime.ports.outputs_repository import OutputsRepository
from fulfillment_runtime.settings import get_settings


class FileOutputsRepository(OutputsRepository):
    def __init__(self, output_dir: str | None = None) -> None:
        settings = get_settings()
        self.output_dir = Path(output_dir or settings.output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def _write_jsonl(self, path: Path, items: Iterable[dict]) -> None:
        with path.open("w") as f:
            for item in items:
                f.write(json.dumps(item))
                f.write("\n")

    def write_classification(
        self, ctx: RunContext, result: ClassificationResult, orders: Mapping[OrderKey, Order]
    ) -> None:
        self._write_jsonl(self.output_dir / "classification.jsonl", classification_rows(ctx, result, orders))

    def write_pack_fits(self, ctx: RunContext, fits: Mapping[OrderKey, PackFitResult]) -> None:
        self._write_jsonl(self.output_dir / "pack_fits.jsonl", pack_fit_rows(ctx, fits))
