"""Unit tests for the end-to-end classification runner."""

from __future__ import annotations

import json

import pytest

from fulfillment_runtime.adapters.config.json_pack_catalog_provider import (
    JsonPackCatalogProvider,
    StaticPackCatalogProvider,
)
from fulfillment_runtime.adapters.inputs.in_memory_fulfillments_repository import InMemoryFulfillmentsRepository
from fulfillment_runtime.adapters.outputs.file_outputs_repository import FileOutputsRepository
from fulfillment_runtime.application.errors import PackCatalogError, RunCancelledError
from fulfillment_runtime.application.run_context import RunContext
from fulfillment_runtime.application.runner import Runner
from fulfillment_runtime.domain.packing.models import PackCatalog, PackDefinition


class RecordingOutputsRepository:
    def __init__(self) -> None:
        self.classification = None
        self.orders = None
        self.fits = None

    def write_classification(self, ctx, result, orders) -> None:
        self.classification = result
        self.orders = orders

    def write_pack_fits(self, ctx, fits) -> None:
        self.fits = fits


def make_catalog() -> PackCatalog:
    return PackCatalog(
        packs=(
            PackDefinition(key="single", name="Single Item", max_items=1),
            PackDefinition(
                key="pack2",
                name="2-Pack",
                max_items=2,
                combinations=(("DPT10", "DPT16"), ("DPT26", "stickers")),
            ),
        )
    )


def make_runner(outputs, **kwargs) -> Runner:
    return Runner(
        fulfillments_repo=InMemoryFulfillmentsRepository(),
        catalog_provider=StaticPackCatalogProvider(make_catalog()),
        outputs_repo=outputs,
        **kwargs,
    )


def test_run_classifies_and_resolves_every_order():
    outputs = RecordingOutputsRepository()

    summary = make_runner(outputs).run(RunContext.from_args(correlation_id="test-run"))

    assert summary["correlation_id"] == "test-run"
    assert summary["fulfillment_count"] == 9
    assert summary["order_count"] == 6
    assert summary["category_counts"] == {"singles": 1, "bulk": 2, "high_volume": 2, "unique": 1}
    assert summary["bulk_group_count"] == 1
    assert summary["high_volume_sku_count"] == 1
    assert summary["optimal_pack_counts"] == {"single": 1, "pack2": 3, "custom": 2}
    assert set(outputs.fits) == set(outputs.orders)
    assert outputs.fits["SO1005"].optimal == "pack2"
    assert outputs.fits["SO1006"].optimal == "custom"


def test_run_can_be_cancelled():
    outputs = RecordingOutputsRepository()
    runner = make_runner(outputs, cancellation_check=lambda: True)

    with pytest.raises(RunCancelledError):
        runner.run(RunContext.from_args())
    assert outputs.fits is None


def test_bad_catalog_fails_before_any_output(tmp_path):
    path = tmp_path / "pack-config.json"
    path.write_text(json.dumps({"packSizes": {"pack2": {"name": "2-Pack", "maxItems": 2}}}), encoding="utf-8")
    outputs = RecordingOutputsRepository()
    runner = Runner(
        fulfillments_repo=InMemoryFulfillmentsRepository(),
        catalog_provider=JsonPackCatalogProvider(path),
        outputs_repo=outputs,
    )

    with pytest.raises(PackCatalogError):
        runner.run(RunContext.from_args())
    assert outputs.classification is None


def test_file_outputs_are_written_as_jsonl(tmp_path):
    runner = make_runner(FileOutputsRepository(str(tmp_path)))

    runner.run(RunContext.from_args(correlation_id="files"))

    rows = [json.loads(line) for line in (tmp_path / "classification.jsonl").read_text().splitlines()]
    assert [r["order_id"] for r in rows] == ["SO1001", "SO1002", "SO1003", "SO1004", "SO1005", "SO1006"]
    by_id = {r["order_id"]: r for r in rows}
    assert by_id["SO1002"]["category"] == "bulk"
    assert by_id["SO1002"]["bulk_signature"] == "DPT10-RED:1|DPT16-BLU:1"
    assert by_id["SO1004"]["high_volume_skus"] == ["DPT26-GRN"]

    fits = [json.loads(line) for line in (tmp_path / "pack_fits.jsonl").read_text().splitlines()]
    assert fits[0] == {"correlation_id": "files", "order_id": "SO1001", "optimal": "single", "all": ["single"]}


def test_empty_input_runs_cleanly():
    outputs = RecordingOutputsRepository()
    runner = Runner(
        fulfillments_repo=InMemoryFulfillmentsRepository(records=[]),
        catalog_provider=StaticPackCatalogProvider(make_catalog()),
        outputs_repo=outputs,
    )

    summary = runner.run(RunContext.from_args())

    assert summary["order_count"] == 0
    assert summary["optimal_pack_counts"] == {}
