"""Unit tests for grouping fulfillment records into orders."""

from __future__ import annotations

import logging

from fulfillment_runtime.domain.fulfillment.aggregation import aggregate, is_well_formed
from fulfillment_runtime.domain.fulfillment.model import FulfillmentRecord, resolve_order_key


def make_record(order: str | None, sku: str = "DPT10-RED", quantity: int = 1, **fields) -> FulfillmentRecord:
    return FulfillmentRecord.new(sku, quantity, sales_order_id=order, **fields)


def test_resolve_order_key_prefers_sales_order():
    assert resolve_order_key("SO1", "IF9") == "SO1"
    assert resolve_order_key("", "IF9") == "IF9"
    assert resolve_order_key(None, None) is None


def test_groups_lines_by_order_in_first_seen_order():
    orders = aggregate(
        [
            make_record("SO2", "DPT10-RED"),
            make_record("SO1", "DPT16-BLU"),
            make_record("SO2", "DPT26-GRN", 2),
        ]
    )

    assert list(orders) == ["SO2", "SO1"]
    assert orders["SO2"].skus == ["DPT10-RED", "DPT26-GRN"]
    assert orders["SO2"].total_quantity == 3
    assert orders["SO1"].line_count == 1


def test_repeated_sku_lines_are_not_merged():
    """Two lines of the same SKU stay two items, so the order is never a single."""
    orders = aggregate([make_record("SO1"), make_record("SO1")])

    assert orders["SO1"].line_count == 2
    assert orders["SO1"].total_quantity == 2


def test_transaction_id_is_used_when_no_sales_order():
    record = FulfillmentRecord.new("DPT10-RED", 1, sales_order_id="", transaction_id="IF77")

    orders = aggregate([record])

    assert list(orders) == ["IF77"]


def test_order_fields_come_from_first_record():
    orders = aggregate(
        [
            make_record("SO1", customer_id="C1", customer_name="Acme", order_date="3/1/2025"),
            make_record("SO1", "DPT16-BLU", customer_id="C9", customer_name="Other", order_date="4/1/2025"),
        ]
    )

    order = orders["SO1"]
    assert order.customer_id == "C1"
    assert order.customer_name == "Acme"
    assert order.order_date == "3/1/2025"


def test_malformed_records_are_excluded_and_logged(caplog):
    records = [
        make_record(None),
        make_record("SO1", sku=""),
        make_record("SO2", quantity=0),
        make_record("SO3"),
    ]

    with caplog.at_level(logging.WARNING):
        orders = aggregate(records)

    assert list(orders) == ["SO3"]
    assert sum("Skipping malformed fulfillment" in r.message for r in caplog.records) == 3


def test_is_well_formed():
    assert is_well_formed(make_record("SO1"))
    assert not is_well_formed(make_record("SO1", quantity=-1))


def test_empty_input_gives_no_orders():
    assert aggregate([]) == {}
