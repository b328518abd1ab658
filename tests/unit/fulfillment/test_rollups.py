"""Unit tests for inventory, customer and summary rollups."""

from __future__ import annotations

from fulfillment_runtime.domain.fulfillment.aggregation import aggregate
from fulfillment_runtime.domain.fulfillment.model import FulfillmentRecord
from fulfillment_runtime.domain.fulfillment.rollups import customer_rollup, data_summary, inventory_rollup


def make_records() -> list[FulfillmentRecord]:
    return [
        FulfillmentRecord.new(
            "DPT10-RED", 1, sales_order_id="SO1", customer_id="C1", customer_name="Acme",
            created_date="3/1/2025", order_date="3/1/2025", item_name="10oz Red",
        ),
        FulfillmentRecord.new(
            "DPT10-RED", 2, sales_order_id="SO2", customer_id="C1", customer_name="Acme",
            created_date="3/5/2025", order_date="3/4/2025", item_name="10oz Red",
        ),
        FulfillmentRecord.new(
            "DPT16-BLU", 1, sales_order_id="SO2", customer_id="C1", customer_name="Acme",
            created_date="3/5/2025", order_date="3/4/2025",
        ),
        FulfillmentRecord.new(
            "DPT26-GRN", 1, sales_order_id="SO3", customer_id="C2", customer_name="Birch",
            created_date="2/20/2025", order_date="2/19/2025",
        ),
        FulfillmentRecord.new("DPT26-GRN", 1, sales_order_id="SO4", created_date="2/21/2025"),
    ]


def test_inventory_rollup_sums_units_per_sku():
    items = {item.sku: item for item in inventory_rollup(make_records())}

    assert list(items) == ["DPT10-RED", "DPT16-BLU", "DPT26-GRN"]
    assert items["DPT10-RED"].total_fulfilled == 3
    assert items["DPT10-RED"].name == "10oz Red"
    assert items["DPT10-RED"].last_fulfilled == "3/5/2025"
    # Falls back to the SKU when no item name is known
    assert items["DPT16-BLU"].name == "DPT16-BLU"


def test_customer_rollup_counts_orders_and_units():
    records = make_records()
    customers = {c.id: c for c in customer_rollup(records, aggregate(records))}

    assert set(customers) == {"C1", "C2"}
    acme = customers["C1"]
    assert acme.name == "Acme"
    assert acme.total_orders == 2
    assert acme.total_quantity == 4
    assert acme.last_order_date == "3/5/2025"
    assert customers["C2"].total_orders == 1


def test_data_summary_counts_distinct_entities():
    records = make_records()

    summary = data_summary(records, aggregate(records))

    assert summary.total_fulfillments == 5
    assert summary.total_items == 3
    assert summary.total_orders == 4
    assert summary.total_customers == 2
