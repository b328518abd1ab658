"""Unit tests for the box-size worklist."""

from __future__ import annotations

from fulfillment_runtime.domain.classification.stages import classify
from fulfillment_runtime.domain.common.ids import OrderKey
from fulfillment_runtime.domain.fulfillment.model import Order, OrderItem
from fulfillment_runtime.domain.packing.models import PackCatalog, PackDefinition
from fulfillment_runtime.domain.packing.resolver import fits_combined_filter
from fulfillment_runtime.domain.packing.worklist import build_box_size_worklist, filter_worklist


def make_order(order_id: str, order_date: str, *items: tuple[str, int], created_date: str = "") -> Order:
    return Order(
        id=OrderKey(order_id),
        items=tuple(OrderItem(sku=s, quantity=q) for s, q in items),
        order_date=order_date,
        created_date=created_date,
    )


def make_catalog() -> PackCatalog:
    return PackCatalog(
        packs=(
            PackDefinition(key="single", name="Single Item", max_items=1),
            PackDefinition(key="pack2", name="2-Pack", max_items=2, combinations=(("DPT10", "DPT16"),)),
        )
    )


def make_orders() -> dict[OrderKey, Order]:
    orders = [
        make_order("SO1", "3/1/2025", ("DPT10-RED", 1), ("DPT16-BLU", 1)),
        make_order("SO2", "3/3/2025", ("DPT10-RED", 1)),
        make_order("SO3", "3/2/2025", ("DPT16-BLU", 1), ("DPT10-BLK", 1)),
        make_order("SO4", "3/4/2025", ("MUG-XL", 2)),
    ]
    return {o.id: o for o in orders}


def test_worklist_sorted_by_pack_then_newest_first():
    entries = build_box_size_worklist(make_orders(), make_catalog())

    assert [(e.fit.optimal, e.order.id) for e in entries] == [
        ("custom", "SO4"),
        ("pack2", "SO3"),
        ("pack2", "SO1"),
        ("single", "SO2"),
    ]


def test_worklist_carries_category_when_classified():
    orders = make_orders()
    result = classify(orders)

    entries = build_box_size_worklist(orders, make_catalog(), classification=result)

    assert {e.order.id: e.category for e in entries}["SO2"] == "singles"


def test_filter_by_pack_and_size():
    catalog = make_catalog()
    entries = build_box_size_worklist(make_orders(), catalog)

    assert [e.order.id for e in filter_worklist(entries, catalog, pack_key="pack2")] == ["SO3", "SO1"]
    assert [e.order.id for e in filter_worklist(entries, catalog, size_filter="16oz")] == ["SO3", "SO1"]
    assert [e.order.id for e in filter_worklist(entries, catalog, size_filter="10oz", pack_key="single")] == ["SO2"]


def test_filter_by_missing_pack_returns_nothing():
    catalog = make_catalog()
    entries = build_box_size_worklist(make_orders(), catalog)

    assert filter_worklist(entries, catalog, pack_key="pack9") == []


def test_blank_order_date_sorts_by_created_date():
    orders = make_orders()
    late = make_order("SO5", "", ("DPT16-RED", 1), ("DPT10-RED", 1), created_date="3/5/2025 9:00 am")
    early = make_order("SO6", "", ("DPT10-BLU", 1), ("DPT16-BLU", 1), created_date="2/28/2025 9:00 am")
    orders.update({late.id: late, early.id: early})

    entries = build_box_size_worklist(orders, make_catalog())

    assert [e.order.id for e in entries if e.fit.optimal == "pack2"] == ["SO5", "SO3", "SO1", "SO6"]


def test_pack_filter_agrees_with_combined_filter():
    catalog = make_catalog()
    entries = build_box_size_worklist(make_orders(), catalog)

    for size_filter in ("all", "10oz", "16oz"):
        expected = [
            e.order.id for e in entries if fits_combined_filter(e.order, size_filter, "pack2", catalog)
        ]
        assert [e.order.id for e in filter_worklist(entries, catalog, size_filter, "pack2")] == expected
