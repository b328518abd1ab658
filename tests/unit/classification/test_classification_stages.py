"""Unit tests for the individual classification stages."""

from __future__ import annotations

import pytest

from fulfillment_runtime.domain.classification.config import ClassificationConfig
from fulfillment_runtime.domain.classification.stages import (
    classify_bulk,
    classify_high_volume,
    classify_singles,
    classify_unique,
    is_single,
    item_signature,
)
from fulfillment_runtime.domain.common.ids import OrderKey
from fulfillment_runtime.domain.fulfillment.model import Order, OrderItem


def make_order(order_id: str, *items: tuple[str, int]) -> Order:
    return Order(
        id=OrderKey(order_id),
        items=tuple(OrderItem(sku=sku, quantity=qty, name=f"{sku} name") for sku, qty in items),
    )


def make_orders(*orders: Order) -> dict[OrderKey, Order]:
    return {order.id: order for order in orders}


def test_is_single_requires_one_line_and_one_unit():
    assert is_single(make_order("SO1", ("DPT10-RED", 1)))
    assert not is_single(make_order("SO2", ("DPT10-RED", 2)))
    assert not is_single(make_order("SO3", ("DPT10-RED", 1), ("DPT10-RED", 1)))


def test_item_signature_ignores_line_order():
    a = make_order("SO1", ("DPT16-BLU", 1), ("DPT10-RED", 2))
    b = make_order("SO2", ("DPT10-RED", 2), ("DPT16-BLU", 1))

    assert item_signature(a) == item_signature(b) == "DPT10-RED:2|DPT16-BLU:1"


def test_item_signature_distinguishes_quantities():
    a = make_order("SO1", ("DPT10-RED", 1))
    b = make_order("SO2", ("DPT10-RED", 2))

    assert item_signature(a) != item_signature(b)


def test_singles_stage_leaves_the_rest_in_arrival_order():
    orders = make_orders(
        make_order("SO1", ("DPT10-RED", 2)),
        make_order("SO2", ("DPT10-RED", 1)),
        make_order("SO3", ("DPT16-BLU", 3)),
    )

    stage = classify_singles(orders)

    assert stage.singles == {"SO2"}
    assert stage.remaining == ("SO1", "SO3")


def test_bulk_groups_identical_signatures():
    orders = make_orders(
        make_order("SO1", ("DPT10-RED", 1), ("DPT16-BLU", 1)),
        make_order("SO2", ("DPT26-GRN", 2)),
        make_order("SO3", ("DPT16-BLU", 1), ("DPT10-RED", 1)),
    )

    stage = classify_bulk(classify_singles(orders))

    assert stage.bulk == {"SO1", "SO3"}
    assert len(stage.groups) == 1
    group = stage.groups[0]
    assert group.order_ids == ("SO1", "SO3")
    assert group.total_orders == 2
    assert [item.sku for item in group.items] == ["DPT10-RED", "DPT16-BLU"]
    assert stage.remaining == ("SO2",)


def test_bulk_groups_sorted_by_size_then_discovery():
    orders = make_orders(
        make_order("SO1", ("A", 2)),
        make_order("SO2", ("B", 2)),
        make_order("SO3", ("B", 2)),
        make_order("SO4", ("A", 2)),
        make_order("SO5", ("B", 2)),
        make_order("SO6", ("C", 2)),
        make_order("SO7", ("C", 2)),
    )

    groups = classify_bulk(classify_singles(orders)).groups

    assert [g.signature for g in groups] == ["B:2", "A:2", "C:2"]


def test_bulk_never_claims_singles():
    orders = make_orders(make_order("SO1", ("DPT10-RED", 1)), make_order("SO2", ("DPT10-RED", 1)))

    stage = classify_bulk(classify_singles(orders))

    assert stage.bulk == frozenset()
    assert stage.groups == ()


def test_bulk_respects_configured_minimum():
    orders = make_orders(make_order("SO1", ("A", 2)), make_order("SO2", ("A", 2)))
    config = ClassificationConfig(bulk_min_orders=3)

    stage = classify_bulk(classify_singles(orders, config))

    assert stage.bulk == frozenset()
    assert stage.remaining == ("SO1", "SO2")


def test_high_volume_counts_each_order_once_per_sku():
    orders = make_orders(
        make_order("SO1", ("DPT26-GRN", 1), ("DPT26-GRN", 1), ("X", 1)),
        make_order("SO2", ("Y", 3)),
    )

    stage = classify_high_volume(classify_bulk(classify_singles(orders)))

    # SO1 carries DPT26-GRN twice but is one order
    assert stage.high_volume == frozenset()
    assert stage.groups == ()


def test_high_volume_groups_shared_skus():
    orders = make_orders(
        make_order("SO1", ("DPT26-GRN", 2)),
        make_order("SO2", ("DPT26-GRN", 1), ("PL-STCK-LOGO", 1)),
        make_order("SO3", ("MUG-XL", 3)),
    )

    stage = classify_high_volume(classify_bulk(classify_singles(orders)))

    assert stage.high_volume == {"SO1", "SO2"}
    assert len(stage.groups) == 1
    group = stage.groups[0]
    assert group.sku == "DPT26-GRN"
    assert group.order_ids == ("SO1", "SO2")
    assert group.order_count == 2
    assert group.total_quantity == 3
    assert group.item_name == "DPT26-GRN name"
    assert stage.remaining == ("SO3",)


def test_order_may_appear_in_several_high_volume_groups():
    orders = make_orders(
        make_order("SO1", ("A", 1), ("B", 1)),
        make_order("SO2", ("A", 2), ("C", 1)),
        make_order("SO3", ("B", 2), ("D", 1)),
    )

    stage = classify_high_volume(classify_bulk(classify_singles(orders)))

    by_sku = {g.sku: g.order_ids for g in stage.groups}
    assert by_sku == {"A": ("SO1", "SO2"), "B": ("SO1", "SO3")}
    assert stage.high_volume == {"SO1", "SO2", "SO3"}


def test_unique_takes_whatever_is_left():
    orders = make_orders(make_order("SO1", ("DPT10-RED", 1)), make_order("SO2", ("MUG-XL", 3)))

    result = classify_unique(classify_high_volume(classify_bulk(classify_singles(orders))))

    assert result.singles == {"SO1"}
    assert result.unique == {"SO2"}
    assert result.order_ids == ("SO1", "SO2")


def test_stages_cannot_run_out_of_order():
    orders = make_orders(make_order("SO1", ("A", 2)))
    singles = classify_singles(orders)

    with pytest.raises(TypeError):
        classify_high_volume(singles)
    with pytest.raises(TypeError):
        classify_unique(classify_bulk(singles))
