"""NetSuite saved-search export adapter.

Maps ``itemfulfillment`` search rows into FulfillmentRecords. Reference fields
(``item``, ``name``, ``shipmethod`` ...) arrive as lists of ``{"value", "text"}``
objects; only the first entry is used.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Optional

from fulfillment_runtime.application.run_context import RunContext
from fulfillment_runtime.domain.fulfillment.model import FulfillmentRecord, resolve_order_key
from fulfillment_runtime.ports.fulfillments_repository import FulfillmentsRepository

logger = logging.getLogger(__name__)

RECORD_TYPE_FULFILLMENT = "itemfulfillment"
UNKNOWN_CUSTOMER_NAME = "Unknown Customer"
DEFAULT_SHIP_METHOD = "Standard"
DEFAULT_URGENCY = "Normal"
DEFAULT_ORDER_CLASS = "Standard"
FULFILLED = "Fulfilled"


def _ref(values: dict[str, Any], key: str) -> dict[str, Any]:
    refs = values.get(key)
    if isinstance(refs, list) and refs and isinstance(refs[0], dict):
        return refs[0]
    return {}


def _text(values: dict[str, Any], key: str, default: str = "") -> str:
    return str(_ref(values, key).get("text") or default)


def _plain(values: dict[str, Any], key: str) -> str:
    value = values.get(key)
    return str(value) if value else ""


def _parse_quantity(value: Any) -> int:
    # Unparseable quantities become 0 so the aggregator treats the line as malformed.
    try:
        return int(value)
    except (TypeError, ValueError):
        pass
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return 0


def normalize_netsuite_record(record: dict[str, Any]) -> Optional[FulfillmentRecord]:
    """Map one search row; rows that are not item fulfillments yield None."""
    if record.get("recordType") != RECORD_TYPE_FULFILLMENT:
        return None
    values = record.get("values") or {}

    sales_order_id = _plain(values, "createdFrom.tranid")
    transaction_id = _plain(values, "tranid")
    customer = _ref(values, "name")
    sku = _text(values, "item")

    return FulfillmentRecord(
        order_key=resolve_order_key(sales_order_id, transaction_id),
        sku=sku,
        quantity=_parse_quantity(values.get("quantity")),
        item_name=sku,
        size=_plain(values, "item.custitem_item_size"),
        color=_plain(values, "item.custitem_item_color"),
        customer_id=str(customer.get("value") or ""),
        customer_name=str(customer.get("text") or UNKNOWN_CUSTOMER_NAME),
        ship_date=_plain(values, "createdFrom.shipdate"),
        created_date=_plain(values, "datecreated"),
        order_date=_plain(values, "createdFrom.saleseffectivedate"),
        status=FULFILLED,
        fulfillment_id=str(record.get("id") or ""),
        transaction_id=transaction_id,
        ship_method=_text(values, "shipmethod", DEFAULT_SHIP_METHOD),
        urgency=_text(values, "createdFrom.custbody_sales_order_urgency", DEFAULT_URGENCY),
        order_class=_text(values, "createdFrom.class", DEFAULT_ORDER_CLASS),
        memo=_plain(values, "memo"),
    )


def normalize_netsuite_payload(payload: dict[str, Any]) -> list[FulfillmentRecord]:
    """Map a whole saved-search response, preserving row order."""
    if payload.get("status") != "success" or not payload.get("data"):
        logger.warning("NetSuite payload has no successful data (status=%r)", payload.get("status"))
        return []

    records: list[FulfillmentRecord] = []
    for row in payload["data"]:
        record = normalize_netsuite_record(row)
        if record is not None:
            records.append(record)
    logger.info("Normalized %d fulfillment records from %d NetSuite rows", len(records), len(payload["data"]))
    return records


class NetSuiteFulfillmentsRepository(FulfillmentsRepository):
    """Reads fulfillments from a NetSuite saved-search JSON export on disk."""

    def __init__(self, export_path: Path | str) -> None:
        self.export_path = Path(export_path)

    def fetch_fulfillments(self, ctx: RunContext) -> Iterable[FulfillmentRecord]:
        if not self.export_path.exists():
            raise FileNotFoundError(f"NetSuite export not found: {self.export_path}")
        with open(self.export_path, "r", encoding="utf-8") as f:
            payload = json.load(f)
        return normalize_netsuite_payload(payload)
