from __future__ import annotations

from typing import Iterable, List, Optional

from fulfillment_runtime.application.run_context import RunContext
from fulfillment_runtime.domain.fulfillment.model import FulfillmentRecord
from fulfillment_runtime.ports.fulfillments_repository import FulfillmentsRepository


def demo_fulfillments() -> list[FulfillmentRecord]:
    """A small fixed data set covering every category."""
    return [
        FulfillmentRecord.new("DPT10-RED", 1, sales_order_id="SO1001", customer_id="C1", customer_name="Acme"),
        FulfillmentRecord.new("DPT10-RED", 1, sales_order_id="SO1002", customer_id="C2", customer_name="Birch"),
        FulfillmentRecord.new("DPT16-BLU", 1, sales_order_id="SO1002", customer_id="C2", customer_name="Birch"),
        FulfillmentRecord.new("DPT10-RED", 1, sales_order_id="SO1003", customer_id="C3", customer_name="Cedar"),
        FulfillmentRecord.new("DPT16-BLU", 1, sales_order_id="SO1003", customer_id="C3", customer_name="Cedar"),
        FulfillmentRecord.new("DPT26-GRN", 2, sales_order_id="SO1004", customer_id="C1", customer_name="Acme"),
        FulfillmentRecord.new("DPT26-GRN", 1, sales_order_id="SO1005", customer_id="C4", customer_name="Dune"),
        FulfillmentRecord.new("PL-STCK-LOGO", 1, sales_order_id="SO1005", customer_id="C4", customer_name="Dune"),
        FulfillmentRecord.new("MUG-XL", 3, sales_order_id="SO1006", customer_id="C2", customer_name="Birch"),
    ]


class InMemoryFulfillmentsRepository(FulfillmentsRepository):
    def __init__(self, records: Optional[List[FulfillmentRecord]] = None) -> None:
        self.records = records

    def fetch_fulfillments(self, ctx: RunContext) -> Iterable[FulfillmentRecord]:
        if self.records is not None:
            return list(self.records)
        # Provide a minimal default example when none supplied
        return demo_fulfillments()
