"""Read-side service behind the HTTP API.

Every call recomputes orders and classification from the current fulfillment
set, so responses never reflect stale category membership.
"""

from __future__ import annotations

from typing import Optional

from fulfillment_runtime.application.errors import NotFoundError, OrderNotFoundError
from fulfillment_runtime.application.run_context import RunContext
from fulfillment_runtime.domain.classification import rules
from fulfillment_runtime.domain.classification.config import ClassificationConfig
from fulfillment_runtime.domain.classification.models import ClassificationResult
from fulfillment_runtime.domain.classification.stages import classify
from fulfillment_runtime.domain.common.ids import OrderKey
from fulfillment_runtime.domain.fulfillment.aggregation import aggregate
from fulfillment_runtime.domain.fulfillment.model import FulfillmentRecord, Order
from fulfillment_runtime.domain.fulfillment.rollups import (
    CustomerSummary,
    DataSummary,
    InventoryItem,
    customer_rollup,
    data_summary,
    inventory_rollup,
)
from fulfillment_runtime.domain.packing.models import PackCatalog, PackFitResult
from fulfillment_runtime.domain.packing.resolver import compatible_packs
from fulfillment_runtime.domain.packing.sizing import ALL_SIZES, matches_size_filter
from fulfillment_runtime.domain.packing.worklist import (
    ALL_PACKS,
    BoxSizeEntry,
    build_box_size_worklist,
    filter_worklist,
)
from fulfillment_runtime.ports.fulfillments_repository import FulfillmentsRepository
from fulfillment_runtime.ports.pack_catalog_provider import PackCatalogProvider

ALL_COLORS = "all"


class WarehouseDataService:
    def __init__(
        self,
        fulfillments_repo: FulfillmentsRepository,
        catalog_provider: PackCatalogProvider,
        classification_config: Optional[ClassificationConfig] = None,
    ) -> None:
        self.fulfillments_repo = fulfillments_repo
        self.catalog_provider = catalog_provider
        self.classification_config = classification_config or ClassificationConfig()

    def fulfillments(self) -> list[FulfillmentRecord]:
        ctx = RunContext.from_args(correlation_id="api")
        return list(self.fulfillments_repo.fetch_fulfillments(ctx))

    def get_fulfillment(self, fulfillment_id: str) -> FulfillmentRecord:
        for record in self.fulfillments():
            if record.fulfillment_id == fulfillment_id:
                return record
        raise NotFoundError(f"Fulfillment not found: {fulfillment_id}")

    def orders(self) -> dict[OrderKey, Order]:
        return aggregate(self.fulfillments())

    def get_order(self, order_id: str) -> Order:
        order = self.orders().get(OrderKey(order_id))
        if order is None:
            raise OrderNotFoundError(f"Order not found: {order_id}")
        return order

    def order_fulfillments(self, order_id: str) -> list[FulfillmentRecord]:
        return [r for r in self.fulfillments() if r.order_key == order_id]

    def classification(self) -> tuple[dict[OrderKey, Order], ClassificationResult]:
        orders = self.orders()
        return orders, classify(orders, self.classification_config)

    def singles(self, size: str = ALL_SIZES, color: str = ALL_COLORS) -> list[Order]:
        """Singles narrowed by item size and color, sorted by SKU."""
        orders, result = self.classification()
        singles = [orders[order_id] for order_id in result.ordered_members(rules.SINGLES)]
        if size != ALL_SIZES:
            singles = [o for o in singles if matches_size_filter(o.items[0].sku, o.items[0].size, size)]
        if color != ALL_COLORS:
            singles = [o for o in singles if o.items[0].color == color]
        return sorted(singles, key=lambda o: o.items[0].sku)

    def catalog(self) -> PackCatalog:
        return self.catalog_provider.get_catalog()

    def pack_fit(self, order_id: str) -> PackFitResult:
        order = self.get_order(order_id)
        return compatible_packs(order, self.catalog())

    def worklist(self, size: str = ALL_SIZES, pack: str = ALL_PACKS) -> list[BoxSizeEntry]:
        catalog = self.catalog()
        orders, result = self.classification()
        entries = build_box_size_worklist(orders, catalog, classification=result)
        return filter_worklist(entries, catalog, size_filter=size, pack_key=pack)

    def inventory(self) -> list[InventoryItem]:
        return inventory_rollup(self.fulfillments())

    def customers(self) -> list[CustomerSummary]:
        fulfillments = self.fulfillments()
        return customer_rollup(fulfillments, aggregate(fulfillments))

    def customer_fulfillments(self, customer_id: str) -> list[FulfillmentRecord]:
        return [r for r in self.fulfillments() if r.customer_id == customer_id]

    def summary(self) -> DataSummary:
        fulfillments = self.fulfillments()
        return data_summary(fulfillments, aggregate(fulfillments))
