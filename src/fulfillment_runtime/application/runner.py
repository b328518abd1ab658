from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from fulfillment_runtime.application.errors import RunCancelledError
from fulfillment_runtime.application.run_context import RunContext
from fulfillment_runtime.domain.classification.config import ClassificationConfig
from fulfillment_runtime.domain.classification.stages import classify
from fulfillment_runtime.domain.common.ids import OrderKey
from fulfillment_runtime.domain.fulfillment.aggregation import aggregate
from fulfillment_runtime.domain.packing.models import PackFitResult
from fulfillment_runtime.domain.packing.resolver import compatible_packs
from fulfillment_runtime.ports.fulfillments_repository import FulfillmentsRepository
from fulfillment_runtime.ports.outputs_repository import OutputsRepository
from fulfillment_runtime.ports.pack_catalog_provider import PackCatalogProvider

logger = logging.getLogger(__name__)


class Runner:
    def __init__(
        self,
        fulfillments_repo: FulfillmentsRepository,
        catalog_provider: PackCatalogProvider,
        outputs_repo: OutputsRepository,
        classification_config: Optional[ClassificationConfig] = None,
        cancellation_check: Optional[Callable[[], bool]] = None,
    ) -> None:
        self.fulfillments_repo = fulfillments_repo
        self.catalog_provider = catalog_provider
        self.outputs_repo = outputs_repo
        self.classification_config = classification_config or ClassificationConfig()
        self.cancellation_check = cancellation_check

    def _check_cancelled(self, ctx: RunContext) -> None:
        if self.cancellation_check and self.cancellation_check():
            raise RunCancelledError(f"Run cancelled for correlation_id={ctx.correlation_id.value}")

    def run(self, ctx: RunContext) -> dict:
        started_at = datetime.now(timezone.utc)

        # Load the catalog first so configuration errors surface before any work
        catalog = self.catalog_provider.get_catalog()

        fulfillments = list(self.fulfillments_repo.fetch_fulfillments(ctx))
        orders = aggregate(fulfillments)
        self._check_cancelled(ctx)

        result = classify(orders, self.classification_config)

        fits: dict[OrderKey, PackFitResult] = {}
        for order_id, order in orders.items():
            self._check_cancelled(ctx)
            fits[order_id] = compatible_packs(order, catalog)

        self.outputs_repo.write_classification(ctx, result, orders)
        self.outputs_repo.write_pack_fits(ctx, fits)

        optimal_pack_counts: dict[str, int] = {}
        for fit in fits.values():
            optimal_pack_counts[fit.optimal] = optimal_pack_counts.get(fit.optimal, 0) + 1

        duration_ms = int((datetime.now(timezone.utc) - started_at).total_seconds() * 1000)
        summary = {
            "correlation_id": ctx.correlation_id.value,
            "fulfillment_count": len(fulfillments),
            "order_count": len(orders),
            "category_counts": result.counts(),
            "bulk_group_count": len(result.bulk_groups),
            "high_volume_sku_count": len(result.high_volume_groups),
            "optimal_pack_counts": optimal_pack_counts,
            "duration_ms": duration_ms,
        }
        logger.info("Run %s completed: %s", ctx.correlation_id.value, summary)
        return summary
