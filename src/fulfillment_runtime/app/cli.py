from __future__ import annotations

import argparse
import json
import sys
from datetime import datetime, timezone
from typing import Optional

from fulfillment_runtime.adapters.config.pack_catalog_loader import load_pack_catalog
from fulfillment_runtime.application.errors import PackCatalogError
from fulfillment_runtime.application.run_context import RunContext
from fulfillment_runtime.application.runner import Runner
from fulfillment_runtime.app.factory import (
    create_adapters,
    create_classification_config,
    create_fulfillments_repository,
    create_pack_catalog_provider,
)
from fulfillment_runtime.domain.classification import rules
from fulfillment_runtime.domain.classification.stages import classify
from fulfillment_runtime.domain.common.ids import OrderKey
from fulfillment_runtime.domain.fulfillment.aggregation import aggregate
from fulfillment_runtime.domain.packing.resolver import compatible_packs
from fulfillment_runtime.observability.logging import configure_logging
from fulfillment_runtime.settings import Settings, get_settings


def parse_datetime(value: Optional[str]) -> Optional[datetime]:
    if value is None:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _load_orders(settings: Settings, ctx: RunContext):
    repo = create_fulfillments_repository(settings)
    return aggregate(repo.fetch_fulfillments(ctx))


def cmd_run(args: argparse.Namespace, settings: Settings) -> int:
    ctx = RunContext.from_args(
        as_of_ts=parse_datetime(args.as_of_ts) or datetime.now(timezone.utc),
        correlation_id=args.correlation_id,
    )
    fulfillments_repo, catalog_provider, outputs_repo = create_adapters(settings, stdout_outputs=args.stdout)
    runner = Runner(
        fulfillments_repo=fulfillments_repo,
        catalog_provider=catalog_provider,
        outputs_repo=outputs_repo,
        classification_config=create_classification_config(settings),
    )
    summary = runner.run(ctx)
    print(json.dumps(summary, indent=2))
    return 0


def cmd_classify(args: argparse.Namespace, settings: Settings) -> int:
    orders = _load_orders(settings, RunContext.from_args(correlation_id="cli"))
    result = classify(orders, create_classification_config(settings))
    payload = {
        "counts": result.counts(),
        rules.SINGLES: list(result.ordered_members(rules.SINGLES)),
        "bulk_groups": [
            {"signature": g.signature, "order_ids": list(g.order_ids)} for g in result.bulk_groups
        ],
        "high_volume_groups": [
            {"sku": g.sku, "order_ids": list(g.order_ids), "total_quantity": g.total_quantity}
            for g in result.high_volume_groups
        ],
        rules.UNIQUE: list(result.ordered_members(rules.UNIQUE)),
    }
    print(json.dumps(payload, indent=2))
    return 0


def cmd_packs(args: argparse.Namespace, settings: Settings) -> int:
    orders = _load_orders(settings, RunContext.from_args(correlation_id="cli"))
    order = orders.get(OrderKey(args.order_id))
    if order is None:
        print(f"Order not found: {args.order_id}", file=sys.stderr)
        return 1
    catalog = create_pack_catalog_provider(settings).get_catalog()
    fit = compatible_packs(order, catalog)
    print(json.dumps({"order_id": order.id, **fit.to_dict()}, indent=2))
    return 0


def cmd_validate_catalog(args: argparse.Namespace, settings: Settings) -> int:
    path = args.path or settings.pack_config_path
    try:
        catalog = load_pack_catalog(path, schema_path=settings.pack_schema_path)
    except (PackCatalogError, FileNotFoundError) as e:
        print(f"✗ {path}: {e}", file=sys.stderr)
        return 1
    print(f"✓ {path}: {len(catalog)} pack sizes ({', '.join(catalog.keys())})")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    configure_logging()
    parser = argparse.ArgumentParser(description="Fulfillment Runtime CLI")
    subparsers = parser.add_subparsers(dest="command")

    run_parser = subparsers.add_parser("run", help="Run a full classification and pack-fit pass")
    run_parser.add_argument("--as-of", dest="as_of_ts")
    run_parser.add_argument("--correlation-id", dest="correlation_id")
    run_parser.add_argument("--stdout", action="store_true", help="Print outputs instead of writing files")

    subparsers.add_parser("classify", help="Print category counts and groups as JSON")

    packs_parser = subparsers.add_parser("packs", help="Print the pack fit of one order")
    packs_parser.add_argument("--order", required=True, dest="order_id")

    validate_parser = subparsers.add_parser("validate-catalog", help="Validate a pack catalog file")
    validate_parser.add_argument("path", nargs="?", help="Defaults to PACK_CONFIG_PATH")

    args = parser.parse_args(argv)
    commands = {
        "run": cmd_run,
        "classify": cmd_classify,
        "packs": cmd_packs,
        "validate-catalog": cmd_validate_catalog,
    }
    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 0
    return handler(args, get_settings())


if __name__ == "__main__":
    sys.exit(main())
