"""Loading and validation of the pack catalog configuration."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

import jsonschema

from fulfillment_runtime.application.errors import PackCatalogError
from fulfillment_runtime.domain.packing.models import SINGLE_PACK_KEY, PackCatalog, PackDefinition

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_PATH = Path(__file__).parent / "schemas" / "pack_catalog.schema.json"


def load_schema(schema_path: Optional[Path] = None) -> dict[str, Any]:
    path = Path(schema_path) if schema_path else DEFAULT_SCHEMA_PATH
    if not path.exists():
        raise FileNotFoundError(f"Schema file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _validate_json(data: Any, schema: dict[str, Any], source: str) -> None:
    try:
        jsonschema.validate(instance=data, schema=schema)
    except jsonschema.ValidationError as e:
        raise PackCatalogError(f"Pack catalog validation failed: {e.message}", source=source) from e
    except jsonschema.SchemaError as e:
        raise PackCatalogError(f"Schema error: {e.message}", source=source) from e


def _build_definition(key: str, raw: dict[str, Any], source: str) -> PackDefinition:
    max_items = raw["maxItems"]
    combinations = tuple(tuple(layout) for layout in raw.get("combinations", []))

    if key == SINGLE_PACK_KEY:
        if max_items != 1:
            raise PackCatalogError(
                f"Pack '{key}' must hold exactly 1 item, got maxItems={max_items}",
                source=source,
                pack_key=key,
            )
        return PackDefinition(key=key, name=raw["name"], max_items=1, combinations=combinations)

    if not combinations:
        raise PackCatalogError(f"Pack '{key}' declares no combinations", source=source, pack_key=key)
    for index, layout in enumerate(combinations):
        if len(layout) != max_items:
            raise PackCatalogError(
                f"Pack '{key}' combination {index} has {len(layout)} slots but maxItems={max_items}",
                source=source,
                pack_key=key,
            )
    return PackDefinition(key=key, name=raw["name"], max_items=max_items, combinations=combinations)


def parse_pack_catalog(
    data: Any, schema: Optional[dict[str, Any]] = None, source: str = "<inline>"
) -> PackCatalog:
    """
    Validate raw catalog JSON and build a PackCatalog.

    Checks the JSON schema first, then the structure the schema cannot express:
    each non-single pack has at least one combination and every combination is
    exactly maxItems long. Declaration order of packSizes is kept.

    Raises:
        PackCatalogError: the catalog is invalid
    """
    _validate_json(data, schema if schema is not None else load_schema(), source)
    packs = tuple(
        _build_definition(key, raw, source) for key, raw in data["packSizes"].items()
    )
    logger.info("Loaded pack catalog from %s with %d packs: %s", source, len(packs), [p.key for p in packs])
    return PackCatalog(packs=packs)


def load_pack_catalog(path: Path | str, schema_path: Optional[Path | str] = None) -> PackCatalog:
    """Load, validate and build the pack catalog stored at ``path``."""
    catalog_path = Path(path)
    if not catalog_path.exists():
        raise FileNotFoundError(f"Pack catalog not found: {catalog_path}")

    try:
        with open(catalog_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise PackCatalogError(f"Invalid JSON in pack catalog {catalog_path}: {e}", source=str(catalog_path)) from e

    schema = load_schema(Path(schema_path) if schema_path else None)
    return parse_pack_catalog(data, schema=schema, source=str(catalog_path))
