#!/usr/bin/env python3
"""Validation script for pack catalog JSON files.

Scans every *.json file under config/ and validates it as a pack catalog:
the JSON schema first, then the combination-length checks the schema cannot
express. Exits with error code if any invalid files are found.
"""

from __future__ import annotations

import sys
from pathlib import Path

from fulfillment_runtime.adapters.config.pack_catalog_loader import load_pack_catalog
from fulfillment_runtime.application.errors import PackCatalogError


def find_repo_root() -> Path:
    """Find the repository root by looking for pyproject.toml."""
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / "pyproject.toml").exists():
            return parent
    return Path.cwd()


def validate_catalog_file(file_path: Path) -> tuple[bool, str | None]:
    try:
        catalog = load_pack_catalog(file_path)
    except PackCatalogError as e:
        where = f" (pack '{e.pack_key}')" if e.pack_key else ""
        return False, f"{e}{where}"
    if len(catalog) == 0:
        return False, "Catalog declares no pack sizes"
    return True, None


def main() -> int:
    config_dir = find_repo_root() / "config"
    if not config_dir.exists():
        print(f"ERROR: Config directory not found: {config_dir}", file=sys.stderr)
        return 1

    errors: list[str] = []
    for catalog_file in sorted(config_dir.glob("*.json")):
        valid, error = validate_catalog_file(catalog_file)
        if not valid:
            errors.append(f"{catalog_file}: {error}")
        else:
            print(f"✓ {catalog_file}")

    if errors:
        print("\nValidation errors:", file=sys.stderr)
        for error in errors:
            print(f"  {error}", file=sys.stderr)
        return 1

    print("\nAll pack catalogs validated successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
