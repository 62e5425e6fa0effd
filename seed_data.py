#!/usr/bin/env python3
"""
Seed the catalog from a JSON document and reset cached lookups.

Usage:
    python seed_data.py catalog.json             # Add missing categories/products/coupons
    python seed_data.py catalog.json --replace   # Empty catalog tables first
    python seed_data.py --validate               # Check catalog integrity
    python seed_data.py --clear-cache            # Drop the shared cache table only
"""

import json
import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.caching.duckdb_store import DuckDBCacheStore
from app.repositories.db import Database
from etl import seed_catalog, validate_catalog
from settings import DB_PATH
from settings.logging import setup_logging

logger = setup_logging(level="INFO", to_file=True)


def run_validation(db: Database) -> bool:
    """Print a catalog validation report."""
    result = validate_catalog(db.connection())
    status = "OK" if result["valid"] else "ISSUES FOUND"

    print("\n" + "=" * 60)
    print(f"CATALOG VALIDATION: {status}")
    print("=" * 60)
    for name, value in result["stats"].items():
        print(f"  {name}: {value:,}")
    for issue in result["issues"]:
        print(f"  ! {issue}")
    print("=" * 60 + "\n")
    return result["valid"]


def clear_cache(db: Database) -> None:
    """Drop shared cache entries so readers refill from the new catalog."""
    DuckDBCacheStore(db).clear()


def main():
    args = sys.argv[1:]
    db = Database(DB_PATH)

    try:
        if "--validate" in args:
            sys.exit(0 if run_validation(db) else 1)

        if args == ["--clear-cache"]:
            clear_cache(db)
            return

        files = [a for a in args if not a.startswith("-")]
        if len(files) != 1:
            print(__doc__)
            sys.exit(1)

        path = Path(files[0])
        data = json.loads(path.read_text(encoding="utf-8"))
        replace = "--replace" in args

        logger.info("Seeding {} into {}{}", path, DB_PATH, " [REPLACE]" if replace else "")
        seed_catalog(db.connection(), data, replace=replace)
        clear_cache(db)

        run_validation(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
