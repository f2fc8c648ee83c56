# storefront/cli.py
"""
Batch runner for the storefront catalog core.

Commands:
- snapshot: fetch the catalog from the inventory API and save it as JSON
- related:  write related products for one slug (or every product) as CSV
- specs:    write display spec entries for one slug (or every product) as CSV

The CSVs always carry a fixed header so downstream tooling can rely
on column names.
"""

from __future__ import annotations
import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import pandas as pd
from loguru import logger

from storefront.catalog_client import get_products
from storefront.catalog_snapshot import load_catalog_snapshot, write_catalog_snapshot
from storefront.config import CATALOG_SNAPSHOT_PATH, RELATED_DEFAULT_LIMIT, Product
from storefront.formatting import get_spec_entries
from storefront.related import get_related_products


def load_catalog(path: Optional[Path]) -> List[Product]:
    if path is not None:
        return load_catalog_snapshot(path)
    if CATALOG_SNAPSHOT_PATH.exists():
        return load_catalog_snapshot(CATALOG_SNAPSHOT_PATH)
    return get_products()


def select_products(catalog: List[Product], slug: Optional[str]) -> List[Product]:
    if slug is None:
        return list(catalog)
    return [p for p in catalog if p.slug == slug]


def related_rows(catalog: List[Product], targets: List[Product], limit: int) -> List[Tuple[str, str]]:
    rows: List[Tuple[str, str]] = []
    for p in targets:
        for r in get_related_products(p, catalog, limit):
            rows.append((p.slug, r.slug))
    return rows


def spec_rows(targets: List[Product]) -> List[Tuple[str, str, str]]:
    rows: List[Tuple[str, str, str]] = []
    for p in targets:
        for entry in get_spec_entries(p.specs):
            rows.append((p.slug, entry.label, entry.value))
    return rows


def write_csv(rows: list, columns: List[str], out_path: Path) -> None:
    df = pd.DataFrame(rows, columns=columns)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(out_path, index=False)
    logger.info("Wrote {} rows to {}", len(df), out_path)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="storefront")
    ap.add_argument("--catalog", type=str, default=None, help="optional catalog snapshot JSON")
    sub = ap.add_subparsers(dest="command", required=True)

    snap = sub.add_parser("snapshot", help="fetch the catalog and save it as JSON")
    snap.add_argument("--out", type=str, default=str(CATALOG_SNAPSHOT_PATH))

    rel = sub.add_parser("related", help="related products as CSV")
    rel.add_argument("--slug", type=str, default=None, help="single product slug (default: all)")
    rel.add_argument("--limit", type=int, default=RELATED_DEFAULT_LIMIT)
    rel.add_argument("--out", type=str, default="artifacts/related.csv")

    spc = sub.add_parser("specs", help="display spec entries as CSV")
    spc.add_argument("--slug", type=str, default=None, help="single product slug (default: all)")
    spc.add_argument("--out", type=str, default="artifacts/specs.csv")

    args = ap.parse_args(argv)

    if args.command == "snapshot":
        products = get_products()
        if not products:
            print("No products fetched; snapshot not written", file=sys.stderr)
            return 1
        write_catalog_snapshot(products, Path(args.out))
        print(f"Wrote {len(products)} products to {args.out}")
        return 0

    catalog = load_catalog(Path(args.catalog) if args.catalog else None)
    print(f"Loaded {len(catalog)} products")
    targets = select_products(catalog, args.slug)
    if args.slug is not None and not targets:
        print(f"Unknown product slug: {args.slug}", file=sys.stderr)
        return 1

    if args.command == "related":
        rows = related_rows(catalog, targets, max(0, args.limit))
        write_csv(rows, ["Product", "Related_product"], Path(args.out))
    else:
        rows = spec_rows(targets)
        write_csv(rows, ["Product", "Label", "Value"], Path(args.out))
    print(f"Wrote {len(rows)} rows to {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
