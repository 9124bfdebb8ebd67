#!/usr/bin/env python3
"""
Menu Recommender CLI — query a menu CSV from the terminal, or start the API server.

USAGE:
  python -m menurec.cli categories                          # Categories in the configured menu
  python -m menurec.cli categories --source menu.csv        # ...or in a specific file/URL
  python -m menurec.cli flavors "Beverage"                  # Flavors offered in a category
  python -m menurec.cli filter --category Food --flavor Spicy
  python -m menurec.cli filter --flavor Sweet --json        # Any category, JSON output
  python -m menurec.cli filter --sample                     # Built-in sample menu

  python -m menurec.cli serve                               # Start API server
  python -m menurec.cli serve --port 8000
"""
from __future__ import annotations

import argparse
import contextlib
import json
import os
import sys

from menurec.config import MENU_SOURCE
from menurec.data.store import MenuStore


def _load_store(args) -> MenuStore:
    """Load the menu named by --source/--sample; exit on failure."""
    store = MenuStore()
    # Progress lines go to stderr so stdout stays clean for --json
    with contextlib.redirect_stdout(sys.stderr):
        if getattr(args, "sample", False):
            result = store.load_sample()
        else:
            result = store.load(args.source, getattr(args, "delimiter", None))
    if not result.ok:
        print(f"  {result.message}", file=sys.stderr)
        sys.exit(1)
    if result.dropped:
        print(f"  ({result.dropped:,} invalid row(s) skipped)", file=sys.stderr)
    return store


def cmd_categories(args):
    """List categories in first-seen order."""
    store = _load_store(args)
    categories = store.categories_available()
    if args.json:
        print(json.dumps(categories))
        return
    print(f"\nCATEGORIES ({len(categories)}):\n")
    for i, category in enumerate(categories, 1):
        flavors = store.flavors_for(category)
        print(f"{i:<4}{category[:40]:<42}{len(flavors):>3} flavor(s)")


def cmd_flavors(args):
    """List flavors offered in one category."""
    store = _load_store(args)
    flavors = store.flavors_for(args.category)
    if args.json:
        print(json.dumps(flavors))
        return
    if not flavors:
        print(f"  No flavors for category '{args.category}'")
        return
    print(f"\nFLAVORS IN {args.category.upper()} ({len(flavors)}):\n")
    for flavor in flavors:
        print(f"   {flavor}")


def cmd_filter(args):
    """Print the items matching a category and flavor."""
    store = _load_store(args)
    items = store.filter(args.category, args.flavor)
    if args.json:
        print(json.dumps([item.to_dict() for item in items], indent=2))
        return
    if not items:
        print("  No menu items found matching your criteria.")
        return
    print(f"\nRECOMMENDATIONS ({len(items)}):\n")
    for item in items:
        price = f"  ${item.price:,.2f}" if item.price is not None else ""
        print(f"   {item.name}  [{item.category} / {item.flavor}]{price}")
        if item.description:
            print(f"      {item.description}")


def cmd_serve(args):
    """Start the API server."""
    import uvicorn
    print(f"\nStarting Menu Recommender API on port {args.port}...")
    uvicorn.run("menurec.main:app", host=args.host, port=args.port, reload=args.reload,
                timeout_keep_alive=65)


def _add_source_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--source", default=MENU_SOURCE, help="CSV path or URL (default: MENU_SOURCE)")
    parser.add_argument("--delimiter", help="Field delimiter (default: detect from filename)")
    parser.add_argument("--sample", action="store_true", help="Use the built-in sample menu")
    parser.add_argument("--json", action="store_true", help="Print JSON")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="menurec",
        description="Menu Recommender — find menu items by category and flavor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    cat_parser = subparsers.add_parser("categories", help="List categories")
    _add_source_args(cat_parser)
    cat_parser.set_defaults(func=cmd_categories)

    flavor_parser = subparsers.add_parser("flavors", help="List flavors for a category")
    flavor_parser.add_argument("category", help="Category name (or the all-categories label)")
    _add_source_args(flavor_parser)
    flavor_parser.set_defaults(func=cmd_flavors)

    filter_parser = subparsers.add_parser("filter", help="Find items by category and flavor")
    filter_parser.add_argument("--category", default="", help="Category (empty = any)")
    filter_parser.add_argument("--flavor", default="", help="Flavor (empty = any)")
    _add_source_args(filter_parser)
    filter_parser.set_defaults(func=cmd_filter)

    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--host", default="0.0.0.0", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")), help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return
    args.func(args)


if __name__ == "__main__":
    main()
