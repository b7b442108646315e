"""
Store CLI: inspect and prune a Dairycart store from the command line.

Connection settings come from DAIRYCART_STORE_URL, DAIRYCART_USERNAME, DAIRYCART_PASSWORD
(and optionally DAIRYCART_TIMEOUT), read from the environment or a .env file.

Usage examples:
  python -m scripts.store_cli product-exists --sku t-shirt-red-small
  python -m scripts.store_cli list-products --filter page=2 --filter limit=25
  python -m scripts.store_cli delete-discount --id 12

product-exists exits 0 when the SKU exists and 3 when it does not.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from dairyclient.api.client import ApiClient
from dairyclient.api.errors import ConfigurationError, DairyClientError
from dairyclient.config import load_settings


def _parse_filters(pairs: list[str] | None) -> dict[str, str] | None:
    if not pairs:
        return None
    out: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"filter must look like key=value, got {pair!r}")
        out[key] = value
    return out


def _print_json(obj: Any) -> None:
    payload = obj.to_dict() if hasattr(obj, "to_dict") else obj
    print(json.dumps(payload, indent=2, sort_keys=True))


def run_command(client: ApiClient, args: argparse.Namespace, query: dict[str, str] | None = None) -> int:
    cmd = args.cmd
    if cmd == "product-exists":
        exists = client.products.exists(args.sku)
        print("yes" if exists else "no")
        return 0 if exists else 3
    if cmd == "get-product":
        _print_json(client.products.get(args.sku))
        return 0
    if cmd == "list-products":
        _print_json(client.products.list(query))
        return 0
    if cmd == "delete-product":
        client.products.delete(args.sku)
        logging.info(f"Deleted product {args.sku}")
        return 0
    if cmd == "get-product-root":
        _print_json(client.product_roots.get(args.id))
        return 0
    if cmd == "list-product-roots":
        _print_json(client.product_roots.list(query))
        return 0
    if cmd == "get-discount":
        _print_json(client.discounts.get(args.id))
        return 0
    if cmd == "list-discounts":
        _print_json(client.discounts.list(query))
        return 0
    if cmd == "delete-discount":
        client.discounts.delete(args.id)
        logging.info(f"Deleted discount {args.id}")
        return 0
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query and manage a Dairycart store")
    parser.add_argument("--env-file", default=None, help="Path to a .env file with DAIRYCART_* settings")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log HTTP traffic at DEBUG level")
    sub = parser.add_subparsers(dest="cmd", required=True)

    for name, help_text in (
        ("product-exists", "Check whether a product SKU exists"),
        ("get-product", "Show a product by SKU"),
        ("delete-product", "Delete a product by SKU"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("--sku", required=True, help="Product SKU")

    for name, help_text in (
        ("get-product-root", "Show a product root by ID"),
        ("get-discount", "Show a discount by ID"),
        ("delete-discount", "Delete a discount by ID"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("--id", type=int, required=True, help="Numeric ID")

    for name, help_text in (
        ("list-products", "List one page of products"),
        ("list-product-roots", "List one page of product roots"),
        ("list-discounts", "List one page of discounts"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("--filter", action="append", metavar="KEY=VALUE", help="Query filter (repeatable)")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        settings = load_settings(args.env_file)
    except ConfigurationError as e:
        logging.error(f"Configuration error: {e}")
        return 2

    try:
        query = _parse_filters(getattr(args, "filter", None))
    except argparse.ArgumentTypeError as e:
        logging.error(str(e))
        return 2

    try:
        with ApiClient.login(
            settings.store_url, settings.username, settings.password, timeout=settings.timeout
        ) as client:
            return run_command(client, args, query)
    except DairyClientError as e:
        logging.error(f"{args.cmd} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
