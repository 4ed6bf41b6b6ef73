#!/usr/bin/env python3
"""
Command line access to the Customer API.

Usage:
    python customer_cli.py list
    python customer_cli.py get 6f1c...
    python customer_cli.py create --name "Ada" --version 1
    python customer_cli.py update 6f1c... --name "Ada L." --version 2
    python customer_cli.py patch 6f1c... --version 3
    python customer_cli.py delete 6f1c...

The server URL and credentials default to the ``CUSTOMER_API_URL``,
``API_USERNAME`` and ``API_PASSWORD`` environment variables.  If no
password is configured you will be prompted for it.
"""

import argparse
import getpass
import json
import os
import sys
from typing import Any, Dict, List, Optional

from customer_client import CustomerAPI


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Manage customers through the Customer API.")
    ap.add_argument("--url", default=os.getenv("CUSTOMER_API_URL", "http://localhost:8000"), help="API base URL")
    ap.add_argument("--username", default=os.getenv("API_USERNAME", "user1"), help="HTTP Basic username")
    ap.add_argument("--password", default=os.getenv("API_PASSWORD"), help="HTTP Basic password")

    sub = ap.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="List all customers")

    get_p = sub.add_parser("get", help="Show one customer")
    get_p.add_argument("customer_id")

    create_p = sub.add_parser("create", help="Create a customer")
    create_p.add_argument("--name", required=True)
    create_p.add_argument("--version")

    update_p = sub.add_parser("update", help="Replace name and version")
    update_p.add_argument("customer_id")
    update_p.add_argument("--name", required=True)
    update_p.add_argument("--version")

    patch_p = sub.add_parser("patch", help="Update only the given fields")
    patch_p.add_argument("customer_id")
    patch_p.add_argument("--name")
    patch_p.add_argument("--version")

    delete_p = sub.add_parser("delete", help="Delete a customer")
    delete_p.add_argument("customer_id")
    return ap


def _payload(args: argparse.Namespace, *, sparse: bool) -> Dict[str, Any]:
    payload = {"customerName": args.name, "version": args.version}
    if sparse:
        payload = {k: v for k, v in payload.items() if v is not None}
    return payload


def run(args: argparse.Namespace, client: CustomerAPI) -> int:
    if args.command == "list":
        result, error = client.list_customers()
    elif args.command == "get":
        result, error = client.get_customer(args.customer_id)
    elif args.command == "create":
        new_id, error = client.create_customer(_payload(args, sparse=True))
        result = {"id": new_id}
    elif args.command == "update":
        ok, error = client.update_customer(args.customer_id, _payload(args, sparse=False))
        result = {"updated": ok}
    elif args.command == "patch":
        ok, error = client.patch_customer(args.customer_id, _payload(args, sparse=True))
        result = {"patched": ok}
    else:
        ok, error = client.delete_customer(args.customer_id)
        result = {"deleted": ok}

    if error:
        print(f"[!] {error['status_code'] or 'error'}: {error['message']}", file=sys.stderr)
        return 1
    print(json.dumps(result, indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    password = args.password or getpass.getpass("API password: ")
    client = CustomerAPI(base_url=args.url, username=args.username, password=password)
    return run(args, client)


if __name__ == "__main__":
    sys.exit(main())
