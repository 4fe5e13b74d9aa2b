"""
Command line front end for the Billplz client.

  billplz [--pretty] [--config PATH] collection get <id>
  billplz collection create --title T [--split-header] [--split-payment EMAIL:ORDER[:fixed=N|:variable=PCT]]
  billplz bill get <id> | bill create --collection-id ... --due-at YYYY-MM-DD
  billplz bank fpx-list | bank verify <account> | bank create-verification ...
  billplz payout get <id> | payout create ...
  billplz payout-collection get <id> | payout-collection create --title T
  billplz mcp                      (MCP server over stdio)
"""
import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

from .builders import CreateCollectionBuilder
from .client import BillplzClient
from .errors import BillplzError
from .settings import load_settings
from .utils.render import output_json, raw_to_json


def add_split_payment(builder: CreateCollectionBuilder, spec: str) -> CreateCollectionBuilder:
    """EMAIL:STACK_ORDER, EMAIL:STACK_ORDER:fixed=CENTS or EMAIL:STACK_ORDER:variable=PERCENT"""
    parts = spec.split(":")
    if len(parts) not in (2, 3):
        raise argparse.ArgumentTypeError(f"invalid split payment: {spec!r}")
    try:
        email, order = parts[0], int(parts[1])
        if len(parts) == 2:
            return builder.split_payment(email, order)
        kind, _, amount = parts[2].partition("=")
        if kind == "fixed":
            return builder.split_payment_with_fixed_cut(email, int(amount), order)
        if kind == "variable":
            return builder.split_payment_with_variable_cut(email, amount, order)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid split payment {spec!r}: {e}") from e
    raise argparse.ArgumentTypeError(f"invalid split payment cut: {parts[2]!r}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="billplz", description="CLI and MCP server for the Billplz payment API")
    p.add_argument("--pretty", action="store_true", help="Output formatted JSON")
    p.add_argument("--config", type=Path, default=None, help="Path to config.toml (default ~/.billplz/config.toml)")
    sub = p.add_subparsers(dest="command", required=True)

    # collection
    collection = sub.add_parser("collection", help="Manage collections").add_subparsers(dest="action", required=True)
    c_get = collection.add_parser("get", help="Get a collection by ID")
    c_get.add_argument("id")
    c_create = collection.add_parser("create", help="Create a new collection")
    c_create.add_argument("--title", required=True)
    c_create.add_argument("--split-header", action="store_true", default=None)
    c_create.add_argument("--split-payment", action="append", default=[], metavar="EMAIL:ORDER[:fixed=N|:variable=PCT]")

    # bill
    bill = sub.add_parser("bill", help="Manage bills").add_subparsers(dest="action", required=True)
    b_get = bill.add_parser("get", help="Get a bill by ID")
    b_get.add_argument("id")
    b_create = bill.add_parser("create", help="Create a new bill")
    for name in ("--collection-id", "--email", "--name", "--callback-url", "--description", "--due-at"):
        b_create.add_argument(name, required=True)
    b_create.add_argument("--amount", type=int, required=True, help="Amount in cents")
    for name in ("--mobile", "--redirect-url", "--reference-1-label", "--reference-1", "--reference-2-label", "--reference-2"):
        b_create.add_argument(name, default=None)
    b_create.add_argument("--deliver", action=argparse.BooleanOptionalAction, default=None)

    # bank
    bank = sub.add_parser("bank", help="Bank operations").add_subparsers(dest="action", required=True)
    bank.add_parser("fpx-list", help="List FPX banks")
    verify = bank.add_parser("verify", help="Get bank account verification status")
    verify.add_argument("account_number")
    create_v = bank.add_parser("create-verification", help="Create a bank account verification")
    for name in ("--name", "--id-no", "--acc-no", "--code"):
        create_v.add_argument(name, required=True)
    create_v.add_argument("--organization", action="store_true")

    # payout
    payout = sub.add_parser("payout", help="Manage payouts").add_subparsers(dest="action", required=True)
    po_get = payout.add_parser("get", help="Get a payout by ID")
    po_get.add_argument("id")
    po_create = payout.add_parser("create", help="Create a payout")
    for name in ("--collection-id", "--bank-code", "--acc-no", "--id-no", "--name", "--description"):
        po_create.add_argument(name, required=True)
    po_create.add_argument("--total", type=int, required=True, help="Total in cents")

    # payout collection
    pc = sub.add_parser("payout-collection", help="Manage payout collections").add_subparsers(dest="action", required=True)
    pc_get = pc.add_parser("get", help="Get a payout collection by ID")
    pc_get.add_argument("id")
    pc_create = pc.add_parser("create", help="Create a payout collection")
    pc_create.add_argument("--title", required=True)

    sub.add_parser("mcp", help="Start MCP server (stdio transport)")
    return p


async def execute_command(args: argparse.Namespace, client: BillplzClient) -> Any:
    """Run one subcommand; returns a model, a list of models or decoded passthrough JSON."""
    cmd, action = args.command, getattr(args, "action", None)

    if cmd == "collection":
        if action == "get":
            return await client.get_collection(args.id)
        builder = client.create_collection(args.title)
        if args.split_header is not None:
            builder = builder.split_header(args.split_header)
        for spec in args.split_payment:
            builder = add_split_payment(builder, spec)
        return await builder.send()

    if cmd == "bill":
        if action == "get":
            return await client.get_bill(args.id)
        builder = client.create_bill(
            args.collection_id,
            args.email,
            args.name,
            args.amount,
            args.callback_url,
            args.description,
            args.due_at,
        )
        for field in ("mobile", "redirect_url", "deliver", "reference_1_label", "reference_1", "reference_2_label", "reference_2"):
            value = getattr(args, field)
            if value is not None:
                builder = getattr(builder, field)(value)
        return await builder.send()

    if cmd == "bank":
        if action == "fpx-list":
            return client.get_fpx_banks()
        if action == "verify":
            return raw_to_json(await client.get_bank_verification(args.account_number))
        return raw_to_json(
            await client.create_bank_verification(args.name, args.id_no, args.acc_no, args.code)
            .organization(args.organization)
            .send()
        )

    if cmd == "payout":
        if action == "get":
            return raw_to_json(await client.get_payout(args.id))
        return raw_to_json(
            await client.create_payout(
                args.collection_id,
                args.bank_code,
                args.acc_no,
                args.id_no,
                args.name,
                args.description,
                args.total,
            ).send()
        )

    if cmd == "payout-collection":
        if action == "get":
            return raw_to_json(await client.get_payout_collection(args.id))
        return raw_to_json(await client.create_payout_collection(args.title).send())

    raise ValueError(f"unknown command: {cmd}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.config)
    except BillplzError as e:
        print(e, file=sys.stderr)
        return 1

    # stdout is reserved for JSON (and for the MCP stdio stream)
    logging.basicConfig(level=settings.log_level.upper(), stream=sys.stderr)
    client = settings.into_client()

    if args.command == "mcp":
        from .mcp_server import run_stdio

        run_stdio(client)
        return 0

    try:
        result = asyncio.run(execute_command(args, client))
    except (BillplzError, argparse.ArgumentTypeError) as e:
        print(e, file=sys.stderr)
        return 1

    print(output_json(result, args.pretty))
    return 0


if __name__ == "__main__":
    sys.exit(main())
