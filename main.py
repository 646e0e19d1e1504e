# main.py

"""Entry point for the fakestore command-line client."""

import argparse
import asyncio
import logging
import sys

from fakestore.cli.runner import parse_query_item
from fakestore.config.logging_config import setup_logging, verbosity_to_level
from fakestore.config.settings import Settings

logger = logging.getLogger("fakestore.main")


def _query_item(raw: str) -> tuple[str, str | None]:
    """argparse type wrapper around ``parse_query_item``."""
    try:
        return parse_query_item(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="fakestore",
        description="Client for the Fake Store products API.",
        epilog=f"API base URL: {Settings.API_BASE_URL}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Show INFO (-v) or DEBUG (-vv) logs on stderr.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    lp = sub.add_parser("list", help="List all products")
    lp.add_argument(
        "-q",
        "--query",
        action="append",
        type=_query_item,
        default=[],
        dest="query_items",
        metavar="KEY=VALUE",
        help="Query item to send, e.g. limit=5 (repeatable).",
    )

    gp = sub.add_parser("get", help="Fetch one product by id")
    gp.add_argument("product_id", type=int)

    for p in (lp, gp):
        p.add_argument(
            "-f",
            "--format",
            choices=["json", "table"],
            default="json",
            dest="output_format",
            help="Output format (default: json).",
        )

    sub.add_parser("add", help="Create the sample product")

    up = sub.add_parser("update", help="Overwrite a product with the sample")
    up.add_argument("product_id", type=int, nargs="?", default=8)

    dp = sub.add_parser("delete", help="Delete a product by id")
    dp.add_argument("product_id", type=int)

    return parser


async def _dispatch(args: argparse.Namespace) -> int:
    """Run the selected command and return an exit code."""
    from fakestore.cli.runner import cli_get, cli_list
    from fakestore.services import product_service

    if args.command == "list":
        return await cli_list(args.query_items, args.output_format)
    if args.command == "get":
        return await cli_get(args.product_id, args.output_format)

    if args.command == "add":
        result = await product_service.add_sample_product()
    elif args.command == "update":
        result = await product_service.update_sample_product(args.product_id)
    else:
        result = await product_service.delete_product(args.product_id)
    return 0 if result is not None else 1


def main() -> None:
    """Parse arguments, run one command, exit with its status."""
    args = _build_parser().parse_args()
    log_file = setup_logging(verbosity_to_level(args.verbose))
    logger.info("fakestore starting, log file: %s", log_file)

    try:
        exit_code = asyncio.run(_dispatch(args))
    except Exception:
        logger.critical("Fatal error during %s", args.command, exc_info=True)
        raise
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
