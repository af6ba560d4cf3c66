"""
Command-line entry point.

Usage:
    solana-holdings <WALLET_ADDRESS>
    solana-holdings <WALLET_ADDRESS> --no-metadata
    solana-holdings <WALLET_ADDRESS> --rpc-url https://my-node.example --json
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn, Sequence

from solana_holdings.core.address import AddressError
from solana_holdings.core.node import MAINNET_RPC_URL, SolanaNodeError
from solana_holdings.core.token_list import TOKEN_LIST_URL, TokenListError
from solana_holdings.report import format_report, format_report_json
from solana_holdings.scanner import ScanConfig, scan_address

logger = logging.getLogger("solana_holdings.cli")

EXIT_OK = 0
EXIT_FAILURE = 1


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit code 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_FAILURE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="solana-holdings",
        description="Show the SOL balance and SPL token holdings of a Solana address.",
    )
    parser.add_argument("address", metavar="WALLET_ADDRESS", help="Base58 Solana address")
    parser.add_argument("--rpc-url", default=MAINNET_RPC_URL, help="Solana JSON-RPC endpoint")
    parser.add_argument("--token-list-url", default=TOKEN_LIST_URL, help="token list JSON URL")
    parser.add_argument(
        "--no-metadata",
        dest="enrich_metadata",
        action="store_false",
        help="skip the token list download and show mints only",
    )
    parser.add_argument("--json", action="store_true", help="print the report as JSON")
    parser.add_argument("--timeout", type=float, default=None, help="HTTP timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = ScanConfig(
        rpc_url=args.rpc_url,
        token_list_url=args.token_list_url,
        enrich_metadata=args.enrich_metadata,
        timeout=args.timeout,
    )

    try:
        report = scan_address(args.address, config)
    except (AddressError, SolanaNodeError, TokenListError) as e:
        logger.debug(f"Scan of {args.address} failed", exc_info=True)
        print(f"❌ Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    print(format_report_json(report) if args.json else format_report(report))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
