"""
WalletScanner: balance + token accounts + optional token names for one address.

This is the single code path behind every way of reporting holdings. Token
name enrichment is an optional capability: pass a TokenList (or a zero-arg
callable that loads one) to annotate holdings, or leave it out and holdings
are reported by mint only.

Usage:
    from solana_holdings import SolanaNode, WalletScanner, load_token_list

    with SolanaNode() as node:
        scanner = WalletScanner(node, token_list=load_token_list)
        report = scanner.scan("9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Callable, Union

from solana_holdings.core.address import validate_address
from solana_holdings.core.models import HoldingsReport, TokenHolding
from solana_holdings.core.node import MAINNET_RPC_URL, SolanaNode
from solana_holdings.core.token_list import TOKEN_LIST_URL, TokenList, load_token_list

logger = logging.getLogger("solana_holdings.scanner")

TokenListSource = Union[TokenList, Callable[[], TokenList]]


@dataclass
class ScanConfig:
    """
    Options for one holdings scan.

    Args:
        rpc_url:          Solana JSON-RPC endpoint
        token_list_url:   token list used for name enrichment
        enrich_metadata:  if False, skip the token list entirely
        timeout:          HTTP timeout in seconds (None keeps the httpx default)
    """
    rpc_url: str = MAINNET_RPC_URL
    token_list_url: str = TOKEN_LIST_URL
    enrich_metadata: bool = True
    timeout: float | None = None


class WalletScanner:
    """Collects the SOL balance and non-empty token holdings of an address."""

    def __init__(self, node: SolanaNode, token_list: TokenListSource | None = None) -> None:
        self._node = node
        self._token_list = token_list

    def scan(self, address: str) -> HoldingsReport:
        """
        Fetch and filter holdings for an address.

        Calls run in order: balance, token accounts, then the token list
        (if enrichment is on). The first failure aborts the scan.

        Raises:
            AddressError: if the address is not a valid Solana address
            SolanaNodeError: if either RPC call fails
            TokenListError: if the token list cannot be loaded
        """
        validate_address(address)

        lamports = self._node.get_balance(address)
        accounts = self._node.get_token_holdings(address)
        token_list = self._resolve_token_list()

        holdings = []
        for account in accounts:
            if not account.has_balance:
                continue
            metadata = token_list.lookup(account.mint) if token_list is not None else None
            holdings.append(TokenHolding(account=account, metadata=metadata))

        logger.debug(
            f"{address}: {lamports} lamports, "
            f"{len(holdings)}/{len(accounts)} token accounts non-empty"
        )
        return HoldingsReport(
            address=address,
            lamports=lamports,
            tokens=holdings,
            enriched=token_list is not None,
        )

    def _resolve_token_list(self) -> TokenList | None:
        if self._token_list is None or isinstance(self._token_list, TokenList):
            return self._token_list
        self._token_list = self._token_list()
        return self._token_list


def scan_address(address: str, config: ScanConfig | None = None) -> HoldingsReport:
    """Run a complete scan with a fresh node client built from a ScanConfig."""
    config = config or ScanConfig()
    token_list = None
    if config.enrich_metadata:
        token_list = partial(load_token_list, config.token_list_url, timeout=config.timeout)

    with SolanaNode(rpc_url=config.rpc_url, timeout=config.timeout) as node:
        return WalletScanner(node, token_list=token_list).scan(address)
