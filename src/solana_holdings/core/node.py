"""
SolanaNode: JSON-RPC client for a Solana RPC node.

Docs: https://solana.com/docs/rpc
"""

from __future__ import annotations

import itertools
import logging
from typing import Any

import httpx

from solana_holdings.core.address import TOKEN_PROGRAM_ID
from solana_holdings.core.models import TokenAccount

# Public mainnet endpoint (rate-limited)
MAINNET_RPC_URL = "https://api.mainnet-beta.solana.com"

logger = logging.getLogger("solana_holdings.node")


class SolanaNodeError(Exception):
    """Raised when the RPC node is unreachable or returns an error or malformed response."""
    pass


class SolanaNode:
    """
    Synchronous client for the Solana JSON-RPC API.
    Uses the public mainnet endpoint by default.

    Usage:
        node = SolanaNode()  # public mainnet
        node = SolanaNode(rpc_url="https://my-provider.example/rpc", timeout=30.0)
    """

    def __init__(
        self,
        rpc_url: str = MAINNET_RPC_URL,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.rpc_url = rpc_url
        if client is None:
            headers = {"Content-Type": "application/json"}
            # Leave the httpx default timeout in place unless one is given
            if timeout is None:
                client = httpx.Client(headers=headers)
            else:
                client = httpx.Client(headers=headers, timeout=timeout)
        self._client = client
        self._ids = itertools.count(1)

    # ------------------------------------------------------------------
    # Balance & token accounts
    # ------------------------------------------------------------------

    def get_balance(self, address: str) -> int:
        """
        Return the native balance of an address.

        Returns:
            int: balance in lamports
        """
        result = self._rpc("getBalance", [address])
        # Nodes wrap the value in an RpcResponse context; accept a bare int too
        value = result.get("value") if isinstance(result, dict) else result
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise SolanaNodeError(f"Malformed getBalance result: {result!r}")
        return value

    def get_token_accounts_by_owner(
        self,
        owner: str,
        program_id: str = TOKEN_PROGRAM_ID,
    ) -> list[dict[str, Any]]:
        """
        Return every token account owned by an address, as jsonParsed entries.

        Args:
            owner: wallet address
            program_id: token program that owns the accounts (SPL Token by default)

        Returns:
            list[dict]: raw entries, in node order (may be empty)
        """
        result = self._rpc(
            "getTokenAccountsByOwner",
            [owner, {"programId": program_id}, {"encoding": "jsonParsed"}],
        )
        if not isinstance(result, dict):
            raise SolanaNodeError(f"Malformed getTokenAccountsByOwner result: {result!r}")
        value = result.get("value")
        if value is None:
            return []
        if not isinstance(value, list):
            raise SolanaNodeError(f"Malformed getTokenAccountsByOwner value: {value!r}")
        return value

    def get_token_holdings(
        self,
        owner: str,
        program_id: str = TOKEN_PROGRAM_ID,
    ) -> list[TokenAccount]:
        """Return parsed token accounts for an address, empty ones included."""
        return [
            TokenAccount.from_rpc(entry)
            for entry in self.get_token_accounts_by_owner(owner, program_id)
        ]

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _rpc(self, method: str, params: list[Any]) -> Any:
        payload = {"jsonrpc": "2.0", "id": next(self._ids), "method": method, "params": params}
        logger.debug(f"RPC {method} -> {self.rpc_url}")
        try:
            response = self._client.post(self.rpc_url, json=payload)
        except httpx.HTTPError as e:
            raise SolanaNodeError(f"RPC request {method} failed: {e}") from e

        if response.status_code != 200:
            raise SolanaNodeError(
                f"RPC error {response.status_code} for {method}: {response.text}"
            )
        try:
            body = response.json()
        except ValueError as e:
            raise SolanaNodeError(f"Invalid JSON in {method} response: {e}") from e

        if not isinstance(body, dict):
            raise SolanaNodeError(f"Malformed {method} response: {body!r}")
        if "error" in body:
            error = body["error"]
            message = error.get("message", error) if isinstance(error, dict) else error
            raise SolanaNodeError(f"RPC {method} returned an error: {message}")
        if "result" not in body:
            raise SolanaNodeError(f"RPC {method} response has no result")
        return body["result"]

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> SolanaNode:
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()
