"""
TokenList: mint -> display name/symbol lookup from a public token list.

The list is downloaded in full on every load and kept in memory only.
It is not cached between runs.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from solana_holdings.core.models import TokenMetadata

TOKEN_LIST_URL = (
    "https://raw.githubusercontent.com/solana-labs/token-list/main/"
    "src/tokens/solana.tokenlist.json"
)

logger = logging.getLogger("solana_holdings.token_list")


class TokenListError(Exception):
    """Raised when the token list cannot be downloaded or parsed."""
    pass


class TokenList:
    """
    In-memory token metadata registry.

    Usage:
        tokens = TokenList.from_json(payload)
        tokens.lookup("EPjFWdd5...").name  # "USD Coin"
    """

    def __init__(self, entries: dict[str, TokenMetadata] | None = None) -> None:
        self._entries: dict[str, TokenMetadata] = dict(entries or {})

    @classmethod
    def from_json(cls, payload: Any) -> TokenList:
        """
        Build a registry from a token list document.

        Args:
            payload: decoded JSON with a top-level "tokens" array

        Raises:
            TokenListError: if the document has no "tokens" array
        """
        if not isinstance(payload, dict) or not isinstance(payload.get("tokens"), list):
            raise TokenListError("Token list document has no 'tokens' array")

        entries: dict[str, TokenMetadata] = {}
        for token in payload["tokens"]:
            if not isinstance(token, dict) or not isinstance(token.get("address"), str):
                continue
            # Later duplicates overwrite earlier ones
            name = token.get("name")
            symbol = token.get("symbol")
            entries[token["address"]] = TokenMetadata(
                name=name if isinstance(name, str) and name else "Unknown",
                symbol=symbol if isinstance(symbol, str) else "",
            )
        return cls(entries)

    def lookup(self, mint: str) -> TokenMetadata:
        """Return metadata for a mint, or the Unknown placeholder."""
        return self._entries.get(mint) or TokenMetadata()

    def __contains__(self, mint: object) -> bool:
        return mint in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def load_token_list(
    url: str = TOKEN_LIST_URL,
    client: httpx.Client | None = None,
    timeout: float | None = None,
) -> TokenList:
    """
    Download and parse the token list.

    Args:
        url: token list location
        client: HTTP client to reuse (closed by the caller)
        timeout: HTTP timeout in seconds when no client is given

    Raises:
        TokenListError: on network failure, non-200 status or malformed JSON
    """
    owns_client = client is None
    if client is None:
        client = httpx.Client() if timeout is None else httpx.Client(timeout=timeout)
    try:
        response = client.get(url, follow_redirects=True)
        if response.status_code != 200:
            raise TokenListError(f"Token list error {response.status_code} for {url}")
        payload = response.json()
    except httpx.HTTPError as e:
        raise TokenListError(f"Token list download failed: {e}") from e
    except ValueError as e:
        raise TokenListError(f"Invalid JSON in token list: {e}") from e
    finally:
        if owns_client:
            client.close()

    tokens = TokenList.from_json(payload)
    logger.debug(f"Loaded {len(tokens)} tokens from {url}")
    return tokens
