"""
Core data models for Solana account holdings.
All native amounts are in lamports (1 SOL = 1,000,000,000 lamports) internally.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

LAMPORTS_PER_SOL = 1_000_000_000

UNKNOWN_MINT = "???"
UNKNOWN_TOKEN_NAME = "Unknown"


class TokenMetadata(BaseModel):
    """Display name and symbol of a token mint, from a token list."""
    name: str = UNKNOWN_TOKEN_NAME
    symbol: str = ""

    @property
    def label(self) -> str:
        return f"{self.name} ({self.symbol})" if self.symbol else self.name


class TokenAccount(BaseModel):
    """An SPL token account owned by a wallet, as parsed by the node."""
    mint: str = UNKNOWN_MINT
    ui_amount_string: str = "0"
    ui_amount: float = 0.0
    decimals: int | None = None
    pubkey: str | None = None

    @property
    def has_balance(self) -> bool:
        """Empty rent-exempt accounts are common; only positive ones count."""
        return self.ui_amount > 0

    @classmethod
    def from_rpc(cls, entry: dict[str, Any]) -> TokenAccount:
        """
        Build a TokenAccount from one jsonParsed getTokenAccountsByOwner entry.

        Missing fields fall back to defaults so one odd entry never breaks
        the whole listing.
        """
        info = _dig(entry, "account", "data", "parsed", "info")
        token_amount = _dig(info, "tokenAmount")

        mint = info.get("mint")
        amount_str = token_amount.get("uiAmountString")
        ui_amount = token_amount.get("uiAmount")
        decimals = token_amount.get("decimals")
        pubkey = entry.get("pubkey") if isinstance(entry, dict) else None

        return cls(
            mint=mint if isinstance(mint, str) else UNKNOWN_MINT,
            ui_amount_string=amount_str if isinstance(amount_str, str) else "0",
            ui_amount=_to_float(ui_amount),
            decimals=decimals if isinstance(decimals, int) else None,
            pubkey=pubkey if isinstance(pubkey, str) else None,
        )


class TokenHolding(BaseModel):
    """A non-empty token account, optionally annotated with token list metadata."""
    account: TokenAccount
    metadata: TokenMetadata | None = None

    @property
    def mint(self) -> str:
        return self.account.mint

    @property
    def amount(self) -> str:
        return self.account.ui_amount_string


class HoldingsReport(BaseModel):
    """SOL balance and token holdings of one address."""
    address: str
    lamports: int
    tokens: list[TokenHolding] = Field(default_factory=list)
    enriched: bool = False

    @property
    def sol(self) -> float:
        """SOL value (human-readable)."""
        return self.lamports / LAMPORTS_PER_SOL

    def to_agent_summary(self) -> str:
        """One-line summary of the holdings."""
        lines = [f"SOL: {self.sol:.4f}"]
        for holding in self.tokens:
            name = holding.metadata.label if holding.metadata else holding.mint
            lines.append(f"{name}: {holding.amount}")
        return ", ".join(lines)


def _to_float(value: Any) -> float:
    """Numeric uiAmount as float; anything else (bools included) counts as 0.0."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


def _dig(data: Any, *keys: str) -> dict[str, Any]:
    """Walk nested dicts, returning {} as soon as a level is missing."""
    for key in keys:
        if not isinstance(data, dict):
            return {}
        data = data.get(key)
    return data if isinstance(data, dict) else {}
