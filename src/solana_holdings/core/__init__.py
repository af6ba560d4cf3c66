"""core module init"""
from solana_holdings.core.address import (
    TOKEN_PROGRAM_ID,
    AddressError,
    is_valid_address,
    validate_address,
)
from solana_holdings.core.models import (
    LAMPORTS_PER_SOL,
    HoldingsReport,
    TokenAccount,
    TokenHolding,
    TokenMetadata,
)
from solana_holdings.core.node import MAINNET_RPC_URL, SolanaNode, SolanaNodeError
from solana_holdings.core.token_list import (
    TOKEN_LIST_URL,
    TokenList,
    TokenListError,
    load_token_list,
)

__all__ = [
    "AddressError",
    "HoldingsReport",
    "LAMPORTS_PER_SOL",
    "MAINNET_RPC_URL",
    "SolanaNode",
    "SolanaNodeError",
    "TOKEN_LIST_URL",
    "TOKEN_PROGRAM_ID",
    "TokenAccount",
    "TokenHolding",
    "TokenList",
    "TokenListError",
    "TokenMetadata",
    "is_valid_address",
    "load_token_list",
    "validate_address",
]
