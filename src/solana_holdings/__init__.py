"""
solana-holdings: SOL balance and SPL token holdings of a Solana address.

Usage:
    from solana_holdings import SolanaNode, WalletScanner, load_token_list
    from solana_holdings import ScanConfig, scan_address
"""

from solana_holdings.core.models import HoldingsReport, TokenAccount, TokenMetadata
from solana_holdings.core.node import SolanaNode
from solana_holdings.core.token_list import TokenList, load_token_list
from solana_holdings.scanner import ScanConfig, WalletScanner, scan_address

__version__ = "0.1.0"
__all__ = [
    "SolanaNode",
    "WalletScanner",
    "ScanConfig",
    "scan_address",
    "TokenList",
    "load_token_list",
    "HoldingsReport",
    "TokenAccount",
    "TokenMetadata",
]
