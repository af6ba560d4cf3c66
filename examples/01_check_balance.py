#!/usr/bin/env python3
"""
Example 01: Check a wallet's SOL balance and token holdings.

Connects to the public Solana RPC and reads the holdings of any address.
No wallet keys required.

Usage:
    python examples/01_check_balance.py
    python examples/01_check_balance.py 9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM
"""

import sys

# Fix Windows encoding for Unicode token names
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(errors="replace")

from solana_holdings import SolanaNode, WalletScanner, load_token_list

DEFAULT_ADDRESS = "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM"
address = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_ADDRESS

with SolanaNode() as node:
    # Without a token list: mints only
    report = WalletScanner(node).scan(address)
    print("=== Summary ===")
    print(report.to_agent_summary())

    # With the token list loaded once up front
    print("\n=== Structured output ===")
    report = WalletScanner(node, token_list=load_token_list()).scan(address)
    print(f"Address: {address[:16]}...")
    print(f"SOL:     {report.sol:.4f}")
    if report.tokens:
        print("Tokens:")
        for holding in report.tokens:
            print(f"  {holding.metadata.label}: {holding.amount}")
    else:
        print("Tokens:  (none)")
