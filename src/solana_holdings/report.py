"""Terminal rendering of a HoldingsReport."""

from __future__ import annotations

import json

from solana_holdings.core.models import HoldingsReport


def format_report(report: HoldingsReport) -> str:
    """
    Render a report as the human-readable CLI output.

    Token holdings keep node order. Names are shown only when the report
    was enriched from a token list.
    """
    lines = [
        f"🔍 Scanning tokens for address: {report.address}",
        "",
        f"💰 SOL: {report.sol:.4f} SOL",
    ]

    if not report.tokens:
        lines.append("⚠️  No SPL tokens found.")
        return "\n".join(lines)

    lines.append("")
    lines.append("📦 SPL Tokens:")
    for holding in report.tokens:
        lines.append(f"• Mint: {holding.mint}")
        if holding.metadata is not None:
            lines.append(f"  Name: {holding.metadata.label}")
        lines.append(f"  Amount: {holding.amount}")
    return "\n".join(lines)


def format_report_json(report: HoldingsReport) -> str:
    """Render a report as JSON, with the SOL value precomputed."""
    data = report.model_dump()
    data["sol"] = report.sol
    return json.dumps(data, indent=2, ensure_ascii=False)
