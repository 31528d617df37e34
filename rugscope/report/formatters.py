"""Format check results for display: score gauge, holder and transfer tables."""

import re
from datetime import UTC, datetime

from rugscope.models.token import Holder, TokenInfo, Transaction

EXPLORER_URL = "https://polygonscan.com"
DEFAULT_SCORE = 50
HOLDER_ROWS = 25
TRANSACTION_ROWS = 15

# Tried in order; first match wins
SCORE_PATTERNS = [
    re.compile(r"Risk Score:?\s*(\d+)", re.IGNORECASE),
    re.compile(r"Overall Score:?\s*(\d+)", re.IGNORECASE),
    re.compile(r"Legitimacy Score:?\s*(\d+)", re.IGNORECASE),
]


def extract_risk_score(analysis: str | None) -> int:
    """Pull the numeric score out of the markdown report, 50 when absent."""
    if not analysis:
        return DEFAULT_SCORE
    for pattern in SCORE_PATTERNS:
        match = pattern.search(analysis)
        if match:
            return int(match.group(1))
    return DEFAULT_SCORE


def score_band(score: int) -> tuple[str, str]:
    """Legitimacy label and advice for a 0-100 score."""
    if score > 70:
        return "High legitimacy", "This contract appears to be safe and well-maintained"
    if score > 40:
        return "Medium legitimacy", "Exercise caution and do additional research"
    return "Low legitimacy", "High risk, proceed with extreme caution"


def format_number(value: object) -> str:
    """Thousands separators, at most 6 fractional digits."""
    if not value:
        return "0"
    try:
        num = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return str(value)
    text = f"{num:,.6f}"
    return text.rstrip("0").rstrip(".") if "." in text else text


def format_date(timestamp: int | str | None) -> str:
    if not timestamp:
        return "N/A"
    try:
        dt = datetime.fromtimestamp(int(timestamp), tz=UTC)
    except (TypeError, ValueError, OverflowError, OSError):
        return "N/A"
    return dt.strftime("%Y-%m-%d %H:%M:%S UTC")


def truncate_address(address: str | None) -> str:
    if not address:
        return "N/A"
    if len(address) > 16:
        return f"{address[:8]}...{address[-8:]}"
    return address


def explorer_link(kind: str, value: str) -> str:
    """kind is one of token, address, tx."""
    return f"{EXPLORER_URL}/{kind}/{value}"


def token_overview(info: TokenInfo) -> dict[str, str]:
    return {
        "name": info.name or "Unknown Token",
        "symbol": info.symbol or "N/A",
        "total_supply": format_number(info.total_supply),
        "decimals": str(info.decimals),
        "address": info.address,
        "url": explorer_link("token", info.address),
    }


def holder_rows(holders: list[Holder], limit: int = HOLDER_ROWS) -> list[dict[str, str]]:
    """Top holders by amount, ranked from 1."""
    ranked = sorted(holders, key=lambda h: h.amount, reverse=True)[:limit]
    return [
        {
            "rank": str(i),
            "account": truncate_address(h.account),
            "balance": format_number(h.amount),
            "percentage": f"{h.percentage or 0:.2f}%",
            "url": explorer_link("address", h.account),
        }
        for i, h in enumerate(ranked, start=1)
    ]


def transaction_rows(
    transactions: list[Transaction], limit: int = TRANSACTION_ROWS
) -> list[dict[str, str]]:
    """Most recent transfers, in source order."""
    return [
        {
            "hash": truncate_address(tx.hash),
            "from": truncate_address(tx.from_),
            "to": truncate_address(tx.to),
            "value": format_number(tx.value),
            "time": format_date(tx.timestamp),
            "url": explorer_link("tx", tx.hash),
        }
        for tx in transactions[:limit]
    ]


def render_table(rows: list[dict[str, str]], columns: list[str]) -> str:
    """Plain-text table with left-aligned columns."""
    if not rows:
        return ""
    widths = {c: max(len(c), *(len(r[c]) for r in rows)) for c in columns}
    header = "  ".join(c.upper().ljust(widths[c]) for c in columns)
    lines = [header, "  ".join("-" * widths[c] for c in columns)]
    for row in rows:
        lines.append("  ".join(row[c].ljust(widths[c]) for c in columns))
    return "\n".join(lines)
