"""Check a Polygon token contract from the command line.

Runs the same pipeline as POST /api/check-contract and prints the
legitimacy score, token overview, holder and transfer tables, then the
markdown report.

Usage:
    python scripts/check_contract.py 0xTokenAddress
    python scripts/check_contract.py 0xTokenAddress --json
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from loguru import logger  # noqa: E402

from config.settings import settings  # noqa: E402
from rugscope.models.token import AnalysisResult  # noqa: E402
from rugscope.parsers.checker import ContractChecker  # noqa: E402
from rugscope.parsers.exceptions import RugscopeError  # noqa: E402
from rugscope.report.formatters import (  # noqa: E402
    extract_risk_score,
    holder_rows,
    render_table,
    score_band,
    token_overview,
    transaction_rows,
)
from rugscope.utils.logger import setup_logger  # noqa: E402


def print_report(result: AnalysisResult) -> None:
    data = result.token_data
    score = extract_risk_score(result.analysis)
    label, advice = score_band(score)
    print(f"\nLegitimacy Score: {score}/100  {label}")
    print(f"  {advice}\n")

    overview = token_overview(data.token_info)
    print(f"{overview['name']} ({overview['symbol']})")
    print(f"  Total supply: {overview['total_supply']}")
    print(f"  Decimals:     {overview['decimals']}")
    print(f"  Contract:     {overview['url']}\n")

    print("Top Token Holders")
    holders = holder_rows(data.holders)
    print(render_table(holders, ["rank", "account", "balance", "percentage", "url"]) or "  No holder data available")

    print("\nRecent Transactions")
    txs = transaction_rows(data.transactions)
    print(render_table(txs, ["hash", "from", "to", "value", "time", "url"]) or "  No transaction data available")

    print("\nDetailed Analysis\n")
    print(result.analysis)


async def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Token contract rug-pull check")
    parser.add_argument("address", help="Token contract address")
    parser.add_argument("--json", action="store_true", help="Print the raw JSON envelope")
    args = parser.parse_args(argv)

    setup_logger(level="WARNING")
    checker = ContractChecker.from_settings(settings)
    try:
        result = await checker.check(args.address)
    except RugscopeError as e:
        logger.error(f"Check failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception(f"Check crashed: {e}")
        print(f"Error: {str(e) or type(e).__name__}", file=sys.stderr)
        return 1
    finally:
        await checker.close()

    if args.json:
        print(json.dumps(result.model_dump(by_alias=True), indent=2))
    else:
        print_report(result)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
