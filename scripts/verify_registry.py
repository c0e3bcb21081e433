from __future__ import annotations

"""
Consistency check for the token and pair registry.

Run this after editing any token, alias or pair table:

  - Verifies token codes are unique and inside the quote/base ranges.
  - Verifies aliases are normalized and resolve to exactly one token.
  - Verifies every supported pair decodes and matches its canonical name.

Usage (from repo root):

    python scripts/verify_registry.py [--json]

Exits with status 1 when any problem is found.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Ensure project root and src/ are on sys.path
ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = ROOT / "src"
for path in (ROOT, SRC_PATH):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_log_level  # noqa: E402
from tokens import PAIRS, SUPPORTED_TOKENS, Pair, TokenError, check_registry  # noqa: E402
from tokens.token import TOKEN_ALIASES  # noqa: E402

logger = logging.getLogger("verify_registry")


def _describe_pair(pair: Pair) -> dict:
    entry = {"name": str(pair), "value": f"0x{int(pair):016x}"}
    try:
        base, quote = pair.tokens()
    except TokenError as exc:
        entry["base"] = entry["quote"] = f"<{exc}>"
        return entry
    entry["base"] = base.name
    entry["quote"] = quote.name
    return entry


def build_report() -> dict:
    tokens = []
    for token in SUPPORTED_TOKENS:
        entry = token.to_dict()
        entry["aliases"] = list(TOKEN_ALIASES.get(token, ()))
        entry["role"] = "quote" if token.is_quote else "base"
        tokens.append(entry)

    pairs = [_describe_pair(pair) for pair in PAIRS]
    return {"tokens": tokens, "pairs": pairs, "problems": check_registry()}


def print_report(report: dict) -> None:
    print("\n" + "=" * 80)
    print("TOKEN REGISTRY REPORT")
    print("=" * 80)

    for token in report["tokens"]:
        print(
            f"\n{token['name']:<5} code={token['code']:<5} "
            f"decimals={token['decimals']:<3} chain={token['blockchain']:<9} "
            f"role={token['role']}"
        )
        print(f"   Aliases: {', '.join(token['aliases'])}")

    print("\n" + "-" * 80)
    for pair in report["pairs"]:
        print(f"{pair['name']:<10} {pair['value']}  base={pair['base']} quote={pair['quote']}")

    print("\n" + "=" * 80)
    if report["problems"]:
        print(f"❌ {len(report['problems'])} problem(s) found:")
        for problem in report["problems"]:
            print(f"   - {problem}")
    else:
        print("✅ Registry is consistent")


def main() -> int:
    parser = argparse.ArgumentParser(description="Verify token and pair registry")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON instead of text",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s |%(levelname)s |%(message)s",
    )

    report = build_report()
    logger.info(
        "Checked %d tokens and %d pairs", len(report["tokens"]), len(report["pairs"])
    )
    if args.json:
        print(json.dumps(report, indent=2))
    else:
        print_report(report)

    for problem in report["problems"]:
        logger.error("Registry problem: %s", problem)
    return 1 if report["problems"] else 0


if __name__ == "__main__":
    sys.exit(main())
