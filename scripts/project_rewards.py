# scripts/project_rewards.py
import argparse
import sys
from pathlib import Path

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.config import settings  # noqa: E402
from src.config.logging_setup import configure_logging  # noqa: E402
from src.core.live_data import PriceSnapshot, fetch_prices  # noqa: E402
from src.core.projection import (  # noqa: E402
    InputValidationError,
    parse_input,
    project,
    projection_to_dataframe,
)
from src.ui.formatting import format_percent, format_usd  # noqa: E402


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print projected CC rewards for manual comparison.",
    )
    parser.add_argument("amount", help="CC received per reward, e.g. 3.5")
    parser.add_argument(
        "frequency",
        nargs="?",
        default=settings.DEFAULT_FREQUENCY_MINUTES,
        help="Minutes between rewards (default: %(default)s)",
    )
    parser.add_argument("--holdings", default="", help="SEND holdings for APR")
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Skip the live price fetch (CC-only output)",
    )
    parser.add_argument("--log-level", default=settings.LOG_LEVEL)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        inputs = parse_input(args.amount, args.frequency, args.holdings)
    except InputValidationError as e:
        print(f"Nothing to calculate: {e}")
        return 1

    prices = PriceSnapshot()
    if not args.offline:
        fetched = fetch_prices()
        prices = fetched.snapshot
        if fetched.error:
            print(fetched.error)

    result = project(inputs, prices)
    print(projection_to_dataframe(result).to_string(index=False))

    if result.apr is not None:
        print(
            f"\nEstimated APR (USD): {format_percent(result.apr.apr_percent)}%  |  "
            f"Position value: {format_usd(result.apr.position_value_usd)}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
