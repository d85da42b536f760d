#!/usr/bin/env python
from __future__ import annotations

import argparse
import logging
import sys

from fri_schedule import AtMost, ExactTarget, InvalidParameter
from fri_schedule.analysis.report import compare_strategies, format_comparison
from fri_schedule.utils import config


def log(msg: str) -> None:
    print(msg, flush=True)


def main() -> None:
    parser = argparse.ArgumentParser(description="Compare optimal and fixed-factor FRI folding schedules.")
    parser.add_argument("--log-degree", type=int, default=25, help="log2 of the polynomial degree bound.")
    parser.add_argument("--blowup", type=int, default=8, help="Blowup factor (power of two).")
    parser.add_argument("--queries", type=int, default=1, help="Number of FRI queries.")
    parser.add_argument("--remainder", type=int, default=1, help="Remainder polynomial degree bound.")
    parser.add_argument(
        "--exact-remainder",
        action="store_true",
        help="Land exactly on --remainder instead of stopping at or below it.",
    )
    parser.add_argument(
        "--folding-factors",
        type=int,
        nargs="+",
        default=[1, 2, 3, 4],
        help="Folding exponents of the fixed-factor baselines.",
    )
    parser.add_argument("--max-folding-bits", type=int, default=config.max_folding_bits, help="Per-round search cap.")
    parser.add_argument("--bytes-per-element", type=int, default=config.bytes_per_element, help="Bytes per field element.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    args = parser.parse_args()

    config.max_folding_bits = args.max_folding_bits
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    remainder = ExactTarget(args.remainder) if args.exact_remainder else AtMost(args.remainder)
    try:
        comparison = compare_strategies(
            1 << args.log_degree,
            args.blowup,
            args.queries,
            remainder=remainder,
            folding_factors=args.folding_factors,
            bytes_per_element=args.bytes_per_element,
        )
    except InvalidParameter as exc:
        log(f"[error] {exc}")
        sys.exit(2)

    log(format_comparison(comparison))


if __name__ == "__main__":
    main()
