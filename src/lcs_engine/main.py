#!/usr/bin/env python3
"""
Length of the longest common subsequence of two strings.

Algorithms (choose with --algorithm / -a):
  - lcs_for     : greedy for-loop scan (fast, not a true LCS)
  - lcs_dynamic : dynamic programming table
  - lcs_rec     : plain recursion (exponential, no memo)

Usage examples:
  python -m src.lcs_engine.main --s1 ABCBDAB --s2 BDCABA -a lcs_dynamic -b
  python -m src.lcs_engine.main --s1 AA --s2 AA --out_csv runs.csv
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import List, Optional, cast

from simple_parsing import field, parse

from src.lcs_engine.engine import Algorithm, LcsRun, algorithm_names, run
from src.lcs_engine.logger import make_record, write_to_csv

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


@dataclass
class Args:
    s1: str = field(help="The first string")
    s2: str = field(help="The second string")
    benchmark: bool = field(default=False, alias="-b", help="Time the single LCS computation")
    algorithm: str = field(
        default=Algorithm.GREEDY_SCAN.value,
        alias="-a",
        choices=algorithm_names(),
        help="lcs_for: for loop, lcs_dynamic: dynamic programming, lcs_rec: recursive",
    )
    out_csv: Optional[str] = field(default=None, help="Append the run to this CSV")


def format_output(s1: str, s2: str, result: LcsRun) -> List[str]:
    lines = [f"s1: {s1}", f"s2: {s2}", f"lcs: {result.lcs}"]
    if result.elapsed is not None:
        lines.append(f"Time elapsed: {result.elapsed:.6f}s")
    return lines


def run_cli(args: Args) -> LcsRun:
    # choices already guard the CLI path; this covers Args built in code
    algorithm = Algorithm.from_name(args.algorithm)
    if algorithm is Algorithm.RECURSIVE and len(args.s1) + len(args.s2) > 30:
        logger.warning("lcs_rec is exponential in the input length, this may take a long time")
    result = run(args.s1, args.s2, algorithm, timed=args.benchmark)
    for line in format_output(args.s1, args.s2, result):
        print(line)
    if args.out_csv:
        write_to_csv(args.out_csv, [make_record(args.s1, args.s2, result)], append=True)
        logger.info(f"Appended run to {args.out_csv}")
    return result


def parse_args(argv: Optional[List[str]] = None) -> Args:
    return cast(Args, parse(Args, args=argv))


if __name__ == "__main__":
    start_time = time.perf_counter()
    args = parse_args()
    run_cli(args)
    logger.debug(f"Total time: {time.perf_counter() - start_time:.4f} seconds")
