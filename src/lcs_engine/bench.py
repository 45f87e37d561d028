"""
Compare the LCS variants on random strings.

Every variant runs with timing on the same seeded pairs; the DP result is the
reference the other variants are scored against.

Usage:
  python -m src.lcs_engine.bench --n 20 --lengths 4 8 12 64 --out_csv bench.csv
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Tuple, cast

from simple_parsing import parse
from tqdm import tqdm

from src.lcs_engine.engine import Algorithm, algorithm_names, run
from src.lcs_engine.logger import Record, make_record, write_to_csv
from src.lcs_engine.metrics import agreement_with_reference, timing_summary
from src.lcs_engine.utils import make_pairs, seed_all

logger = logging.getLogger(__name__)


@dataclass
class BenchArgs:
    n: int = 10
    lengths: List[int] = field(default_factory=lambda: [4, 8, 12])
    alphabet: str = "abcd"
    algorithms: List[str] = field(
        default_factory=algorithm_names,
        metadata={"choices": algorithm_names(), "help": "Variants to compare."},
    )
    seed: int = 1
    max_rec_len: int = field(
        default=12,
        metadata={"help": "Pairs longer than this skip lcs_rec, which is exponential."},
    )
    out_csv: Optional[str] = None


def check_args(args: Any) -> None:
    if args.n < 1:
        raise ValueError("n must be >=1")
    if not args.alphabet:
        raise ValueError("alphabet must not be empty")
    if any(length < 0 for length in args.lengths):
        raise ValueError(f"lengths must be non-negative, got {args.lengths}")


def run_pairs(pairs: Sequence[Tuple[str, str]], algorithms: Sequence[Algorithm], seed: int, max_rec_len: int) -> List[Record]:
    records: List[Record] = []
    skipped = 0
    for s1, s2 in tqdm(pairs, desc="pairs", leave=False):
        for algorithm in algorithms:
            if algorithm is Algorithm.RECURSIVE and max(len(s1), len(s2)) > max_rec_len:
                skipped += 1
                continue
            result = run(s1, s2, algorithm, timed=True)
            records.append(make_record(s1, s2, result, seed=seed))
    if skipped:
        logger.info(f"Skipped {skipped} lcs_rec runs longer than max_rec_len={max_rec_len}")
    return records


def run_bench(args: Any) -> List[Record]:
    check_args(args)
    rng = seed_all(args.seed)
    algorithms = [Algorithm.from_name(name) for name in args.algorithms]
    pairs = make_pairs(rng, args.lengths, args.n, args.alphabet)
    logger.info(f"Running {len(algorithms)} algorithms on {len(pairs)} pairs (seed={args.seed})")
    records = run_pairs(pairs, algorithms, args.seed, args.max_rec_len)

    if records:
        logger.info(f"Timing summary:\n{timing_summary(records)}")
        agreement = agreement_with_reference(records)
        if not agreement.empty:
            logger.info(f"Agreement with {Algorithm.DYNAMIC.value}:\n{agreement}")
    if args.out_csv:
        write_to_csv(args.out_csv, records)
        logger.info(f"Wrote {len(records)} records to {args.out_csv}")
    return records


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    run_bench(cast(BenchArgs, parse(BenchArgs)))
