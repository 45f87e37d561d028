from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Hashable, List, Optional, Sequence, Tuple, TypeVar

from src.lcs_engine.algorithms import lcs_dynamic, lcs_for, lcs_rec

logger = logging.getLogger(__name__)

T = TypeVar("T")

LcsFunc = Callable[[Sequence[Hashable], Sequence[Hashable]], int]


class UnknownAlgorithmError(ValueError):
    pass


class Algorithm(str, Enum):
    GREEDY_SCAN = "lcs_for"
    RECURSIVE = "lcs_rec"
    DYNAMIC = "lcs_dynamic"

    @classmethod
    def from_name(cls, name: str) -> "Algorithm":
        for algo in cls:
            if algo.value == name:
                return algo
        raise UnknownAlgorithmError(f"Invalid algorithm: {name!r} (expected one of {algorithm_names()})")


ALGORITHMS: Dict[Algorithm, LcsFunc] = {
    Algorithm.GREEDY_SCAN: lcs_for,
    Algorithm.RECURSIVE: lcs_rec,
    Algorithm.DYNAMIC: lcs_dynamic,
}


def algorithm_names() -> List[str]:
    return [a.value for a in Algorithm]


@dataclass(frozen=True)
class LcsRun:
    algorithm: Algorithm
    lcs: int
    elapsed: Optional[float] = None  # seconds, None when not timed


def benchmark(func: Callable[[], T], enabled: bool) -> Tuple[T, Optional[float]]:
    """Call ``func`` once; also return the wall-clock seconds it took when ``enabled``."""
    if not enabled:
        return func(), None
    start = time.perf_counter()
    result = func()
    return result, time.perf_counter() - start


def compute_lcs_length(
    s: Sequence[Hashable],
    t: Sequence[Hashable],
    algorithm: Algorithm = Algorithm.GREEDY_SCAN,
) -> int:
    return ALGORITHMS[algorithm](s, t)


def run(
    s: Sequence[Hashable],
    t: Sequence[Hashable],
    algorithm: Algorithm = Algorithm.GREEDY_SCAN,
    timed: bool = False,
) -> LcsRun:
    lcs, elapsed = benchmark(lambda: compute_lcs_length(s, t, algorithm), timed)
    logger.debug(f"{algorithm.value}: len(s)={len(s)} len(t)={len(t)} lcs={lcs} elapsed={elapsed}")
    return LcsRun(algorithm=algorithm, lcs=lcs, elapsed=elapsed)
