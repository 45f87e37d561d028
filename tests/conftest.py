import random
from dataclasses import dataclass, field
from typing import List, Optional

import pytest

from src.lcs_engine.utils import rand_string


@dataclass
class CreateArgs:
    s1: str = "ABCBDAB"
    s2: str = "BDCABA"
    benchmark: bool = False
    algorithm: str = "lcs_dynamic"
    out_csv: Optional[str] = None


@dataclass
class CreateBenchArgs:
    n: int = 3
    lengths: List[int] = field(default_factory=lambda: [0, 3, 6])
    alphabet: str = "ab"
    algorithms: List[str] = field(default_factory=lambda: ["lcs_for", "lcs_rec", "lcs_dynamic"])
    seed: int = 1
    max_rec_len: int = 6
    out_csv: Optional[str] = None


@pytest.fixture
def default_args():
    return CreateArgs()


@pytest.fixture
def bench_args():
    return CreateBenchArgs()


EXAMPLES = 50
MAX_LEN = 8


@pytest.fixture(scope="session")
def random_pairs():
    rng = random.Random(1234)
    return [(rand_string(rng, "abc", lo=0, hi=MAX_LEN), rand_string(rng, "abc", lo=0, hi=MAX_LEN)) for _ in range(EXAMPLES)]
