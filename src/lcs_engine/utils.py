import random
from typing import List, Optional, Sequence, Tuple

import numpy as np


def seed_all(seed: int) -> random.Random:
    random.seed(seed)
    np.random.seed(seed)
    return random.Random(seed)


def rand_string(rng: random.Random, alpha: str = "abcd", n: Optional[int] = None, lo: int = 5, hi: int = 12) -> str:
    if n is None:
        n = rng.randint(lo, hi)
    return "".join(rng.choice(alpha) for _ in range(n))


def make_pairs(rng: random.Random, lengths: Sequence[int], n: int, alpha: str = "abcd") -> List[Tuple[str, str]]:
    """n random string pairs for every length, both strings of that length."""
    pairs: List[Tuple[str, str]] = []
    for length in lengths:
        for _ in range(n):
            pairs.append((rand_string(rng, alpha, n=length), rand_string(rng, alpha, n=length)))
    return pairs
