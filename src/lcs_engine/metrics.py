from typing import List

import numpy as np
import pandas as pd

from src.lcs_engine.engine import Algorithm
from src.lcs_engine.logger import Record, records_to_df


def timing_summary(records: List[Record]) -> pd.DataFrame:
    """Per-algorithm timing stats over the timed records (seconds)."""
    df = records_to_df(records)
    df = df[df["elapsed_s"].notna()]
    byalgo = df.groupby("algorithm")["elapsed_s"]
    summary = pd.DataFrame(
        {
            "runs": byalgo.size(),
            "mean_s": byalgo.mean(),
            "median_s": byalgo.median(),
            "p95_s": byalgo.agg(lambda x: float(np.percentile(np.asarray(x, dtype=float), 95))),
            "max_s": byalgo.max(),
        }
    )
    return summary


def agreement_with_reference(records: List[Record], reference: Algorithm = Algorithm.DYNAMIC) -> pd.Series:
    """Fraction of pairs where each algorithm gives the same length as ``reference``."""
    df = records_to_df(records)
    wide = df.pivot_table(index=["s1", "s2"], columns="algorithm", values="lcs", aggfunc="first")
    if reference.value not in wide.columns:
        return pd.Series(dtype=float)
    ref = wide[reference.value]
    out = {}
    for algo in wide.columns:
        both = wide[algo].notna() & ref.notna()
        out[algo] = float((wide.loc[both, algo] == ref[both]).mean()) if both.any() else float("nan")
    return pd.Series(out, name="agreement")
