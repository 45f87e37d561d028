# define how to serialize here.
import os
from typing import Any, Dict, List, Optional

import pandas as pd
from pydantic import BaseModel

from src.lcs_engine.engine import LcsRun


class Record(BaseModel):
    s1: str = ""
    s2: str = ""
    algorithm: str = ""
    lcs: int = -1
    elapsed_s: Optional[float] = None  # None when the run was not timed
    seed: int = -1  # -1 for runs from the command line


def make_record(s1: str, s2: str, result: LcsRun, seed: int = -1) -> Record:
    return Record(
        s1=s1,
        s2=s2,
        algorithm=result.algorithm.value,
        lcs=result.lcs,
        elapsed_s=result.elapsed,
        seed=seed,
    )


def write_to_csv(path: str, records: List[Record], append: bool = False) -> None:
    result: List[Dict[str, Any]] = []
    for record in records:
        result.append(record.model_dump())
    df = pd.DataFrame(result, columns=list(Record.model_fields))
    header = not (append and os.path.exists(path))
    df.to_csv(path, mode="a" if append else "w", index=False, header=header)


def read_from_csv(path: str) -> List[Record]:
    result: List[Record] = []
    if not os.path.exists(path):
        return result

    # only an empty elapsed_s is missing; inputs like "NA" or "nan" are real strings
    df = pd.read_csv(
        path,
        dtype={"s1": str, "s2": str, "algorithm": str},
        keep_default_na=False,
        na_values={"elapsed_s": [""]},
        float_precision="round_trip",
    )
    for r in df.to_dict("records"):
        clean: Dict[str, Any] = {}
        for name, field in Record.model_fields.items():
            val = r.get(name, None)
            if val is None or pd.isna(val):
                # untimed runs come back as NaN
                val = field.default
            elif field.annotation is int:
                val = int(val)
            clean[name] = val
        result.append(Record(**clean))
    return result


def records_to_df(records: List[Record]) -> pd.DataFrame:
    return pd.DataFrame([r.model_dump() for r in records], columns=list(Record.model_fields))
