# dataset_io.py
from typing import Iterable, List, Optional, Sequence
import csv, sys
from pathlib import Path

import numpy as np


def require_int_range(values: Sequence[int], dtype=np.int32) -> None:
    if len(values) == 0: return
    info = np.iinfo(dtype)
    mn, mx = min(values), max(values)
    if mn < info.min or mx > info.max:
        raise ValueError(f"values must fit {np.dtype(dtype).name} "
                         f"[{info.min}, {info.max}], got [{mn}, {mx}]")


def load_dataset_csv(path: Path) -> List[int]:
    path = Path(path)
    if not path.exists(): print(f"[SKIP] {path}", file=sys.stderr); return []
    data: List[int] = []
    with path.open(newline="") as f:
        rd = csv.DictReader(f)
        if "value" not in (rd.fieldnames or []):
            print(f"[ERROR] {path} missing 'value' header", file=sys.stderr); return []
        for row in rd:
            try: data.append(int(row["value"]))
            except (TypeError, ValueError): pass
    if not data: print(f"[SKIP] No ints: {path}", file=sys.stderr)
    return data


def write_dataset_csv(path: Path, values: Iterable[int]) -> Path:
    path = Path(path)
    with path.open("w", newline="") as f:
        wr = csv.writer(f)
        wr.writerow(["value"])
        for v in values: wr.writerow([int(v)])
    return path


def make_dataset(n: int, *, seed: int = 0, low: Optional[int] = None, high: Optional[int] = None,
                 dtype=np.int32) -> List[int]:
    """n integers drawn uniformly from [low, high], both ends inclusive.

    Bounds default to the full range of dtype.
    """
    info = np.iinfo(dtype)
    lo = info.min if low is None else low
    hi = info.max if high is None else high
    if lo > hi: raise ValueError(f"low {lo} > high {hi}")
    rng = np.random.default_rng(seed)
    return rng.integers(lo, hi, size=n, dtype=dtype, endpoint=True).tolist()


def make_datasets(base_dir: Path, sizes: Sequence[int], variants: Sequence[int], *,
                  seed: int = 0, overwrite: bool = False, dtype=np.int32) -> List[Path]:
    base_dir = Path(base_dir)
    base_dir.mkdir(parents=True, exist_ok=True)
    paths: List[Path] = []
    for n in sizes:
        for i in variants:
            path = base_dir / f"{n}_dataset_{i}.csv"
            if overwrite or not path.exists():
                # one stream per (size, variant) so files don't depend on generation order
                write_dataset_csv(path, make_dataset(n, seed=seed + n * 1000 + i, dtype=dtype))
            paths.append(path)
    return paths
