# compare_sorters.py
from typing import Callable, Dict, Any, List, Optional, Sequence, TextIO
import sys, time, random, math
from pathlib import Path
from statistics import mean, stdev

from dataset_io import load_dataset_csv, make_datasets, require_int_range
from sorters import (BogoSortExhausted, bogo_sort, bubble_sort, insertion_sort,
                     mergesort, quicksort, quicksort_iterative)

SORTERS: Dict[str, Callable[[List[int]], None]] = {
    "quick_s": quicksort,
    "quick_iter_s": quicksort_iterative,
    "merge_s": mergesort,
    "insertion_s": insertion_sort,
    "bubble_s": bubble_sort,
}
QUADRATIC = ("insertion_s", "bubble_s")
METRICS = ["builtin_s", *SORTERS, "bogo_s"]


def bench(func, arr, **kwargs):
    s = time.perf_counter(); res = func(arr, **kwargs); e = time.perf_counter()
    return res, e - s

def bench_inplace(func, arr, **kwargs):
    work = list(arr)
    _, t = bench(func, work, **kwargs)
    return work, t

def run_one(path: Path, *, check=True, shuffle_copy=False, quadratic_max_n: int = 10_000,
            bogo_max_n: int = 0, bogo_max_shuffles: Optional[int] = 100_000) -> Optional[Dict[str, Any]]:
    data = load_dataset_csv(path)
    if not data: return None
    require_int_range(data)
    work = data[:]
    if shuffle_copy: random.Random(0xC0FFEE).shuffle(work)
    n = len(work)
    py_sorted, t_builtin = bench(sorted, work)
    row: Dict[str, Any] = {"file": Path(path).name, "n": n, "builtin_s": t_builtin}
    for name, func in SORTERS.items():
        if name in QUADRATIC and n > quadratic_max_n:
            row[name] = float('nan'); continue
        out, row[name] = bench_inplace(func, work)
        if check: assert out == py_sorted, f"Mismatch ({name}) on {path}"
    row["bogo_s"] = float('nan')
    if n <= bogo_max_n:
        try:
            out, row["bogo_s"] = bench_inplace(bogo_sort, work, max_shuffles=bogo_max_shuffles)
        except BogoSortExhausted as exc:
            print(f"[SKIP] bogo on {Path(path).name}: {exc}", file=sys.stderr)
        else:
            if check: assert out == py_sorted, f"Mismatch (bogo_s) on {path}"
    return row

def _finite(vals): return [v for v in vals if v is not None and math.isfinite(v)]

def write_lines(lines: Sequence[str], stream: Optional[TextIO] = None) -> None:
    out = sys.stdout if stream is None else stream
    out.write("".join(f"{line}\n" for line in lines))
    out.flush()

# Print
def format_perfile(rows) -> List[str]:
    if not rows: return []
    lines = ["", "================ Per-file Results ================",
             f"{'File':18} {'n':>10} " + " ".join(f"{k:>13}" for k in METRICS)]
    for r in rows:
        lines.append(f"{r['file']:18} {r['n']:10d} " + " ".join(f"{r[k]:13.4f}" for k in METRICS))
    return lines

def format_group_stats(rows, label: str) -> List[str]:
    if not rows: return []
    lines = ["", f"===== Size {label} — Averages (± std) over {len(rows)} runs =====",
             f"{'Metric':18} {'Mean(s)':>12} {'Std(s)':>12}"]
    for k in METRICS:
        vals = _finite([r[k] for r in rows])
        if not vals: continue
        m = mean(vals)
        sd = stdev(vals) if len(vals) >= 2 else 0.0
        lines.append(f"{k:18} {m:12.4f} {sd:12.4f}")
    built_vals = _finite([r["builtin_s"] for r in rows])
    quick_vals = _finite([r["quick_s"] for r in rows])
    if built_vals and quick_vals and mean(built_vals) > 0:
        lines.append(f"{'Slowdown Quick/Built':18} {mean(quick_vals)/mean(built_vals):12.4f} {'(ratio of means)':>12}")
    return lines

# Main
if __name__ == "__main__":
    try:
        base_dir = Path(__file__).resolve().parent
    except NameError:
        base_dir = Path.cwd()
    print(f"Looking for datasets in: {base_dir}")

    SIZES = [100, 1_000, 10_000]
    VARIANTS = [1, 2, 3, 4, 5]
    CHECK = {100: True, 1_000: True, 10_000: False}
    SHUFFLE_FOR_TIMING = False
    GENERATE_MISSING = True
    QUADRATIC_MAX_N = 1_000
    BOGO_MAX_N = 8

    if GENERATE_MISSING: make_datasets(base_dir, SIZES, VARIANTS)

    for n in SIZES:
        group = []
        for i in VARIANTS:
            path = base_dir / f"{n}_dataset_{i}.csv"
            r = run_one(path, check=CHECK[n], shuffle_copy=SHUFFLE_FOR_TIMING,
                        quadratic_max_n=QUADRATIC_MAX_N, bogo_max_n=BOGO_MAX_N)
            if r: group.append(r)
        write_lines(format_perfile(group) + format_group_stats(group, str(n)))
