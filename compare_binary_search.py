# compare_binary_search.py
from __future__ import annotations
from typing import Sequence, Callable, Optional, Tuple, Dict
import bisect, time, random, math
from pathlib import Path
from statistics import mean, stdev

from dataset_io import load_dataset_csv, make_datasets
from sorters import binary_search, mergesort

def bisect_reference(arr: Sequence[int], key: int) -> int:
    i = bisect.bisect_left(arr, key)
    return i if i < len(arr) and arr[i] == key else -i - 1

def prep_queries(sorted_arr: Sequence[int], n_queries: int, *, seed: int = 42,
                 miss_spread: int = 3) -> list[int]:
    # half hits, a quarter each just below and just above the range; any
    # remainder lands one off an existing value (a miss unless it hits a neighbour)
    n = len(sorted_arr)
    if n == 0 or n_queries <= 0: return []
    rng = random.Random(seed)
    lo, hi = sorted_arr[0], sorted_arr[-1]
    qs = [sorted_arr[rng.randrange(n)] for _ in range(n_queries // 2)]
    qs += [lo - rng.randint(1, miss_spread) for _ in range(n_queries // 4)]
    qs += [hi + rng.randint(1, miss_spread) for _ in range(n_queries // 4)]
    while len(qs) < n_queries:
        qs.append(sorted_arr[rng.randrange(n)] + rng.choice((-1, 1)))
    rng.shuffle(qs); return qs

def verify_queries(arr: Sequence[int], queries: Sequence[int]) -> int:
    """Check binary_search against bisect for every query; returns the hit count.

    Duplicates may legitimately resolve to different indices, so a hit only
    has to land on an equal element.
    """
    hits = 0
    for q in queries:
        got, want = binary_search(arr, q), bisect_reference(arr, q)
        if want >= 0:
            assert got >= 0 and arr[got] == q, f"missed {q}: got {got}"
            hits += 1
        else:
            assert got == want, f"sentinel for {q}: got {got}, want {want}"
    return hits

def bench_batch(search_fn: Callable[[Sequence[int], int], int],
                arr: Sequence[int],
                queries: Sequence[int],
                repeats: int = 1) -> Tuple[float, int]:
    found = 0
    s = time.perf_counter()
    for _ in range(repeats):
        for q in queries:
            found += (search_fn(arr, q) >= 0)
    e = time.perf_counter()
    return e - s, found

def format_result(label: str, seconds: float, ops: int, baseline: Optional[float]) -> str:
    qps = ops / seconds if seconds > 0 else float('inf')
    if baseline is None:
        return f"[{label:<20}] {seconds:10.6f} s   {qps:12.0f} qps   (baseline)"
    speedup = baseline / seconds if seconds > 0 else float('inf')
    return f"[{label:<20}] {seconds:10.6f} s   {qps:12.0f} qps   ×{speedup:5.2f} vs bisect"

def run_one_file(path: Path,
                 n_queries: Optional[int] = None,
                 repeats: int = 2,
                 verify: bool = True) -> Optional[Dict[str, float]]:
    path = Path(path)
    data = load_dataset_csv(path)
    if not data: return None
    sorted_data = data[:]; mergesort(sorted_data)
    n = len(sorted_data)
    if n_queries is None: n_queries = min(2 * n, 200_000)
    queries = prep_queries(sorted_data, n_queries)
    print(f"\n=== {path.name}  (n={n}, queries={len(queries)}, repeats={repeats}) ===")
    if verify: verify_queries(sorted_data, queries)
    ops = len(queries) * repeats
    t_bisect, _ = bench_batch(bisect_reference, sorted_data, queries, repeats=repeats)
    print(format_result("bisect_left", t_bisect, ops, baseline=None))
    t_search, _ = bench_batch(binary_search, sorted_data, queries, repeats=repeats)
    print(format_result("binary_search", t_search, ops, baseline=t_bisect))
    return {"file": path.name, "n": n, "queries": ops,
            "t_bisect": t_bisect, "t_search": t_search}

# Print
def _finite(vals): return [v for v in vals if v is not None and math.isfinite(v)]

def print_perfile(rows: list[Dict[str, float]]) -> None:
    if not rows: return
    print("\n================ Per-file Results ================")
    print(f"{'File':18} {'n':>9} {'Queries':>10}  {'Bisect(s)':>10} {'Search(s)':>10}")
    for r in rows:
        print(f"{r['file']:18} {int(r['n']):9d} {int(r['queries']):10d}  "
              f"{r['t_bisect']:10.4f} {r['t_search']:10.4f}")

def print_group_stats(rows: list[Dict[str, float]], label: str) -> None:
    if not rows: return
    print(f"\n===== Size {label} — Averages (± std) over {len(rows)} runs =====")
    print(f"{'Metric':16} {'Mean(s)':>12} {'Std(s)':>12}")
    for k in ["t_bisect", "t_search"]:
        vals = _finite([r[k] for r in rows])
        m = mean(vals) if vals else float('nan')
        sd = stdev(vals) if len(vals) >= 2 else 0.0 if vals else float('nan')
        print(f"{k:16} {m:12.4f} {sd:12.4f}")

# Main
if __name__ == "__main__":
    try:
        base_dir = Path(__file__).resolve().parent
    except NameError:
        base_dir = Path.cwd()
    print(f"Looking for datasets in: {base_dir}")

    SIZES = [100, 10_000, 1_000_000]
    VARIANTS = [1, 2, 3, 4, 5]
    REPEATS = {100: 5, 10_000: 3, 1_000_000: 2}
    VERIFY_RESULTS = True
    GENERATE_MISSING = True

    if GENERATE_MISSING: make_datasets(base_dir, SIZES, VARIANTS)

    for n in SIZES:
        group_rows: list[Dict[str, float]] = []
        for i in VARIANTS:
            path = base_dir / f"{n}_dataset_{i}.csv"
            r = run_one_file(path, n_queries=None, repeats=REPEATS[n], verify=VERIFY_RESULTS)
            if r: group_rows.append(r)
        print_perfile(group_rows)
        print_group_stats(group_rows, str(n))
