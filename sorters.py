# sorters.py
from typing import List, MutableSequence, Optional, Sequence, Tuple
import random


class BogoSortExhausted(RuntimeError):
    """Raised when bogo_sort hits its caller-supplied shuffle cap."""
    def __init__(self, shuffles: int):
        super().__init__(f"sequence still unsorted after {shuffles} shuffles")
        self.shuffles = shuffles


def check_range(a: Sequence[int], low: Optional[int], high: Optional[int]) -> Tuple[int, int]:
    """Resolve the closed range [low, high] a sorter should work on.

    No bounds means the whole sequence. Explicit bounds must both be given and
    both lie inside [0, len(a)); anything else is an IndexError, never clamped.
    """
    n = len(a)
    if low is None and high is None: return 0, n - 1
    if low is None or high is None:
        raise IndexError("low and high must be given together")
    if not (0 <= low < n and 0 <= high < n):
        raise IndexError(f"range [{low}, {high}] outside sequence of length {n}")
    return low, high


def swap(a: MutableSequence[int], i: int, j: int) -> None:
    a[i], a[j] = a[j], a[i]


def partition(a: MutableSequence[int], lo: int, hi: int, pivot: int) -> int:
    """Partition a[lo:hi] around pivot, which already sits at a[hi].

    Returns the pivot's final index.
    """
    left, right = lo, hi - 1
    while left < right:
        while a[left] <= pivot and left < right: left += 1
        while a[right] >= pivot and left < right: right -= 1
        if left < right: swap(a, left, right)
    # every remaining element <= pivot leaves the pivot where it is
    if a[left] > a[hi]:
        swap(a, left, hi)
        return left
    return hi


def _split(a: MutableSequence[int], lo: int, hi: int, rng: random.Random) -> int:
    p_idx = rng.randrange(lo, hi)
    pivot = a[p_idx]
    swap(a, p_idx, hi)
    return partition(a, lo, hi, pivot)


def quicksort(a: MutableSequence[int], low: Optional[int] = None, high: Optional[int] = None,
              *, rng: Optional[random.Random] = None) -> None:
    """Randomized-pivot quicksort of a[low..high] (inclusive), in place.

    Sorts the whole sequence when no bounds are given. Pass a seeded
    ``random.Random`` as ``rng`` for a reproducible pivot sequence.
    """
    lo, hi = check_range(a, low, high)
    if rng is None: rng = random.Random()
    _quicksort(a, lo, hi, rng)


def _quicksort(a: MutableSequence[int], lo: int, hi: int, rng: random.Random) -> None:
    if lo >= hi: return
    p = _split(a, lo, hi, rng)
    _quicksort(a, lo, p - 1, rng)
    _quicksort(a, p + 1, hi, rng)


def quicksort_iterative(a: MutableSequence[int], low: Optional[int] = None, high: Optional[int] = None,
                        *, rng: Optional[random.Random] = None) -> None:
    """Same contract as quicksort, driven by an explicit work stack.

    The larger side is pushed and the smaller one processed next, so the
    stack never holds more than O(log n) ranges.
    """
    lo, hi = check_range(a, low, high)
    if rng is None: rng = random.Random()
    stack: List[Tuple[int, int]] = [(lo, hi)]
    while stack:
        lo, hi = stack.pop()
        while lo < hi:
            p = _split(a, lo, hi, rng)
            if (p - lo) < (hi - p):
                if p + 1 < hi: stack.append((p + 1, hi))
                hi = p - 1
            else:
                if lo < p - 1: stack.append((lo, p - 1))
                lo = p + 1


def merge(a: MutableSequence[int], left: Sequence[int], right: Sequence[int]) -> None:
    i, j, k = 0, 0, 0
    while i < len(left) and j < len(right):
        # ties come from the left half to keep the sort stable
        if left[i] <= right[j]: a[k] = left[i]; i += 1
        else: a[k] = right[j]; j += 1
        k += 1
    while i < len(left): a[k] = left[i]; i += 1; k += 1
    while j < len(right): a[k] = right[j]; j += 1; k += 1


def mergesort(a: MutableSequence[int]) -> None:
    n = len(a)
    if n < 2: return
    mid = n // 2
    left, right = list(a[:mid]), list(a[mid:])
    mergesort(left); mergesort(right)
    merge(a, left, right)


def insertion_sort(a: MutableSequence[int]) -> None:
    for i in range(1, len(a)):
        current = a[i]
        j = i - 1
        while j >= 0 and a[j] > current:
            a[j + 1] = a[j]; j -= 1
        a[j + 1] = current


def bubble_sort(a: MutableSequence[int]) -> None:
    swapped = True
    while swapped:
        swapped = False
        for i in range(len(a) - 1):
            if a[i] > a[i + 1]:
                swap(a, i, i + 1); swapped = True


def is_sorted(a: Optional[Sequence[int]]) -> bool:
    if a is None or len(a) <= 1: return True
    for i in range(len(a) - 1):
        if a[i] > a[i + 1]: return False
    return True


def bogo_sort(a: Optional[MutableSequence[int]], *, rng: Optional[random.Random] = None,
              max_shuffles: Optional[int] = None) -> None:
    """Shuffle until sorted. No latency bound unless max_shuffles is given.

    A None, empty or single-element sequence counts as sorted and is left
    untouched. With max_shuffles set, BogoSortExhausted is raised once that
    many shuffles have not produced an ordered sequence.
    """
    if max_shuffles is not None and max_shuffles < 0:
        raise ValueError(f"max_shuffles must be >= 0, got {max_shuffles}")
    if rng is None: rng = random.Random()
    shuffles = 0
    while not is_sorted(a):
        if max_shuffles is not None and shuffles >= max_shuffles:
            raise BogoSortExhausted(shuffles)
        rng.shuffle(a); shuffles += 1


def binary_search(arr: Sequence[int], key: int) -> int:
    """Index of key in ascending arr, or -(insertion point) - 1 when absent."""
    lo, hi = 0, len(arr) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        v = arr[mid]
        if v < key: lo = mid + 1
        elif v > key: hi = mid - 1
        else: return mid
    return -lo - 1
