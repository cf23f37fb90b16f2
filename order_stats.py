# order_stats.py
from typing import Sequence

from sorters import mergesort

# Empty input yields 0 for every statistic here rather than raising.


def maximum(a: Sequence[int]) -> int:
    if len(a) == 0: return 0
    mx = a[0]
    for x in a:
        if x > mx: mx = x
    return mx


def minimum(a: Sequence[int]) -> int:
    if len(a) == 0: return 0
    mn = a[0]
    for x in a:
        if x < mn: mn = x
    return mn


def median(a: Sequence[int]) -> int:
    """Element at index n // 2 of a sorted copy of a.

    Even lengths give the upper of the two middle values, not their mean:
    median([4, 3, 2, 1]) == 3.
    """
    if len(a) == 0: return 0
    ordered = list(a)
    mergesort(ordered)
    return ordered[len(ordered) // 2]


def average(a: Sequence[int]) -> float:
    if len(a) == 0: return 0.0
    return sum(int(x) for x in a) / len(a)
