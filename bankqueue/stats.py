"""
Descriptive statistics over the wait-time sample.

Every function returns a sentinel (0 or 0.0) for an empty sample instead of
dividing by zero or indexing past the end. Callers that must tell "no data"
apart from "all zeros" use summarize(), which returns None for an empty
sample.
"""

import math
from collections import Counter
from typing import List, Optional, Sequence

from .models import WaitStatistics


def sort_sample(data: Sequence[int]) -> List[int]:
    return sorted(data)

def mean(data: Sequence[int]) -> float:
    n = len(data)
    if n == 0:
        return 0.0
    return sum(data) / n

def median(sorted_data: Sequence[int]) -> float:
    # sorted_data must already be ascending
    n = len(sorted_data)
    if n == 0:
        return 0.0
    if n % 2 == 0:
        return (sorted_data[n // 2 - 1] + sorted_data[n // 2]) / 2.0
    return float(sorted_data[n // 2])

def mode(data: Sequence[int]) -> int:
    if not data:
        return 0
    frequency = Counter(data)
    best, best_freq = 0, 0
    # ascending scan + strict ">" keeps the smallest value on ties
    for value in sorted(frequency):
        if frequency[value] > best_freq:
            best, best_freq = value, frequency[value]
    return best

def std_dev(data: Sequence[int], mean_value: float) -> float:
    # population standard deviation (divide by N)
    n = len(data)
    if n == 0:
        return 0.0
    sum_sq = sum((x - mean_value) ** 2 for x in data)
    return math.sqrt(sum_sq / n)

def max_wait(sorted_data: Sequence[int]) -> int:
    if not sorted_data:
        return 0
    return sorted_data[-1]

def summarize(sample: Sequence[int]) -> Optional[WaitStatistics]:
    if not sample:
        return None
    ordered = sort_sample(sample)
    avg = mean(ordered)
    return WaitStatistics(
        mean=avg,
        median=median(ordered),
        mode=mode(ordered),
        std_dev=std_dev(ordered, avg),
        max_wait=max_wait(ordered)
    )
