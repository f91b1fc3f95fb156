"""Growable store for the wait times of served customers."""

from typing import List, Tuple

from .errors import ResourceExhausted
from .models import INITIAL_STORAGE_CAPACITY
from .validators import require_int_at_least


class WaitTimeCollector:
    """
    Wait times in the order customers were served.

    Storage is preallocated and doubles when full, so ``count`` never
    exceeds ``capacity`` and capacity never shrinks. Running out of memory
    while growing raises ResourceExhausted instead of dropping the sample.
    """

    def __init__(self, initial_capacity: int = INITIAL_STORAGE_CAPACITY):
        require_int_at_least("initial_capacity", initial_capacity, 1)
        self._slots = self._allocate(initial_capacity)
        self._count = 0

    @staticmethod
    def _allocate(size: int) -> List[int]:
        return [0] * size

    @property
    def count(self) -> int:
        return self._count

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return self._count

    def record(self, wait_time: int) -> None:
        if self._count == len(self._slots):
            self._grow()
        self._slots[self._count] = wait_time
        self._count += 1

    def _grow(self) -> None:
        try:
            self._slots.extend(self._allocate(len(self._slots)))
        except MemoryError as exc:
            raise ResourceExhausted(
                f"cannot grow wait-time storage past {len(self._slots)} samples"
            ) from exc

    def snapshot(self) -> Tuple[int, ...]:
        """Read-only copy of the recorded wait times, in service order."""
        return tuple(self._slots[:self._count])

    def sorted_sample(self) -> List[int]:
        return sorted(self._slots[:self._count])
