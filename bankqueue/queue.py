"""FIFO line of customers waiting for a teller."""

from collections import deque
from typing import Optional

from .errors import ResourceExhausted
from .models import Customer


class CustomerQueue:
    """Customers in arrival order; every operation is O(1)."""

    def __init__(self):
        self._line = deque()

    def enqueue(self, arrival_minute: int) -> Customer:
        """Append a customer who arrived at ``arrival_minute`` to the tail."""
        try:
            customer = Customer(arrival_minute=arrival_minute)
            self._line.append(customer)
        except MemoryError as exc:
            raise ResourceExhausted("no memory left for a new customer") from exc
        return customer

    def dequeue(self) -> Optional[Customer]:
        """Remove and return the head, or None when nobody is waiting."""
        if not self._line:
            return None
        return self._line.popleft()

    def is_empty(self) -> bool:
        return not self._line

    def size(self) -> int:
        return len(self._line)

    def __len__(self) -> int:
        return len(self._line)
