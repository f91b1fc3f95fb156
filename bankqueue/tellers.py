"""Fixed pool of tellers serving the customer queue."""

import logging
import random
from typing import Iterator, List

from .collector import WaitTimeCollector
from .distributions import service_time
from .errors import ResourceExhausted
from .models import MAX_SERVICE_TIME, MIN_SERVICE_TIME, ServiceRecord, Teller
from .queue import CustomerQueue
from .validators import require_int_at_least, require_service_range

logger = logging.getLogger(__name__)


class TellerPool:
    """
    Tellers indexed 0..n-1, always scanned in index order.

    Index order is the tie-break when several tellers are free: the lowest
    index picks up the next waiting customer.
    """

    def __init__(self,
                 count: int,
                 min_service: int = MIN_SERVICE_TIME,
                 max_service: int = MAX_SERVICE_TIME):
        require_int_at_least("tellers", count, 1)
        require_service_range(min_service, max_service)
        try:
            self._tellers: List[Teller] = [Teller() for _ in range(count)]
        except MemoryError as exc:
            raise ResourceExhausted(f"cannot allocate {count} tellers") from exc
        self.min_service = min_service
        self.max_service = max_service
        self.customers_served = 0

    def __len__(self) -> int:
        return len(self._tellers)

    def __iter__(self) -> Iterator[Teller]:
        return iter(self._tellers)

    def busy_count(self) -> int:
        return sum(1 for t in self._tellers if t.is_busy)

    def tick_down(self) -> int:
        """Advance every busy teller by one minute; returns how many finished."""
        finished = 0
        for teller in self._tellers:
            if not teller.is_busy:
                continue
            teller.remaining_service_time -= 1
            if teller.remaining_service_time == 0:
                teller.is_busy = False
                finished += 1
        return finished

    def assign_if_free(self,
                       queue: CustomerQueue,
                       current_minute: int,
                       collector: WaitTimeCollector,
                       rng: random.Random) -> List[ServiceRecord]:
        """
        Hand waiting customers to idle tellers, at most one per teller.

        Each served customer's wait is recorded in ``collector`` and the
        teller is kept busy for a freshly sampled service time.
        """
        started: List[ServiceRecord] = []
        for idx, teller in enumerate(self._tellers):
            if queue.is_empty():
                break
            if teller.is_busy:
                continue

            customer = queue.dequeue()
            wait = current_minute - customer.arrival_minute
            collector.record(wait)

            duration = service_time(rng, self.min_service, self.max_service)
            teller.is_busy = True
            teller.remaining_service_time = duration

            self.customers_served += 1
            started.append(ServiceRecord(
                serial_no=self.customers_served,
                teller_id=idx + 1,
                arrival_minute=customer.arrival_minute,
                service_start=current_minute,
                service_time=duration,
                service_end=current_minute + duration,
                wait_time=wait
            ))
            logger.debug("minute %d: teller %d took customer from minute %d (wait %d, service %d)",
                         current_minute, idx + 1, customer.arrival_minute, wait, duration)
        return started
