import logging
from typing import List, Optional

from .collector import WaitTimeCollector
from .distributions import make_rng, poisson_arrivals, service_mean_variance
from .models import (
    HORIZON_MINUTES, MAX_SERVICE_TIME, MIN_SERVICE_TIME,
    ServiceRecord, SimulationRequest, SimulationResult, TickRecord
)
from .queue import CustomerQueue
from .stats import summarize
from .tellers import TellerPool
from .validators import require_int_at_least, require_positive, require_service_range

logger = logging.getLogger(__name__)

def validate_request(req: SimulationRequest) -> None:
    require_positive("arrival_rate", req.arrival_rate)
    require_int_at_least("tellers", req.tellers, 1)
    require_int_at_least("horizon", req.horizon, 1)
    require_service_range(req.min_service, req.max_service)

def simulate(req: SimulationRequest) -> SimulationResult:
    validate_request(req)
    rng, seed = make_rng(req.seed)

    queue = CustomerQueue()
    tellers = TellerPool(req.tellers, req.min_service, req.max_service)
    collector = WaitTimeCollector()

    mean_service, _ = service_mean_variance(req.min_service, req.max_service)
    load = req.arrival_rate * mean_service / req.tellers
    logger.info("Starting %d-minute simulation: lambda=%.2f, tellers=%d, seed=%d",
                req.horizon, req.arrival_rate, req.tellers, seed)
    if load >= 1:
        logger.warning("Offered load %.2f >= 1: the queue will keep growing", load)

    services: List[ServiceRecord] = []
    timeline: List[TickRecord] = []
    total_arrived = 0

    for minute in range(req.horizon):
        # 1. free tellers whose service ran out
        tellers.tick_down()

        # 2. arrivals join the tail of the line
        arrivals = poisson_arrivals(req.arrival_rate, rng)
        for _ in range(arrivals):
            queue.enqueue(minute)
        total_arrived += arrivals

        # 3. idle tellers pick up waiting customers, lowest index first
        started = tellers.assign_if_free(queue, minute, collector, rng)
        services.extend(started)

        timeline.append(TickRecord(
            minute=minute,
            arrivals=arrivals,
            served=len(started),
            queue_length=queue.size(),
            busy_tellers=tellers.busy_count(),
            total_arrived=total_arrived,
            total_served=collector.count
        ))
        logger.debug("minute %d: %d arrived, %d served, %d waiting",
                     minute, arrivals, len(started), queue.size())

    wait_times = collector.sorted_sample()
    result = SimulationResult(
        total_arrived=total_arrived,
        total_served=collector.count,
        remaining_in_queue=queue.size(),
        wait_times=wait_times,
        statistics=summarize(wait_times),
        services=services,
        timeline=timeline,
        seed=seed
    )
    logger.info("Simulation complete: %d arrived, %d served, %d left in queue",
                result.total_arrived, result.total_served, result.remaining_in_queue)
    return result

def run_simulation(arrival_rate: float,
                   tellers: int,
                   horizon: int = HORIZON_MINUTES,
                   min_service: int = MIN_SERVICE_TIME,
                   max_service: int = MAX_SERVICE_TIME,
                   seed: Optional[int] = None) -> SimulationResult:
    return simulate(SimulationRequest(
        arrival_rate=arrival_rate,
        tellers=tellers,
        horizon=horizon,
        min_service=min_service,
        max_service=max_service,
        seed=seed
    ))
