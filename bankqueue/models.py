from dataclasses import dataclass, field
from typing import List, Optional

# ---------- Defaults ----------
HORIZON_MINUTES = 480          # 8 hours * 60 minutes
MIN_SERVICE_TIME = 2
MAX_SERVICE_TIME = 3
INITIAL_STORAGE_CAPACITY = 100

@dataclass
class Customer:
    arrival_minute: int

@dataclass
class Teller:
    is_busy: bool = False
    remaining_service_time: int = 0

@dataclass
class SimulationRequest:
    arrival_rate: float                 # lambda, mean arrivals per minute
    tellers: int                        # fixed pool size
    horizon: int = HORIZON_MINUTES      # ticks to run
    min_service: int = MIN_SERVICE_TIME
    max_service: int = MAX_SERVICE_TIME
    seed: Optional[int] = None          # None -> seeded from the OS

@dataclass
class ServiceRecord:
    serial_no: int
    teller_id: int          # 1-based, "Teller 1", "Teller 2" etc.
    arrival_minute: int
    service_start: int
    service_time: int
    service_end: int
    wait_time: int

@dataclass
class TickRecord:
    minute: int
    arrivals: int
    served: int
    queue_length: int
    busy_tellers: int
    total_arrived: int
    total_served: int

@dataclass
class WaitStatistics:
    mean: float
    median: float
    mode: int
    std_dev: float
    max_wait: int

@dataclass
class SimulationResult:
    total_arrived: int
    total_served: int
    remaining_in_queue: int
    wait_times: List[int]                       # sorted ascending
    statistics: Optional[WaitStatistics]        # None when nobody was served
    services: List[ServiceRecord] = field(default_factory=list)
    timeline: List[TickRecord] = field(default_factory=list)
    seed: Optional[int] = None

    @property
    def has_statistics(self) -> bool:
        return self.statistics is not None
