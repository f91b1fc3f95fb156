from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


# ---------- Simulation ----------
class SimulationRequest(BaseModel):
    arrival_rate: float = Field(..., gt=0, examples=[1.5])
    tellers: int = Field(..., ge=1, le=10000, examples=[3])
    horizon: int = Field(480, ge=1, le=100000)
    min_service: int = Field(2, ge=1)
    max_service: int = Field(3, ge=1)
    seed: Optional[int] = None
    include_timeline: bool = False

    @model_validator(mode="after")
    def check_service_range(self):
        if self.max_service < self.min_service:
            raise ValueError("max_service must be >= min_service")
        return self

class ServiceRecord(BaseModel):
    serial_no: int
    teller_id: int
    arrival_minute: int
    service_start: int
    service_time: int
    service_end: int
    wait_time: int

class TickRecord(BaseModel):
    minute: int
    arrivals: int
    served: int
    queue_length: int
    busy_tellers: int
    total_arrived: int
    total_served: int

class WaitStatistics(BaseModel):
    mean: float
    median: float
    mode: int
    std_dev: float
    max_wait: int

class SimulationResponse(BaseModel):
    total_arrived: int
    total_served: int
    remaining_in_queue: int
    wait_times: List[int]
    statistics: Optional[WaitStatistics] = None
    note: Optional[str] = None
    services: List[ServiceRecord]
    timeline: List[TickRecord] = []
    seed: int
