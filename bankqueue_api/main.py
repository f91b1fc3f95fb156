import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bankqueue.errors import InvalidParameter, ResourceExhausted
from bankqueue.logging_config import configure_from_env
from bankqueue.models import SimulationRequest as CoreSimReq
from bankqueue.report import NO_STATISTICS
from bankqueue.simulation import simulate
from bankqueue_api.schemas import SimulationRequest, SimulationResponse

configure_from_env()
logger = logging.getLogger("bankqueue.api")

app = FastAPI(title="Bank Queue Simulator API", version="1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(InvalidParameter)
def invalid_parameter_handler(request: Request, exc: InvalidParameter):
    return JSONResponse(status_code=422, content={"detail": str(exc)})

@app.exception_handler(ResourceExhausted)
def resource_exhausted_handler(request: Request, exc: ResourceExhausted):
    logger.error("Simulation ran out of memory: %s", exc)
    return JSONResponse(status_code=503, content={"detail": str(exc)})

@app.get("/health")
def health():
    return {"status": "ok"}

@app.post("/simulate", response_model=SimulationResponse)
def simulate_endpoint(req: SimulationRequest):
    core_req = CoreSimReq(
        arrival_rate=req.arrival_rate,
        tellers=req.tellers,
        horizon=req.horizon,
        min_service=req.min_service,
        max_service=req.max_service,
        seed=req.seed
    )
    res = simulate(core_req)

    # convert dataclasses -> dicts for pydantic response
    return SimulationResponse(
        total_arrived=res.total_arrived,
        total_served=res.total_served,
        remaining_in_queue=res.remaining_in_queue,
        wait_times=res.wait_times,
        statistics=res.statistics.__dict__ if res.has_statistics else None,
        note=None if res.has_statistics else NO_STATISTICS,
        services=[s.__dict__ for s in res.services],
        timeline=[t.__dict__ for t in res.timeline] if req.include_timeline else [],
        seed=res.seed
    )
