"""Minute-by-minute bank teller queue simulator."""

import logging

from .errors import BankQueueError, InvalidParameter, ResourceExhausted
from .models import SimulationRequest, SimulationResult, WaitStatistics
from .simulation import run_simulation, simulate

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'BankQueueError',
    'InvalidParameter',
    'ResourceExhausted',
    'SimulationRequest',
    'SimulationResult',
    'WaitStatistics',
    'run_simulation',
    'simulate',
]
