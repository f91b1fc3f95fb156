import math
import random
from typing import Optional, Tuple

from .models import MAX_SERVICE_TIME, MIN_SERVICE_TIME

def make_rng(seed: Optional[int] = None) -> Tuple[random.Random, int]:
    """
    Returns: (rng, seed)
    With no seed one is drawn from the OS entropy pool, so the run can
    still be replayed from the seed reported in its result.
    """
    if seed is None:
        seed = random.SystemRandom().getrandbits(63)
    return random.Random(seed), seed

# e^-lambda underflows to 0.0 past ~745; e^-500 is still a normal float
POISSON_CHUNK = 500.0

def _knuth_poisson(lambda_: float, rng: random.Random) -> int:
    # Knuth: multiply uniforms until the product drops to e^-lambda.
    limit = math.exp(-lambda_)
    p = 1.0
    k = 0
    while True:
        k += 1
        p *= rng.random()
        if p <= limit:
            return k - 1

def poisson_arrivals(lambda_: float, rng: random.Random) -> int:
    # lambda_ must be >= 0; simulate() validates it.
    # Large rates are drawn as a sum of independent Poisson(POISSON_CHUNK) draws.
    k = 0
    while lambda_ > POISSON_CHUNK:
        k += _knuth_poisson(POISSON_CHUNK, rng)
        lambda_ -= POISSON_CHUNK
    return k + _knuth_poisson(lambda_, rng)

def service_time(rng: random.Random,
                 low: int = MIN_SERVICE_TIME,
                 high: int = MAX_SERVICE_TIME) -> int:
    # closed interval [low, high]
    return rng.randint(low, high)

def service_mean_variance(low: int = MIN_SERVICE_TIME,
                          high: int = MAX_SERVICE_TIME) -> Tuple[float, float]:
    # discrete uniform on {low, ..., high}
    n = high - low + 1
    mean = (low + high) / 2.0
    var = (n * n - 1) / 12.0
    return mean, var
