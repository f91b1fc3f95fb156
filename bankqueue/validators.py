import math
import numbers

from .errors import InvalidParameter


def require_positive(name: str, value: float) -> None:
    if not isinstance(value, numbers.Real) or isinstance(value, bool):
        raise InvalidParameter(f"{name} must be a real number")
    if value <= 0:
        raise InvalidParameter(f"{name} must be > 0")
    if not math.isfinite(value):
        raise InvalidParameter(f"{name} must be finite")

def require_int_at_least(name: str, value: int, minimum: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or value < minimum:
        raise InvalidParameter(f"{name} must be an integer >= {minimum}")

def require_service_range(low: int, high: int) -> None:
    require_int_at_least("min_service", low, 1)
    require_int_at_least("max_service", high, low)
