class BankQueueError(Exception):
    """Base class for every error raised by the bank queue simulator."""


class InvalidParameter(BankQueueError, ValueError):
    """A simulation input was rejected before the run started."""


class ResourceExhausted(BankQueueError, MemoryError):
    """Memory for the queue, the teller pool or the wait-time sample ran out."""
