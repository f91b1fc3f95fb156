"""
Shared pytest fixtures for bankqueue tests.
"""

import logging
import random

import pytest


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture(autouse=True)
def reset_bankqueue_logging():
    """Start every test with the library's silent logging default."""
    logger = logging.getLogger("bankqueue")

    def _reset():
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            if not isinstance(handler, logging.NullHandler):
                handler.close()
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.NOTSET)

    _reset()
    yield
    _reset()
