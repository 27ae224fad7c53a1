import pytest
import structlog

from primebench.core.models import Range


@pytest.fixture(autouse=True)
def log_events():
    # keep structlog output out of captured stdout; tests may inspect the events
    with structlog.testing.capture_logs() as cap:
        yield cap


@pytest.fixture
def small_range():
    return Range(1, 100)


@pytest.fixture
def primes_below_100():
    return [
        2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47,
        53, 59, 61, 67, 71, 73, 79, 83, 89, 97,
    ]
