import pytest

from eztotp import Parameters
from eztotp.security.security_events import SecurityEventTracker, reset_security_counters

from .vectors import RFC_SECRET


@pytest.fixture(autouse=True)
def _reset_global_tracker():
    reset_security_counters()
    yield
    reset_security_counters()


@pytest.fixture
def rfc_secret():
    return RFC_SECRET


@pytest.fixture
def params():
    return Parameters(digits=6, period=30, tolerance=1)


@pytest.fixture
def events():
    return SecurityEventTracker(alert_threshold=100, cooldown_period=0)
