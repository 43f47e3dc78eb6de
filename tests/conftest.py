"""
Pytest configuration and fixtures for wellbeing_core tests.
"""
import pytest
import sys
from pathlib import Path

from hypothesis import HealthCheck, settings

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from wellbeing_core import BASIC_NEEDS, StateOfTheWorld
from wellbeing_core import runtime_config

# The override reset below runs once per test, not per generated example
settings.register_profile(
    "wellbeing",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("wellbeing")


@pytest.fixture(autouse=True)
def _isolate_runtime_overrides():
    """
    Reset runtime setting overrides between tests.

    _runtime_overrides is a module global, so an override set by one test
    (strict_needs, default_need_value) would leak into the next.
    """
    runtime_config.clear_overrides()
    yield
    runtime_config.clear_overrides()


def needs_at(value=5.0, **overrides):
    """Needs mapping with every basic need at value, then overrides applied."""
    needs = {need: value for need in BASIC_NEEDS}
    needs.update(overrides)
    return needs


@pytest.fixture
def make_state():
    """Factory for states of the world."""
    def _make(desires=0, needs=None, current_others=(), result_others=()):
        return StateOfTheWorld(
            potential_desires=[f"desire_{i}" for i in range(desires)],
            needs=needs if needs is not None else needs_at(),
            affected_others_current=list(current_others),
            affected_others_result=list(result_others),
        )
    return _make


@pytest.fixture
def neutral_state(make_state):
    """Two potential desires, every basic need at 5, nobody else affected."""
    return make_state(desires=2)
