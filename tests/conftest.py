"""Shared fixtures for the scoring engine test suite."""

import pytest

from src.scenario_manager.config import DEFAULT_BASELINE
from src.scenario_manager.simulation_session import SimulationSession
from src.scoring_engine.aggregator import ScoreAggregator
from src.scoring_engine.models import FactorValues
from src.scoring_engine.normalizer import FactorNormalizer


# ------------------------------------------------------------------
# Lightweight factories – cheap to construct, no I/O
# ------------------------------------------------------------------

@pytest.fixture(scope="module")
def normalizer():
    return FactorNormalizer()


@pytest.fixture(scope="module")
def aggregator():
    return ScoreAggregator()


@pytest.fixture
def baseline():
    """The default dashboard baseline: 3.8 / 35h / 43h / 10h / 5 days."""
    return FactorValues.from_dict(DEFAULT_BASELINE)


@pytest.fixture
def session(baseline):
    return SimulationSession(baseline=baseline)
