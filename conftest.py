from __future__ import annotations

import pandas as pd
import pytest

from core.config import ProjectionConfig
from core.schema import ScenarioConfig, ScenarioInputs

AS_OF = pd.Timestamp("2024-01-01")


@pytest.fixture
def as_of() -> pd.Timestamp:
    return AS_OF


@pytest.fixture
def make_config():
    """Factory: $100 balance, nothing scheduled, 12-month horizon unless overridden."""

    def _make(scenario: ScenarioInputs | None = None, **overrides) -> ProjectionConfig:
        fields = dict(
            current_balance_cents=10000,
            interest_rate_bps=0,
            interest_frequency=None,
            allowance_amount_cents=0,
            allowance_frequency=None,
            scenario=scenario or ScenarioInputs(horizon_months=12),
        )
        fields.update(overrides)
        return ProjectionConfig(**fields)

    return _make


@pytest.fixture
def make_scenario():
    def _make(**overrides) -> ScenarioConfig:
        fields = dict(
            id="s0",
            weekly_amount_cents=0,
            weekly_direction="spending",
            one_time_amount_cents=0,
            one_time_direction="deposit",
            color="#2563eb",
        )
        fields.update(overrides)
        return ScenarioConfig(**fields)

    return _make
