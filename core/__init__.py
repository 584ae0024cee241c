"""
Core package — schema definitions, configuration, and shared utilities.
No business logic lives here.
"""

from .schema import (
    Frequency,
    OneTimeDirection,
    ScenarioConfig,
    ScenarioInputs,
    ScenarioTitleContext,
    WeeklyDirection,
)
from .config import (
    DEFAULT_HORIZON_MONTHS,
    DEFAULT_WEEKLY_SPENDING_CENTS,
    HORIZON_OPTIONS,
    MAX_SCENARIOS,
    SCENARIO_COLORS,
    ProjectionConfig,
)
from .utils import cents_to_dollars, dollars_to_cents, format_currency, format_dollars, round_half_away

__all__ = [
    "Frequency",
    "OneTimeDirection",
    "ScenarioConfig",
    "ScenarioInputs",
    "ScenarioTitleContext",
    "WeeklyDirection",
    "DEFAULT_HORIZON_MONTHS",
    "DEFAULT_WEEKLY_SPENDING_CENTS",
    "HORIZON_OPTIONS",
    "MAX_SCENARIOS",
    "SCENARIO_COLORS",
    "ProjectionConfig",
    "round_half_away",
    "format_dollars",
    "format_currency",
    "dollars_to_cents",
    "cents_to_dollars",
]
