"""
Projection configuration and application defaults.
Schedule frequencies live in core/schema.py (Frequency).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .schema import Frequency, ScenarioInputs


# Horizon picker options: (months, short label)
HORIZON_OPTIONS: Tuple[Tuple[int, str], ...] = (
    (3, "3mo"),
    (6, "6mo"),
    (12, "1yr"),
    (24, "2yr"),
    (60, "5yr"),
)
DEFAULT_HORIZON_MONTHS: int = 12

# Second default scenario when there is no active allowance to spend
DEFAULT_WEEKLY_SPENDING_CENTS: int = 500

# Display palette for scenario lines; also bounds how many scenarios can coexist
SCENARIO_COLORS: Tuple[str, ...] = (
    "#2563eb",
    "#dc2626",
    "#16a34a",
    "#9333ea",
    "#ea580c",
)
MAX_SCENARIOS: int = len(SCENARIO_COLORS)


@dataclass(frozen=True)
class ProjectionConfig:
    """
    Account state plus one scenario, already resolved by the caller.

    A frequency of None means the schedule is inactive (paused, or no schedule),
    whatever its amount or rate says.
    """

    current_balance_cents: int
    interest_rate_bps: int = 0
    interest_frequency: Optional[Frequency] = None
    allowance_amount_cents: int = 0
    allowance_frequency: Optional[Frequency] = None
    scenario: ScenarioInputs = field(default_factory=ScenarioInputs)
