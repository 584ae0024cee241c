"""
Projection calculator — week-stepped balance simulation for one scenario.

Order of events inside a simulated week:
  1. allowance deposit (if due)
  2. interest (if due), computed on the balance including this week's allowance
  3. weekly savings
  4. weekly spending
  5. floor at $0, dropping spending the balance could not absorb from the totals
  6. depletion latch (first week the balance hits exactly 0 while spending)

All money is integer cents. Interest is rounded to the nearest cent per
application, half away from zero. Dates are labels only (today + 7 days
per week) and never feed the math.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional

import pandas as pd

from core.config import ProjectionConfig
from core.utils import round_half_away

from .periods import horizon_to_weeks, periods_per_year, weeks_per_period

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectionDataPoint:
    week_index: int
    date: pd.Timestamp
    balance_cents: int


@dataclass(frozen=True)
class ProjectionResult:
    """
    Weekly trajectory plus totals for one projection run.

    final_balance_cents == starting_balance_cents + total_interest_cents
        + total_allowance_cents + total_savings_cents - total_spending_cents

    total_spending_cents is the spending the balance actually absorbed, not the
    nominal weekly amount times the number of weeks.
    """

    data_points: List[ProjectionDataPoint]
    final_balance_cents: int
    total_interest_cents: int
    total_allowance_cents: int
    total_spending_cents: int
    total_savings_cents: int
    starting_balance_cents: int
    depletion_week: Optional[int]

    @property
    def total_weeks(self) -> int:
        return len(self.data_points) - 1

    def to_dataframe(self) -> pd.DataFrame:
        """One row per simulated week (week 0 = today), balances in cents and dollars."""
        df = pd.DataFrame(
            {
                "week_index": [p.week_index for p in self.data_points],
                "date": [p.date for p in self.data_points],
                "balance_cents": [p.balance_cents for p in self.data_points],
            }
        )
        df["balance"] = df["balance_cents"] / 100.0
        return df


def calculate_projection(
    config: ProjectionConfig,
    *,
    as_of: Optional[pd.Timestamp] = None,
) -> ProjectionResult:
    """
    Simulate the account week by week over the scenario's horizon.

    Parameters
    ----------
    config : ProjectionConfig
        Resolved account state and scenario inputs.
    as_of : pd.Timestamp, optional
        Date of week 0. Defaults to a single snapshot of "now" taken here.

    Returns
    -------
    ProjectionResult with total_weeks + 1 data points.
    """
    scenario = config.scenario
    total_weeks = horizon_to_weeks(scenario.horizon_months)

    # One-time adjustments; the withdrawal is clamped to the pre-deposit balance
    withdrawal = min(scenario.one_time_withdrawal_cents, config.current_balance_cents)
    starting_balance = (
        config.current_balance_cents + scenario.one_time_deposit_cents - withdrawal
    )

    has_interest = config.interest_frequency is not None and config.interest_rate_bps > 0
    if has_interest:
        interest_per_period = (
            config.interest_rate_bps / 10000 / periods_per_year(config.interest_frequency)
        )
        interest_interval = weeks_per_period(config.interest_frequency)
        next_interest_week = interest_interval
    else:
        interest_per_period = 0.0
        interest_interval = 0.0
        next_interest_week = math.inf

    has_allowance = (
        config.allowance_frequency is not None and config.allowance_amount_cents > 0
    )
    if has_allowance:
        allowance_interval = weeks_per_period(config.allowance_frequency)
        next_allowance_week = allowance_interval
    else:
        allowance_interval = 0.0
        next_allowance_week = math.inf

    weekly_spending = scenario.weekly_spending_cents
    weekly_savings = scenario.weekly_savings_cents

    balance = starting_balance
    total_interest = 0
    total_allowance = 0
    total_spending = 0
    total_savings = 0
    depletion_week: Optional[int] = None

    start = pd.Timestamp.now() if as_of is None else pd.Timestamp(as_of)
    data_points = [ProjectionDataPoint(0, start, max(0, balance))]

    for week in range(1, total_weeks + 1):
        if has_allowance and week >= round_half_away(next_allowance_week):
            balance += config.allowance_amount_cents
            total_allowance += config.allowance_amount_cents
            next_allowance_week += allowance_interval

        if has_interest and week >= round_half_away(next_interest_week):
            interest = round_half_away(balance * interest_per_period)
            if interest > 0:
                balance += interest
                total_interest += interest
            next_interest_week += interest_interval

        if weekly_savings > 0:
            balance += weekly_savings
            total_savings += weekly_savings

        if weekly_spending > 0:
            balance -= weekly_spending
            total_spending += weekly_spending

        if balance < 0:
            # Only count the spending the balance could cover
            total_spending += balance
            balance = 0

        if balance == 0 and depletion_week is None and weekly_spending > 0:
            depletion_week = week

        data_points.append(
            ProjectionDataPoint(week, start + pd.Timedelta(days=7 * week), balance)
        )

    logger.debug(
        "Projection over %d weeks: start=%d final=%d interest=%d allowance=%d "
        "savings=%d spending=%d depletion_week=%s",
        total_weeks, starting_balance, balance, total_interest, total_allowance,
        total_savings, total_spending, depletion_week,
    )

    return ProjectionResult(
        data_points=data_points,
        final_balance_cents=balance,
        total_interest_cents=total_interest,
        total_allowance_cents=total_allowance,
        total_spending_cents=total_spending,
        total_savings_cents=total_savings,
        starting_balance_cents=starting_balance,
        depletion_week=depletion_week,
    )
