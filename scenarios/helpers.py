"""
Scenario input mapping — UI-level ScenarioConfig <-> calculator ScenarioInputs,
plus default scenarios and id/color bookkeeping for the scenario list.

Everything here is a pure function of its arguments; ids and colors are
derived from the existing list rather than from a counter.
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional, Sequence

from core.config import DEFAULT_WEEKLY_SPENDING_CENTS, MAX_SCENARIOS, SCENARIO_COLORS
from core.schema import (
    Frequency,
    OneTimeDirection,
    ScenarioConfig,
    ScenarioInputs,
    ScenarioTitleContext,
    WeeklyDirection,
)
from core.utils import round_half_away
from engine.periods import weeks_per_period


def map_scenario_config_to_inputs(config: ScenarioConfig, horizon_months: int) -> ScenarioInputs:
    weekly = config.weekly_amount_cents
    one_time = config.one_time_amount_cents
    return ScenarioInputs(
        weekly_spending_cents=weekly if config.weekly_direction == WeeklyDirection.SPENDING else 0,
        weekly_savings_cents=weekly if config.weekly_direction == WeeklyDirection.SAVING else 0,
        one_time_deposit_cents=one_time if config.one_time_direction == OneTimeDirection.DEPOSIT else 0,
        one_time_withdrawal_cents=(
            one_time if config.one_time_direction == OneTimeDirection.WITHDRAWAL else 0
        ),
        horizon_months=horizon_months,
    )


def has_active_allowance(allowance_amount_cents: int, allowance_frequency: Optional[Frequency]) -> bool:
    return allowance_frequency is not None and allowance_amount_cents > 0


def weekly_allowance_cents(allowance_amount_cents: int, allowance_frequency: Frequency) -> int:
    """Weekly equivalent of a per-period allowance, rounded to the cent."""
    return round_half_away(allowance_amount_cents / weeks_per_period(allowance_frequency))


def build_default_scenarios(
    allowance_amount_cents: int,
    allowance_frequency: Optional[Frequency],
) -> List[ScenarioConfig]:
    """
    Two starting scenarios: "save everything" and "spend it all".

    With an active allowance the second one spends the allowance's weekly
    equivalent; without one it spends DEFAULT_WEEKLY_SPENDING_CENTS a week.
    """
    if has_active_allowance(allowance_amount_cents, allowance_frequency):
        spend = weekly_allowance_cents(allowance_amount_cents, allowance_frequency)
    else:
        spend = DEFAULT_WEEKLY_SPENDING_CENTS

    return [
        ScenarioConfig(
            id=f"s{i}",
            weekly_amount_cents=amount,
            weekly_direction=WeeklyDirection.SPENDING,
            one_time_amount_cents=0,
            one_time_direction=OneTimeDirection.DEPOSIT,
            color=SCENARIO_COLORS[i],
        )
        for i, amount in enumerate((0, spend))
    ]


def get_next_scenario_color(existing: Sequence[ScenarioConfig]) -> str:
    """First palette color not in use; wraps to the first color when all are taken."""
    used = {s.color for s in existing}
    for color in SCENARIO_COLORS:
        if color not in used:
            return color
    return SCENARIO_COLORS[0]


def get_next_scenario_id(existing: Sequence[ScenarioConfig]) -> str:
    """`s<N+1>` where N is the largest numeric suffix among existing `sN` ids."""
    max_num = -1
    for s in existing:
        suffix = s.id.replace("s", "", 1)
        if suffix.isdigit():
            max_num = max(max_num, int(suffix))
    return f"s{max_num + 1}"


def add_scenario(existing: Sequence[ScenarioConfig]) -> List[ScenarioConfig]:
    """Append a blank scenario. Raises ValueError once MAX_SCENARIOS are present."""
    if len(existing) >= MAX_SCENARIOS:
        raise ValueError(f"At most {MAX_SCENARIOS} scenarios can be compared.")
    new = ScenarioConfig(
        id=get_next_scenario_id(existing),
        color=get_next_scenario_color(existing),
    )
    return list(existing) + [new]


def remove_scenario(existing: Sequence[ScenarioConfig], scenario_id: str) -> List[ScenarioConfig]:
    """Drop a scenario by id; the last remaining scenario is never removed."""
    if len(existing) <= 1:
        return list(existing)
    return [s for s in existing if s.id != scenario_id]


def update_scenario(existing: Sequence[ScenarioConfig], scenario_id: str, **changes) -> List[ScenarioConfig]:
    return [replace(s, **changes) if s.id == scenario_id else s for s in existing]


def build_title_context(
    scenario: ScenarioConfig,
    allowance_amount_cents: int,
    allowance_frequency: Optional[Frequency],
) -> ScenarioTitleContext:
    active = has_active_allowance(allowance_amount_cents, allowance_frequency)
    return ScenarioTitleContext(
        has_allowance=active,
        weekly_allowance_cents=(
            weekly_allowance_cents(allowance_amount_cents, allowance_frequency) if active else 0
        ),
        weekly_amount_cents=scenario.weekly_amount_cents,
        weekly_direction=scenario.weekly_direction,
        one_time_amount_cents=scenario.one_time_amount_cents,
        one_time_direction=scenario.one_time_direction,
    )
