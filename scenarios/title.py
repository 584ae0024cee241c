"""
Scenario titles — one templated "If I ..." sentence per scenario.

The sentence is built from three independent axes:
  - whether the account has an active allowance
  - the weekly direction and its size relative to the weekly allowance
  - the one-time adjustment (none / deposit / withdrawal)

Bold spans are marked with `**`; plain_title() strips them for legends.
"""

from __future__ import annotations

from core.schema import OneTimeDirection, ScenarioTitleContext, WeeklyDirection
from core.utils import format_dollars


def _weekly_clause_with_allowance(ctx: ScenarioTitleContext) -> str:
    allowance = format_dollars(ctx.weekly_allowance_cents)
    amount = ctx.weekly_amount_cents

    if ctx.weekly_direction == WeeklyDirection.SAVING and amount > 0:
        return (
            f"save **all** of my {allowance} allowance plus an additional "
            f"**{format_dollars(amount)}** per week"
        )
    if amount == 0:
        return f"save **all** of my {allowance} allowance"
    if amount > ctx.weekly_allowance_cents:
        excess = amount - ctx.weekly_allowance_cents
        return f"spend my whole {allowance} allowance plus another **{format_dollars(excess)}** per week"
    if amount == ctx.weekly_allowance_cents:
        return f"save **none** of my {allowance} allowance"
    kept = ctx.weekly_allowance_cents - amount
    return f"save **{format_dollars(kept)}** per week from my {allowance} allowance"


def _weekly_clause_without_allowance(ctx: ScenarioTitleContext) -> str:
    if ctx.weekly_amount_cents == 0:
        return ""
    verb = "spend" if ctx.weekly_direction == WeeklyDirection.SPENDING else "save"
    return f"{verb} **{format_dollars(ctx.weekly_amount_cents)}** per week"


def generate_scenario_title(ctx: ScenarioTitleContext) -> str:
    has_weekly = ctx.weekly_amount_cents > 0
    has_one_time = ctx.one_time_amount_cents > 0

    if ctx.has_allowance:
        weekly = _weekly_clause_with_allowance(ctx)
    else:
        if not has_weekly and not has_one_time:
            return "If I don't do anything"
        weekly = _weekly_clause_without_allowance(ctx)

    if not has_one_time:
        return f"If I {weekly}"

    amount = f"**{format_dollars(ctx.one_time_amount_cents)}**"
    spending_only = not ctx.has_allowance and ctx.weekly_direction == WeeklyDirection.SPENDING

    if ctx.one_time_direction == OneTimeDirection.DEPOSIT:
        if not ctx.has_allowance and not has_weekly:
            return f"If I deposit {amount} now"
        if spending_only:
            return f"If I deposit {amount} now and {weekly}"
        return f"If I {weekly}, and deposit {amount} now"

    if not ctx.has_allowance and not has_weekly:
        return f"If I withdraw {amount} now"
    if spending_only:
        return f"If I {weekly}, and withdraw {amount} now"
    return f"If I {weekly}, but withdraw {amount} now"


def plain_title(title: str) -> str:
    return title.replace("**", "")
