"""
Plain-English explanation of a projection — what the chart means in one paragraph.

Answers the questions a saver actually asks:
  Q1: "How much will I have?"          → final balance and where it came from
  Q2: "Will I run out?"                → depletion warning with the week count
  Q3: "Why is nothing growing?"        → no allowance/interest encouragement
  Q4: "Is anything switched off?"      → paused allowance/interest note
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from core.schema import Frequency
from core.utils import format_currency
from engine.projection import ProjectionResult


def horizon_label(months: int) -> str:
    """`3 months`, `1 year`, `5 years`, `18 months`."""
    if months < 12:
        return f"{months} month{'' if months == 1 else 's'}"
    if months % 12 == 0:
        years = months // 12
        return f"{years} year{'' if years == 1 else 's'}"
    return f"{months} months"


@dataclass
class GrowthExplanation:
    """Structured explanation output; render with to_markdown()."""
    summary: str
    depletion_warning: Optional[str] = None
    paused_note: Optional[str] = None
    breakdown: List[str] = field(default_factory=list)

    def paragraphs(self) -> List[str]:
        return [p for p in (self.summary, self.depletion_warning, self.paused_note) if p]

    def to_markdown(self) -> str:
        return "\n\n".join(self.paragraphs())


def _paused_note(allowance_paused: bool, interest_paused: bool) -> Optional[str]:
    if not (allowance_paused or interest_paused):
        return None
    parts = []
    if allowance_paused:
        parts.append("Your allowance is currently paused.")
    if interest_paused:
        parts.append("Your interest is currently paused.")
    return " ".join(parts) + " This projection doesn't include paused schedules."


def explain_projection(
    result: ProjectionResult,
    horizon_months: int,
    *,
    has_allowance: bool,
    has_interest: bool,
    allowance_amount_cents: int = 0,
    allowance_frequency: Optional[Frequency] = None,
    allowance_paused: bool = False,
    interest_paused: bool = False,
) -> GrowthExplanation:
    """
    Describe a projection in plain English.

    Parameters
    ----------
    result : ProjectionResult
        Output of engine.projection.calculate_projection()
    horizon_months : int
        Horizon the projection was run for
    has_allowance, has_interest : bool
        Whether an active allowance / interest schedule fed the projection
    allowance_amount_cents, allowance_frequency :
        The allowance as scheduled, for the "If you keep saving ..." intro
    allowance_paused, interest_paused : bool
        Schedules that exist but were left out because they are paused
    """
    paused = _paused_note(allowance_paused, interest_paused)

    # Nothing moves the balance: no schedules, no weekly spending or saving
    if (
        not has_allowance
        and not has_interest
        and result.total_spending_cents == 0
        and result.total_savings_cents == 0
    ):
        summary = (
            f"Your balance will stay at {format_currency(result.starting_balance_cents)} "
            f"unless you get an allowance or interest set up. Ask your parent!"
        )
        return GrowthExplanation(summary=summary, paused_note=paused)

    horizon = horizon_label(horizon_months)
    if has_allowance:
        frequency = Frequency(allowance_frequency or Frequency.WEEKLY).value
        intro = (
            f"If you keep saving your {format_currency(allowance_amount_cents)} {frequency} "
            f"allowance, in {horizon}"
        )
    else:
        intro = f"In {horizon}"

    breakdown = [f"{format_currency(result.starting_balance_cents)} from what you have now"]
    if result.total_interest_cents > 0:
        breakdown.append(f"{format_currency(result.total_interest_cents)} from interest")
    if result.total_allowance_cents > 0:
        breakdown.append(f"{format_currency(result.total_allowance_cents)} from allowance deposits")
    if result.total_savings_cents > 0:
        breakdown.append(f"{format_currency(result.total_savings_cents)} from extra weekly savings")

    summary = (
        f"{intro} your account will have {format_currency(result.final_balance_cents)} total. "
        f"That's {', '.join(breakdown)}."
    )
    if result.total_spending_cents > 0:
        summary += f" That's after subtracting {format_currency(result.total_spending_cents)} in spending."

    depletion = None
    if result.depletion_week is not None:
        weeks = result.depletion_week
        depletion = (
            f"At this rate, your account will run out of money in about "
            f"{weeks} week{'' if weeks == 1 else 's'}."
        )

    return GrowthExplanation(
        summary=summary,
        depletion_warning=depletion,
        paused_note=paused,
        breakdown=breakdown,
    )
