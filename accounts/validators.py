"""
Sanity checks on account data and scenario inputs before they reach the engine.

The engine itself trusts its inputs; this is where a host surfaces problems:
- Negative balances, rates or amounts (blocking)
- A one-time withdrawal larger than the balance (it will be clamped)
- Horizons outside the picker options
- Rates that look like percent instead of basis points
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from core.config import HORIZON_OPTIONS
from core.schema import ScenarioInputs
from core.utils import format_dollars

from .snapshot import AccountSnapshot

# 100% annual; anything above is almost certainly a units mistake
MAX_PLAUSIBLE_RATE_BPS = 10_000

_SCENARIO_AMOUNT_LABELS = {
    "weekly_spending_cents": "Weekly spending",
    "weekly_savings_cents": "Weekly savings",
    "one_time_deposit_cents": "The one-time deposit",
    "one_time_withdrawal_cents": "The one-time withdrawal",
}


@dataclass
class ValidationResult:
    """
    Problems found with an account and scenario, worded for the saver.

    `problems` stop a projection from running; `notes` are shown next to it.
    """
    problems: List[str] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.problems

    def summary(self) -> str:
        """Markdown bullet lists, ready for st.error / st.warning."""
        sections = []
        if self.problems:
            sections.append(
                "We can't project this account yet:\n" + "\n".join(f"- {p}" for p in self.problems)
            )
        if self.notes:
            sections.append("Heads up:\n" + "\n".join(f"- {n}" for n in self.notes))
        return "\n\n".join(sections) or "Everything looks good."


def withdrawal_error(inputs: ScenarioInputs, balance_cents: int) -> Optional[str]:
    """Inline message for a withdrawal editor, or None when the amount fits."""
    if inputs.one_time_withdrawal_cents > balance_cents:
        return f"You can't withdraw more than your {format_dollars(balance_cents)} balance"
    return None


def validate_account(
    snapshot: AccountSnapshot,
    inputs: Optional[ScenarioInputs] = None,
) -> ValidationResult:
    """
    Check an account snapshot, and optionally one scenario against it.

    Parameters
    ----------
    snapshot : AccountSnapshot
        Balance, rate and schedules as loaded.
    inputs : ScenarioInputs, optional
        Scenario to check against the balance and the horizon options.

    Returns
    -------
    ValidationResult with blocking problems and informational notes.
    """
    result = ValidationResult()

    # --- Account ---
    if snapshot.balance_cents < 0:
        result.problems.append("Your balance can't be negative.")
    if snapshot.interest_rate_bps < 0:
        result.problems.append("The interest rate can't be negative.")
    elif snapshot.interest_rate_bps > MAX_PLAUSIBLE_RATE_BPS:
        result.notes.append(
            f"An interest rate of {snapshot.interest_rate_bps / 100:g}% a year is unusually high; "
            f"the rate is expected in basis points (500 = 5%)."
        )
    if snapshot.allowance is not None and snapshot.allowance.amount_cents < 0:
        result.problems.append("The allowance amount can't be negative.")

    if inputs is None:
        return result

    # --- Scenario ---
    for name, label in _SCENARIO_AMOUNT_LABELS.items():
        if getattr(inputs, name) < 0:
            result.problems.append(f"{label} can't be negative.")

    if inputs.horizon_months <= 0:
        result.problems.append("Pick how far ahead to look: the horizon must be at least one month.")
    elif inputs.horizon_months not in {months for months, _ in HORIZON_OPTIONS}:
        result.notes.append(f"{inputs.horizon_months} months isn't one of the usual horizons.")

    if inputs.weekly_spending_cents > 0 and inputs.weekly_savings_cents > 0:
        result.notes.append("This scenario both spends and saves each week; usually it's one or the other.")
    if inputs.one_time_deposit_cents > 0 and inputs.one_time_withdrawal_cents > 0:
        result.notes.append("This scenario both deposits and withdraws now; usually it's one or the other.")

    message = withdrawal_error(inputs, snapshot.balance_cents)
    if message is not None:
        result.notes.append(message + ", so the withdrawal will stop at your balance.")

    return result
