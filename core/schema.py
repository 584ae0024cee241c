from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Frequency(str, Enum):
    """Calendar cadence of an allowance or interest schedule."""

    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"


class WeeklyDirection(str, Enum):
    SPENDING = "spending"
    SAVING = "saving"


class OneTimeDirection(str, Enum):
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"


@dataclass(frozen=True)
class ScenarioInputs:
    """Calculator inputs. At most one field of each spending/saving and deposit/withdrawal pair is non-zero."""

    weekly_spending_cents: int = 0
    weekly_savings_cents: int = 0
    one_time_deposit_cents: int = 0
    one_time_withdrawal_cents: int = 0
    horizon_months: int = 12


@dataclass(frozen=True)
class ScenarioConfig:
    """
    UI-level scenario: a weekly adjustment and a one-time adjustment, each
    tagged with its direction. `color` is a display tag the engine never reads.
    """

    id: str
    weekly_amount_cents: int = 0
    weekly_direction: WeeklyDirection = WeeklyDirection.SPENDING
    one_time_amount_cents: int = 0
    one_time_direction: OneTimeDirection = OneTimeDirection.DEPOSIT
    color: str = ""

    def __post_init__(self) -> None:
        # Accept plain strings ("saving", "withdrawal") and normalise them.
        object.__setattr__(self, "weekly_direction", WeeklyDirection(self.weekly_direction))
        object.__setattr__(self, "one_time_direction", OneTimeDirection(self.one_time_direction))


@dataclass(frozen=True)
class ScenarioTitleContext:
    has_allowance: bool
    weekly_allowance_cents: int
    weekly_amount_cents: int
    weekly_direction: WeeklyDirection
    one_time_amount_cents: int
    one_time_direction: OneTimeDirection
