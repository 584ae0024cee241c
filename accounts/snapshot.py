"""
Account snapshot — the already-fetched account records the projector needs.

Only active schedules count: a paused allowance or interest schedule is
handed to the engine as an absent frequency, so its amount/rate is ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from core.config import ProjectionConfig
from core.schema import Frequency, ScenarioInputs


class ScheduleStatus(str, Enum):
    ACTIVE = "active"
    PAUSED = "paused"


@dataclass(frozen=True)
class AllowanceSchedule:
    amount_cents: int
    frequency: Frequency
    status: ScheduleStatus = ScheduleStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return ScheduleStatus(self.status) == ScheduleStatus.ACTIVE


@dataclass(frozen=True)
class InterestSchedule:
    frequency: Frequency
    status: ScheduleStatus = ScheduleStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return ScheduleStatus(self.status) == ScheduleStatus.ACTIVE


@dataclass(frozen=True)
class AccountSnapshot:
    balance_cents: int
    interest_rate_bps: int = 0
    allowance: Optional[AllowanceSchedule] = None
    interest: Optional[InterestSchedule] = None

    @property
    def allowance_frequency(self) -> Optional[Frequency]:
        if self.allowance is None or not self.allowance.is_active:
            return None
        return Frequency(self.allowance.frequency)

    @property
    def allowance_amount_cents(self) -> int:
        return self.allowance.amount_cents if self.allowance_frequency is not None else 0

    @property
    def interest_frequency(self) -> Optional[Frequency]:
        if self.interest is None or not self.interest.is_active:
            return None
        return Frequency(self.interest.frequency)

    @property
    def has_allowance(self) -> bool:
        return self.allowance_frequency is not None and self.allowance_amount_cents > 0

    @property
    def has_interest(self) -> bool:
        return self.interest_frequency is not None and self.interest_rate_bps > 0

    @property
    def allowance_paused(self) -> bool:
        return self.allowance is not None and not self.allowance.is_active

    @property
    def interest_paused(self) -> bool:
        return self.interest is not None and not self.interest.is_active

    def to_projection_config(self, scenario: ScenarioInputs) -> ProjectionConfig:
        return ProjectionConfig(
            current_balance_cents=self.balance_cents,
            interest_rate_bps=self.interest_rate_bps,
            interest_frequency=self.interest_frequency,
            allowance_amount_cents=self.allowance_amount_cents,
            allowance_frequency=self.allowance_frequency,
            scenario=scenario,
        )
