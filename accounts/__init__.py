"""
Account inputs — snapshot of balance/schedules and pre-flight validation.
"""

from .snapshot import AccountSnapshot, AllowanceSchedule, InterestSchedule, ScheduleStatus
from .validators import ValidationResult, validate_account, withdrawal_error

__all__ = [
    "AccountSnapshot",
    "AllowanceSchedule",
    "InterestSchedule",
    "ScheduleStatus",
    "ValidationResult",
    "validate_account",
    "withdrawal_error",
]
