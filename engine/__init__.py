"""
Projection engine — period arithmetic + week-stepped balance simulator.
"""

from .periods import horizon_to_weeks, periods_per_year, weeks_per_period
from .projection import ProjectionDataPoint, ProjectionResult, calculate_projection

__all__ = [
    "horizon_to_weeks",
    "periods_per_year",
    "weeks_per_period",
    "ProjectionDataPoint",
    "ProjectionResult",
    "calculate_projection",
]
