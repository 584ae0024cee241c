"""
Saver-facing outputs — plain-English explanation and scenario comparison.
"""

from .explanation import GrowthExplanation, explain_projection, horizon_label
from .comparison import ScenarioLine, build_comparison_frame, comparison_summary, to_long_frame

__all__ = [
    "GrowthExplanation",
    "explain_projection",
    "horizon_label",
    "ScenarioLine",
    "build_comparison_frame",
    "comparison_summary",
    "to_long_frame",
]
