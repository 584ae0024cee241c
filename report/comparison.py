"""
Side-by-side scenario comparison — merge several projections for one chart/table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import pandas as pd

from engine.projection import ProjectionResult


@dataclass(frozen=True)
class ScenarioLine:
    """One projected scenario as drawn on the chart."""
    id: str
    result: ProjectionResult
    color: str
    label: str


def build_comparison_frame(lines: Sequence[ScenarioLine]) -> pd.DataFrame:
    """
    Wide frame: week_index, date, then one `balance_cents_<id>` column per scenario.

    Weeks and dates come from the first scenario; a scenario with fewer points
    is filled with 0 past its end.
    """
    if not lines:
        return pd.DataFrame(columns=["week_index", "date"])

    base = lines[0].result.to_dataframe()[["week_index", "date"]]
    frame = base.copy()
    for line in lines:
        balances = line.result.to_dataframe().set_index("week_index")["balance_cents"]
        frame[f"balance_cents_{line.id}"] = (
            frame["week_index"].map(balances).fillna(0).astype(int)
        )
    return frame


def to_long_frame(lines: Sequence[ScenarioLine]) -> pd.DataFrame:
    """Long (tidy) form for charting: date, scenario label, color, balance in dollars."""
    frames = []
    for line in lines:
        df = line.result.to_dataframe()
        df["scenario_id"] = line.id
        df["label"] = line.label
        df["color"] = line.color
        frames.append(df)
    if not frames:
        return pd.DataFrame(columns=["week_index", "date", "balance_cents", "balance", "scenario_id", "label", "color"])
    return pd.concat(frames, ignore_index=True)


def comparison_summary(lines: Sequence[ScenarioLine]) -> pd.DataFrame:
    """One row per scenario with final balance, components, and depletion week."""
    rows = []
    for line in lines:
        r = line.result
        rows.append({
            "scenario_id": line.id,
            "label": line.label,
            "starting_balance_cents": r.starting_balance_cents,
            "final_balance_cents": r.final_balance_cents,
            "total_interest_cents": r.total_interest_cents,
            "total_allowance_cents": r.total_allowance_cents,
            "total_savings_cents": r.total_savings_cents,
            "total_spending_cents": r.total_spending_cents,
            "depletion_week": r.depletion_week,
        })
    return pd.DataFrame(rows)
