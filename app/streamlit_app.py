"""
Growth Projector — "what if" savings dashboard
==============================================

Compare up to five scenarios for one savings account:
  1. Account:    balance, interest rate and schedule, allowance and schedule
  2. Scenarios:  weekly spending/saving habit + one-time deposit/withdrawal
  3. Outputs:    balance chart, per-scenario explanation, shareable link

Run: streamlit run app/streamlit_app.py
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List

import altair as alt
import pandas as pd
import streamlit as st

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import DEFAULT_HORIZON_MONTHS, HORIZON_OPTIONS, MAX_SCENARIOS
from core.schema import Frequency, OneTimeDirection, ScenarioConfig, WeeklyDirection
from core.utils import cents_to_dollars, dollars_to_cents, format_currency, round_half_away

from accounts.snapshot import AccountSnapshot, AllowanceSchedule, InterestSchedule, ScheduleStatus
from accounts.validators import validate_account, withdrawal_error

from engine.projection import calculate_projection

from scenarios.helpers import (
    add_scenario,
    build_default_scenarios,
    build_title_context,
    map_scenario_config_to_inputs,
    remove_scenario,
    update_scenario,
)
from scenarios.title import generate_scenario_title, plain_title
from scenarios.url import deserialize_scenarios, serialize_scenarios

from report.comparison import ScenarioLine, comparison_summary, to_long_frame
from report.explanation import explain_projection

logger = logging.getLogger(__name__)

FREQUENCY_OPTIONS = [f.value for f in Frequency]
STATUS_OPTIONS = [s.value for s in ScheduleStatus]


# ---------------------------------------------------------------------------
# Chart helpers
# ---------------------------------------------------------------------------
def _plot_scenarios(lines: List[ScenarioLine], height=320):
    if not lines:
        st.info("No scenarios to plot.")
        return
    long = to_long_frame(lines)
    long["label"] = long["label"].map(plain_title)
    long["date"] = pd.to_datetime(long["date"], errors="coerce")
    chart = (
        alt.Chart(long).mark_line()
        .encode(
            x=alt.X("date:T", title="Date"),
            y=alt.Y("balance:Q", title="Balance ($)", axis=alt.Axis(format="$,.0f")),
            color=alt.Color(
                "label:N",
                title="Scenario",
                scale=alt.Scale(domain=[plain_title(l.label) for l in lines], range=[l.color for l in lines]),
            ),
            tooltip=["label", alt.Tooltip("date:T", format="%b %d, %Y"), alt.Tooltip("balance:Q", format="$,.2f")],
        )
        .properties(title="Projected Balance", height=height)
    )
    st.altair_chart(chart, use_container_width=True)


# ---------------------------------------------------------------------------
# Session state
# ---------------------------------------------------------------------------
def _initial_scenarios(snapshot: AccountSnapshot):
    """Scenarios from the share link if it decodes, else the two defaults."""
    decoded = deserialize_scenarios(dict(st.query_params))
    if decoded is not None and decoded.scenarios:
        logger.info("Loaded %d scenarios from share link.", len(decoded.scenarios))
        return decoded.scenarios[:MAX_SCENARIOS], decoded.horizon_months
    return (
        build_default_scenarios(snapshot.allowance_amount_cents, snapshot.allowance_frequency),
        DEFAULT_HORIZON_MONTHS,
    )


def _scenario_editor(sc: ScenarioConfig, balance_cents: int) -> None:
    scenarios = st.session_state["scenarios"]
    c1, c2 = st.columns(2)
    with c1:
        weekly = st.text_input(
            "Weekly amount ($)", value=cents_to_dollars(sc.weekly_amount_cents),
            placeholder="$0.00", key=f"weekly_{sc.id}",
        )
        weekly_dir = st.radio(
            "Each week I'm...", [d.value for d in WeeklyDirection],
            index=list(WeeklyDirection).index(sc.weekly_direction),
            horizontal=True, key=f"weekly_dir_{sc.id}",
        )
    with c2:
        one_time = st.text_input(
            "One-time amount ($)", value=cents_to_dollars(sc.one_time_amount_cents),
            placeholder="$0.00", key=f"one_time_{sc.id}",
        )
        one_time_dir = st.radio(
            "Right now I...", [d.value for d in OneTimeDirection],
            index=list(OneTimeDirection).index(sc.one_time_direction),
            horizontal=True, key=f"one_time_dir_{sc.id}",
        )

    updated = update_scenario(
        scenarios, sc.id,
        weekly_amount_cents=dollars_to_cents(weekly),
        weekly_direction=WeeklyDirection(weekly_dir),
        one_time_amount_cents=dollars_to_cents(one_time),
        one_time_direction=OneTimeDirection(one_time_dir),
    )
    st.session_state["scenarios"] = updated

    edited = next(s for s in updated if s.id == sc.id)
    message = withdrawal_error(map_scenario_config_to_inputs(edited, DEFAULT_HORIZON_MONTHS), balance_cents)
    if message:
        st.caption(f":red[{message}]")

    if len(updated) > 1 and st.button("Remove scenario", key=f"remove_{sc.id}"):
        st.session_state["scenarios"] = remove_scenario(updated, sc.id)
        st.rerun()


# ═══════════════════════════════════════════════════════════════════════════
# PAGE
# ═══════════════════════════════════════════════════════════════════════════
def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    st.set_page_config(page_title="Growth Projector", layout="wide")
    st.title("Growth Projector")
    st.caption("See where your savings could be with different spending and saving habits.")

    # --- Sidebar: account ---
    with st.sidebar:
        st.header("Account")
        balance_cents = dollars_to_cents(st.text_input("Current balance ($)", value="100.00"))

        st.subheader("Allowance")
        allowance_amount = dollars_to_cents(st.text_input("Allowance amount ($)", value="10.00"))
        allowance_freq = st.selectbox("Allowance frequency", FREQUENCY_OPTIONS, index=0)
        allowance_status = st.selectbox("Allowance status", STATUS_OPTIONS, index=0)

        st.subheader("Interest")
        rate_pct = st.number_input("Annual interest rate (%)", min_value=0.0, max_value=100.0, value=5.0, step=0.25)
        interest_freq = st.selectbox("Interest frequency", FREQUENCY_OPTIONS, index=2)
        interest_status = st.selectbox("Interest status", STATUS_OPTIONS, index=0)

    snapshot = AccountSnapshot(
        balance_cents=balance_cents,
        interest_rate_bps=round_half_away(rate_pct * 100),
        allowance=AllowanceSchedule(allowance_amount, Frequency(allowance_freq), ScheduleStatus(allowance_status)),
        interest=InterestSchedule(Frequency(interest_freq), ScheduleStatus(interest_status)),
    )

    if "scenarios" not in st.session_state:
        scenarios, horizon = _initial_scenarios(snapshot)
        st.session_state["scenarios"] = scenarios
        st.session_state["horizon_months"] = horizon

    vr = validate_account(snapshot)
    if not vr.is_valid:
        st.error(vr.summary())
        st.stop()
    if vr.notes:
        st.warning(vr.summary())

    # --- Horizon ---
    months_options = [m for m, _ in HORIZON_OPTIONS]
    labels = dict(HORIZON_OPTIONS)
    current_h = st.session_state["horizon_months"]
    if current_h not in months_options:
        months_options.append(current_h)
        labels[current_h] = f"{current_h}mo"
    horizon_months = st.radio(
        "Horizon", months_options, index=months_options.index(current_h),
        format_func=lambda m: labels[m], horizontal=True,
    )
    st.session_state["horizon_months"] = horizon_months

    # --- Scenario editors (before projecting so edits apply on this run) ---
    st.markdown("#### What if...")
    for i, sc in enumerate(list(st.session_state["scenarios"])):
        with st.expander(f"Scenario {i + 1}", expanded=(i == 0)):
            _scenario_editor(sc, snapshot.balance_cents)

    if len(st.session_state["scenarios"]) < MAX_SCENARIOS and st.button("Add scenario"):
        st.session_state["scenarios"] = add_scenario(st.session_state["scenarios"])
        st.rerun()

    # --- Projections ---
    lines: List[ScenarioLine] = []
    for sc in st.session_state["scenarios"]:
        inputs = map_scenario_config_to_inputs(sc, horizon_months)
        result = calculate_projection(snapshot.to_projection_config(inputs))
        title = generate_scenario_title(
            build_title_context(sc, snapshot.allowance_amount_cents, snapshot.allowance_frequency)
        )
        lines.append(ScenarioLine(id=sc.id, result=result, color=sc.color, label=title))

    _plot_scenarios(lines)

    # --- Explanations ---
    for line in lines:
        explanation = explain_projection(
            line.result,
            horizon_months,
            has_allowance=snapshot.has_allowance,
            has_interest=snapshot.has_interest,
            allowance_amount_cents=snapshot.allowance_amount_cents,
            allowance_frequency=snapshot.allowance_frequency,
            allowance_paused=snapshot.allowance_paused,
            interest_paused=snapshot.interest_paused,
        )
        st.markdown(f"**{plain_title(line.label)}**")
        st.markdown(explanation.to_markdown())

    # --- Summary table ---
    with st.expander("Scenario totals", expanded=False):
        summary = comparison_summary(lines)
        summary["label"] = summary["label"].map(plain_title)
        money_cols = [c for c in summary.columns if c.endswith("_cents")]
        for col in money_cols:
            summary[col] = summary[col].map(format_currency)
        st.dataframe(summary, use_container_width=True, hide_index=True)

    # --- Share link ---
    query = serialize_scenarios(st.session_state["scenarios"], horizon_months)
    st.markdown("**Share these scenarios**")
    st.code("?" + query, language=None)


if __name__ == "__main__":
    main()
