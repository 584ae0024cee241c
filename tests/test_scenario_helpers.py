import pytest

from core.config import DEFAULT_WEEKLY_SPENDING_CENTS, MAX_SCENARIOS, SCENARIO_COLORS
from core.schema import Frequency, OneTimeDirection, ScenarioConfig, WeeklyDirection
from scenarios.helpers import (
    add_scenario,
    build_default_scenarios,
    build_title_context,
    get_next_scenario_color,
    get_next_scenario_id,
    has_active_allowance,
    map_scenario_config_to_inputs,
    remove_scenario,
    update_scenario,
    weekly_allowance_cents,
)


# =====================================================
# map_scenario_config_to_inputs
# =====================================================
def test_spending_and_deposit(make_scenario):
    inputs = map_scenario_config_to_inputs(
        make_scenario(weekly_amount_cents=500, weekly_direction="spending",
                      one_time_amount_cents=2000, one_time_direction="deposit"),
        12,
    )
    assert inputs.weekly_spending_cents == 500
    assert inputs.weekly_savings_cents == 0
    assert inputs.one_time_deposit_cents == 2000
    assert inputs.one_time_withdrawal_cents == 0
    assert inputs.horizon_months == 12


def test_saving_and_withdrawal(make_scenario):
    inputs = map_scenario_config_to_inputs(
        make_scenario(weekly_amount_cents=300, weekly_direction="saving",
                      one_time_amount_cents=1000, one_time_direction="withdrawal"),
        24,
    )
    assert inputs.weekly_spending_cents == 0
    assert inputs.weekly_savings_cents == 300
    assert inputs.one_time_deposit_cents == 0
    assert inputs.one_time_withdrawal_cents == 1000
    assert inputs.horizon_months == 24


def test_zero_amounts_map_to_zero(make_scenario):
    inputs = map_scenario_config_to_inputs(make_scenario(), 6)
    assert inputs.weekly_spending_cents == 0
    assert inputs.weekly_savings_cents == 0
    assert inputs.one_time_deposit_cents == 0
    assert inputs.one_time_withdrawal_cents == 0


@pytest.mark.parametrize("months", [3, 6, 12, 24, 60])
def test_horizon_passes_through(make_scenario, months):
    assert map_scenario_config_to_inputs(make_scenario(), months).horizon_months == months


def test_string_directions_become_enums():
    sc = ScenarioConfig(id="s0", weekly_direction="saving", one_time_direction="withdrawal")
    assert sc.weekly_direction is WeeklyDirection.SAVING
    assert sc.one_time_direction is OneTimeDirection.WITHDRAWAL


# =====================================================
# Allowance helpers
# =====================================================
@pytest.mark.parametrize("amount,frequency,expected", [
    (1000, Frequency.WEEKLY, True),
    (0, Frequency.WEEKLY, False),
    (1000, None, False),
])
def test_has_active_allowance(amount, frequency, expected):
    assert has_active_allowance(amount, frequency) is expected


@pytest.mark.parametrize("amount,frequency,expected", [
    (1000, Frequency.WEEKLY, 1000),
    (2000, Frequency.BIWEEKLY, 1000),
    (5000, Frequency.MONTHLY, 1154),  # 5000 / 4.333 = 1153.85
])
def test_weekly_allowance_cents(amount, frequency, expected):
    assert weekly_allowance_cents(amount, frequency) == expected


# =====================================================
# build_default_scenarios
# =====================================================
def test_defaults_without_allowance():
    defaults = build_default_scenarios(0, None)
    assert len(defaults) == 2
    assert [s.id for s in defaults] == ["s0", "s1"]
    assert [s.color for s in defaults] == list(SCENARIO_COLORS[:2])
    assert defaults[0].weekly_amount_cents == 0
    assert defaults[1].weekly_amount_cents == DEFAULT_WEEKLY_SPENDING_CENTS
    assert all(s.weekly_direction is WeeklyDirection.SPENDING for s in defaults)
    assert all(s.one_time_amount_cents == 0 for s in defaults)
    assert all(s.one_time_direction is OneTimeDirection.DEPOSIT for s in defaults)


def test_defaults_with_weekly_allowance():
    defaults = build_default_scenarios(1000, Frequency.WEEKLY)
    assert defaults[0].weekly_amount_cents == 0
    assert defaults[1].weekly_amount_cents == 1000


def test_defaults_with_biweekly_allowance():
    assert build_default_scenarios(2000, Frequency.BIWEEKLY)[1].weekly_amount_cents == 1000


def test_defaults_with_monthly_allowance():
    assert build_default_scenarios(5000, Frequency.MONTHLY)[1].weekly_amount_cents == 1154


def test_defaults_with_paused_allowance_use_fallback():
    assert build_default_scenarios(1000, None)[1].weekly_amount_cents == DEFAULT_WEEKLY_SPENDING_CENTS


# =====================================================
# Ids and colors
# =====================================================
def test_next_color_skips_used(make_scenario):
    existing = [make_scenario(id="s0", color=SCENARIO_COLORS[0]), make_scenario(id="s1", color=SCENARIO_COLORS[1])]
    assert get_next_scenario_color(existing) == SCENARIO_COLORS[2]


def test_next_color_fills_gaps(make_scenario):
    existing = [make_scenario(id="s0", color=SCENARIO_COLORS[0]), make_scenario(id="s2", color=SCENARIO_COLORS[2])]
    assert get_next_scenario_color(existing) == SCENARIO_COLORS[1]


def test_next_color_wraps_when_palette_used(make_scenario):
    existing = [make_scenario(id=f"s{i}", color=c) for i, c in enumerate(SCENARIO_COLORS)]
    assert get_next_scenario_color(existing) == SCENARIO_COLORS[0]


@pytest.mark.parametrize("ids,expected", [
    ([], "s0"),
    (["s0", "s1"], "s2"),
    (["s0", "s5", "s2"], "s6"),
    (["custom", "s3"], "s4"),
    (["custom"], "s0"),
])
def test_next_scenario_id(make_scenario, ids, expected):
    assert get_next_scenario_id([make_scenario(id=i) for i in ids]) == expected


# =====================================================
# add / remove / update
# =====================================================
def test_add_scenario_appends_blank():
    existing = build_default_scenarios(0, None)
    result = add_scenario(existing)
    assert len(result) == 3
    new = result[-1]
    assert new.id == "s2"
    assert new.color == SCENARIO_COLORS[2]
    assert new.weekly_amount_cents == 0
    assert new.one_time_amount_cents == 0
    assert len(existing) == 2


def test_add_scenario_stops_at_max(make_scenario):
    existing = [make_scenario(id=f"s{i}", color=SCENARIO_COLORS[i]) for i in range(MAX_SCENARIOS)]
    with pytest.raises(ValueError):
        add_scenario(existing)


def test_remove_scenario_by_id():
    existing = build_default_scenarios(0, None)
    assert [s.id for s in remove_scenario(existing, "s0")] == ["s1"]


def test_remove_keeps_last_scenario(make_scenario):
    only = [make_scenario(id="s0")]
    assert remove_scenario(only, "s0") == only


def test_remove_unknown_id_is_noop():
    existing = build_default_scenarios(0, None)
    assert remove_scenario(existing, "s9") == existing


def test_update_scenario_replaces_only_target():
    existing = build_default_scenarios(0, None)
    updated = update_scenario(existing, "s1", weekly_amount_cents=750, weekly_direction=WeeklyDirection.SAVING)
    assert updated[0] == existing[0]
    assert updated[1].weekly_amount_cents == 750
    assert updated[1].weekly_direction is WeeklyDirection.SAVING
    assert existing[1].weekly_amount_cents == DEFAULT_WEEKLY_SPENDING_CENTS


# =====================================================
# build_title_context
# =====================================================
def test_title_context_with_allowance(make_scenario):
    ctx = build_title_context(
        make_scenario(weekly_amount_cents=300, one_time_amount_cents=1000, one_time_direction="withdrawal"),
        2000, Frequency.BIWEEKLY,
    )
    assert ctx.has_allowance is True
    assert ctx.weekly_allowance_cents == 1000
    assert ctx.weekly_amount_cents == 300
    assert ctx.weekly_direction is WeeklyDirection.SPENDING
    assert ctx.one_time_amount_cents == 1000
    assert ctx.one_time_direction is OneTimeDirection.WITHDRAWAL


def test_title_context_without_allowance(make_scenario):
    ctx = build_title_context(make_scenario(), 2000, None)
    assert ctx.has_allowance is False
    assert ctx.weekly_allowance_cents == 0
