"""
Scenario modeling — input mapping, default scenarios, titles, and share links.
"""

from .helpers import (
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
from .title import generate_scenario_title, plain_title
from .url import CompactScenario, DecodedScenarios, deserialize_scenarios, serialize_scenarios

__all__ = [
    "add_scenario",
    "build_default_scenarios",
    "build_title_context",
    "get_next_scenario_color",
    "get_next_scenario_id",
    "has_active_allowance",
    "map_scenario_config_to_inputs",
    "remove_scenario",
    "update_scenario",
    "weekly_allowance_cents",
    "generate_scenario_title",
    "plain_title",
    "CompactScenario",
    "DecodedScenarios",
    "deserialize_scenarios",
    "serialize_scenarios",
]
