"""
Scenario URL codec — compact, URL-safe share token for a scenario list.

Token layout:
  scenarios=<url-safe base64 of compact JSON>&h=<horizon months>

Each scenario is shortened to {"w": weekly cents, "wd": "s"|"v",
"o": one-time cents, "od": "d"|"w"}. Ids and colors are not encoded; they are
reassigned by position on decode.

Decoding never raises: a missing key, bad base64, bad JSON, a non-array
payload or a malformed entry all yield None and the caller falls back to
default scenarios.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
from dataclasses import dataclass
from typing import List, Literal, Mapping, Optional, Sequence, Union
from urllib.parse import parse_qs, urlencode

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from core.config import DEFAULT_HORIZON_MONTHS, SCENARIO_COLORS
from core.schema import OneTimeDirection, ScenarioConfig, WeeklyDirection

logger = logging.getLogger(__name__)

SCENARIOS_PARAM = "scenarios"
HORIZON_PARAM = "h"

_WEEKLY_CODES = {WeeklyDirection.SPENDING: "s", WeeklyDirection.SAVING: "v"}
_ONE_TIME_CODES = {OneTimeDirection.DEPOSIT: "d", OneTimeDirection.WITHDRAWAL: "w"}


class CompactScenario(BaseModel):
    """Wire shape of one scenario inside the token."""

    # Strict: JSON `true`, "5" or 5.5 are rejected rather than coerced to an int
    model_config = ConfigDict(extra="ignore", strict=True)

    w: int = Field(..., ge=0)
    wd: Literal["s", "v"]
    o: int = Field(..., ge=0)
    od: Literal["d", "w"]

    @classmethod
    def from_config(cls, sc: ScenarioConfig) -> "CompactScenario":
        return cls(
            w=sc.weekly_amount_cents,
            wd=_WEEKLY_CODES[sc.weekly_direction],
            o=sc.one_time_amount_cents,
            od=_ONE_TIME_CODES[sc.one_time_direction],
        )

    def to_config(self, index: int) -> ScenarioConfig:
        return ScenarioConfig(
            id=f"s{index}",
            weekly_amount_cents=self.w,
            weekly_direction=WeeklyDirection.SAVING if self.wd == "v" else WeeklyDirection.SPENDING,
            one_time_amount_cents=self.o,
            one_time_direction=(
                OneTimeDirection.WITHDRAWAL if self.od == "w" else OneTimeDirection.DEPOSIT
            ),
            color=SCENARIO_COLORS[index % len(SCENARIO_COLORS)],
        )


@dataclass(frozen=True)
class DecodedScenarios:
    scenarios: List[ScenarioConfig]
    horizon_months: int


def _to_url_safe_base64(text: str) -> str:
    return base64.urlsafe_b64encode(text.encode("utf-8")).decode("ascii").rstrip("=")


def _from_url_safe_base64(encoded: str) -> str:
    padded = encoded + "=" * (-len(encoded) % 4)
    # validate=True rejects characters outside the alphabet instead of skipping them
    raw = base64.b64decode(padded.replace("-", "+").replace("_", "/"), validate=True)
    return raw.decode("utf-8")


def serialize_scenarios(scenarios: Sequence[ScenarioConfig], horizon_months: int) -> str:
    """Query string `scenarios=<token>&h=<months>`; identical input gives an identical string."""
    compact = [CompactScenario.from_config(sc).model_dump() for sc in scenarios]
    payload = json.dumps(compact, separators=(",", ":"))
    return urlencode({SCENARIOS_PARAM: _to_url_safe_base64(payload), HORIZON_PARAM: str(horizon_months)})


def _first(params: Mapping, key: str) -> Optional[str]:
    value = params.get(key)
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    return value


def _parse_horizon(value: Optional[str]) -> int:
    """Positive whole months written as plain ASCII digits; anything else is the default."""
    if value is None:
        return DEFAULT_HORIZON_MONTHS
    text = str(value)
    # int() alone would also take "1_2", "+12", " 12 " and "-5"
    if not (text.isascii() and text.isdigit()):
        return DEFAULT_HORIZON_MONTHS
    months = int(text)
    return months if months > 0 else DEFAULT_HORIZON_MONTHS


def deserialize_scenarios(params: Union[str, Mapping]) -> Optional[DecodedScenarios]:
    """
    Decode a share token back into scenarios.

    `params` may be a raw query string or a mapping such as the result of
    urllib.parse.parse_qs() or Streamlit's st.query_params.
    """
    if isinstance(params, str):
        params = parse_qs(params.lstrip("?"))

    encoded = _first(params, SCENARIOS_PARAM)
    if not encoded:
        logger.debug("No %r parameter in share link.", SCENARIOS_PARAM)
        return None

    try:
        text = _from_url_safe_base64(str(encoded))
    except (binascii.Error, ValueError) as exc:
        logger.info("Ignoring share link: scenarios token is not valid base64 (%s).", exc)
        return None

    try:
        compact = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.info("Ignoring share link: scenarios token is not JSON (%s).", exc)
        return None
    except RecursionError:
        logger.info("Ignoring share link: scenarios token is nested too deeply to decode.")
        return None

    if not isinstance(compact, list):
        logger.info("Ignoring share link: scenarios payload is %s, not a list.", type(compact).__name__)
        return None

    try:
        entries = [CompactScenario.model_validate(c) for c in compact]
    except ValidationError as exc:
        logger.info("Ignoring share link: malformed scenario entry (%d errors).", exc.error_count())
        return None

    return DecodedScenarios(
        scenarios=[entry.to_config(i) for i, entry in enumerate(entries)],
        horizon_months=_parse_horizon(_first(params, HORIZON_PARAM)),
    )
