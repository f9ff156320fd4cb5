"""
calzh.display
-------------
Label text for a menu-bar clock: time, date, or a custom strftime pattern
that may embed lunar tokens.

Lunar tokens, written either braced ({GY}) or bare (GY) when not glued to a
letter, underscore or '%':

  GY  ganzhi year        e.g. 甲辰年
  GM  ganzhi month       e.g. 丙寅月
  LD  lunar day name     e.g. 初一
  LM  lunar month name   e.g. 正月
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta
from typing import Dict, List, Optional, Set, Tuple

from . import api, labeler
from .core.errors import ConfigurationError
from .core.types import DisplayConfig, LabelConfig

logger = logging.getLogger(__name__)

LUNAR_TOKENS = ("GY", "GM", "LD", "LM")

_TOKEN_RE = re.compile(
    r"\{(?P<braced>GY|GM|LD|LM)\}|(?<![A-Za-z_%])(?P<bare>GY|GM|LD|LM)(?![A-Za-z_])"
)

TIME_FORMAT = "%H:%M:%S"

# strftime directives that change every second / every minute.
_SECOND_DIRECTIVES = set("SsTXcr")
_MINUTE_DIRECTIVES = set("MHIpRlk")
_DIRECTIVE_RE = re.compile(r"%[-#_^0]?([A-Za-z])")


def find_lunar_tokens(fmt: str) -> Set[str]:
    return {m.group("braced") or m.group("bare") for m in _TOKEN_RE.finditer(fmt)}


def _split(fmt: str) -> List[Tuple[bool, str]]:
    """[(is_token, text), ...] in pattern order."""
    parts: List[Tuple[bool, str]] = []
    pos = 0
    for m in _TOKEN_RE.finditer(fmt):
        if m.start() > pos:
            parts.append((False, fmt[pos:m.start()]))
        parts.append((True, m.group("braced") or m.group("bare")))
        pos = m.end()
    if pos < len(fmt):
        parts.append((False, fmt[pos:]))
    return parts


def lunar_token_values(now: datetime, config: Optional[LabelConfig] = None) -> Dict[str, str]:
    config = config or api.DEFAULT_CONFIG
    t = api.to_lunar(now, config=config)
    return {
        "GY": labeler.ganzhi_year(t),
        "GM": labeler.ganzhi_month(t.year_ordinal, t.month, rule=config.month_stem_rule),
        "LD": labeler.lunar_day_name(t.day),
        "LM": labeler.lunar_month_name(t.month),
    }


def render_custom(fmt: str, now: datetime, *, config: Optional[LabelConfig] = None) -> str:
    parts = _split(fmt)
    values: Dict[str, str] = {}
    if any(is_token for is_token, _ in parts):
        values = lunar_token_values(now, config)
        logger.debug("Lunar tokens for %s: %s", now.date(), values)

    out = []
    for is_token, text in parts:
        out.append(values[text] if is_token else now.strftime(text))
    return "".join(out)


def render(now: datetime, config: DisplayConfig) -> str:
    if config.mode == "icon":
        return ""
    if config.mode == "time":
        return now.strftime(TIME_FORMAT)
    if config.mode == "date":
        return f"{now:%b} {now.day}"
    if config.mode == "custom":
        return render_custom(config.custom_format, now, config=config.label)
    raise ConfigurationError(f"Unknown display mode {config.mode!r}")


def refresh_interval(config: DisplayConfig) -> Tuple[float, Optional[str]]:
    """(seconds, unit) between label refreshes; unit is None when nothing updates."""
    if config.mode == "icon":
        return 0.0, None
    if config.mode == "time":
        return 1.0, "second"
    if config.mode == "date":
        return 86400.0, "day"
    if config.mode != "custom":
        raise ConfigurationError(f"Unknown display mode {config.mode!r}")

    directives = set(_DIRECTIVE_RE.findall(config.custom_format.replace("%%", "")))
    if directives & _SECOND_DIRECTIVES:
        return 1.0, "second"
    if directives & _MINUTE_DIRECTIVES:
        return 60.0, "minute"
    return 86400.0, "day"


def seconds_until_next_tick(now: datetime, unit: Optional[str]) -> float:
    """Delay that lands the next refresh on the next second/minute/midnight."""
    if unit == "second":
        wait = 1.0 - now.microsecond / 1_000_000
    elif unit == "minute":
        wait = 60.0 - (now.second + now.microsecond / 1_000_000)
    elif unit == "day":
        midnight = datetime.combine(now.date() + timedelta(days=1), datetime.min.time(), tzinfo=now.tzinfo)
        wait = (midnight - now).total_seconds()
    else:
        wait = 1.0

    if wait < 0.05:
        wait += 0.1
    return wait
