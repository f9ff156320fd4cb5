from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Literal, Optional

from .errors import ConfigurationError

MonthStemRule = Literal["legacy", "wuhu"]
DisplayMode = Literal["icon", "time", "date", "custom"]

MONTH_STEM_RULES = ("legacy", "wuhu")
DISPLAY_MODES = ("icon", "time", "date", "custom")

@dataclass(frozen=True)
class ConverterId:
    name: str
    version: str

@dataclass(frozen=True)
class LunarDate:
    """Output of a Gregorian -> lunar conversion service.

    year_ordinal is the 1-based position in the sexagenary cycle (1 = 甲子).
    ganzhi_year_name is the service's own label for the year and is passed
    through untouched.
    """
    year_ordinal: int
    month: int
    day: int
    is_leap_month: bool = False
    ganzhi_year_name: str = ""
    lunar_year: Optional[int] = None

@dataclass(frozen=True)
class DayInfo:
    civil_date: date
    converter: ConverterId
    lunar: LunarDate
    attributes: Optional[Dict[str, Any]] = None

@dataclass(frozen=True)
class LabelConfig:
    """Which conversion backend to ask, and how to derive month stems."""
    converter: str = "lunar_python"
    month_stem_rule: MonthStemRule = "legacy"

    def __post_init__(self) -> None:
        if self.month_stem_rule not in MONTH_STEM_RULES:
            raise ConfigurationError(
                f"month_stem_rule must be one of {MONTH_STEM_RULES}, got {self.month_stem_rule!r}"
            )
        if not self.converter:
            raise ConfigurationError("converter name must not be empty")

@dataclass(frozen=True)
class DisplayConfig:
    mode: DisplayMode = "time"
    custom_format: str = ""
    label: LabelConfig = LabelConfig()

    def __post_init__(self) -> None:
        if self.mode not in DISPLAY_MODES:
            raise ConfigurationError(f"mode must be one of {DISPLAY_MODES}, got {self.mode!r}")
