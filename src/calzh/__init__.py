"""calzh public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    day_info,
    to_lunar,
    to_gregorian,
    labels,
    ganzhi_year,
    ganzhi_month,
    zodiac_sign,
    lunar_day_name,
    lunar_month_name,
    list_converters,
    converter_info,
    register_converter,
)
from .core.errors import (
    CalzhError,
    ConfigurationError,
    ConversionError,
    ConverterUnavailableError,
    UnknownConverterError,
)
from .core.types import DayInfo, DisplayConfig, LabelConfig, LunarDate

__all__ = [
    "day_info",
    "to_lunar",
    "to_gregorian",
    "labels",
    "ganzhi_year",
    "ganzhi_month",
    "zodiac_sign",
    "lunar_day_name",
    "lunar_month_name",
    "list_converters",
    "converter_info",
    "register_converter",
    "CalzhError",
    "ConfigurationError",
    "ConversionError",
    "ConverterUnavailableError",
    "UnknownConverterError",
    "DayInfo",
    "DisplayConfig",
    "LabelConfig",
    "LunarDate",
]
