from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Sequence

from . import labeler
from .attributes import compute_attributes
from .core.converter import ConverterRegistry, LunarConverter
from .core.types import DayInfo, LabelConfig, LunarDate

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = LabelConfig()
_registry: Optional[ConverterRegistry] = None

def set_registry(reg: ConverterRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> ConverterRegistry:
    if _registry is None:
        raise RuntimeError("Converter registry not initialized")
    return _registry

def _converter(config: Optional[LabelConfig]) -> LunarConverter:
    return _reg().get((config or DEFAULT_CONFIG).converter)

def list_converters() -> List[str]:
    return _reg().list()

def converter_info(name: str) -> Dict[str, Any]:
    return _reg().get(name).info()

def register_converter(name: str, converter: LunarConverter, *, overwrite: bool = False) -> None:
    _reg().register(name, converter, overwrite=overwrite)

def to_lunar(d: date, *, config: Optional[LabelConfig] = None) -> LunarDate:
    return _converter(config).to_lunar(d)

def to_gregorian(
    year: int,
    month: int,
    day: int,
    *,
    is_leap_month: bool = False,
    config: Optional[LabelConfig] = None,
) -> date:
    return _converter(config).to_gregorian(year, month, day, is_leap_month=is_leap_month)

def day_info(
    d: date,
    *,
    config: Optional[LabelConfig] = None,
    attributes: Sequence[str] = (),
) -> DayInfo:
    config = config or DEFAULT_CONFIG
    if isinstance(d, datetime):
        d = d.date()
    conv = _converter(config)
    logger.debug("day_info %s via %s", d, conv.id.name)
    info = DayInfo(civil_date=d, converter=conv.id, lunar=conv.to_lunar(d))
    if attributes:
        attrs = compute_attributes(info, attributes, config)
        info = replace(info, attributes=attrs)
    return info

# ============================================================
# Gregorian-date labels
# ============================================================

def ganzhi_year(d: date, *, config: Optional[LabelConfig] = None) -> str:
    return labeler.ganzhi_year(to_lunar(d, config=config))

def ganzhi_month(d: date, *, config: Optional[LabelConfig] = None) -> str:
    config = config or DEFAULT_CONFIG
    t = to_lunar(d, config=config)
    return labeler.ganzhi_month(t.year_ordinal, t.month, rule=config.month_stem_rule)

def zodiac_sign(d: date, *, config: Optional[LabelConfig] = None) -> str:
    return labeler.zodiac_sign(to_lunar(d, config=config).year_ordinal)

def lunar_day_name(d: date, *, config: Optional[LabelConfig] = None) -> str:
    return labeler.lunar_day_name(to_lunar(d, config=config).day)

def lunar_month_name(d: date, *, config: Optional[LabelConfig] = None) -> str:
    return labeler.lunar_month_name(to_lunar(d, config=config).month)

def labels(d: date, *, config: Optional[LabelConfig] = None) -> Dict[str, str]:
    """All five labels from a single conversion."""
    config = config or DEFAULT_CONFIG
    return labeler.labels(to_lunar(d, config=config), rule=config.month_stem_rule)
