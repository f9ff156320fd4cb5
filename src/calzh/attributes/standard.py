from __future__ import annotations
from typing import Any, Dict

from .. import labeler
from .registry import register_attribute

def ganzhi(info, config) -> Dict[str, Any]:
    t = info.lunar
    return {
        "ganzhi_year": labeler.ganzhi_year(t),
        "ganzhi_month": labeler.ganzhi_month(t.year_ordinal, t.month, rule=config.month_stem_rule),
    }

def zodiac(info, config) -> Dict[str, Any]:
    return {"zodiac": labeler.zodiac_sign(info.lunar.year_ordinal)}

def names(info, config) -> Dict[str, Any]:
    t = info.lunar
    # Leap months share the name of the month they repeat.
    return {
        "lunar_day": labeler.lunar_day_name(t.day),
        "lunar_month": labeler.lunar_month_name(t.month),
        "is_leap_month": t.is_leap_month,
    }

def labels(info, config) -> Dict[str, Any]:
    return labeler.labels(info.lunar, rule=config.month_stem_rule)

register_attribute("ganzhi", ganzhi)
register_attribute("zodiac", zodiac)
register_attribute("names", names)
register_attribute("labels", labels)
