"""
calzh.labeler
-------------
Sexagenary (ganzhi) and lunar-name labels derived from a lunar-date breakdown.

Every function here is total: input outside its domain yields "" rather than an
exception, since the labels are spliced into display strings where a raised
error would lose the whole line. Tables are tuples and never change.
"""

from __future__ import annotations
from typing import Any, Dict

from .core.types import MONTH_STEM_RULES, LunarDate

HEAVENLY_STEMS = ("甲", "乙", "丙", "丁", "戊", "己", "庚", "辛", "壬", "癸")
EARTHLY_BRANCHES = ("子", "丑", "寅", "卯", "辰", "巳", "午", "未", "申", "酉", "戌", "亥")
ZODIAC_SYMBOLS = ("鼠", "牛", "虎", "兔", "龍", "蛇", "馬", "羊", "猴", "雞", "狗", "豬")
LUNAR_DAY_NAMES = (
    "初一", "初二", "初三", "初四", "初五", "初六", "初七", "初八", "初九", "初十",
    "十一", "十二", "十三", "十四", "十五", "十六", "十七", "十八", "十九", "二十",
    "廿一", "廿二", "廿三", "廿四", "廿五", "廿六", "廿七", "廿八", "廿九", "三十",
)
LUNAR_MONTH_NAMES = ("正月", "二月", "三月", "四月", "五月", "六月", "七月", "八月", "九月", "十月", "冬月", "腊月")

# 1984 opened a 甲子 cycle.
CYCLE_EPOCH_YEAR = 1984


def _is_int(x: Any) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def ganzhi_year(lunar: LunarDate) -> str:
    """Year label as named by the conversion service, e.g. "甲辰年"."""
    return lunar.ganzhi_year_name


def ganzhi_month(lunar_year: int, lunar_month: int, *, rule: str = "legacy") -> str:
    """
    Stem-branch label of a lunar month, e.g. "丙寅月".

    lunar_year is the cycle ordinal (1 = 甲子). The month stem follows from the
    year stem with a x2 multiplier; the branch is fixed per month, 寅 for the
    first. rule="wuhu" shifts the stem by one so that a 甲 year opens on 丙寅.
    """
    if not (_is_int(lunar_year) and _is_int(lunar_month)):
        return ""
    if not 1 <= lunar_month <= 12:
        return ""
    if rule not in MONTH_STEM_RULES:
        return ""

    year_stem = (lunar_year - 1) % 10
    offset = 1 if rule == "wuhu" else 0
    month_stem = (year_stem * 2 + lunar_month + offset) % 10
    month_branch = (lunar_month + 1) % 12

    return HEAVENLY_STEMS[month_stem] + EARTHLY_BRANCHES[month_branch] + "月"


def zodiac_sign(lunar_year: int) -> str:
    if not _is_int(lunar_year):
        return ""
    branch = (lunar_year - 1) % 12
    if 0 <= branch < len(ZODIAC_SYMBOLS):
        return ZODIAC_SYMBOLS[branch]
    return ""


def lunar_day_name(lunar_day: int) -> str:
    if not _is_int(lunar_day) or not 1 <= lunar_day <= 30:
        return ""
    return LUNAR_DAY_NAMES[lunar_day - 1]


def lunar_month_name(lunar_month: int) -> str:
    if not _is_int(lunar_month) or not 1 <= lunar_month <= 12:
        return ""
    return LUNAR_MONTH_NAMES[lunar_month - 1]


def cycle_year_name(year_ordinal: int) -> str:
    """Year label rebuilt from the stem/branch tables (diagnostics only)."""
    if not _is_int(year_ordinal):
        return ""
    return HEAVENLY_STEMS[(year_ordinal - 1) % 10] + EARTHLY_BRANCHES[(year_ordinal - 1) % 12] + "年"


def year_ordinal_from_lunar_year(lunar_year: int) -> int:
    """Running lunar year (e.g. 2024) -> 1-based sexagenary ordinal (e.g. 41)."""
    return (lunar_year - CYCLE_EPOCH_YEAR) % 60 + 1


def labels(lunar: LunarDate, *, rule: str = "legacy") -> Dict[str, str]:
    return {
        "ganzhi_year": ganzhi_year(lunar),
        "ganzhi_month": ganzhi_month(lunar.year_ordinal, lunar.month, rule=rule),
        "zodiac": zodiac_sign(lunar.year_ordinal),
        "lunar_day": lunar_day_name(lunar.day),
        "lunar_month": lunar_month_name(lunar.month),
    }
