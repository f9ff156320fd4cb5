"""
calzh.converters.lunar_python
-----------------------------
Gregorian <-> Chinese lunar conversion backed by the lunar_python library.

lunar_python reports an intercalary month as a negative month number
(-2 for 闰二月); LunarDate carries it as month=2, is_leap_month=True.
"""

from __future__ import annotations
import logging
from datetime import date, datetime
from typing import Any, Dict

from ..core.errors import ConversionError, ConverterUnavailableError
from ..core.types import ConverterId, LunarDate
from ..labeler import year_ordinal_from_lunar_year

logger = logging.getLogger(__name__)

CONVERTER_ID = ConverterId(name="lunar_python", version="1")


def _need_lunar_python():
    try:
        import lunar_python
    except ImportError as e:
        raise ConverterUnavailableError("Need lunar_python. Install: pip install lunar_python") from e
    return lunar_python


class LunarPythonConverter:
    def __init__(self, *, id: ConverterId = CONVERTER_ID):
        self.id = id

    def info(self) -> Dict[str, Any]:
        return {
            "name": self.id.name,
            "version": self.id.version,
            "backend": "lunar_python",
            "year_boundary": "spring_festival",
        }

    def to_lunar(self, d: date) -> LunarDate:
        if isinstance(d, datetime):
            d = d.date()
        lp = _need_lunar_python()
        try:
            lunar = lp.Solar.fromYmd(d.year, d.month, d.day).getLunar()
            year, month, day = lunar.getYear(), lunar.getMonth(), lunar.getDay()
            year_name = lunar.getYearInGanZhi() + "年"
        except Exception as e:
            raise ConversionError(f"lunar_python could not convert {d.isoformat()}: {e}") from e

        out = LunarDate(
            year_ordinal=year_ordinal_from_lunar_year(year),
            month=abs(month),
            day=day,
            is_leap_month=month < 0,
            ganzhi_year_name=year_name,
            lunar_year=year,
        )
        logger.debug("%s -> %s", d, out)
        return out

    def to_gregorian(self, year: int, month: int, day: int, *, is_leap_month: bool = False) -> date:
        lp = _need_lunar_python()
        m = -month if is_leap_month else month
        try:
            solar = lp.Lunar.fromYmd(year, m, day).getSolar()
            return date(solar.getYear(), solar.getMonth(), solar.getDay())
        except Exception as e:
            leap_tag = "闰" if is_leap_month else ""
            raise ConversionError(f"lunar_python could not convert lunar {year}-{leap_tag}{month}-{day}: {e}") from e
