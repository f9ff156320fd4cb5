# tests/test_converters.py

import sys
from datetime import date, datetime
from unittest.mock import patch

import pytest

from calzh.converters import LunarPythonConverter, TableConverter
from calzh.core.errors import ConversionError, ConverterUnavailableError
from calzh.core.types import LunarDate


@pytest.fixture
def conv():
    return LunarPythonConverter()


def test_spring_festival_2024(conv):
    t = conv.to_lunar(date(2024, 2, 10))
    assert t.lunar_year == 2024
    assert (t.month, t.day, t.is_leap_month) == (1, 1, False)
    assert t.year_ordinal == 41
    assert t.ganzhi_year_name == "甲辰年"


def test_new_years_eve_belongs_to_previous_year(conv):
    t = conv.to_lunar(date(2024, 2, 9))
    assert t.lunar_year == 2023
    assert (t.month, t.day) == (12, 30)
    assert t.year_ordinal == 40
    assert t.ganzhi_year_name == "癸卯年"


def test_leap_month_is_normalized(conv):
    # 2023 has an intercalary second month starting 2023-03-22
    t = conv.to_lunar(date(2023, 3, 22))
    assert (t.month, t.day, t.is_leap_month) == (2, 1, True)


def test_mid_autumn_2024(conv):
    t = conv.to_lunar(date(2024, 9, 17))
    assert (t.month, t.day) == (8, 15)


def test_datetime_uses_wall_clock_date(conv):
    assert conv.to_lunar(datetime(2025, 1, 29, 23, 59)) == conv.to_lunar(date(2025, 1, 29))
    assert conv.to_lunar(date(2025, 1, 29)).ganzhi_year_name == "乙巳年"


def test_to_gregorian(conv):
    assert conv.to_gregorian(2024, 1, 1) == date(2024, 2, 10)
    assert conv.to_gregorian(2024, 8, 15) == date(2024, 9, 17)
    assert conv.to_gregorian(2023, 2, 1, is_leap_month=True) == date(2023, 3, 22)


def test_missing_library_raises(conv):
    with patch.dict(sys.modules, {"lunar_python": None}):
        with pytest.raises(ConverterUnavailableError):
            conv.to_lunar(date(2024, 2, 10))


def test_info(conv):
    info = conv.info()
    assert info["name"] == "lunar_python"
    assert info["backend"] == "lunar_python"


# --- table backend ---

T_2024_01_01 = LunarDate(year_ordinal=41, month=1, day=1, ganzhi_year_name="甲辰年", lunar_year=2024)


def test_table_lookup():
    tc = TableConverter({date(2024, 2, 10): T_2024_01_01})
    assert tc.to_lunar(date(2024, 2, 10)) is T_2024_01_01
    assert tc.to_lunar(datetime(2024, 2, 10, 8, 0)) is T_2024_01_01
    assert tc.to_gregorian(2024, 1, 1) == date(2024, 2, 10)
    assert tc.info()["entries"] == 1


def test_table_misses_raise():
    tc = TableConverter()
    with pytest.raises(ConversionError):
        tc.to_lunar(date(2024, 2, 10))
    tc.add(date(2024, 2, 10), T_2024_01_01)
    with pytest.raises(ConversionError):
        tc.to_gregorian(2024, 1, 1, is_leap_month=True)
