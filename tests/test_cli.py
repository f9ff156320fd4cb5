# tests/test_cli.py

from datetime import date

import pytest

import calzh
from calzh import cli
from calzh.converters import TableConverter
from calzh.core.types import LunarDate

D = date(2023, 3, 22)
T = LunarDate(year_ordinal=40, month=2, day=1, is_leap_month=True, ganzhi_year_name="癸卯年", lunar_year=2023)


@pytest.fixture(autouse=True)
def fixture_converter():
    calzh.register_converter("cli-fixture", TableConverter({D: T}), overwrite=True)


def test_day_command(capsys):
    rc = cli.main(["day", "2023-03-22", "--converter", "cli-fixture"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "lunar 2023-闰02-01" in out
    assert "癸卯年" in out
    assert "甲卯月" in out
    assert "初一" in out
    assert "二月" in out


def test_day_shortcut_and_attr(capsys):
    rc = cli.main(["2023-03-22", "--converter", "cli-fixture", "--attr", "zodiac"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "兔" in out
    assert "ganzhi_year" not in out


def test_render_command(capsys):
    rc = cli.main(["render", "%m/%d GY LD", "--at", "2023-03-22T08:00:00", "--converter", "cli-fixture"])
    assert rc == 0
    assert capsys.readouterr().out.strip() == "03/22 癸卯年 初一"


def test_render_time_mode(capsys):
    rc = cli.main(["render", "--at", "2023-03-22T08:01:02"])
    assert rc == 0
    assert capsys.readouterr().out.strip() == "08:01:02"


def test_render_watch_icon_prints_once(capsys):
    rc = cli.main(["render", "--mode", "icon", "--watch"])
    assert rc == 0
    assert capsys.readouterr().out == "\n"


def test_months_command(capsys):
    rc = cli.main(["months", "--ordinal", "1"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "甲子年" in out
    assert "乙寅月" in out
    assert "冬月" in out


def test_calzh_errors_become_exit_status(capsys):
    rc = cli.main(["day", "2023-03-23", "--converter", "cli-fixture"])
    assert rc == 2
    assert "No lunar entry" in capsys.readouterr().err


def test_unknown_converter_exit_status(capsys):
    rc = cli.main(["day", "2023-03-22", "--converter", "missing"])
    assert rc == 2
    assert "Unknown converter" in capsys.readouterr().err


def test_year_check(capsys):
    rc = cli.main(["diag", "year-check", "--from-year", "2020", "--to-year", "2026"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "14 dates checked, 0 mismatches" in out


def test_year_check_reports_mismatch(capsys):
    # converter whose year name disagrees with the stem/branch tables for ordinal 41
    wrong = TableConverter({
        date(2024, 2, 9): LunarDate(year_ordinal=40, month=12, day=30, ganzhi_year_name="癸卯年", lunar_year=2023),
        date(2024, 2, 10): LunarDate(year_ordinal=41, month=1, day=1, ganzhi_year_name="乙巳年", lunar_year=2024),
    })
    calzh.register_converter("cli-wrong-year", wrong, overwrite=True)

    rc = cli.main(["diag", "year-check", "--from-year", "2024", "--to-year", "2024", "--converter", "cli-wrong-year"])
    out = capsys.readouterr().out
    assert rc == 1
    assert "BAD 2024-02-10" in out
    assert "tables=甲辰年" in out
    assert "2 dates checked, 1 mismatches" in out


@pytest.mark.parametrize(
    "argv",
    [
        ["day", "2023-02-30"],
        ["2023-02-30"],
        ["day", "yesterday"],
        ["render", "%H", "--at", "garbage"],
    ],
)
def test_bad_dates_are_usage_errors(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(argv)
    assert exc.value.code == 2
    err = capsys.readouterr().err
    assert "invalid" in err
    assert "Traceback" not in err


def test_verbose_flag_first(capsys):
    rc = cli.main(["-v", "months", "--ordinal", "41"])
    assert rc == 0
    assert "甲辰年" in capsys.readouterr().out


def test_top_level_help_has_no_dead_verbose_option(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--help"])
    assert exc.value.code == 0
    assert "--verbose" not in capsys.readouterr().out
