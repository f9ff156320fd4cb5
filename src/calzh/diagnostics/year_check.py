from __future__ import annotations

import argparse
from datetime import date, timedelta
from typing import List, Tuple

import calzh
from calzh import labeler
from calzh.core.types import LabelConfig


def new_year_lunar(year: int, config: LabelConfig) -> Tuple[date, calzh.LunarDate]:
    """Lunar 1-1 of the lunar year that starts in Gregorian year `year`."""
    d = calzh.to_gregorian(year, 1, 1, config=config)
    return d, calzh.to_lunar(d, config=config)


def check_years(from_year: int, to_year: int, config: LabelConfig) -> List[dict]:
    """
    Compare the converter's year name with the stem/branch tables on the first
    and last day of each lunar year. Returns one row per checked date.
    """
    rows = []
    for y in range(from_year, to_year + 1):
        first, t_first = new_year_lunar(y, config)
        last = first - timedelta(days=1)
        t_last = calzh.to_lunar(last, config=config)
        for d, t in ((last, t_last), (first, t_first)):
            local = labeler.cycle_year_name(t.year_ordinal)
            rows.append({
                "date": d,
                "ordinal": t.year_ordinal,
                "service": t.ganzhi_year_name,
                "tables": local,
                "ok": t.ganzhi_year_name == local,
            })
    return rows


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Cross-check the converter's ganzhi year name against the stem/branch tables around each lunar New Year."
    )
    p.add_argument("--from-year", type=int, default=1950)
    p.add_argument("--to-year", type=int, default=2050)
    p.add_argument("--converter", default="lunar_python")
    p.add_argument("--all", action="store_true", help="Print matching rows too.")
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    rows = check_years(args.from_year, args.to_year, LabelConfig(converter=args.converter))
    bad = [r for r in rows if not r["ok"]]

    for r in rows:
        if args.all or not r["ok"]:
            flag = "ok " if r["ok"] else "BAD"
            print(f"{flag} {r['date'].isoformat()}  #{r['ordinal']:2d}  service={r['service']}  tables={r['tables']}")

    print(f"{len(rows)} dates checked, {len(bad)} mismatches")
    return 1 if bad else 0


if __name__ == "__main__":
    raise SystemExit(main())
