from __future__ import annotations

import argparse

from calzh import labeler


def month_rows(year_ordinal: int, rule: str = "legacy") -> list[tuple[int, str, str]]:
    return [
        (m, labeler.lunar_month_name(m), labeler.ganzhi_month(year_ordinal, m, rule=rule))
        for m in range(1, 13)
    ]


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print the ganzhi month labels of one lunar year.")
    g = p.add_mutually_exclusive_group()
    g.add_argument("--year", type=int, help="Running lunar year, e.g. 2024")
    g.add_argument("--ordinal", type=int, help="Sexagenary ordinal 1..60 (1 = 甲子)")
    p.add_argument("--rule", choices=("legacy", "wuhu"), default="legacy")
    args = p.parse_args(argv)

    if args.ordinal is not None:
        ordinal = args.ordinal
    else:
        ordinal = labeler.year_ordinal_from_lunar_year(args.year if args.year is not None else 2024)

    print(f"{labeler.cycle_year_name(ordinal)}  (#{ordinal}, {labeler.zodiac_sign(ordinal)}, rule={args.rule})")
    for m, name, gz in month_rows(ordinal, args.rule):
        print(f"  {m:2d}  {name}  {gz}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
