from __future__ import annotations
import logging
from datetime import date, datetime
from typing import Any, Dict, Mapping, Optional

from ..core.errors import ConversionError
from ..core.types import ConverterId, LunarDate

logger = logging.getLogger(__name__)


class TableConverter:
    """Converter answering from a fixed date -> LunarDate table."""

    def __init__(self, table: Optional[Mapping[date, LunarDate]] = None, *, name: str = "table"):
        self.id = ConverterId(name=name, version="1")
        self._table: Dict[date, LunarDate] = dict(table or {})

    def info(self) -> Dict[str, Any]:
        return {"name": self.id.name, "version": self.id.version, "backend": "table", "entries": len(self._table)}

    def add(self, d: date, lunar: LunarDate) -> None:
        self._table[d] = lunar

    def to_lunar(self, d: date) -> LunarDate:
        if isinstance(d, datetime):
            d = d.date()
        if d not in self._table:
            raise ConversionError(f"No lunar entry for {d.isoformat()} in converter '{self.id.name}'")
        return self._table[d]

    def to_gregorian(self, year: int, month: int, day: int, *, is_leap_month: bool = False) -> date:
        hits = sorted(
            d for d, t in self._table.items()
            if t.lunar_year == year and t.month == month and t.day == day and t.is_leap_month == is_leap_month
        )
        if not hits:
            raise ConversionError(f"No Gregorian entry for lunar {year}-{month}-{day} in converter '{self.id.name}'")
        if len(hits) > 1:
            logger.debug("Lunar %s-%s-%s matches %d dates, using the first", year, month, day, len(hits))
        return hits[0]
