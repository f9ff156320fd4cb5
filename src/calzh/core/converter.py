from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Protocol

from .errors import UnknownConverterError
from .types import ConverterId, LunarDate

logger = logging.getLogger(__name__)

class LunarConverter(Protocol):
    id: ConverterId

    def info(self) -> Dict[str, Any]: ...
    def to_lunar(self, d: date) -> LunarDate: ...
    def to_gregorian(self, year: int, month: int, day: int, *, is_leap_month: bool = False) -> date: ...

@dataclass
class ConverterRegistry:
    _converters: Dict[str, LunarConverter]

    def get(self, name: str) -> LunarConverter:
        if name not in self._converters:
            raise UnknownConverterError(f"Unknown converter '{name}'. Available: {sorted(self._converters)}")
        return self._converters[name]

    def list(self) -> List[str]:
        return sorted(self._converters.keys())

    def register(self, name: str, converter: LunarConverter, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._converters):
            raise KeyError(f"Converter '{name}' already exists. Use overwrite=True to replace.")
        self._converters[name] = converter
        logger.debug("Registered converter %s", name)
