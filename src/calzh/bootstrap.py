from __future__ import annotations
from calzh.core.converter import ConverterRegistry
from calzh.converters import LunarPythonConverter, TableConverter

def build_registry() -> ConverterRegistry:
    return ConverterRegistry({
        "lunar_python": LunarPythonConverter(),
        "table": TableConverter(),
    })
