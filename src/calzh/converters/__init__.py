"""Gregorian -> lunar conversion backends."""

from .lunar_python import LunarPythonConverter
from .table import TableConverter

__all__ = ["LunarPythonConverter", "TableConverter"]
