"""Diagnostics package.

Command-line checks over the labeler and the conversion backends.
"""

__all__ = ["year_check", "month_table"]
