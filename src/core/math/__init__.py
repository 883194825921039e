"""
Core math modules для календарного ядра

Arithmetic Engine: сложение дней и месяцев по правилам джалали.
"""

from src.core.math.date_arithmetic import (
    add_days,
    add_jalali_months,
    add_months,
    end_of_day,
    subtract_days,
    subtract_months,
)

__all__ = [
    "add_days",
    "add_jalali_months",
    "add_months",
    "end_of_day",
    "subtract_days",
    "subtract_months",
]
