"""
Month Lengths — Таблицы длин месяцев

Джалали: 6 × 31, 5 × 30, Esfand 29 (30 в високосный год).
Григорианский: стандартная таблица, февраль 29 в високосный год.
"""

from itertools import accumulate
from typing import Final

from src.core.calendar.leap_years import is_leap_year
from src.core.domain.civil_date import InvalidDateError


MONTHS_PER_YEAR: Final[int] = 12

JALALI_MONTH_LENGTHS: Final[tuple[int, ...]] = (31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 29)
GREGORIAN_MONTH_LENGTHS: Final[tuple[int, ...]] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Дней от начала года до первого числа месяца (индекс = month - 1)
JALALI_DAYS_BEFORE_MONTH: Final[tuple[int, ...]] = tuple(
    accumulate(JALALI_MONTH_LENGTHS[:-1], initial=0)
)

JALALI_COMMON_YEAR_DAYS: Final[int] = sum(JALALI_MONTH_LENGTHS)  # 365


def _check_month(month: int) -> None:
    if not 1 <= month <= MONTHS_PER_YEAR:
        raise InvalidDateError(f"Month {month} outside range [1, {MONTHS_PER_YEAR}]")


# =============================================================================
# GREGORIAN
# =============================================================================


def is_gregorian_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def gregorian_month_length(year: int, month: int) -> int:
    """
    Длина месяца пролептического григорианского календаря.

    Raises:
        InvalidDateError: Если month вне 1..12
    """
    _check_month(month)
    if month == 2 and is_gregorian_leap_year(year):
        return 29
    return GREGORIAN_MONTH_LENGTHS[month - 1]


# =============================================================================
# JALALI
# =============================================================================


def jalali_month_length(year: int, month: int) -> int:
    """
    Длина месяца джалали.

    Args:
        year: Год джалали (нужен только для Esfand)
        month: Месяц 1..12

    Returns:
        31 для месяцев 1–6, 30 для 7–11, 29/30 для 12

    Raises:
        InvalidDateError: Если month вне 1..12
        RangeError: Если для Esfand год вне поддерживаемого диапазона
    """
    _check_month(month)
    if month == MONTHS_PER_YEAR and is_leap_year(year):
        return 30
    return JALALI_MONTH_LENGTHS[month - 1]


def jalali_year_length(year: int) -> int:
    return JALALI_COMMON_YEAR_DAYS + (1 if is_leap_year(year) else 0)


def jalali_days_before_month(month: int) -> int:
    _check_month(month)
    return JALALI_DAYS_BEFORE_MONTH[month - 1]
