"""
Date Arithmetic — Сложение дней и месяцев по правилам джалали

Arithmetic Engine. Все функции принимают и возвращают GregorianCivilDate;
месячная арифметика выполняется над полями джалали.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. add_days линейна: add_days(add_days(d, a), b) == add_days(d, a + b)
2. add_months переносит месяц в год с округлением к -inf и
   обрезает день до длины месяца (31 Shahrivar + 1 месяц → 30 Mehr)
3. n = 0 — тождественное преобразование
4. Time-of-day сохраняется (кроме end_of_day)

ФОРМУЛЫ:
    total = (month - 1) + n
    year' = year + floor(total / 12)
    month' = (total mod 12) + 1
    day' = min(day, month_length(year', month'))
"""

from src.core.calendar.conversion import (
    epoch_day_to_gregorian,
    gregorian_to_epoch_day,
    gregorian_to_jalali,
    jalali_to_gregorian,
    validate_jalali,
)
from src.core.calendar.leap_years import check_jalali_year
from src.core.calendar.month_lengths import MONTHS_PER_YEAR, jalali_month_length
from src.core.domain.civil_date import GregorianCivilDate, JalaliCivilDate


# =============================================================================
# DAYS
# =============================================================================


def add_days(date: GregorianCivilDate, days: int) -> GregorianCivilDate:
    """
    Сдвиг даты на целое число дней (отрицательное — назад).

    Работает по линейному счёту дней, поэтому корректна через любые
    границы месяцев и лет в обоих календарях.

    Args:
        date: Исходная дата
        days: Число дней

    Returns:
        Новая дата с тем же time-of-day

    Raises:
        InvalidDateError: исходная дата невалидна
        RangeError: исходная дата или результат вне поддерживаемого диапазона

    Examples:
        >>> add_days(GregorianCivilDate(year=2023, month=5, day=15), 10).ymd()
        (2023, 5, 25)
    """
    return epoch_day_to_gregorian(gregorian_to_epoch_day(date) + days, time_of_day=date)


def subtract_days(date: GregorianCivilDate, days: int) -> GregorianCivilDate:
    return add_days(date, -days)


def end_of_day(date: GregorianCivilDate) -> GregorianCivilDate:
    """Конец дня: 00:00:00 следующего дня."""
    return add_days(date.date_part(), 1)


# =============================================================================
# MONTHS
# =============================================================================


def add_jalali_months(date: JalaliCivilDate, months: int) -> JalaliCivilDate:
    """
    Сдвиг даты джалали на целое число месяцев с обрезкой дня.

    Raises:
        InvalidDateError: исходная дата невалидна
        RangeError: исходная дата или год результата вне поддерживаемого диапазона
    """
    validate_jalali(date)
    total = date.month - 1 + months
    year = check_jalali_year(date.year + total // MONTHS_PER_YEAR)
    month = total % MONTHS_PER_YEAR + 1
    day = min(date.day, jalali_month_length(year, month))
    return date.model_copy(update={"year": year, "month": month, "day": day})


def add_months(date: GregorianCivilDate, months: int) -> GregorianCivilDate:
    """
    Сдвиг григорианской даты на целое число месяцев календаря джалали.

    Дата переводится в джалали, месяц переносится в год, день обрезается
    до последнего дня получившегося месяца, результат переводится обратно.

    Args:
        date: Исходная дата
        months: Число месяцев (отрицательное — назад)

    Returns:
        Новая дата с тем же time-of-day

    Raises:
        InvalidDateError: исходная дата невалидна
        RangeError: исходная дата или результат вне поддерживаемого диапазона

    Examples:
        >>> add_months(GregorianCivilDate(year=2023, month=9, day=22), 1).ymd()
        (2023, 10, 22)
    """
    return jalali_to_gregorian(add_jalali_months(gregorian_to_jalali(date), months))


def subtract_months(date: GregorianCivilDate, months: int) -> GregorianCivilDate:
    return add_months(date, -months)
