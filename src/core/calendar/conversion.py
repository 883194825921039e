"""
Conversion Engine — Григорианский ⇄ джалали

Опорная величина всех конверсий — номер дня от эпохи джалали
(1 Farvardin 1 = JDN 1948321 = пролептический григорианский 622-03-22).
Только целочисленная арифметика, без float.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Round trip: jalali_to_gregorian(gregorian_to_jalali(d)) == d
   для каждой валидной даты в поддерживаемом диапазоне (и симметрично)
2. Time-of-day проходит без изменений
3. Невалидные month/day → InvalidDateError, год вне диапазона → RangeError
4. Выход всегда удовлетворяет инварианту JalaliCivilDate

ФОРМУЛЫ:
    epoch_day = JDN(gregorian) - JALALI_EPOCH_JDN
    epoch_day = nowruz_jdn(year) - JALALI_EPOCH_JDN
                + days_before_month(month) + day - 1
"""

from typing import Final, Optional

from src.core.calendar.leap_years import (
    GREGORIAN_YEAR_OFFSET,
    JALALI_MAX_YEAR,
    JALALI_MIN_YEAR,
    check_jalali_year,
    jalali_year_info,
)
from src.core.calendar.month_lengths import (
    JALALI_MONTH_LENGTHS,
    gregorian_month_length,
    jalali_days_before_month,
    jalali_month_length,
    jalali_year_length,
)
from src.core.domain.civil_date import (
    CivilDateTime,
    GregorianCivilDate,
    InvalidDateError,
    JalaliCivilDate,
    RangeError,
)


# =============================================================================
# JULIAN DAY NUMBER (пролептический григорианский)
# =============================================================================


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """
    Julian Day Number для григорианской даты (Fliegel–Van Flandern).

    Поля не проверяются — вызывающий код отвечает за валидацию.
    """
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045


def jdn_to_gregorian(jdn: int) -> tuple[int, int, int]:
    """Обратная формула: JDN → (year, month, day)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153

    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10
    return year, month, day


def nowruz_jdn(jalali_year: int) -> int:
    """JDN дня 1 Farvardin указанного года."""
    info = jalali_year_info(jalali_year)
    return gregorian_to_jdn(info.gregorian_year, 3, info.nowruz_march_day)


# =============================================================================
# SUPPORTED RANGE
# =============================================================================

# JDN эпохи джалали (1 Farvardin 1)
JALALI_EPOCH_JDN: Final[int] = 1948321

# Последний поддерживаемый epoch day (29/30 Esfand JALALI_MAX_YEAR)
MAX_EPOCH_DAY: Final[int] = (
    nowruz_jdn(JALALI_MAX_YEAR) + jalali_year_length(JALALI_MAX_YEAR) - 1 - JALALI_EPOCH_JDN
)


def _check_epoch_day(epoch_day: int) -> int:
    if not 0 <= epoch_day <= MAX_EPOCH_DAY:
        raise RangeError(
            f"Epoch day {epoch_day} outside supported range [0, {MAX_EPOCH_DAY}]"
        )
    return epoch_day


def _time_fields(time_of_day: Optional[CivilDateTime]) -> dict:
    if time_of_day is None:
        return {}
    return {
        "hour": time_of_day.hour,
        "minute": time_of_day.minute,
        "second": time_of_day.second,
    }


# =============================================================================
# DAY NUMBERING
# =============================================================================


def gregorian_to_epoch_day(date: GregorianCivilDate) -> int:
    """
    Номер дня от эпохи джалали для григорианской даты.

    Сначала проверяются month/day, затем диапазон.

    Raises:
        InvalidDateError: month/day вне календаря
        RangeError: дата раньше эпохи или позже последнего поддерживаемого дня
    """
    month_length = gregorian_month_length(date.year, date.month)
    if not 1 <= date.day <= month_length:
        raise InvalidDateError(
            f"Gregorian day {date.day} outside range [1, {month_length}] "
            f"for {date.year:04d}-{date.month:02d}"
        )
    epoch_day = gregorian_to_jdn(date.year, date.month, date.day) - JALALI_EPOCH_JDN
    if not 0 <= epoch_day <= MAX_EPOCH_DAY:
        raise RangeError(
            f"Gregorian date {date.year:04d}-{date.month:02d}-{date.day:02d} "
            f"outside supported range (Jalali years {JALALI_MIN_YEAR}..{JALALI_MAX_YEAR})"
        )
    return epoch_day


def jalali_to_epoch_day(date: JalaliCivilDate) -> int:
    """
    Номер дня от эпохи джалали для даты джалали.

    Сначала проверяется год (длина Esfand зависит от года), затем month/day.

    Raises:
        RangeError: год вне поддерживаемого диапазона
        InvalidDateError: month/day вне календаря (включая 30 Esfand
            в невисокосном году)
    """
    check_jalali_year(date.year)
    month_length = jalali_month_length(date.year, date.month)
    if not 1 <= date.day <= month_length:
        raise InvalidDateError(
            f"Jalali day {date.day} outside range [1, {month_length}] "
            f"for {date.year:04d}/{date.month:02d}"
        )
    return (
        nowruz_jdn(date.year)
        - JALALI_EPOCH_JDN
        + jalali_days_before_month(date.month)
        + date.day
        - 1
    )


def epoch_day_to_gregorian(
    epoch_day: int, time_of_day: Optional[CivilDateTime] = None
) -> GregorianCivilDate:
    """
    Epoch day → григорианская дата.

    Args:
        epoch_day: Номер дня от эпохи джалали
        time_of_day: Источник hour/minute/second (по умолчанию 00:00:00)

    Raises:
        RangeError: epoch_day вне поддерживаемого диапазона
    """
    year, month, day = jdn_to_gregorian(_check_epoch_day(epoch_day) + JALALI_EPOCH_JDN)
    return GregorianCivilDate(year=year, month=month, day=day, **_time_fields(time_of_day))


def epoch_day_to_jalali(
    epoch_day: int, time_of_day: Optional[CivilDateTime] = None
) -> JalaliCivilDate:
    """
    Epoch day → дата джалали.

    Год-кандидат = григорианский год - 621; если день раньше его Nowruz,
    дата принадлежит предыдущему году. Остаток раскладывается по таблице
    длин месяцев.

    Raises:
        RangeError: epoch_day вне поддерживаемого диапазона
    """
    jdn = _check_epoch_day(epoch_day) + JALALI_EPOCH_JDN
    gregorian_year = jdn_to_gregorian(jdn)[0]

    # Начало григорианского года после Nowruz JALALI_MAX_YEAR всё ещё в JALALI_MAX_YEAR
    year = min(gregorian_year - GREGORIAN_YEAR_OFFSET, JALALI_MAX_YEAR)
    day_of_year = jdn - nowruz_jdn(year)
    if day_of_year < 0:
        year -= 1
        day_of_year = jdn - nowruz_jdn(year)

    month = 1
    for length in JALALI_MONTH_LENGTHS[:-1]:
        if day_of_year < length:
            break
        day_of_year -= length
        month += 1

    return JalaliCivilDate(
        year=year, month=month, day=day_of_year + 1, **_time_fields(time_of_day)
    )


# =============================================================================
# CONVERSION
# =============================================================================


def gregorian_to_jalali(date: GregorianCivilDate) -> JalaliCivilDate:
    """
    Конверсия григорианской даты в джалали.

    Args:
        date: Григорианская дата (time-of-day сохраняется)

    Returns:
        JalaliCivilDate

    Raises:
        InvalidDateError: month/day вне календаря
        RangeError: дата вне поддерживаемого диапазона

    Examples:
        >>> gregorian_to_jalali(GregorianCivilDate(year=2023, month=5, day=15)).ymd()
        (1402, 2, 25)
    """
    return epoch_day_to_jalali(gregorian_to_epoch_day(date), time_of_day=date)


def jalali_to_gregorian(date: JalaliCivilDate) -> GregorianCivilDate:
    """
    Конверсия даты джалали в григорианскую.

    Raises:
        RangeError: год вне поддерживаемого диапазона
        InvalidDateError: month/day вне календаря

    Examples:
        >>> jalali_to_gregorian(JalaliCivilDate(year=1403, month=1, day=1)).ymd()
        (2024, 3, 20)
    """
    return epoch_day_to_gregorian(jalali_to_epoch_day(date), time_of_day=date)


def validate_gregorian(date: GregorianCivilDate) -> GregorianCivilDate:
    """Проверка григорианской даты без конверсии; возвращает её же."""
    gregorian_to_epoch_day(date)
    return date


def validate_jalali(date: JalaliCivilDate) -> JalaliCivilDate:
    """Проверка даты джалали без конверсии; возвращает её же."""
    jalali_to_epoch_day(date)
    return date
