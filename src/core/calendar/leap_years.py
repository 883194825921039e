"""
Leap Years — Високосные годы календаря джалали

Таблица breakpoints задаёт границы под-циклов (33 года и их хвосты) внутри
большого цикла. Классификация года полностью детерминирована таблицей:
без астрономических вычислений и без float.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. JALALI_BREAKS воспроизводится точно — любое отклонение меняет
   классификацию лет рядом с границей (это баг, а не вопрос округления)
2. Внутри 33-летнего под-цикла 8 високосных лет; в текущей эпохе это
   годы с остатком {1, 5, 9, 13, 17, 22, 26, 30} по модулю 33
3. Таблица — константа процесса, только чтение (без блокировок)

ФОРМУЛЫ:
    n = year - cycle_start
    leap  ⇔  ((n + 1) mod 33 - 1) mod 4 == 0
    nowruz_march_day = 20 + leap_count_jalali - leap_count_gregorian
"""

from typing import Final, NamedTuple

from src.core.domain.civil_date import RangeError


# =============================================================================
# BREAKPOINT TABLE
# =============================================================================

# Границы под-циклов (годы джалали). Последний элемент — исключающая граница.
JALALI_BREAKS: Final[tuple[int, ...]] = (
    -61, 9, 38, 199, 426, 686, 756, 818, 1111, 1181, 1210,
    1635, 2060, 2097, 2192, 2262, 2324, 2394, 2456, 3178,
)

# Поддерживаемый диапазон: от эпохи (1 Farvardin 1) до последнего break - 1
JALALI_MIN_YEAR: Final[int] = 1
JALALI_MAX_YEAR: Final[int] = JALALI_BREAKS[-1] - 1

# Год джалали + 621 = григорианский год, в марте которого наступает Nowruz
GREGORIAN_YEAR_OFFSET: Final[int] = 621

CYCLE_YEARS: Final[int] = 33
LEAP_YEARS_PER_CYCLE: Final[int] = 8

# Накопленное число високосных лет на начало таблицы (year = -61)
_LEAP_COUNT_AT_FIRST_BREAK: Final[int] = -14


# =============================================================================
# TYPES
# =============================================================================


class JalaliYearInfo(NamedTuple):
    """Сводка по году джалали."""

    jalali_year: int
    gregorian_year: int
    nowruz_march_day: int  # День марта (григорианский), на который выпадает 1 Farvardin
    is_leap: bool


# =============================================================================
# YEAR CLASSIFICATION
# =============================================================================


def check_jalali_year(jalali_year: int) -> int:
    """
    Проверка, что год входит в поддерживаемый диапазон.

    Raises:
        RangeError: Если год вне [JALALI_MIN_YEAR, JALALI_MAX_YEAR]
    """
    if not JALALI_MIN_YEAR <= jalali_year <= JALALI_MAX_YEAR:
        raise RangeError(
            f"Jalali year {jalali_year} outside supported range "
            f"[{JALALI_MIN_YEAR}, {JALALI_MAX_YEAR}]"
        )
    return jalali_year


def jalali_year_info(jalali_year: int) -> JalaliYearInfo:
    """
    Классификация года джалали по таблице breakpoints.

    Проходит по под-циклам до того, который содержит год, накапливая
    число високосных лет; затем сравнивает его с числом високосных лет
    григорианского календаря, чтобы получить день марта для Nowruz.

    Args:
        jalali_year: Год джалали

    Returns:
        JalaliYearInfo(jalali_year, gregorian_year, nowruz_march_day, is_leap)

    Raises:
        RangeError: Если год вне поддерживаемого диапазона

    Examples:
        >>> jalali_year_info(1403)
        JalaliYearInfo(jalali_year=1403, gregorian_year=2024, nowruz_march_day=20, is_leap=True)
    """
    check_jalali_year(jalali_year)

    gregorian_year = jalali_year + GREGORIAN_YEAR_OFFSET
    leap_count = _LEAP_COUNT_AT_FIRST_BREAK
    cycle_start = JALALI_BREAKS[0]
    jump = 0

    for cycle_end in JALALI_BREAKS[1:]:
        jump = cycle_end - cycle_start
        if jalali_year < cycle_end:
            break
        leap_count += (jump // CYCLE_YEARS) * LEAP_YEARS_PER_CYCLE + (jump % CYCLE_YEARS) // 4
        cycle_start = cycle_end

    n = jalali_year - cycle_start
    leap_count += (n // CYCLE_YEARS) * LEAP_YEARS_PER_CYCLE + ((n % CYCLE_YEARS) + 3) // 4
    if jump % CYCLE_YEARS == 4 and jump - n == 4:
        leap_count += 1

    gregorian_leap_count = (
        gregorian_year // 4 - ((gregorian_year // 100 + 1) * 3) // 4 - 150
    )
    nowruz_march_day = 20 + leap_count - gregorian_leap_count

    # Хвост под-цикла (< 6 лет до break) переносится в начало следующего 33-летнего
    if jump - n < 6:
        n = n - jump + ((jump + 4) // CYCLE_YEARS) * CYCLE_YEARS
    position = ((n + 1) % CYCLE_YEARS - 1) % 4

    return JalaliYearInfo(
        jalali_year=jalali_year,
        gregorian_year=gregorian_year,
        nowruz_march_day=nowruz_march_day,
        is_leap=position == 0,
    )


def is_leap_year(jalali_year: int) -> bool:
    """
    Високосный ли год джалали (Esfand = 30 дней).

    Raises:
        RangeError: Если год вне поддерживаемого диапазона
    """
    return jalali_year_info(jalali_year).is_leap


def nowruz_day_in_march(jalali_year: int) -> int:
    """День григорианского марта, на который выпадает 1 Farvardin года."""
    return jalali_year_info(jalali_year).nowruz_march_day
