"""
Conversion Engine для ядра календаря

Григорианский ⇄ джалали, високосные годы, длины месяцев.
Внутренняя нумерация дней (epoch day) отсюда не экспортируется.
"""

# Leap Years
from src.core.calendar.leap_years import (
    JALALI_BREAKS,
    JALALI_MAX_YEAR,
    JALALI_MIN_YEAR,
    JalaliYearInfo,
    is_leap_year,
    jalali_year_info,
    nowruz_day_in_march,
)

# Month Lengths
from src.core.calendar.month_lengths import (
    GREGORIAN_MONTH_LENGTHS,
    JALALI_MONTH_LENGTHS,
    MONTHS_PER_YEAR,
    gregorian_month_length,
    is_gregorian_leap_year,
    jalali_month_length,
    jalali_year_length,
)

# Conversion
from src.core.calendar.conversion import (
    gregorian_to_jalali,
    jalali_to_gregorian,
    validate_gregorian,
    validate_jalali,
)

__all__ = [
    # Leap Years — Constants
    "JALALI_BREAKS",
    "JALALI_MAX_YEAR",
    "JALALI_MIN_YEAR",
    # Leap Years — Types
    "JalaliYearInfo",
    # Leap Years — Functions
    "is_leap_year",
    "jalali_year_info",
    "nowruz_day_in_march",
    # Month Lengths — Constants
    "GREGORIAN_MONTH_LENGTHS",
    "JALALI_MONTH_LENGTHS",
    "MONTHS_PER_YEAR",
    # Month Lengths — Functions
    "gregorian_month_length",
    "is_gregorian_leap_year",
    "jalali_month_length",
    "jalali_year_length",
    # Conversion
    "gregorian_to_jalali",
    "jalali_to_gregorian",
    "validate_gregorian",
    "validate_jalali",
]
