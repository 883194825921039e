"""
Тесты для Leap Years — таблица breakpoints и классификация годов

Проверяемые инварианты:
1. Известные високосные / невисокосные годы
2. 8 високосных лет на 33-летний под-цикл
3. В текущей эпохе остатки по модулю 33: {1, 5, 9, 13, 17, 22, 26, 30}
4. День марта для Nowruz известных лет
5. RangeError вне поддерживаемого диапазона
"""

import pytest

from src.core.calendar.leap_years import (
    JALALI_BREAKS,
    JALALI_MAX_YEAR,
    JALALI_MIN_YEAR,
    JalaliYearInfo,
    check_jalali_year,
    is_leap_year,
    jalali_year_info,
    nowruz_day_in_march,
)
from src.core.domain import RangeError


CURRENT_ERA_LEAP_OFFSETS = {1, 5, 9, 13, 17, 22, 26, 30}


# =============================================================================
# ТЕСТЫ: Breakpoint table
# =============================================================================


class TestBreakpointTable:
    """Тесты константной таблицы breakpoints."""

    def test_table_is_exact(self):
        """Таблица воспроизводится точно."""
        assert JALALI_BREAKS == (
            -61, 9, 38, 199, 426, 686, 756, 818, 1111, 1181, 1210,
            1635, 2060, 2097, 2192, 2262, 2324, 2394, 2456, 3178,
        )

    def test_table_is_strictly_increasing(self):
        assert all(a < b for a, b in zip(JALALI_BREAKS, JALALI_BREAKS[1:]))

    def test_supported_range(self):
        assert JALALI_MIN_YEAR == 1
        assert JALALI_MAX_YEAR == 3177


# =============================================================================
# ТЕСТЫ: is_leap_year
# =============================================================================


class TestIsLeapYear:
    """Тесты классификации високосных лет."""

    @pytest.mark.parametrize("year", [1375, 1379, 1383, 1387, 1391, 1395, 1399, 1403, 1408, 1412])
    def test_known_leap_years(self, year):
        assert is_leap_year(year) is True

    @pytest.mark.parametrize("year", [1400, 1401, 1402, 1404, 1405, 1406, 1407, 1409])
    def test_known_common_years(self, year):
        assert is_leap_year(year) is False

    def test_current_era_offsets(self):
        """Годы 1210..1629: високосный ⇔ year mod 33 в стандартном наборе."""
        for year in range(1210, 1630):
            assert is_leap_year(year) == (year % 33 in CURRENT_ERA_LEAP_OFFSETS), year

    @pytest.mark.parametrize("start", [1210, 1243, 1276, 1342, 1375, 1596])
    def test_eight_leap_years_per_cycle(self, start):
        """33 подряд идущих года внутри под-цикла содержат ровно 8 високосных."""
        assert sum(is_leap_year(y) for y in range(start, start + 33)) == 8

    def test_no_consecutive_leap_years(self):
        """Два високосных года подряд невозможны."""
        for year in range(JALALI_MIN_YEAR, JALALI_MAX_YEAR):
            assert not (is_leap_year(year) and is_leap_year(year + 1)), year

    def test_deterministic(self):
        assert [is_leap_year(1403) for _ in range(5)] == [True] * 5


# =============================================================================
# ТЕСТЫ: jalali_year_info / Nowruz
# =============================================================================


class TestJalaliYearInfo:
    """Тесты сводки по году и дня Nowruz."""

    def test_year_info_1403(self):
        info = jalali_year_info(1403)

        assert isinstance(info, JalaliYearInfo)
        assert info == JalaliYearInfo(
            jalali_year=1403, gregorian_year=2024, nowruz_march_day=20, is_leap=True
        )

    @pytest.mark.parametrize(
        "year,march_day",
        [
            (1, 22),  # эпоха: 622-03-22
            (1392, 21),  # 2013-03-21
            (1401, 21),  # 2022-03-21
            (1402, 21),  # 2023-03-21
            (1403, 20),  # 2024-03-20
            (1404, 21),  # 2025-03-21
        ],
    )
    def test_nowruz_day(self, year, march_day):
        assert nowruz_day_in_march(year) == march_day


# =============================================================================
# ТЕСТЫ: Range
# =============================================================================


class TestYearRange:
    """Тесты границ поддерживаемого диапазона."""

    @pytest.mark.parametrize("year", [JALALI_MIN_YEAR, 1403, JALALI_MAX_YEAR])
    def test_in_range(self, year):
        assert check_jalali_year(year) == year

    @pytest.mark.parametrize("year", [0, -1, -62, JALALI_MAX_YEAR + 1, 10_000])
    def test_out_of_range(self, year):
        with pytest.raises(RangeError, match="outside supported range"):
            is_leap_year(year)

    def test_range_error_is_value_error(self):
        with pytest.raises(ValueError):
            jalali_year_info(0)
