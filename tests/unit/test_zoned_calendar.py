"""Тесты для ZonedCalendar — фасад с привязкой к временной зоне.

Coverage:
- datetime ⇄ гражданские поля (aware / naive)
- Текущий момент через фиксированный clock
- Делегирование в Conversion / Arithmetic Engine
- Конфигурация зоны
"""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from src.core.domain import (
    ConfigurationError,
    GregorianCivilDate,
    InvalidDateError,
    JalaliCivilDate,
)
from src.service import ZonedCalendar, ZonedCalendarConfig


def fixed_clock(moment: datetime):
    return lambda zone: moment.astimezone(zone)


@pytest.fixture
def calendar() -> ZonedCalendar:
    # 2024-03-19 23:30 UTC = 2024-03-20 03:00 Asia/Tehran (UTC+03:30)
    return ZonedCalendar(clock=fixed_clock(datetime(2024, 3, 19, 23, 30, tzinfo=timezone.utc)))


class TestZonedCalendarConfig:
    """Тесты конфигурации."""

    def test_default_zone(self):
        assert ZonedCalendarConfig().zone_name == "Asia/Tehran"
        assert ZonedCalendar().zone == ZoneInfo("Asia/Tehran")

    def test_custom_zone(self):
        cal = ZonedCalendar(ZonedCalendarConfig(zone_name="UTC"))
        assert cal.zone == ZoneInfo("UTC")

    def test_unknown_zone(self):
        with pytest.raises(ConfigurationError, match="Unknown time zone"):
            ZonedCalendar(ZonedCalendarConfig(zone_name="Mars/Olympus_Mons"))


class TestDatetimeConversion:
    """datetime ⇄ GregorianCivilDate."""

    def test_aware_datetime_moves_to_zone(self, calendar):
        result = calendar.civil_from_datetime(datetime(2024, 3, 19, 23, 30, tzinfo=timezone.utc))

        assert result == GregorianCivilDate(year=2024, month=3, day=20, hour=3, minute=0, second=0)

    def test_naive_datetime_is_wall_clock(self, calendar):
        result = calendar.civil_from_datetime(datetime(2023, 5, 15, 10, 30, 45, 999))

        assert result == GregorianCivilDate(year=2023, month=5, day=15, hour=10, minute=30, second=45)

    def test_datetime_from_civil(self, calendar):
        dt = calendar.datetime_from_civil(GregorianCivilDate(year=2023, month=5, day=15, hour=10))

        assert dt == datetime(2023, 5, 15, 10, tzinfo=ZoneInfo("Asia/Tehran"))
        assert calendar.civil_from_datetime(dt).hour == 10

    def test_datetime_from_invalid_civil_raises(self, calendar):
        with pytest.raises(InvalidDateError):
            calendar.datetime_from_civil(GregorianCivilDate(year=2023, month=2, day=30))

    def test_to_jalali_and_back(self, calendar):
        dt = datetime(2023, 5, 15, 10, 30, 45, tzinfo=ZoneInfo("Asia/Tehran"))

        jalali = calendar.to_jalali(dt)

        assert jalali == JalaliCivilDate(year=1402, month=2, day=25, hour=10, minute=30, second=45)
        assert calendar.to_datetime(jalali) == dt


class TestCurrentMoment:
    """Текущий момент только через clock фасада."""

    def test_now(self, calendar):
        assert calendar.now() == GregorianCivilDate(year=2024, month=3, day=20, hour=3)

    def test_today(self, calendar):
        assert calendar.today() == GregorianCivilDate(year=2024, month=3, day=20)

    def test_today_jalali(self, calendar):
        assert calendar.today_jalali() == JalaliCivilDate(year=1403, month=1, day=1)

    def test_is_current_year_leap(self, calendar):
        assert calendar.is_current_year_leap() is True

    def test_is_current_year_leap_in_utc(self):
        """В UTC это ещё 2024-03-19 → 1402 (невисокосный)."""
        cal = ZonedCalendar(
            ZonedCalendarConfig(zone_name="UTC"),
            clock=fixed_clock(datetime(2024, 3, 19, 23, 30, tzinfo=timezone.utc)),
        )
        assert cal.is_current_year_leap() is False


class TestDelegation:
    """Делегирование в ядро."""

    def test_is_leap_year_of(self, calendar):
        assert calendar.is_leap_year_of(GregorianCivilDate(year=2024, month=3, day=20)) is True
        assert calendar.is_leap_year_of(GregorianCivilDate(year=2024, month=3, day=19)) is False

    def test_add_days(self, calendar):
        result = calendar.add_days(GregorianCivilDate(year=2023, month=5, day=15), 10)
        assert result == GregorianCivilDate(year=2023, month=5, day=25)

    def test_add_months(self, calendar):
        result = calendar.add_months(GregorianCivilDate(year=2023, month=9, day=22), 1)
        assert result == GregorianCivilDate(year=2023, month=10, day=22)

    def test_end_of_day(self, calendar):
        result = calendar.end_of_day(GregorianCivilDate(year=2023, month=12, day=31, hour=23))
        assert result == GregorianCivilDate(year=2024, month=1, day=1)
