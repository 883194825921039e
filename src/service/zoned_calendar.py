"""ZonedCalendar — фасад для вызывающих сервисов (HTTP и т.п.).

Переводит datetime, привязанный к именованной зоне, в гражданские поля и
обратно, затем делегирует в Conversion / Arithmetic Engine. Правила зон
не реализуются здесь: они берутся из zoneinfo (IANA tz database).

Ядро никогда не определяет "сейчас" само — это делает только фасад через
инжектируемый clock.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from src.core.calendar.conversion import (
    gregorian_to_jalali,
    jalali_to_gregorian,
    validate_gregorian,
)
from src.core.calendar.leap_years import is_leap_year
from src.core.domain.civil_date import (
    ConfigurationError,
    GregorianCivilDate,
    JalaliCivilDate,
)
from src.core.math import date_arithmetic

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ZonedCalendarConfig:
    """Конфигурация фасада.

    zone_name — IANA имя зоны, в которой читаются wall-clock поля.
    """
    zone_name: str = "Asia/Tehran"


class ZonedCalendar:
    """Календарь джалали, привязанный к одной временной зоне."""

    def __init__(
        self,
        config: Optional[ZonedCalendarConfig] = None,
        clock: Optional[Callable[[ZoneInfo], datetime]] = None,
    ):
        """
        Args:
            config: конфигурация (по умолчанию Asia/Tehran)
            clock: источник текущего момента; получает зону, возвращает aware datetime

        Raises:
            ConfigurationError: неизвестное имя зоны
        """
        self.config = config or ZonedCalendarConfig()
        try:
            self.zone = ZoneInfo(self.config.zone_name)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ConfigurationError(f"Unknown time zone: {self.config.zone_name!r}") from e
        self._clock = clock or (lambda zone: datetime.now(tz=zone))
        logger.debug("ZonedCalendar initialised for zone %s", self.config.zone_name)

    # ------------------------------------------------------------------
    # datetime <-> civil fields
    # ------------------------------------------------------------------

    def civil_from_datetime(self, dt: datetime) -> GregorianCivilDate:
        """Wall-clock поля datetime в зоне фасада.

        Aware datetime переводится в зону фасада; naive считается уже
        wall-clock временем этой зоны. Микросекунды отбрасываются.
        """
        if dt.tzinfo is not None:
            dt = dt.astimezone(self.zone)
        return GregorianCivilDate(
            year=dt.year,
            month=dt.month,
            day=dt.day,
            hour=dt.hour,
            minute=dt.minute,
            second=dt.second,
        )

    def datetime_from_civil(self, date: GregorianCivilDate) -> datetime:
        """Aware datetime в зоне фасада для гражданских полей.

        Raises:
            InvalidDateError: невалидные месяц или день
            RangeError: дата вне поддерживаемого диапазона
        """
        validate_gregorian(date)
        return datetime(
            date.year, date.month, date.day,
            date.hour, date.minute, date.second,
            tzinfo=self.zone,
        )

    # ------------------------------------------------------------------
    # Текущий момент
    # ------------------------------------------------------------------

    def now(self) -> GregorianCivilDate:
        current = self._clock(self.zone)
        logger.debug("Clock read in %s: %s", self.config.zone_name, current.isoformat())
        return self.civil_from_datetime(current)

    def today(self) -> GregorianCivilDate:
        return self.now().date_part()

    def today_jalali(self) -> JalaliCivilDate:
        return gregorian_to_jalali(self.today())

    # ------------------------------------------------------------------
    # Делегирование в ядро
    # ------------------------------------------------------------------

    def is_leap_year_of(self, date: GregorianCivilDate) -> bool:
        """Високосный ли год джалали, содержащий григорианскую дату."""
        return is_leap_year(gregorian_to_jalali(date).year)

    def is_current_year_leap(self) -> bool:
        return self.is_leap_year_of(self.today())

    def to_jalali(self, dt: datetime) -> JalaliCivilDate:
        return gregorian_to_jalali(self.civil_from_datetime(dt))

    def to_datetime(self, date: JalaliCivilDate) -> datetime:
        return self.datetime_from_civil(jalali_to_gregorian(date))

    def add_days(self, date: GregorianCivilDate, days: int) -> GregorianCivilDate:
        return date_arithmetic.add_days(date, days)

    def add_months(self, date: GregorianCivilDate, months: int) -> GregorianCivilDate:
        return date_arithmetic.add_months(date, months)

    def end_of_day(self, date: GregorianCivilDate) -> GregorianCivilDate:
        return date_arithmetic.end_of_day(date)
