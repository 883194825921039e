"""
Civil dates — Значения дат григорианского и джалали календарей

Immutable Pydantic модели, которые передаются между Conversion Engine,
Arithmetic Engine и внешними коллабораторами (форматирование, сервис).

Валидность (year, month, day) НЕ проверяется при создании модели:
единственный источник истины — Conversion Engine, который сообщает об ошибке
через InvalidDateError / RangeError. При создании проверяется только
time-of-day (pydantic ValidationError).
"""

from typing import TypeVar

from pydantic import BaseModel, Field


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CalendarError(ValueError):
    """Базовое исключение календарного ядра."""

    pass


class InvalidDateError(CalendarError):
    """
    Месяц или день вне допустимого диапазона для календаря и года.

    Включает 30 Esfand в невисокосном джалали году и 29 февраля
    в невисокосном григорианском году.
    """

    pass


class RangeError(CalendarError):
    """Год вне поддерживаемого диапазона (таблица breakpoints)."""

    pass


class ConfigurationError(CalendarError):
    """Некорректная конфигурация фасада (например, неизвестная временная зона)."""

    pass


# =============================================================================
# CIVIL DATE MODELS
# =============================================================================


_D = TypeVar("_D", bound="CivilDateTime")


class CivilDateTime(BaseModel):
    """
    Общие поля гражданской даты: календарная часть + time-of-day.

    Time-of-day не зависит от календаря и проходит через все конверсии
    без изменений.
    """

    year: int = Field(..., description="Год")
    month: int = Field(..., description="Месяц (1..12, проверяется движком)")
    day: int = Field(..., description="День месяца (проверяется движком)")

    hour: int = Field(0, ge=0, le=23, description="Час")
    minute: int = Field(0, ge=0, le=59, description="Минута")
    second: int = Field(0, ge=0, le=59, description="Секунда")

    model_config = {"frozen": True}  # Immutable

    def date_part(self: _D) -> _D:
        """Та же дата в 00:00:00."""
        return self.model_copy(update={"hour": 0, "minute": 0, "second": 0})

    def with_time(self: _D, hour: int = 0, minute: int = 0, second: int = 0) -> _D:
        """Та же дата с другим time-of-day (с валидацией)."""
        return type(self)(
            year=self.year,
            month=self.month,
            day=self.day,
            hour=hour,
            minute=minute,
            second=second,
        )

    def ymd(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def hms(self) -> tuple[int, int, int]:
        return (self.hour, self.minute, self.second)


class GregorianCivilDate(CivilDateTime):
    """
    Дата пролептического григорианского календаря.

    Создаётся внешним источником времени или напрямую вызывающим кодом.
    """

    pass


class JalaliCivilDate(CivilDateTime):
    """
    Дата календаря джалали (солнечная хиджра).

    Инвариант (гарантируется движком на каждом выходе и проверяется на входе):
    day <= длина месяца: 31 для месяцев 1–6, 30 для 7–11,
    29 или 30 для месяца 12 в зависимости от is_leap_year(year).
    """

    pass
