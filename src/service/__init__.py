"""
Service facade

Привязка ядра к именованной временной зоне для вызывающих сервисов.
"""

from src.service.zoned_calendar import ZonedCalendar, ZonedCalendarConfig

__all__ = [
    "ZonedCalendar",
    "ZonedCalendarConfig",
]
