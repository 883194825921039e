"""
Domain models and value objects.

Contains civil date values for both calendars and the error taxonomy.
"""

from src.core.domain.civil_date import (
    CalendarError,
    CivilDateTime,
    ConfigurationError,
    GregorianCivilDate,
    InvalidDateError,
    JalaliCivilDate,
    RangeError,
)

__all__ = [
    # Models
    "CivilDateTime",
    "GregorianCivilDate",
    "JalaliCivilDate",
    # Exceptions
    "CalendarError",
    "InvalidDateError",
    "RangeError",
    "ConfigurationError",
]
