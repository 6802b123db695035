"""
Contract Validation Module

Модуль для валидации JSON контрактов внешних данных (календарь праздников).
"""

from .validators import (
    ContractValidator,
    HolidayCalendarValidator,
    SchemaLoader,
    validate_holiday_calendar,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "HolidayCalendarValidator",
    # Functions
    "validate_holiday_calendar",
]
