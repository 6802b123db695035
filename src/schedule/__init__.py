"""Schedule — расчёт даты отправки списка в страховую.

- NextSendDateCalculator: ближайший слот 1/10/20 числа в 18:00
- WorkingDayResolver: перенос на предыдущий рабочий день
- HolidayCalendar: внедряемый источник праздников
"""

from .holidays import (
    DEFAULT_HOLIDAY_CALENDAR,
    RU_HOLIDAYS_2025,
    HolidayCalendar,
    StaticHolidayCalendar,
    load_holiday_calendar,
)
from .send_date import NextSendDateCalculator, get_next_insurance_send_date
from .working_days import WorkingDayResolver

__all__ = [
    "NextSendDateCalculator",
    "get_next_insurance_send_date",
    "WorkingDayResolver",
    "HolidayCalendar",
    "StaticHolidayCalendar",
    "load_holiday_calendar",
    "RU_HOLIDAYS_2025",
    "DEFAULT_HOLIDAY_CALENDAR",
]
