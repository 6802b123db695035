"""
WorkingDayResolver — Классификация рабочих дней и перенос назад

Рабочий день: день недели не входит в weekend_days И дата не праздник.

resolve() возвращает рабочий день <= исходной даты и никогда не сдвигает
вперёд. Если рабочий день не найден за max_backward_steps шагов,
выбрасывается WorkingDayNotFoundError (ошибка конфигурации календаря).
"""

import logging
from datetime import date, datetime, timedelta

from src.core.domain.schedule import DEFAULT_WORKING_DAY_POLICY, WorkingDayPolicy
from src.core.errors import WorkingDayNotFoundError
from src.schedule.holidays import DEFAULT_HOLIDAY_CALENDAR, HolidayCalendar

logger = logging.getLogger(__name__)

_ONE_DAY = timedelta(days=1)


class WorkingDayResolver:
    """Поиск ближайшего рабочего дня не позже заданной даты."""

    def __init__(
        self,
        calendar: HolidayCalendar | None = None,
        policy: WorkingDayPolicy | None = None,
    ):
        """
        Args:
            calendar: источник праздников (default: праздники РФ 2025)
            policy: выходные дни недели и лимит шагов назад
        """
        self.calendar = calendar if calendar is not None else DEFAULT_HOLIDAY_CALENDAR
        self.policy = policy or DEFAULT_WORKING_DAY_POLICY

    def is_weekend(self, day: date) -> bool:
        return day.weekday() in self.policy.weekend_days

    def is_working_day(self, day: date) -> bool:
        """True если дата не выходной и не праздник"""
        if isinstance(day, datetime):
            day = day.date()
        if self.is_weekend(day):
            return False
        return not self.calendar.is_holiday(day)

    def resolve(self, day: date) -> date:
        """
        Ближайший рабочий день, не позже day.

        Args:
            day: исходная дата (datetime сводится к дате)

        Returns:
            day, если он рабочий, иначе предыдущий рабочий день

        Raises:
            WorkingDayNotFoundError: рабочий день не найден за max_backward_steps
        """
        if isinstance(day, datetime):
            day = day.date()

        candidate = day
        for _ in range(self.policy.max_backward_steps + 1):
            if self.is_working_day(candidate):
                if candidate != day:
                    logger.debug(f"Rolled {day} back to working day {candidate}")
                return candidate
            candidate -= _ONE_DAY

        logger.error(
            f"No working day within {self.policy.max_backward_steps} day(s) before {day}, "
            f"check holiday calendar configuration"
        )
        raise WorkingDayNotFoundError(day, self.policy.max_backward_steps)
