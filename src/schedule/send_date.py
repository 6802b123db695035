"""
NextSendDateCalculator — Дата отправки списка в страховую

Правила:
- Отправка 1, 10 и 20 числа каждого месяца в 18:00
- Если дата отправки выпадает на выходной/праздник, отправка переносится
  на предыдущий рабочий день
- Поиск от текущего момента на months_to_search месяцев вперёд (включая текущий)

Порядок перебора кандидатов: месяц по возрастанию, затем день отправки
по возрастанию. Кандидат, совпадающий с моментом запроса, допустим.

Перенос назад может увести дату раньше момента запроса (например, запрос
в субботу 1-го после 18:00 прошлой пятницы). Такой кандидат пропускается
и поиск продолжается: результат никогда не бывает в прошлом.
"""

import calendar
import logging
from datetime import MAXYEAR, date, datetime
from typing import Iterator

from src.core.domain.schedule import DEFAULT_SEND_SCHEDULE, ScheduledSendResult, SendSchedule
from src.core.errors import NoScheduleFoundError
from src.schedule.working_days import WorkingDayResolver

logger = logging.getLogger(__name__)


def add_months(year: int, month: int, offset: int) -> tuple[int, int]:
    """(год, месяц) через offset месяцев"""
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def clamp_day(year: int, month: int, day: int) -> date:
    """Дата в месяце; день больше длины месяца сводится к последнему дню"""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day, last_day))


class NextSendDateCalculator:
    """Расчёт ближайшей даты отправки с переносом на рабочий день."""

    def __init__(
        self,
        schedule: SendSchedule | None = None,
        resolver: WorkingDayResolver | None = None,
    ):
        """
        Args:
            schedule: дни и время отправки, горизонт поиска
            resolver: классификатор рабочих дней (default: выходные Сб/Вс, праздники РФ 2025)
        """
        self.schedule = schedule or DEFAULT_SEND_SCHEDULE
        self.resolver = resolver or WorkingDayResolver()

    def iter_slot_dates(self, now: datetime) -> Iterator[date]:
        """
        Даты по расписанию в порядке перебора, начиная с месяца now.

        Повторы (например, 30 и 31 в феврале сводятся к одному дню)
        отдаются один раз. Перебор обрывается на границе datetime.MAXYEAR.
        """
        previous: date | None = None
        for month_offset in range(self.schedule.months_to_search):
            year, month = add_months(now.year, now.month, month_offset)
            if year > MAXYEAR:
                return
            for send_day in self.schedule.send_days:
                slot_date = clamp_day(year, month, send_day)
                if slot_date == previous:
                    continue
                previous = slot_date
                yield slot_date

    def at_send_time(self, day: date, now: datetime) -> datetime:
        """Дата + время отправки в часовом поясе момента запроса"""
        return datetime.combine(day, self.schedule.send_time(), tzinfo=now.tzinfo)

    def find_next(self, now: datetime) -> ScheduledSendResult:
        """
        Ближайшая дата отправки с диагностикой.

        Args:
            now: момент запроса (naive или aware)

        Returns:
            ScheduledSendResult с send_at >= now

        Raises:
            NoScheduleFoundError: в горизонте поиска нет подходящей даты
        """
        for slot_date in self.iter_slot_dates(now):
            slot_at = self.at_send_time(slot_date, now)
            if slot_at < now:
                continue

            working_date = self.resolver.resolve(slot_date)
            send_at = self.at_send_time(working_date, now)

            if send_at < now:
                logger.debug(
                    f"Slot {slot_date} rolled back to {working_date}, "
                    f"which is before {now.isoformat()}; continuing search"
                )
                continue

            adjusted = working_date != slot_date
            if adjusted:
                logger.info(f"Send date moved from {slot_date} to working day {working_date}")
                details = f"Slot {slot_date} is non-working, moved back to {working_date}"
            else:
                details = f"Slot {slot_date} is a working day"

            return ScheduledSendResult(
                send_at=send_at,
                slot_date=slot_date,
                working_date=working_date,
                adjusted=adjusted,
                details=details,
            )

        raise NoScheduleFoundError(self.schedule.months_to_search)

    def next(self, now: datetime) -> datetime:
        """Ближайший момент отправки (>= now)"""
        return self.find_next(now).send_at


_DEFAULT_CALCULATOR = NextSendDateCalculator()


def get_next_insurance_send_date(now: datetime | None = None) -> datetime:
    """
    Следующая дата отправки списка в страховую с настройками по умолчанию.

    Args:
        now: момент запроса (default: текущее локальное время)

    Raises:
        NoScheduleFoundError: в горизонте поиска нет подходящей даты
    """
    return _DEFAULT_CALCULATOR.next(now if now is not None else datetime.now())
