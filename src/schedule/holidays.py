"""
HolidayCalendar — Источник праздничных (нерабочих) дат

Календарь внедряется в WorkingDayResolver, а не зашит в код:
- HolidayCalendar: протокол is_holiday(day) -> bool
- StaticHolidayCalendar: неизменяемая таблица {год: даты}
- load_holiday_calendar: загрузка из JSON файла (контракт holiday_calendar.json)

Для года без данных праздников нет (is_holiday всегда False).
Это задокументированное ограничение, а не ошибка.
"""

import json
import logging
from datetime import date
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Final, FrozenSet, Iterable, Mapping, Protocol, runtime_checkable

from src.core.contracts import validate_holiday_calendar

logger = logging.getLogger(__name__)


@runtime_checkable
class HolidayCalendar(Protocol):
    """Интерфейс источника праздничных дат."""

    def is_holiday(self, day: date) -> bool:
        """True если дата является праздничным нерабочим днём"""
        ...


class StaticHolidayCalendar:
    """
    Календарь праздников из фиксированной таблицы по годам.

    Таблица копируется при создании и далее не меняется.
    """

    def __init__(self, holidays_by_year: Mapping[int, Iterable[date]] | None = None):
        """
        Args:
            holidays_by_year: праздничные даты по годам

        Raises:
            ValueError: если дата указана не под своим годом
        """
        table: Dict[int, FrozenSet[date]] = {}
        for year, days in (holidays_by_year or {}).items():
            year_days = frozenset(days)
            for day in year_days:
                if day.year != year:
                    raise ValueError(f"holiday {day.isoformat()} listed under year {year}")
            table[year] = year_days
        self._holidays: Mapping[int, FrozenSet[date]] = MappingProxyType(table)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StaticHolidayCalendar":
        """
        Календарь из данных формата holiday_calendar.json.

        Raises:
            jsonschema.ValidationError: данные не соответствуют контракту
            ValueError: некорректная дата или дата не под своим годом
        """
        validate_holiday_calendar(data)
        return cls(
            {
                int(year): [date.fromisoformat(raw) for raw in days]
                for year, days in data["years"].items()
            }
        )

    @property
    def years(self) -> FrozenSet[int]:
        """Годы, для которых есть данные"""
        return frozenset(self._holidays)

    def has_year(self, year: int) -> bool:
        return year in self._holidays

    def holidays_for(self, year: int) -> FrozenSet[date]:
        """Праздники года; пустое множество, если данных нет"""
        return self._holidays.get(year, frozenset())

    def is_holiday(self, day: date) -> bool:
        year_days = self._holidays.get(day.year)
        if year_days is None:
            logger.debug(f"No holiday data for year {day.year}, treating {day} as regular day")
            return False
        return day in year_days


def load_holiday_calendar(path: Path | str) -> StaticHolidayCalendar:
    """
    Загрузка календаря праздников из JSON файла.

    Args:
        path: путь к файлу формата holiday_calendar.json

    Returns:
        StaticHolidayCalendar
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    calendar = StaticHolidayCalendar.from_dict(data)
    logger.info(f"Loaded holiday calendar from {path}: years={sorted(calendar.years)}")
    return calendar


# =============================================================================
# DEFAULT DATA
# =============================================================================

# Российские праздники и переносы на 2025 год
RU_HOLIDAYS_2025: Final[FrozenSet[date]] = frozenset(
    {
        # Новогодние каникулы и Рождество
        date(2025, 1, 1),
        date(2025, 1, 2),
        date(2025, 1, 3),
        date(2025, 1, 6),
        date(2025, 1, 7),
        date(2025, 1, 8),
        # День защитника Отечества (перенос с воскресенья)
        date(2025, 2, 24),
        # Международный женский день и перенос с субботы
        date(2025, 3, 8),
        date(2025, 3, 10),
        # Праздник Весны и Труда
        date(2025, 5, 1),
        date(2025, 5, 2),
        # День Победы
        date(2025, 5, 9),
        # День России
        date(2025, 6, 12),
        date(2025, 6, 13),
        # День народного единства
        date(2025, 11, 4),
        date(2025, 12, 31),
    }
)

DEFAULT_HOLIDAY_CALENDAR: Final[StaticHolidayCalendar] = StaticHolidayCalendar(
    {2025: RU_HOLIDAYS_2025}
)
