"""
Schedule — Конфигурация расписания отправки и рабочих дней

Immutable модели:
- SendSchedule: дни месяца и время отправки, горизонт поиска
- WorkingDayPolicy: выходные дни недели и лимит шагов назад
- ScheduledSendResult: результат расчёта даты отправки (с диагностикой)

Дефолты соответствуют отправке списка в страховую:
1, 10 и 20 числа каждого месяца в 18:00, поиск на 4 месяца вперёд.
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Final, FrozenSet, Tuple

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# SEND SCHEDULE
# =============================================================================


class SendSchedule(BaseModel):
    """
    Расписание отправки.

    send_days хранятся отсортированными и без повторов: порядок перебора
    кандидатов внутри месяца всегда по возрастанию дня.
    Пустой набор дней допустим и приводит к NoScheduleFoundError.
    """

    send_days: Tuple[int, ...] = Field(
        default=(1, 10, 20), description="Дни месяца отправки"
    )
    send_hour: int = Field(default=18, ge=0, le=23, description="Час отправки")
    send_minute: int = Field(default=0, ge=0, le=59, description="Минуты отправки")
    months_to_search: int = Field(
        default=4, ge=1, description="Горизонт поиска в месяцах (включая текущий)"
    )

    model_config = {"frozen": True}

    @field_validator("send_days")
    @classmethod
    def validate_send_days(cls, v: Tuple[int, ...]) -> Tuple[int, ...]:
        """Дни в диапазоне 1-31, сортировка и удаление повторов"""
        for day in v:
            if not 1 <= day <= 31:
                raise ValueError(f"send day {day} must be within 1..31")
        return tuple(sorted(set(v)))

    def send_time(self) -> time:
        """Время отправки"""
        return time(self.send_hour, self.send_minute)


# =============================================================================
# WORKING DAY POLICY
# =============================================================================


class WorkingDayPolicy(BaseModel):
    """
    Правила классификации рабочих дней.

    weekend_days: номера дней недели в нотации date.weekday() (0 = понедельник).
    """

    weekend_days: FrozenSet[int] = Field(
        default=frozenset({5, 6}), description="Выходные дни недели (0-6)"
    )
    max_backward_steps: int = Field(
        default=10, ge=1, description="Лимит шагов назад при поиске рабочего дня"
    )

    model_config = {"frozen": True}

    @field_validator("weekend_days")
    @classmethod
    def validate_weekend_days(cls, v: FrozenSet[int]) -> FrozenSet[int]:
        """Номера дней недели 0-6, хотя бы один день недели рабочий"""
        for weekday in v:
            if not 0 <= weekday <= 6:
                raise ValueError(f"weekday {weekday} must be within 0..6")
        if len(v) >= 7:
            raise ValueError("weekend_days must leave at least one working weekday")
        return v


# =============================================================================
# DEFAULTS
# =============================================================================

# Общие для процесса, только для чтения
DEFAULT_SEND_SCHEDULE: Final[SendSchedule] = SendSchedule()
DEFAULT_WORKING_DAY_POLICY: Final[WorkingDayPolicy] = WorkingDayPolicy()


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ScheduledSendResult:
    """Результат расчёта даты отправки."""

    send_at: datetime

    # Диагностика
    slot_date: date  # Дата по расписанию (до переноса)
    working_date: date  # Рабочий день, на который приходится отправка
    adjusted: bool  # True если дата перенесена на предыдущий рабочий день
    details: str
