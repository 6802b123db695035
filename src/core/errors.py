"""
Errors — Таксономия исключений

Все ошибки локальные и синхронные: повтор вызова с теми же аргументами
всегда даёт ту же ошибку, поэтому ретраи не выполняются.

- MoneyAmountError: базовая ошибка денежных сумм
  * InvalidAmountError: None, отрицательное или некорректное значение
  * AmountTooLargeError: сумма превышает допустимый максимум
- NoScheduleFoundError: не найдено окно отправки в горизонте поиска
- WorkingDayNotFoundError: нарушение инварианта календаря (фатально)
"""

from datetime import date
from decimal import Decimal
from typing import Any


class MoneyAmountError(ValueError):
    """Базовая ошибка обработки денежных сумм."""


class InvalidAmountError(MoneyAmountError):
    """Сумма отсутствует, отрицательна или не является числом."""


class AmountTooLargeError(MoneyAmountError):
    """
    Сумма превышает максимально допустимое значение.

    Attributes:
        attempted_amount: Сумма, которую пытались преобразовать
        max_amount: Максимально допустимая сумма
    """

    def __init__(
        self,
        attempted_amount: Any,
        max_amount: Decimal,
        message: str | None = None,
    ):
        self.attempted_amount = attempted_amount
        self.max_amount = max_amount
        super().__init__(
            message
            or f"Amount {attempted_amount} exceeds maximum allowed {max_amount}"
        )


class NoScheduleFoundError(LookupError):
    """
    Не удалось найти дату отправки в горизонте поиска.

    Возникает при пустом наборе дней отправки или слишком коротком горизонте.
    """

    def __init__(self, months_searched: int, message: str | None = None):
        self.months_searched = months_searched
        super().__init__(
            message
            or f"No send date found within the next {months_searched} month(s)"
        )


class WorkingDayNotFoundError(RuntimeError):
    """
    Рабочий день не найден за допустимое число шагов назад.

    Признак ошибки конфигурации календаря (выходных подряд больше,
    чем max_backward_steps). Не перехватывается и не ретраится.
    """

    def __init__(self, start_date: date, max_steps: int):
        self.start_date = start_date
        self.max_steps = max_steps
        super().__init__(
            f"No working day found within {max_steps} day(s) before {start_date.isoformat()}"
        )
