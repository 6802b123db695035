"""
Money — Модели денежной суммы и грамматических форм

Immutable Pydantic модели:
- MonetaryAmount: сумма в виде (рубли, копейки) после нормализации
- AmountBounds: допустимый максимум суммы
- GrammaticalForm: тройка словоформ (один / несколько / много)

Нормализация суммы всегда отбрасывает лишние знаки (ROUND_DOWN),
никогда не округляет вверх: 10.999 → 10.99.
"""

from decimal import ROUND_DOWN, Decimal
from enum import Enum
from typing import Final

from pydantic import BaseModel, Field


# Шаг младшей единицы (копейка)
MINOR_UNIT_QUANT: Final[Decimal] = Decimal("0.01")

# Максимальная поддерживаемая сумма
DEFAULT_MAX_AMOUNT: Final[Decimal] = Decimal("99999.99")


# =============================================================================
# PLURALIZATION
# =============================================================================


class PluralCategory(str, Enum):
    """Категория согласования существительного с числительным"""

    ONE = "one"  # 1, 21, 31, ... → "рубль"
    FEW = "few"  # 2-4, 22-24, ... → "рубля"
    MANY = "many"  # 0, 5-20, 25-30, ... → "рублей"


def select_plural_category(number: int) -> PluralCategory:
    """
    Категория словоформы для числа.

    Анализируются две последние цифры: 11-19 всегда "many",
    иначе решает последняя цифра.

    Args:
        number: Неотрицательное целое

    Returns:
        PluralCategory для согласования существительного
    """
    last_two_digits = number % 100
    last_digit = number % 10

    if 11 <= last_two_digits <= 19:
        return PluralCategory.MANY
    if last_digit == 1:
        return PluralCategory.ONE
    if 2 <= last_digit <= 4:
        return PluralCategory.FEW
    return PluralCategory.MANY


class GrammaticalForm(BaseModel):
    """
    Словоформы существительного для согласования с числом.

    Пример: GrammaticalForm(one="рубль", few="рубля", many="рублей")
    """

    one: str = Field(..., min_length=1, description="Форма для 1, 21, 31, ...")
    few: str = Field(..., min_length=1, description="Форма для 2-4, 22-24, ...")
    many: str = Field(..., min_length=1, description="Форма для 0, 5-20, 25-30, ...")

    model_config = {"frozen": True}

    def form_for(self, category: PluralCategory) -> str:
        """Словоформа для заданной категории"""
        if category == PluralCategory.ONE:
            return self.one
        if category == PluralCategory.FEW:
            return self.few
        return self.many

    def select(self, number: int) -> str:
        """Словоформа, согласованная с числом"""
        return self.form_for(select_plural_category(number))


# =============================================================================
# AMOUNT MODELS
# =============================================================================


class AmountBounds(BaseModel):
    """Включительный верхний предел суммы для преобразования"""

    max_amount: Decimal = Field(
        default=DEFAULT_MAX_AMOUNT, ge=0, description="Максимально допустимая сумма"
    )

    model_config = {"frozen": True}

    def exceeds(self, amount: Decimal) -> bool:
        """True если сумма строго больше предела"""
        return amount > self.max_amount


class MonetaryAmount(BaseModel):
    """
    Нормализованная денежная сумма: целые рубли и копейки.

    Создаётся на время одного вызова и нигде не хранится.
    """

    major: int = Field(..., ge=0, description="Целая часть (рубли)")
    minor: int = Field(..., ge=0, le=99, description="Дробная часть (копейки)")

    model_config = {"frozen": True}

    @classmethod
    def from_decimal(cls, amount: Decimal) -> "MonetaryAmount":
        """
        Нормализация суммы к двум знакам с отбрасыванием остатка.

        Args:
            amount: Неотрицательная сумма

        Returns:
            MonetaryAmount с копейками в [0, 99]
        """
        normalized = normalize_amount(amount)
        major = int(normalized)
        minor = int((normalized - major) * 100)
        return cls(major=major, minor=minor)


def normalize_amount(amount: Decimal) -> Decimal:
    """
    Приведение суммы к двум знакам после запятой.

    ROUND_DOWN: лишние копейки отбрасываются, сумма не увеличивается.
    Повторная нормализация ничего не меняет.
    """
    return amount.quantize(MINOR_UNIT_QUANT, rounding=ROUND_DOWN)
