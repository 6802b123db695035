"""
AmountSpeller — Сумма прописью на русском языке

Преобразование суммы от 0 до 99 999.99 рублей в прописное написание
с согласованием рода числительных и падежа существительных:

    1.00      → "один рубль 00 копеек"
    1000.00   → "одна тысяча рублей 00 копеек"
    21532.05  → "двадцать одна тысяча пятьсот тридцать два рубля 05 копеек"

Алгоритм:
1. Валидация (None / отрицательная / больше максимума)
2. Нормализация до копеек с отбрасыванием остатка (ROUND_DOWN)
3. Тысячи: числительное женского рода + "тысяча/тысячи/тысяч"
4. Остаток 0-999: числительное мужского рода (или "ноль", если рублей нет)
5. "рубль/рубля/рублей" по полному числу рублей
6. Копейки всегда двумя цифрами + "копейка/копейки/копеек"
"""

from decimal import Decimal, InvalidOperation
from typing import Final, List, Union

from src.core.domain.money import (
    AmountBounds,
    GrammaticalForm,
    MonetaryAmount,
    select_plural_category,
)
from src.core.errors import AmountTooLargeError, InvalidAmountError
from src.money.lexicon import (
    FEMININE,
    HUNDREDS,
    KOPECK_FORMS,
    MASCULINE,
    RUBLE_FORMS,
    TENS,
    THOUSAND_FORMS,
    ZERO_WORD,
    NumeralLexicon,
)

AmountInput = Union[Decimal, int, float, str]

# Разрядность: тысячи рендерятся одной группой из трёх цифр
_THOUSANDS_LIMIT: Final[Decimal] = Decimal("1000000")


def triple_to_words(number: int, lexicon: NumeralLexicon) -> str:
    """
    Трёхзначное число (0-999) прописью.

    Args:
        number: Число от 0 до 999
        lexicon: Числительные нужного рода (мужской для рублей, женский для тысяч)

    Returns:
        Число прописью; пустая строка для 0
    """
    if not 0 <= number <= 999:
        raise ValueError(f"number {number} must be within 0..999")

    hundreds_digit, tens_and_units = divmod(number, 100)
    words: List[str] = []

    if hundreds_digit > 0:
        words.append(HUNDREDS[hundreds_digit])

    if tens_and_units < 20:
        if tens_and_units > 0:
            words.append(lexicon.units[tens_and_units])
    else:
        tens_digit, units_digit = divmod(tens_and_units, 10)
        words.append(TENS[tens_digit])
        if units_digit > 0:
            words.append(lexicon.units[units_digit])

    return " ".join(words)


def coerce_amount(amount: AmountInput | None) -> Decimal:
    """
    Приведение входного значения к Decimal с проверкой корректности.

    float переводится через str(), чтобы 10.999 не превратилось
    в двоичное приближение.

    Raises:
        InvalidAmountError: None, bool, нечисловая строка, NaN/Infinity, отрицательное
    """
    if amount is None:
        raise InvalidAmountError("Amount must not be None")
    if isinstance(amount, bool):
        raise InvalidAmountError(f"Amount must be numeric, got bool {amount}")

    if isinstance(amount, Decimal):
        value = amount
    elif isinstance(amount, int):
        value = Decimal(amount)
    elif isinstance(amount, (float, str)):
        try:
            value = Decimal(str(amount).strip())
        except InvalidOperation as e:
            raise InvalidAmountError(f"Amount {amount!r} is not a valid number") from e
    else:
        raise InvalidAmountError(
            f"Unsupported amount type {type(amount).__name__}"
        )

    if not value.is_finite():
        raise InvalidAmountError(f"Amount must be finite, got {value}")
    if value < 0:
        raise InvalidAmountError(f"Amount must not be negative, got {value}")

    return value


class AmountSpeller:
    """
    Конвертер суммы в прописное написание.

    Stateless: таблицы словоформ неизменяемы, экземпляр можно разделять
    между потоками.
    """

    def __init__(
        self,
        bounds: AmountBounds | None = None,
        major_forms: GrammaticalForm = RUBLE_FORMS,
        minor_forms: GrammaticalForm = KOPECK_FORMS,
        thousand_forms: GrammaticalForm = THOUSAND_FORMS,
    ):
        """
        Args:
            bounds: верхний предел суммы (default 99 999.99)
            major_forms: словоформы старшей единицы (мужской род)
            minor_forms: словоформы младшей единицы
            thousand_forms: словоформы множителя "тысяча" (женский род)
        """
        self.bounds = bounds or AmountBounds()
        if self.bounds.max_amount >= _THOUSANDS_LIMIT:
            raise ValueError(
                f"max_amount {self.bounds.max_amount} must be below {_THOUSANDS_LIMIT}"
            )
        self.major_forms = major_forms
        self.minor_forms = minor_forms
        self.thousand_forms = thousand_forms

    def convert(self, amount: AmountInput | None) -> str:
        """
        Сумма прописью.

        Предел проверяется по исходному значению, до нормализации:
        99999.999 отклоняется, хотя усекается до 99999.99.

        Args:
            amount: сумма (Decimal, int, str или float)

        Returns:
            Строка вида "две тысячи рублей 00 копеек"

        Raises:
            InvalidAmountError: None, отрицательная или некорректная сумма
            AmountTooLargeError: сумма больше bounds.max_amount
        """
        value = coerce_amount(amount)
        if self.bounds.exceeds(value):
            raise AmountTooLargeError(value, self.bounds.max_amount)

        return self.spell(MonetaryAmount.from_decimal(value))

    def spell(self, amount: MonetaryAmount) -> str:
        """Прописное написание уже нормализованной суммы"""
        rubles = amount.major
        kopecks = amount.minor

        thousands, remainder = divmod(rubles, 1000)
        parts: List[str] = []

        if thousands > 0:
            parts.append(triple_to_words(thousands, FEMININE))
            parts.append(self.thousand_forms.select(thousands))

        remainder_words = triple_to_words(remainder, MASCULINE)
        if remainder_words:
            parts.append(remainder_words)
        elif rubles == 0:
            parts.append(ZERO_WORD)

        # Согласование по полному числу рублей, не по остатку
        parts.append(self.major_forms.select(rubles))

        parts.append(f"{kopecks:02d}")
        parts.append(self.minor_forms.form_for(select_plural_category(kopecks)))

        return " ".join(parts)


_DEFAULT_SPELLER = AmountSpeller()


def convert_amount_to_words(amount: AmountInput | None) -> str:
    """
    Сумма прописью с настройками по умолчанию.

    Raises:
        InvalidAmountError: None, отрицательная или некорректная сумма
        AmountTooLargeError: сумма больше 99 999.99
    """
    return _DEFAULT_SPELLER.convert(amount)
