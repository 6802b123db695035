"""
Lexicon — Словари числительных и словоформ для сумм в рублях

Числительные 1 и 2 различаются по роду: "один рубль" / "одна тысяча",
"два рубля" / "две тысячи". Остальные формы совпадают.

Все таблицы неизменяемые и общие для процесса.
"""

from dataclasses import dataclass
from typing import Final, Tuple

from src.core.domain.money import GrammaticalForm


@dataclass(frozen=True)
class NumeralLexicon:
    """
    Числительные 0-19 для одного грамматического рода.

    Элемент 0 намеренно пустой: ноль обрабатывается отдельно.
    """

    gender: str
    units: Tuple[str, ...]

    def __post_init__(self):
        if len(self.units) != 20:
            raise ValueError(f"units must contain 20 entries, got {len(self.units)}")


_UNITS_COMMON: Final[Tuple[str, ...]] = (
    "три", "четыре", "пять", "шесть", "семь", "восемь", "девять", "десять",
    "одиннадцать", "двенадцать", "тринадцать", "четырнадцать",
    "пятнадцать", "шестнадцать", "семнадцать", "восемнадцать", "девятнадцать",
)

# Мужской род: рубли
MASCULINE: Final[NumeralLexicon] = NumeralLexicon(
    gender="masculine", units=("", "один", "два") + _UNITS_COMMON
)

# Женский род: тысячи
FEMININE: Final[NumeralLexicon] = NumeralLexicon(
    gender="feminine", units=("", "одна", "две") + _UNITS_COMMON
)

# Десятки 20-90, индексы 0 и 1 не используются
TENS: Final[Tuple[str, ...]] = (
    "", "", "двадцать", "тридцать", "сорок",
    "пятьдесят", "шестьдесят", "семьдесят", "восемьдесят", "девяносто",
)

# Сотни 100-900, индекс 0 означает отсутствие сотен
HUNDREDS: Final[Tuple[str, ...]] = (
    "", "сто", "двести", "триста", "четыреста",
    "пятьсот", "шестьсот", "семьсот", "восемьсот", "девятьсот",
)

ZERO_WORD: Final[str] = "ноль"

RUBLE_FORMS: Final[GrammaticalForm] = GrammaticalForm(
    one="рубль", few="рубля", many="рублей"
)
KOPECK_FORMS: Final[GrammaticalForm] = GrammaticalForm(
    one="копейка", few="копейки", many="копеек"
)
THOUSAND_FORMS: Final[GrammaticalForm] = GrammaticalForm(
    one="тысяча", few="тысячи", many="тысяч"
)
