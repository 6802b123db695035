"""Money — преобразование денежных сумм в прописное написание.

- AmountSpeller: сумма в рублях и копейках прописью
- Лексикон числительных мужского и женского рода
"""

from .lexicon import (
    FEMININE,
    KOPECK_FORMS,
    MASCULINE,
    RUBLE_FORMS,
    THOUSAND_FORMS,
    NumeralLexicon,
)
from .speller import (
    AmountSpeller,
    coerce_amount,
    convert_amount_to_words,
    triple_to_words,
)

__all__ = [
    "AmountSpeller",
    "convert_amount_to_words",
    "coerce_amount",
    "triple_to_words",
    "NumeralLexicon",
    "MASCULINE",
    "FEMININE",
    "RUBLE_FORMS",
    "KOPECK_FORMS",
    "THOUSAND_FORMS",
]
