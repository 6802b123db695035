"""
Domain models and value objects.

Contains value types for money amounts, grammatical forms and send schedules.
"""

from src.core.domain.money import (
    DEFAULT_MAX_AMOUNT,
    MINOR_UNIT_QUANT,
    AmountBounds,
    GrammaticalForm,
    MonetaryAmount,
    PluralCategory,
    normalize_amount,
    select_plural_category,
)
from src.core.domain.schedule import (
    DEFAULT_SEND_SCHEDULE,
    DEFAULT_WORKING_DAY_POLICY,
    ScheduledSendResult,
    SendSchedule,
    WorkingDayPolicy,
)

__all__ = [
    # Money module
    "DEFAULT_MAX_AMOUNT",
    "MINOR_UNIT_QUANT",
    "AmountBounds",
    "MonetaryAmount",
    "normalize_amount",
    # Pluralization
    "PluralCategory",
    "GrammaticalForm",
    "select_plural_category",
    # Schedule module
    "DEFAULT_SEND_SCHEDULE",
    "DEFAULT_WORKING_DAY_POLICY",
    "SendSchedule",
    "WorkingDayPolicy",
    "ScheduledSendResult",
]
