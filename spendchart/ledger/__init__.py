"""Mini README: Budget ledger engine for SpendChart.

The ``budget`` module holds the ledger, its line items and the currency
formatting used by every display slot. The ``providers`` module supplies the
amounts for budget and savings top-ups, keeping prompts and other input
modalities out of the arithmetic.
"""

from .budget import (
    LINE_ITEM_LABELS,
    BudgetLedger,
    LedgerDisplay,
    LineItem,
    format_currency,
    parse_amount,
    read_amount,
)
from .providers import (
    AmountProvider,
    PromptAmountProvider,
    StaticAmountProvider,
    parse_prompt_amount,
)

__all__ = [
    "LINE_ITEM_LABELS",
    "AmountProvider",
    "BudgetLedger",
    "LedgerDisplay",
    "LineItem",
    "PromptAmountProvider",
    "StaticAmountProvider",
    "format_currency",
    "parse_amount",
    "parse_prompt_amount",
    "read_amount",
]
