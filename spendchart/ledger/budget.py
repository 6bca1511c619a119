"""Mini README: Reactive budget ledger behind the SpendChart widget.

Structure:
    * LINE_ITEM_LABELS - the five fixed expense categories, in display order.
    * read_amount / parse_amount - lenient numeric parsing of typed text.
    * format_currency - renders amounts as ``$1234.50`` display strings.
    * LineItem - one labelled expense amount.
    * LedgerDisplay - the four formatted display slots shown on the page.
    * BudgetLedger - owns budget, savings and line items; derives totals.

Total expenses and balance are never stored. They are properties computed
from the current line items and budget, so after any mutation returns the
values a reader observes are already consistent. Typed text that does not
start with a number degrades to zero instead of raising, which keeps the
widget usable while a user is half way through typing a value.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import MAX_EMAX, ROUND_HALF_UP, Decimal, DecimalException, localcontext
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple, Union

from ..logging_utils import get_logger

if TYPE_CHECKING:
    from .providers import AmountProvider

LOGGER = get_logger(__name__)

LINE_ITEM_LABELS: Tuple[str, ...] = (
    "Rent/Mortgage",
    "Utilities",
    "Groceries",
    "Transportation",
    "Entertainment",
)
CURRENCY_SYMBOL = "$"
ZERO = Decimal("0")
CENTS = Decimal("0.01")

# Longest leading number a browser's parseFloat would accept, sign excluded.
_NUMERIC_PREFIX = re.compile(r"\s*((?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
# Typed amounts beyond the precision of a browser number field are unreadable.
_MAX_INTEGER_DIGITS = 15

AmountLike = Union[Decimal, int, float, str]


def _to_decimal(value: AmountLike) -> Decimal:
    """Convert numeric values into a Decimal without float artefacts."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    return Decimal(str(value))


def read_amount(text: Optional[str]) -> Optional[Decimal]:
    """Return the number typed at the start of ``text`` or ``None``.

    Only the leading numeric prefix is considered so partially typed input
    such as ``"12."`` or ``"300abc"`` still yields a value. Text starting
    with a sign, letters or nothing at all has no amount.
    """

    if text is None:
        return None
    match = _NUMERIC_PREFIX.match(text)
    if not match:
        return None
    try:
        value = Decimal(match.group(1))
    except DecimalException:
        value = None
    if value is None or value.adjusted() >= _MAX_INTEGER_DIGITS:
        LOGGER.debug("Ignoring out of range amount %r", text)
        return None
    return value


def parse_amount(raw_value: Optional[str]) -> Decimal:
    """Leniently parse a line item field, treating anything unreadable as zero."""
    value = read_amount(raw_value)
    return ZERO if value is None else value


def format_currency(value: AmountLike, symbol: str = CURRENCY_SYMBOL) -> str:
    """Render ``value`` with exactly two decimals and no thousands separator."""
    amount = _to_decimal(value)
    with localcontext() as context:
        # Quantizing to the cent needs every integer digit plus two decimals.
        context.prec = max(context.prec, amount.adjusted() + 3)
        context.Emax = MAX_EMAX
        amount = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    if amount.is_zero():
        amount = abs(amount)
    return f"{symbol}{amount:f}"


@dataclass(slots=True)
class LineItem:
    """A labelled expense category and its current amount."""

    label: str
    amount: Decimal = ZERO

    def as_dict(self) -> Dict[str, str]:
        return {
            "label": self.label,
            "amount": str(self.amount),
            "formatted": format_currency(self.amount),
        }


@dataclass(frozen=True, slots=True)
class LedgerDisplay:
    """Formatted display slots keyed the same way as the page elements."""

    budget: str
    expenses: str
    balance: str
    savings: str

    def as_dict(self) -> Dict[str, str]:
        return {
            "budget": self.budget,
            "expenses": self.expenses,
            "balance": self.balance,
            "savings": self.savings,
        }


class BudgetLedger:
    """Budget, savings and the five expense line items of one page session."""

    def __init__(self) -> None:
        self._budget = ZERO
        self._savings = ZERO
        self._line_items: Tuple[LineItem, ...] = tuple(
            LineItem(label=label) for label in LINE_ITEM_LABELS
        )
        LOGGER.debug("Budget ledger initialised with %s line items", len(self._line_items))

    @property
    def budget(self) -> Decimal:
        return self._budget

    @property
    def savings(self) -> Decimal:
        return self._savings

    @property
    def line_items(self) -> Tuple[LineItem, ...]:
        return self._line_items

    @property
    def total_expenses(self) -> Decimal:
        """Sum of the current line item amounts."""

        return sum((item.amount for item in self._line_items), ZERO)

    @property
    def balance(self) -> Decimal:
        """Budget remaining once all current expenses are paid."""

        return self._budget - self.total_expenses

    def set_line_item(self, index: int, raw_value: Optional[str]) -> None:
        """Store the amount typed into line item ``index``.

        Unreadable text counts as zero. The index identifies one of the fixed
        categories, so anything outside ``0..4`` is a caller error.
        """

        if not 0 <= index < len(self._line_items):
            raise IndexError(f"Line item {index} does not exist")
        item = self._line_items[index]
        item.amount = parse_amount(raw_value)
        LOGGER.debug(
            "Line item %s (%s) set to %s -> expenses=%s balance=%s",
            index,
            item.label,
            item.amount,
            self.total_expenses,
            self.balance,
        )

    def add_to_budget(self, amount: Optional[AmountLike]) -> None:
        """Increase the budget. ``None`` means the request was cancelled."""

        if amount is None:
            LOGGER.debug("Budget addition cancelled")
            return
        self._budget += self._validated(amount, "budget")
        LOGGER.debug("Budget now %s, balance %s", self._budget, self.balance)

    def add_to_savings(self, amount: Optional[AmountLike]) -> None:
        """Increase savings. ``None`` means the request was cancelled."""

        if amount is None:
            LOGGER.debug("Savings addition cancelled")
            return
        self._savings += self._validated(amount, "savings")
        LOGGER.debug("Savings now %s", self._savings)

    @staticmethod
    def _validated(amount: AmountLike, target: str) -> Decimal:
        try:
            value = _to_decimal(amount)
        except DecimalException as error:
            raise ValueError(f"Cannot add {amount!r} to {target}: not a number.") from error
        if not value.is_finite() or value < ZERO:
            raise ValueError(f"Cannot add {amount!r} to {target}: amounts must be non-negative.")
        return value

    def request_budget(self, provider: "AmountProvider") -> bool:
        """Ask ``provider`` for a budget top-up; return whether one was applied."""

        amount = provider.request_amount("budget")
        self.add_to_budget(amount)
        return amount is not None

    def request_savings(self, provider: "AmountProvider") -> bool:
        """Ask ``provider`` for a savings top-up; return whether one was applied."""

        amount = provider.request_amount("savings")
        self.add_to_savings(amount)
        return amount is not None

    def display(self) -> LedgerDisplay:
        """Format the four observable quantities."""

        return LedgerDisplay(
            budget=format_currency(self._budget),
            expenses=format_currency(self.total_expenses),
            balance=format_currency(self.balance),
            savings=format_currency(self._savings),
        )

    def export_snapshot(self) -> Dict[str, object]:
        """Export raw and formatted state for JSON responses."""

        line_items: List[Dict[str, str]] = [item.as_dict() for item in self._line_items]
        return {
            "budget": str(self._budget),
            "savings": str(self._savings),
            "total_expenses": str(self.total_expenses),
            "balance": str(self.balance),
            "line_items": line_items,
            "display": self.display().as_dict(),
        }
