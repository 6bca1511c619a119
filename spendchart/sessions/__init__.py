"""Mini README: Page session ownership for SpendChart.

Every page load gets its own ledger. The ``manager`` module owns those
ledgers so no ledger state ever lives in module globals.
"""

from .manager import SessionManager

__all__ = ["SessionManager"]
