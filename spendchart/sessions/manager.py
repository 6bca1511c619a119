"""Mini README: In-memory store of per-page budget ledgers.

Structure:
    * SessionManager - creates, looks up and discards ledgers by session id.

Loading the SpendChart page creates a fresh session, which is how a reload
resets every quantity to zero. Nothing is persisted. The store is bounded:
once the configured limit is exceeded the least recently used session is
dropped.
"""

from __future__ import annotations

from collections import OrderedDict
from typing import List
from uuid import uuid4

from ..ledger import BudgetLedger
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class SessionManager:
    """Own one ``BudgetLedger`` per page session."""

    def __init__(self, limit: int = 256) -> None:
        if limit < 1:
            raise ValueError("Session limit must be at least 1.")
        self._limit = limit
        self._ledgers: "OrderedDict[str, BudgetLedger]" = OrderedDict()
        LOGGER.debug("Session manager initialised with limit %s", limit)

    @property
    def limit(self) -> int:
        return self._limit

    def create_session(self) -> str:
        """Register a new zeroed ledger and return its session id."""

        session_id = uuid4().hex
        self._ledgers[session_id] = BudgetLedger()
        LOGGER.info("Created session %s", session_id)
        while len(self._ledgers) > self._limit:
            evicted, _ = self._ledgers.popitem(last=False)
            LOGGER.info("Evicted session %s (limit %s reached)", evicted, self._limit)
        return session_id

    def get_ledger(self, session_id: str) -> BudgetLedger:
        """Return the ledger for ``session_id``, raising if it is unknown."""

        if session_id not in self._ledgers:
            raise KeyError(f"Session {session_id} is not registered")
        self._ledgers.move_to_end(session_id)
        return self._ledgers[session_id]

    def discard_session(self, session_id: str) -> None:
        if session_id not in self._ledgers:
            raise KeyError(f"Session {session_id} is not registered")
        del self._ledgers[session_id]
        LOGGER.info("Discarded session %s", session_id)

    def session_ids(self) -> List[str]:
        """Return session ids from least to most recently used."""

        return list(self._ledgers.keys())

    def session_count(self) -> int:
        return len(self._ledgers)
