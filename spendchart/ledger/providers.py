"""Mini README: Amount providers feeding budget and savings top-ups.

Structure:
    * parse_prompt_amount - validates a free-text reply into an optional amount.
    * AmountProvider - abstract capability asked for an amount to add.
    * StaticAmountProvider - replays queued replies (scripted sessions, tests).
    * PromptAmountProvider - asks interactively on the terminal via Typer.

The ledger never talks to an input modality directly. It asks a provider,
and a provider answers with a non-negative ``Decimal`` or ``None`` when the
user cancelled or typed something that is not an amount.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from decimal import Decimal
from typing import Callable, Deque, Iterable, Optional, Union

import typer

from ..logging_utils import get_logger
from .budget import read_amount

LOGGER = get_logger(__name__)

Reply = Union[str, int, Decimal, None]


def parse_prompt_amount(reply: Reply) -> Optional[Decimal]:
    """Turn a prompt reply into an amount, or ``None`` for a cancelled request."""

    if reply is None:
        return None
    text = str(reply)
    if not text.strip():
        return None
    return read_amount(text)


class AmountProvider(ABC):
    """Source of amounts for budget and savings additions."""

    @abstractmethod
    def request_amount(self, target: str) -> Optional[Decimal]:
        """Return the amount to add to ``target`` or ``None`` when cancelled."""


class StaticAmountProvider(AmountProvider):
    """Answer requests from a queue of pre-recorded replies."""

    def __init__(self, replies: Iterable[Reply] = ()) -> None:
        self._replies: Deque[Reply] = deque(replies)

    def push(self, reply: Reply) -> None:
        self._replies.append(reply)

    @property
    def pending(self) -> int:
        return len(self._replies)

    def request_amount(self, target: str) -> Optional[Decimal]:
        if not self._replies:
            LOGGER.debug("No scripted reply left for %s; treating as cancelled", target)
            return None
        reply = self._replies.popleft()
        amount = parse_prompt_amount(reply)
        LOGGER.debug("Scripted reply %r for %s -> %s", reply, target, amount)
        return amount


class PromptAmountProvider(AmountProvider):
    """Ask the operator for an amount; an empty reply cancels."""

    def __init__(self, prompt: Callable[..., str] = typer.prompt) -> None:
        self._prompt = prompt

    def request_amount(self, target: str) -> Optional[Decimal]:
        reply = self._prompt(
            f"Enter amount to add to {target} (blank to cancel)",
            default="",
            show_default=False,
        )
        amount = parse_prompt_amount(reply)
        if amount is None:
            LOGGER.info("No %s amount entered", target)
        return amount
