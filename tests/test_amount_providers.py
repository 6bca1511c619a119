"""Mini README: Tests for the amount providers used by budget and savings top-ups.

These tests confirm that prompt replies are validated into optional amounts,
scripted providers replay their queue, and the interactive provider forwards
to the injected prompt callable.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from spendchart.ledger import PromptAmountProvider, StaticAmountProvider, parse_prompt_amount


@pytest.mark.parametrize(
    ("reply", "expected"),
    [
        ("3000", Decimal("3000")),
        (" 12.75", Decimal("12.75")),
        (1500, Decimal("1500")),
        ("0", Decimal("0")),
        (None, None),
        ("", None),
        ("   ", None),
        ("lots", None),
        ("-40", None),
    ],
)
def test_parse_prompt_amount(reply, expected) -> None:
    """Blank, invalid or negative replies count as a cancelled request."""

    assert parse_prompt_amount(reply) == expected


def test_static_provider_replays_queue_then_cancels() -> None:
    provider = StaticAmountProvider(["10", "oops"])
    provider.push("5.5")

    assert provider.pending == 3
    assert provider.request_amount("budget") == Decimal("10")
    assert provider.request_amount("budget") is None
    assert provider.request_amount("savings") == Decimal("5.5")
    assert provider.request_amount("savings") is None
    assert provider.pending == 0


def test_prompt_provider_asks_with_target_name() -> None:
    """The interactive provider passes the target into the prompt text."""

    questions = []

    def fake_prompt(text: str, **kwargs) -> str:
        questions.append((text, kwargs))
        return "250"

    provider = PromptAmountProvider(prompt=fake_prompt)

    assert provider.request_amount("savings") == Decimal("250")
    text, kwargs = questions[0]
    assert "savings" in text
    assert kwargs["default"] == ""


def test_prompt_provider_blank_reply_cancels() -> None:
    provider = PromptAmountProvider(prompt=lambda text, **kwargs: "")

    assert provider.request_amount("budget") is None
