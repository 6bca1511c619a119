"""Mini README: Entry point CLI for SpendChart.

This script exposes a Typer CLI with two commands: ``run`` starts the
FastAPI application that serves the SpendChart page, and ``console`` drives
a single ledger from the terminal, prompting for budget and savings
top-ups the same way the page does.
"""

from __future__ import annotations

import typer
import uvicorn

from spendchart.configuration import get_settings
from spendchart.ledger import BudgetLedger, PromptAmountProvider
from spendchart.logging_utils import configure_root_logger

cli = typer.Typer(help="Serve or run the SpendChart budgeting widget.")

_SLOT_LABELS = (
    ("budget", "Budget"),
    ("expenses", "Total expenses"),
    ("balance", "Balance"),
    ("savings", "Savings"),
)


def _echo_display(ledger: BudgetLedger) -> None:
    display = ledger.display().as_dict()
    for slot, label in _SLOT_LABELS:
        typer.echo(f"{label + ':':<16}{display[slot]}")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot navigate to the wildcard bind address.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting SpendChart on {effective_host}:{effective_port}.\n"
        f"Open your browser at http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "spendchart.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def console() -> None:
    """Edit a budget interactively in the terminal."""

    configure_root_logger(get_settings().log_level)
    ledger = BudgetLedger()
    provider = PromptAmountProvider()
    for number, item in enumerate(ledger.line_items, start=1):
        typer.echo(f"  {number}. {item.label}")
    _echo_display(ledger)

    while True:
        choice = typer.prompt("Line item [1-5], (b)udget, (s)avings or (q)uit").strip().lower()
        if choice in {"q", "quit"}:
            break
        if choice in {"b", "budget"}:
            ledger.request_budget(provider)
        elif choice in {"s", "savings"}:
            ledger.request_savings(provider)
        elif choice.isdigit() and 1 <= int(choice) <= len(ledger.line_items):
            index = int(choice) - 1
            raw_value = typer.prompt(
                ledger.line_items[index].label, default="", show_default=False
            )
            ledger.set_line_item(index, raw_value)
        else:
            typer.echo(f"Unknown choice '{choice}'.")
            continue
        _echo_display(ledger)


if __name__ == "__main__":
    cli()
