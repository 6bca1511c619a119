"""Mini README: FastAPI-powered SpendChart page and ledger API.

Structure:
    * create_application - application factory wiring routes and templates.
    * _snapshot - JSON payload shared by every ledger endpoint.

Loading ``/`` opens a new session and renders the page with its display
slots already formatted. The page then forwards each event (a line item
edit, a budget or savings top-up) to the JSON API and redraws the four
display slots from the response. The ledgers are owned by the
``SessionManager`` created here, one per application instance.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from ..configuration import SpendChartSettings, get_settings
from ..ledger import BudgetLedger, parse_prompt_amount
from ..logging_utils import configure_root_logger, get_logger
from ..sessions import SessionManager

LOGGER = get_logger(__name__)


def _snapshot(session_id: str, ledger: BudgetLedger) -> Dict[str, object]:
    payload = ledger.export_snapshot()
    payload["session_id"] = session_id
    return payload


def create_application(
    settings: Optional[SpendChartSettings] = None,
    sessions: Optional[SessionManager] = None,
) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    settings = settings or get_settings()
    configure_root_logger(settings.log_level)
    sessions = sessions or SessionManager(limit=settings.session_limit)

    app = FastAPI(title="SpendChart", version="0.1.0", debug=not settings.is_production)
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    static_directory = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_directory)), name="static")
    app.state.sessions = sessions

    def ledger_for(session_id: str) -> BudgetLedger:
        try:
            return sessions.get_ledger(session_id)
        except KeyError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error

    @app.get("/", response_class=HTMLResponse)
    async def spend_chart(request: Request) -> HTMLResponse:
        """Render the widget for a brand new session."""

        session_id = sessions.create_session()
        ledger = sessions.get_ledger(session_id)
        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "session_id": session_id,
                "line_items": ledger.line_items,
                "display": ledger.display(),
            },
        )

    @app.post("/api/sessions")
    async def create_session() -> JSONResponse:
        """Open a session without rendering the page."""

        session_id = sessions.create_session()
        return JSONResponse(_snapshot(session_id, sessions.get_ledger(session_id)), status_code=201)

    @app.get("/api/sessions/{session_id}")
    async def read_session(session_id: str) -> JSONResponse:
        return JSONResponse(_snapshot(session_id, ledger_for(session_id)))

    @app.delete("/api/sessions/{session_id}")
    async def discard_session(session_id: str) -> JSONResponse:
        try:
            sessions.discard_session(session_id)
        except KeyError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        return JSONResponse({"session_id": session_id, "discarded": True})

    @app.post("/api/sessions/{session_id}/line-items/{index}")
    async def set_line_item(session_id: str, index: int, value: str = Form("")) -> JSONResponse:
        """Store the text currently typed into an expense field."""

        ledger = ledger_for(session_id)
        try:
            ledger.set_line_item(index, value)
        except IndexError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        return JSONResponse(_snapshot(session_id, ledger))

    @app.post("/api/sessions/{session_id}/budget")
    async def add_budget(session_id: str, amount: Optional[str] = Form(None)) -> JSONResponse:
        """Apply a budget prompt reply; a missing or invalid reply changes nothing."""

        ledger = ledger_for(session_id)
        parsed = parse_prompt_amount(amount)
        ledger.add_to_budget(parsed)
        LOGGER.info("Session %s budget request %r -> %s", session_id, amount, parsed)
        return JSONResponse(_snapshot(session_id, ledger))

    @app.post("/api/sessions/{session_id}/savings")
    async def add_savings(session_id: str, amount: Optional[str] = Form(None)) -> JSONResponse:
        """Apply a savings prompt reply; a missing or invalid reply changes nothing."""

        ledger = ledger_for(session_id)
        parsed = parse_prompt_amount(amount)
        ledger.add_to_savings(parsed)
        LOGGER.info("Session %s savings request %r -> %s", session_id, amount, parsed)
        return JSONResponse(_snapshot(session_id, ledger))

    return app
