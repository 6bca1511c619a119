"""Mini README: Interactive interfaces for SpendChart.

Exports the FastAPI application factory that serves the SpendChart page and
its ledger API. The terminal interface lives in the top-level CLI script.
"""

from .web_app import create_application

__all__ = ["create_application"]
