"""Mini README: Core package initializer for SpendChart.

SpendChart is a single-page budgeting widget. The package is split into
``ledger`` (the arithmetic display engine and amount providers),
``sessions`` (per page-load ledger ownership) and ``interface`` (the FastAPI
surface that serves the page). Only the logging helper is re-exported here
so importing the package stays free of web framework dependencies.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
