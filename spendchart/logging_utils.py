"""Mini README: Logging set-up shared by the SpendChart ledger, API and CLI.

Structure:
    * configure_root_logger - installs one root handler and applies the level
      named by ``SpendChartSettings.log_level`` (``"DEBUG"``, ``"info"``, ...).
    * get_logger - module logger accessor used as ``LOGGER = get_logger(__name__)``.

Ledger edits log at DEBUG with the recomputed expenses and balance, session
lifecycle and prompt replies at INFO. Both ``create_application`` and the
``console`` command call ``configure_root_logger`` with the configured level;
later calls only change the level, so building several apps in one test run
never stacks handlers.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Configure the root logger with a readable, timestamped formatter."""

    global _LOGGER_INITIALISED
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    if _LOGGER_INITIALISED:
        logging.getLogger().setLevel(level)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
