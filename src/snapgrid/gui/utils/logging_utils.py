"""
Logging utilities for surfacing engine warnings in the editor status bar.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal


class _LogSignals(QObject):
    message = Signal(str, str)


class StatusBarLogHandler(logging.Handler):
    """
    A logging handler that re-emits log records as a Qt signal.

    Used to show engine warnings (reflow aborts, saturated container)
    in the main window status bar.
    """

    def __init__(self, level: int = logging.WARNING):
        super().__init__(level)
        self.signals = _LogSignals()
        self.setFormatter(logging.Formatter("%(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.signals.message.emit(self.format(record), record.levelname)
        except Exception:
            self.handleError(record)


def attach_status_handler(
    logger_name: Optional[str] = "snapgrid",
    level: int = logging.WARNING,
) -> StatusBarLogHandler:
    """
    Attach a StatusBarLogHandler to the specified logger.

    Args:
        logger_name: Name of logger to attach to. None = root logger.
        level: Minimum level forwarded.

    Returns:
        The attached handler (for later removal).
    """
    logger = logging.getLogger(logger_name)
    handler = StatusBarLogHandler(level)
    logger.addHandler(handler)
    return handler


def detach_status_handler(handler: StatusBarLogHandler, logger_name: Optional[str] = "snapgrid") -> None:
    """
    Remove a StatusBarLogHandler from the specified logger.

    Args:
        handler: The handler to remove.
        logger_name: Name of logger to detach from. None = root logger.
    """
    logger = logging.getLogger(logger_name)
    logger.removeHandler(handler)
