# src/taintinfo/log.py
# Diagnostics go through stdlib logging; this handler prints them on a rich
# stderr console with the warning/error styling of the report.

from __future__ import annotations

import logging

from rich.console import Console
from rich.text import Text

from .flags import Severity
from .render import SEVERITY_STYLES

LOGGER_NAME = "taintinfo"
WARNING_PREFIX = "Warning: "


class ConsoleHandler(logging.Handler):
    """
    WARNING  -> "Warning: <msg>" in the WARN style, continuation lines
                indented under the message text.
    ERROR+   -> "<msg>" in the ALERT style.
    Lower levels print unstyled.
    """

    def __init__(self, console: Console, level: int = logging.NOTSET):
        super().__init__(level)
        self.console = console

    def format_text(self, record: logging.LogRecord) -> Text:
        msg = self.format(record)
        if record.levelno >= logging.ERROR:
            return Text(msg, style=SEVERITY_STYLES[Severity.ALERT])
        if record.levelno >= logging.WARNING:
            indent = "\n" + " " * len(WARNING_PREFIX)
            return Text(WARNING_PREFIX + msg.replace("\n", indent), style=SEVERITY_STYLES[Severity.WARN])
        return Text(msg)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.console.print(self.format_text(record))
        except Exception:
            self.handleError(record)


def setup_logging(console: Console, level: int = logging.WARNING) -> logging.Logger:
    """(Re)attach a single ConsoleHandler to the package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    for h in list(logger.handlers):
        if isinstance(h, ConsoleHandler):
            logger.removeHandler(h)
    handler = ConsoleHandler(console)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
