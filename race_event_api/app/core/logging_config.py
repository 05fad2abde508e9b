"""
Root logger setup for the Race Event API.

Services log through ``logging.getLogger(__name__)``: records created
or deleted at INFO, refused registrations and failed logins at WARNING,
and unhandled request errors with a traceback from the 500 handler in
``main``.  ``create_app`` calls ``setup_logging`` with ``LOG_LEVEL`` and
``LOG_FILE`` from the settings.

Configuration happens at most once per process.  The test suite builds
an app per test case and pytest installs its own capture handlers, so
a root logger that already has handlers is left alone.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Send API logs to stderr and, if ``logfile`` is set, to that file.

    ``level`` is a level name such as ``"DEBUG"`` (any case); an
    unrecognised name means ``INFO``.  An empty ``logfile`` (the
    ``LOG_FILE`` default) adds no file handler.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
