"""Package logger for unislug.

Import the ``logger`` instance from this module throughout the codebase.
The engine logs truncations at DEBUG and option loading at INFO.

Only a :class:`logging.NullHandler` is attached; output is left to the
host application's logging configuration, e.g.::

    logging.getLogger("unislug").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging

LOGGER_NAME = "unislug"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


__all__ = ["LOGGER_NAME", "logger"]
