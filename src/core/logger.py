"""Console logging setup. Modules log through `logging.getLogger(__name__)`; whatever process hosts the service should call `init_logger()` once."""

import logging
from typing import Optional

from src.core.config import DATE_FORMAT, LOG_FORMAT, LOG_LEVEL

# Marks the handler we attach, so calling init_logger twice does not duplicate output
_HANDLER_NAME = "quoridor-console"


def init_logger(level: Optional[str] = None) -> logging.Logger:
    """Attach a console handler to the root logger and set the level (defaults to LOG_LEVEL from config)."""
    root = logging.getLogger()
    root.setLevel(level or LOG_LEVEL)

    if not any(handler.get_name() == _HANDLER_NAME for handler in root.handlers):
        console_handler = logging.StreamHandler()
        console_handler.set_name(_HANDLER_NAME)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root.addHandler(console_handler)

    return root
