from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_CONFIGURED = False


def configure_logging(level: str = "INFO") -> None:
    """Attach one stream handler to the root logger. Later calls only adjust the level."""
    global _CONFIGURED
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if _CONFIGURED:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
    _CONFIGURED = True
