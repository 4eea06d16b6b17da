"""Log sink wiring."""

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Loggers that share the configured sink; uvicorn's access and error loggers
# propagate into "uvicorn" when it runs with log_config=None.
SINK_LOGGERS = ("filebox", "uvicorn")


def configure_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    quiet: bool = False,
) -> logging.Logger:
    """Attach one sink to the ``filebox`` and ``uvicorn`` loggers.

    Lines go to stdout unless a log file is given. With ``quiet`` only a
    NullHandler is left, so output is discarded.
    """
    handler: logging.Handler
    if quiet:
        handler = logging.NullHandler()
    elif log_file is not None:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    for name in SINK_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level.upper())
        for existing in list(logger.handlers):
            if not isinstance(existing, logging.NullHandler):
                logger.removeHandler(existing)
                existing.close()
        if quiet:
            if not logger.handlers:
                logger.addHandler(handler)
        else:
            logger.addHandler(handler)

    return logging.getLogger("filebox")
