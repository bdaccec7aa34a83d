import logging
import sys
from typing import Optional

LOGGER_NAME = "detective_quest"


def setup_logger(level: str = "WARNING", log_file: Optional[str] = None) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)

    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

    # player-facing text goes to stdout; keep diagnostics off the root logger
    logger.propagate = False
    return logger


logger = setup_logger()
