from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
ROOT_LOGGER = "daycare_tracker"


def setup_logging(level: str | None = None) -> logging.Logger:
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    resolved = getattr(logging, level_name, logging.INFO)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(resolved)

    # Avoid duplicate console handlers when create_app() runs more than once
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    base = logging.getLogger(ROOT_LOGGER)
    if not name:
        return base
    # Module names arrive as "src.daycare_tracker.daycare_tracker.x.y"
    short = name.rsplit("daycare_tracker.", 1)[-1]
    return base.getChild(short)
