import logging
import sys

from admissions.config import settings

if settings.log_level:
    LOG_LEVEL = logging.getLevelName(settings.log_level.upper())
    if not isinstance(LOG_LEVEL, int):
        # unknown names come back as "Level <name>"
        LOG_LEVEL = logging.INFO
else:
    LOG_LEVEL = logging.DEBUG if settings.environment == "dev" else logging.INFO

# package root logger; module loggers propagate to it
logger = logging.getLogger("admissions")
logger.setLevel(LOG_LEVEL)

if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(LOG_LEVEL)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)-5s [admissions] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(handler)
