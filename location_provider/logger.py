import os
from logging import config, getLevelName, getLogger
from typing import Any

LOGGER_NAME = "location_provider"


def build_log_config(level: str) -> dict[str, Any]:
    """dictConfig for the provider logger and uvicorn, all at one level."""
    log_level = getLevelName(level.upper())
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "()": "uvicorn.logging.DefaultFormatter",
                "fmt": "%(levelprefix)s %(asctime)s - %(name)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
                "use_colors": True,
            },
            "access": {
                "()": "uvicorn.logging.AccessFormatter",
                "fmt": '%(levelprefix)s %(asctime)s - %(client_addr)s - "%(request_line)s" %(status_code)s',
                "datefmt": "%Y-%m-%d %H:%M:%S",
                "use_colors": True,
            },
        },
        "handlers": {
            "stderr": {"class": "logging.StreamHandler", "formatter": "default", "stream": "ext://sys.stderr"},
            "access": {"class": "logging.StreamHandler", "formatter": "access", "stream": "ext://sys.stdout"},
        },
        "loggers": {
            LOGGER_NAME: {"handlers": ["stderr"], "level": log_level, "propagate": False},
            "uvicorn": {"handlers": ["stderr"], "level": log_level, "propagate": True},
            "uvicorn.error": {"level": log_level, "propagate": False},
            "uvicorn.access": {"handlers": ["access"], "level": log_level, "propagate": False},
        },
    }


# DEBUG also logs backend selection and every normalized record.
log_config = build_log_config(os.getenv("LOG_LEVEL", "INFO"))
config.dictConfig(log_config)

logger = getLogger(LOGGER_NAME)
