import copy
import logging.config
from typing import Optional

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "loggers": {
        "reqfile": {
            "level": "INFO",
            "handlers": [
                "warning_console_handler",
            ],
            "propagate": False
        }
    },
    "handlers": {
        "debug_console_handler": {
            "level": "DEBUG",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
            "formatter": "debug_format"
        },
        "warning_console_handler": {
            "level": "WARNING",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
            "formatter": "info_format"
        },
    },
    "formatters": {
        "info_format": {
            "format": "[{asctime}] [{levelname}] {message}",
            "style": "{",
            "datefmt": "%d-%b-%Y:%H:%M:%S"
        },
        "debug_format": {
            "format": "[{asctime}] [{levelname}] {message} ({funcName}:{lineno})",
            "style": "{",
            "datefmt": "%d-%b-%Y:%H:%M:%S",
        }
    }
}


def build_logging_config(
        verbose: bool = False,
        log_file: Optional[str] = None
) -> dict:
    """
    Returns copy of |LOGGING_CONFIG| adjusted to command line options.
    """
    config = copy.deepcopy(LOGGING_CONFIG)
    logger = config["loggers"]["reqfile"]
    if verbose:
        logger["level"] = "DEBUG"
        logger["handlers"] = ["debug_console_handler"]
    if log_file is not None:
        config["handlers"]["info_file_handler"] = {
            "level": "INFO",
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "info_format",
            "filename": log_file,
        }
        logger["handlers"].append("info_file_handler")
    return config


def configure_logging(verbose: bool = False, log_file: Optional[str] = None):
    logging.config.dictConfig(build_logging_config(verbose, log_file))
