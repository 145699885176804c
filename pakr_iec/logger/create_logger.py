import logging
import logging.config
from pathlib import Path
from typing import cast

import shortuuid

from pakr_iec.logger.adapters import (
    ExceptionLoggingAdapter,
    ExtraToJsonAdapter,
    PermanentExtraAdapter,
)

SERVICE_NAME = "pakr_iec"
LOG_FILE_REFRESH_DAY = 1
LOG_FILE_BACKUP_COUNT = 30
MAX_LOGGER_ID_LENGTH = 6
LOG_LEVEL = "WARNING"
LOG_HEADER_LINE_DELIMITER = " - "
FIRST_LINE_DELIMITER = "\u200b"  # zero width space, marks the start of a multiline record


def get_logger_format(
    header_line_delimiter: str,
    service_name: str,
) -> str:
    """
    Example of format: "%(asctime)s - %(levelname)s - pakr_iec - %(logger_id)s - %(message)s\n%(extra)s"
    """
    header_line = header_line_delimiter.join(
        [
            "%(asctime)s",
            "%(levelname)s",
            service_name,
            "%(logger_id)s",
            "%(message)s",
        ]
    )
    extra_line = "%(extra)s"
    format_string = f"{header_line}\n{extra_line}\n"

    return format_string


def get_logging_config(
    service_name: str = SERVICE_NAME,
    log_level: str = LOG_LEVEL,
    log_file: Path | None = None,
) -> dict:
    """Builds a `logging.config.dictConfig` dict. File handler is added only if `log_file` is set."""
    handlers: dict[str, dict] = {
        "consoleHandler": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "stream": "ext://sys.stderr",
            "level": log_level,
        },
    }
    if log_file is not None:
        handlers["fileHandler"] = {
            "class": "logging.handlers.TimedRotatingFileHandler",
            "formatter": "standard",
            "filename": str(log_file),
            "when": "D",  # day
            "interval": LOG_FILE_REFRESH_DAY,
            "backupCount": LOG_FILE_BACKUP_COUNT,
            "level": log_level,
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": FIRST_LINE_DELIMITER
                + get_logger_format(
                    header_line_delimiter=LOG_HEADER_LINE_DELIMITER,
                    service_name=service_name,
                ),
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": handlers,
        "loggers": {
            service_name: {
                "handlers": list(handlers),
                "propagate": False,
                "level": log_level,
            },
        },
    }


def create_logger(
    log_file: Path | None = None,
    logger_name: str = SERVICE_NAME,
    log_level: str = LOG_LEVEL,
    logger_id_length: int = MAX_LOGGER_ID_LENGTH,
) -> logging.Logger:
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(
        get_logging_config(
            service_name=logger_name, log_level=log_level, log_file=log_file
        )
    )
    __log = logging.getLogger(logger_name)
    __log = PermanentExtraAdapter(
        __log, extra=dict(logger_id=shortuuid.uuid()[:logger_id_length])
    )
    # everything bellow this adapter will be turned to json
    __log = ExtraToJsonAdapter(__log, __log.extra)
    __log = ExceptionLoggingAdapter(__log, __log.extra)
    log = cast(logging.Logger, __log)
    return log
