from __future__ import annotations

import json
import logging
import sys
from abc import ABC, abstractmethod

import shortuuid

LoggerType = logging.Logger | logging.LoggerAdapter


class ExtraToJsonAdapter(logging.LoggerAdapter, ABC):
    """
    Converts all extra fields to json string and puts them under `extra` key.

    Before: extra={"value": 1024, "mode": "iec"}
    After:  extra={"extra": "{\"mode\": \"iec\", \"value\": 1024}"}
    Usage: log.info("Formatted", extra={"value": 1024})

    warning: fields which must stay out of the json string (e.g. `logger_id`)
    have to be added by an adapter wrapped by this one.
    """

    def process(self, msg, kwargs):
        extra = kwargs.get("extra")
        if extra is None:
            extra = {}

        extra.pop(None, None)  # pop None key

        json_str = json.dumps(extra, sort_keys=True, default=str)
        extra = dict(extra=json_str)
        kwargs["extra"] = extra
        return msg, kwargs


class AppendExtraAdapter(logging.LoggerAdapter, ABC):
    """
    Adds fields to the log's extra dict. Concrete classes implement `get_extra`.

    Before: extra = {"a": 1, "b": 2} | self.get_extra()
    After:  extra = {"a": 1, "b": 2, "c": 3, "d": 4}
    """

    def process(self, msg, kwargs):
        extra = kwargs.get("extra")
        if extra is None:
            extra = {}
        extra = self.get_extra(msg, kwargs) | extra
        kwargs["extra"] = extra
        return msg, kwargs

    @abstractmethod
    def get_extra(self, msg, kwargs) -> dict:
        raise NotImplementedError


class PermanentExtraAdapter(AppendExtraAdapter):
    """
    Appends an input dictionary (passed as `extra`) to every log's extra.

    Usage:
        PermanentExtraAdapter(logger, extra={"logger_id": "98q39"})
    """

    def __init__(self, logger: LoggerType, extra: dict):
        if not isinstance(extra, dict):
            raise ValueError("extra has to be a dictionary")
        super().__init__(logger, extra)

    def get_extra(self, msg, kwargs):
        return dict(self.extra)  # type: ignore


class ExceptionLoggingAdapter(AppendExtraAdapter):
    """
    If exception exists, adds error fields to the extra of the log message.
    Exception has to be passed explicitly in the exc_info argument.

    After: extra = {
                "error_type": "MagnitudeOutOfRangeError",
                "error_value": "magnitude ... is out of range ...",
                "error_id": "98q39..."
            }
    """

    def get_error_dict(self, exc_info: BaseException | tuple) -> dict:
        if isinstance(exc_info, BaseException):
            error_value = exc_info
        else:
            _, error_value, _ = exc_info

        return dict(
            error_type=type(error_value).__name__,
            error_value=error_value,
            error_id=shortuuid.uuid(),
        )

    def get_extra(self, msg, kwargs):
        exc_info = kwargs.get("exc_info")
        if not exc_info:
            return {}
        if exc_info is True:
            exc_info = sys.exc_info()
            if exc_info[1] is None:
                return {}
        return self.get_error_dict(exc_info)
