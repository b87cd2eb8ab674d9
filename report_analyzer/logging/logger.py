import logging
import sys
from typing import TextIO

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class Log:
    """Centralized logging for the analysis pipeline.

    Keyword arguments are attached to the record as extras and rendered
    after the message as ``key=value`` pairs.
    """

    _logger: logging.Logger = logging.getLogger("report_analyzer")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and write records to *stream* (stdout by default).

        Calling it again replaces the handler from the previous call.
        """
        cls._logger.setLevel(log_level.upper())
        for handler in list(cls._logger.handlers):
            cls._logger.removeHandler(handler)
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT))
        cls._logger.addHandler(handler)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._log(logging.DEBUG, message, kwargs)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._log(logging.INFO, message, kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._log(logging.WARNING, message, kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._log(logging.ERROR, message, kwargs)

    @classmethod
    def _log(cls, level: int, message: str, fields: dict[str, object]) -> None:
        if not cls._logger.isEnabledFor(level):
            return
        if fields:
            pairs = " ".join(f"{key}={value}" for key, value in fields.items())
            message = f"{message} [{pairs}]"
        cls._logger.log(level, message, extra=fields)
