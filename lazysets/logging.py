import logging
import sys
import traceback
from collections.abc import Iterable
from logging import Formatter, Logger, StreamHandler
from typing import TextIO

FORMAT = "%(levelname)s\t%(name)s:%(lineno)d %(message)s"
LOGGER_NAMES = ("lazysets", "__main__")


def log_exception(
    logger: Logger, e: BaseException, msg: str = "Caught exception"
) -> None:
    """Like logger.exception(e) but usable outside an except block."""
    stack_trace = "".join(traceback.format_exception(type(e), e, e.__traceback__))
    logger.error(f"{msg}:\n{stack_trace}")


class LogColors:
    RESET = "\033[0m"
    CYAN = "\033[36m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    RED = "\033[31m"
    BRIGHT_RED = "\033[91m"


class ColorFormatter(Formatter):
    """Formatter that colors the level name of each record."""

    LEVEL_COLORS = {
        logging.DEBUG: LogColors.CYAN,
        logging.INFO: LogColors.GREEN,
        logging.WARNING: LogColors.YELLOW,
        logging.ERROR: LogColors.RED,
        logging.CRITICAL: LogColors.BRIGHT_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        color = self.LEVEL_COLORS.get(record.levelno)
        if color:
            record.levelname = color + levelname + LogColors.RESET
        try:
            return super().format(record)
        finally:
            # Other handlers may share this record.
            record.levelname = levelname


def setup_color_logging(
    format: str = FORMAT,
    level: int = logging.INFO,
    *,
    names: Iterable[str] = LOGGER_NAMES,
    stream: TextIO | None = None,
) -> StreamHandler:
    """Routes the named loggers to a single stream, colored if it is a tty."""
    if stream is None:
        stream = sys.stderr
    handler = StreamHandler(stream)
    formatter: Formatter
    if stream.isatty():
        formatter = ColorFormatter(format)
    else:
        formatter = Formatter(format)
    handler.setFormatter(formatter)
    for name in names:
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.addHandler(handler)
        logger.setLevel(level)
    return handler
