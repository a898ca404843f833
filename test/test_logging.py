import io
import logging

import pytest

from lazysets.checked import CountOverflowError
from lazysets.logging import (
    ColorFormatter,
    LogColors,
    log_exception,
    setup_color_logging,
)
from lazysets.powerset import powerset


def test_color_formatter() -> None:
    formatter = ColorFormatter("%(levelname)s %(message)s")
    record = logging.LogRecord("lazysets", logging.WARNING, "x.py", 1, "hi", (), None)
    assert formatter.format(record) == f"{LogColors.YELLOW}WARNING{LogColors.RESET} hi"
    assert record.levelname == "WARNING"


def test_setup_color_logging() -> None:
    stream = io.StringIO()
    handler = setup_color_logging(
        level=logging.DEBUG, names=["test_logging"], stream=stream
    )
    try:
        logging.getLogger("test_logging.child").debug("hello")
        assert "hello" in stream.getvalue()
        assert not isinstance(handler.formatter, ColorFormatter)
    finally:
        logging.getLogger("test_logging").removeHandler(handler)


def test_log_exception(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("lazysets.test")
    try:
        powerset(range(100)).count()
    except CountOverflowError as e:
        log_exception(logger, e, "Cannot count")
    assert "Cannot count:" in caplog.text
    assert "CountOverflowError" in caplog.text
    assert "Traceback" in caplog.text


def test_debug_logging(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="lazysets"):
        list(powerset([1, 2]))
    assert "Growing powerset to size 1" in caplog.text
    assert "Growing powerset to size 2" in caplog.text
    assert "Powerset of 2 elements is exhausted" in caplog.text
