import io
import logging

import pytest

import fsbox.logging


@pytest.fixture
def logger(request):
    logger = logging.getLogger(f"fsbox.tests.{request.node.name}")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture(params=[
    (0, logging.WARNING),
    (1, logging.INFO),
    (2, logging.DEBUG),
    (5, logging.DEBUG),
    ("info", logging.INFO),
    ("ERROR", logging.ERROR),
])
def verbosity(request):
    return request.param


def test_set_logging_level(logger, verbosity):
    value, level = verbosity
    assert fsbox.logging.set_logging_level(logger, value) == level
    assert logger.level == level


def test_set_logging_level_invalid(logger):
    with pytest.raises(ValueError):
        fsbox.logging.set_logging_level(logger, "loud")
    with pytest.raises(ValueError):
        fsbox.logging.set_logging_level(logger, -1)


def test_get_logger_level():
    logger = fsbox.logging.get_logger("fsbox.tests.get_logger", level="debug")
    assert logger.level == logging.DEBUG


def test_set_default_handlers(logger, tmp_path):
    stream = io.StringIO()
    path = tmp_path / "run.log"
    handlers = fsbox.logging.set_default_handlers(logger, file=str(path), stream=stream)
    assert len(handlers) == 2

    fsbox.logging.set_logging_level(logger, 2)
    logger.debug("hello %s", "world")
    for handler in handlers:
        handler.flush()
    assert "hello world" in stream.getvalue()
    assert "hello world" in path.read_text()

    # Handlers are replaced, not accumulated
    handlers = fsbox.logging.set_default_handlers(logger, stream=None)
    assert handlers == []
    assert logger.handlers == []
