import logging

from curvetx.logging import logger


def test_package_logger():
    assert logger is logging.getLogger("curvetx")
    assert logger.propagate is False
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)
