import logging

"""
The package logger. Records are written to stderr and kept out of the root logger, so an
application embedding curvetx controls its own output. The level is taken from the `logging.level`
setting when the configuration is loaded.
"""

logger = logging.getLogger("curvetx")
logger.propagate = False
logger.setLevel(logging.INFO)
if not logger.handlers:
    logger.addHandler(logging.StreamHandler())
