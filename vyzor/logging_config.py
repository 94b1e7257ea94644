"""Console logging for the 'vyzor' logger namespace.

Components log through logging.getLogger(__name__) and stay silent until
the host script calls setup_logging().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from .constants import LOGGER_NAME, LOG_LEVEL

LOG_FORMAT = '%(asctime)s %(levelname)-7s %(name)s: %(message)s'
LOG_DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int | str = LOG_LEVEL, stream: Optional[TextIO] = None) -> logging.Logger:
	"""Route 'vyzor' records to a stream (stdout unless given) at the given level.

	Calling it again replaces the handler, so reloading a script does not
	duplicate output.
	"""
	logger = logging.getLogger(LOGGER_NAME)
	logger.setLevel(level)
	for handler in list(logger.handlers):
		logger.removeHandler(handler)

	handler = logging.StreamHandler(sys.stdout if stream is None else stream)
	handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
	logger.addHandler(handler)

	logger.debug("Logging to %s at %s", getattr(handler.stream, 'name', 'stream'), logging.getLevelName(logger.level))
	return logger
