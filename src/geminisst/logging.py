import logging
import sys

from pythonjsonlogger.json import JsonFormatter

LOGGER_NAME = "geminisst"


def setup_logging(level: int | str = logging.INFO) -> logging.Logger:
    """
    Configures structured JSON logging for the library.

    Attaches a single stderr handler with a JSON formatter that includes
    timestamp, level, logger name and message to the ``geminisst`` logger.
    The root logger is left untouched so host applications keep control of
    their own logging. Calling this more than once only adjusts the level.

    Returns:
        logging.Logger: The configured library logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not logger.handlers:
        formatter = JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s")
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)
        logger.propagate = False

    return logger
