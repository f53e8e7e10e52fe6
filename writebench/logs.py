"""Console logging for the benchmark"""

import contextlib
import logging
import sys


LOGGER_NAME = "writebench"
DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"


def configure_logging(debug: bool = False, stream=None) -> logging.Logger:
    """Install a single console handler; per-file lines only show up with debug"""
    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(logging.DEBUG if debug else logging.INFO)
    log.propagate = False

    for handler in list(log.handlers):
        with contextlib.suppress(Exception):
            handler.close()
        log.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT, DEFAULT_LOG_DATEFMT))
    log.addHandler(handler)

    # botocore is chatty at DEBUG
    logging.getLogger("botocore").setLevel(logging.WARNING)
    logging.getLogger("s3transfer").setLevel(logging.WARNING)
    return log
