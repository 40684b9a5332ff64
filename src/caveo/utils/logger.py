"""Caveo custom logger."""

import logging
import os
import sys
from pathlib import Path

_log_levels = {
    0: logging.NOTSET,  # no logging
    1: logging.INFO,  # default, INFO and above
    2: logging.DEBUG,  # DEBUG and above
}

# directory holding the `caveo` package, records are shown relative to it
_SOURCE_ROOT = Path(__file__).resolve().parents[2]


class PackagePathFilter(logging.Filter):
    """Adds `relativepath` to the record: the path inside the package, or the file name outside it."""

    def filter(self, record):
        pathname = Path(record.pathname).resolve()
        try:
            record.relativepath = pathname.relative_to(_SOURCE_ROOT)
        except ValueError:
            record.relativepath = pathname.name
        return True


class CustomFormatter(logging.Formatter):
    """Colored formatter, one color per log level."""

    reset = "\x1b[0m"
    location_color = "\x1b[33;20m"
    level_colors = {
        logging.DEBUG: "\x1b[36;20m",
        logging.INFO: "\x1b[32;20m",
        logging.WARNING: "\x1b[33;20m",
        logging.ERROR: "\x1b[31;20m",
        logging.CRITICAL: "\x1b[31;1m",
    }

    prefix = "[%(asctime)s-%(name)s-%(levelname)s]"
    location = "(%(relativepath)s:%(funcName)s:%(lineno)d)"

    def __init__(self):
        super().__init__(datefmt="%Y-%m-%d %H:%M:%S")
        self._formatters = {
            level: logging.Formatter(
                f"{color}{self.prefix}{self.reset} %(message)s {self.location_color}{self.location}{self.reset}",
                datefmt=self.datefmt,
            )
            for level, color in self.level_colors.items()
        }

    def format(self, record):
        formatter = self._formatters.get(record.levelno, self._formatters[logging.INFO])
        return formatter.format(record)


def build_logger(key: str) -> logging.Logger:
    """
    Returns the custom logger with the specified key.
    The default log level is `INFO`, change it via the `<KEY>_LOGLEVEL` env variable (0, 1 or 2).
    """
    _logger = logging.getLogger(key)
    log_level = int(os.environ.get(f"{key}_LOGLEVEL", 1))
    _logger.setLevel(_log_levels.get(log_level, logging.INFO))
    if not _logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(CustomFormatter())
        handler.addFilter(PackagePathFilter())
        _logger.addHandler(handler)
    return _logger


# exported module logger
logger = build_logger("CAVEO")
