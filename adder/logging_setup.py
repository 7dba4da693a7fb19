"""
Logging configuration for adder
"""

import logging
import time
from typing import Optional

from adder.policy import resolve_settings


class ElapsedMsFormatter(logging.Formatter):
    """Formatter that shows milliseconds since program start, right-aligned for up to 9999 seconds."""
    def __init__(self, fmt=None, datefmt=None, *args, **kwargs):
        super().__init__(fmt, datefmt, *args, **kwargs)
        self.start_time = time.monotonic()
        self.width = 8  # Enough for '9999000ms'

    def format(self, record):
        elapsed_ms = int((time.monotonic() - self.start_time) * 1000)
        if elapsed_ms < 10**7:
            elapsed = f"[{elapsed_ms:>{self.width}}ms]"
        else:
            elapsed = f"[{elapsed_ms}ms]"
        record.elapsed = elapsed
        return super().format(record)


VERBOSE_LEVEL = 15  # Between INFO (20) and DEBUG (10)
logging.addLevelName(VERBOSE_LEVEL, "VERBOSE")


def verbose(self, message, *args, **kwargs):
    if self.isEnabledFor(VERBOSE_LEVEL):
        self._log(VERBOSE_LEVEL, message, args, **kwargs)
logging.Logger.verbose = verbose  # type: ignore[attr-defined]


def _level_from_name(name: str) -> int:
    if name == "VERBOSE":
        return VERBOSE_LEVEL
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.INFO


def setup_logging(
    debug: bool = False,
    verbose: bool = False,
    logger_name: Optional[str] = "adder",
) -> logging.Logger:
    """Set up logging configuration for the adder logger hierarchy"""
    if debug:
        log_level = logging.DEBUG
    elif verbose:
        log_level = VERBOSE_LEVEL
    else:
        log_level = _level_from_name(resolve_settings().log_level)
    formatter = ElapsedMsFormatter('%(elapsed)s %(levelname)s %(name)s: %(message)s')
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    target = logging.getLogger(logger_name)
    target.handlers = []  # Remove any existing handlers
    target.addHandler(handler)
    target.setLevel(log_level)
    return target
