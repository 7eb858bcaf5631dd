# riskview/logging_setup.py
import logging
import sys

from riskview.config import LOG_LEVEL

_FMT = "%(asctime)s - %(levelname)s - [%(name)s:%(funcName)s:%(lineno)d] - %(message)s"

_COLORS = {
    "DEBUG":    "\033[36m",
    "INFO":     "\033[32m",
    "WARNING":  "\033[33m",
    "ERROR":    "\033[31m",
    "CRITICAL": "\033[1;31m",
}
_RESET = "\033[0m"


class ColoredFormatter(logging.Formatter):
    """Colours the level name when writing to a terminal."""

    def __init__(self, fmt: str = _FMT, datefmt: str | None = None, use_colors: bool = True):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors and hasattr(sys.stderr, "isatty") and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_colors or record.levelname not in _COLORS:
            return super().format(record)
        orig = record.levelname
        record.levelname = f"{_COLORS[orig]}{orig}{_RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = orig


def setup_logging(level: str = LOG_LEVEL) -> None:
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ColoredFormatter(datefmt="%Y-%m-%d %H:%M:%S"))
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.addHandler(handler)


_configured = False


def get_logger(name: str) -> logging.Logger:
    global _configured
    if not _configured:
        setup_logging()
        _configured = True
    return logging.getLogger(name)
