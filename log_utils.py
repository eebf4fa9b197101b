import logging
import sys
from typing import Optional

from settings import Settings

BASE_LOGGER = "talentscout"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# ANSI codes per level
LEVEL_COLORS = {
    logging.DEBUG: "36",
    logging.INFO: "32",
    logging.WARNING: "33",
    logging.ERROR: "31",
    logging.CRITICAL: "35",
}


class LevelColorFormatter(logging.Formatter):
    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        code = LEVEL_COLORS.get(record.levelno)
        return f"\x1b[{code}m{line}\x1b[0m" if code else line


def _is_tty(stream) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """Set level and formatting of the ``talentscout`` logger from settings.

    Safe to call on every Streamlit rerun: the stdout handler is added once and
    only its formatter is swapped.
    """
    settings = settings or Settings()
    base = logging.getLogger(BASE_LOGGER)
    base.setLevel(getattr(logging, settings.log_level, logging.INFO))
    base.propagate = False

    if base.handlers:
        handler = base.handlers[0]
    else:
        handler = logging.StreamHandler(sys.stdout)
        base.addHandler(handler)

    use_color = settings.log_color and _is_tty(getattr(handler, "stream", None))
    formatter_cls = LevelColorFormatter if use_color else logging.Formatter
    handler.setFormatter(formatter_cls(LOG_FORMAT, datefmt=DATE_FORMAT))
    return base


def get_logger(name: Optional[str] = None) -> logging.Logger:
    base = logging.getLogger(BASE_LOGGER)
    if not base.handlers:
        configure_logging()
    return base.getChild(name) if name else base
