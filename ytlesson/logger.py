import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class _BelowWarningFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Send INFO records to stdout and WARNING and above to stderr."""
    logger = logging.getLogger("ytlesson")
    logger.setLevel(level.upper())
    logger.handlers.clear()

    stdout_handler = logging.StreamHandler(sys.stdout)
    stderr_handler = logging.StreamHandler(sys.stderr)

    stdout_handler.addFilter(_BelowWarningFilter())
    stderr_handler.setLevel(logging.WARNING)

    formatter = logging.Formatter(LOG_FORMAT)
    stdout_handler.setFormatter(formatter)
    stderr_handler.setFormatter(formatter)

    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)
    return logger
