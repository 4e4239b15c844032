import logging
import os
import sys

from dotenv import load_dotenv

load_dotenv()


def resolve_level(value):
    """Logging level for a name like "DEBUG", INFO when the name is unknown."""
    level = logging.getLevelName(str(value).upper())
    return level if isinstance(level, int) else logging.INFO


LOG_LEVEL = resolve_level(os.getenv("LOG_LEVEL", "INFO"))
LOG_FILE = os.getenv("LOG_FILE")

formatter = logging.Formatter(
    fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)

# Console handler writes to stderr, stdout carries the CSV report
console_handler = logging.StreamHandler(sys.stderr)
console_handler.setFormatter(formatter)


def get_logger(name: str = "yosemite_permits") -> logging.Logger:
    """Return a configured logger instance."""
    logger = logging.getLogger(name)
    logger.setLevel(LOG_LEVEL)

    # Avoid duplicate handlers if called multiple times
    if not logger.handlers:
        logger.addHandler(console_handler)
        if LOG_FILE:
            file_handler = logging.FileHandler(LOG_FILE, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
