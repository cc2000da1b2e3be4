"""Colored, filtered console logging for the analyzer scripts."""
import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from socnet.config import get_log_dir

LOG_FILE_NAME = "socnet.log"


class Colors:
    """ANSI color codes."""
    RESET = "\033[0m"
    BOLD = "\033[1m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"


class ColoredFormatter(logging.Formatter):
    """A logging formatter that adds colors to the output."""

    LOG_LEVEL_COLORS = {
        logging.DEBUG: Colors.CYAN,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD + Colors.RED,
    }

    def format(self, record):
        color = self.LOG_LEVEL_COLORS.get(record.levelno)
        message = super().format(record)
        if color:
            return color + message + Colors.RESET
        return message


class ConsoleFilter(logging.Filter):
    """Keeps the console to warnings plus INFO from our own code."""

    ALLOWED_PREFIXES = ("socnet", "analyze_network", "__main__")

    def filter(self, record):
        if record.levelno >= logging.WARNING:
            return True

        if record.levelno == logging.INFO:
            return record.name.startswith(self.ALLOWED_PREFIXES)

        return False


def setup_logging(
    console_level=logging.INFO,
    file_level=logging.DEBUG,
    quiet=False,
    log_dir: Optional[Path] = None,
) -> Path:
    """
    Set up logging with a colored, filtered console handler and a verbose
    rotating file handler. Returns the log file path.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(console_level)
        console_handler.setFormatter(ColoredFormatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S"
        ))
        console_handler.addFilter(ConsoleFilter())
        root_logger.addHandler(console_handler)

    log_dir = Path(log_dir) if log_dir is not None else get_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    file_handler = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=5 * 1024 * 1024, backupCount=5
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"
    ))
    root_logger.addHandler(file_handler)

    logging.getLogger(__name__).info(f"Logging initialized; writing {log_file}")
    return log_file
