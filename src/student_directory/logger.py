"""Logging setup for the Student Directory application"""

import datetime
import logging
from pathlib import Path
from typing import override

from student_directory.config import settings

# Third-party loggers that are too chatty at DEBUG
NOISY_LOGGERS: list[str] = ["urllib3", "requests"]


def configure_logging(level: int = logging.DEBUG) -> Path:
    """Attach a file handler and a coloured console handler to the root logger.

    Returns the path of the log file for this session.
    """
    settings.LOGGING_DIR_PATH.mkdir(parents=True, exist_ok=True)
    now: str = datetime.datetime.now().strftime("%Y-%m-%d-%H-%M")
    log_file = settings.LOGGING_DIR_PATH / f"directory-{now}.log"

    file_handler = logging.FileHandler(log_file, encoding="UTF-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s - [%(name)s]- %(levelname)s - [%(module)s:%(lineno)d] - %(message)s"
        )
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(ColourFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return log_file


class ColourFormatter(logging.Formatter):
    """Console formatter that colours the whole line by level"""

    grey: str = "\x1b[38;20m"
    yellow: str = "\x1b[33;20m"
    red: str = "\x1b[31;20m"
    bold_red: str = "\x1b[31;1m"
    reset: str = "\x1b[0m"
    line_format: str = (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s (%(filename)s:%(lineno)d)"
    )

    COLOURS: dict[int, str] = {
        logging.DEBUG: grey,
        logging.INFO: grey,
        logging.WARNING: yellow,
        logging.ERROR: red,
        logging.CRITICAL: bold_red,
    }

    def __init__(self):
        super().__init__()
        self._formatters: dict[int, logging.Formatter] = {
            levelno: logging.Formatter(colour + self.line_format + self.reset)
            for levelno, colour in self.COLOURS.items()
        }
        self._fallback: logging.Formatter = logging.Formatter(self.line_format)

    @override
    def format(self, record: logging.LogRecord) -> str:
        formatter = self._formatters.get(record.levelno, self._fallback)
        return formatter.format(record)
