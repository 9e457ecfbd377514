"""
Contains the configuration options for the Student Directory application
"""

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError
from pydantic_settings import BaseSettings

USERPROFILE: Path = Path(os.getenv("userprofile", os.getenv("HOME", "")))
BASE_FOLDER: Path = (USERPROFILE / ".student_directory").resolve()
SETTINGS_FILE_PATH: Path = BASE_FOLDER / "config.json"


class Settings(BaseSettings):
    """Settings class for the Student Directory application"""

    LOGGING_DIR_PATH: Path = BASE_FOLDER / "logging"

    # Remote collection
    DIRECTORY_ENDPOINT: str = "https://68a04cea6e38a02c58184c4b.mockapi.io/users"
    REQUEST_TIMEOUT: float = 10.0  # in seconds

    # Search
    SEARCH_DEBOUNCE_MS: int = 150

    # Window
    WINDOW_TITLE: str = "Students Directory"
    WINDOW_SUBTITLE: str = "A clean, simple, professional students table."

    @classmethod
    def load_from_file(cls, path: Path) -> "Settings":
        """
        Build settings from a JSON file layered over the defaults.

        A missing, unreadable or invalid file is logged and ignored.
        """
        try:
            overrides = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return cls()
        except (OSError, json.JSONDecodeError) as e:
            logging.getLogger("Config").error("Cannot read %s: %s", path, e)
            return cls()

        if not isinstance(overrides, dict):
            logging.getLogger("Config").error("Ignoring %s: not a JSON object", path)
            return cls()

        try:
            return cls(**overrides)
        except ValidationError as e:
            logging.getLogger("Config").error("Invalid settings in %s: %s", path, e)
            return cls()


settings = Settings.load_from_file(Path(SETTINGS_FILE_PATH))
