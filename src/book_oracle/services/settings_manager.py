"""Settings Manager - Handles API key, model and request configuration."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_MODEL_NAME = "gemini-2.5-flash"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_LOG_LEVEL = "INFO"


class SettingsManager:
    """
    Manages settings and API key configuration.

    Reads values from a .env file in the project root; real environment
    variables take precedence. Every getter reads the environment at call time.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_gemini_api_key(self) -> Optional[str]:
        """Get the Gemini API key from environment (GEMINI_API_KEY, then API_KEY)."""
        for name in ("GEMINI_API_KEY", "API_KEY"):
            key = os.getenv(name)
            if key and key.strip():
                return key.strip()
        return None

    def get_model_name(self) -> str:
        model = os.getenv("BOOK_ORACLE_MODEL")
        return model.strip() if model and model.strip() else DEFAULT_MODEL_NAME

    def get_request_timeout_seconds(self) -> float:
        """Upper bound for a single model request. Falls back to the default on bad input."""
        raw = os.getenv("BOOK_ORACLE_TIMEOUT_SECONDS")
        if not raw or not raw.strip():
            return DEFAULT_TIMEOUT_SECONDS
        try:
            value = float(raw)
        except ValueError:
            logger.warning("Ignoring non-numeric BOOK_ORACLE_TIMEOUT_SECONDS=%r", raw)
            return DEFAULT_TIMEOUT_SECONDS
        if value <= 0:
            logger.warning("Ignoring non-positive BOOK_ORACLE_TIMEOUT_SECONDS=%r", raw)
            return DEFAULT_TIMEOUT_SECONDS
        return value

    def get_log_level(self) -> str:
        """Logging level name. Falls back to INFO when the name is unknown."""
        level = os.getenv("BOOK_ORACLE_LOG_LEVEL", "INFO").strip().upper()
        if not level:
            return DEFAULT_LOG_LEVEL
        # getLevelName maps known names to ints and unknown ones to "Level X"
        if not isinstance(logging.getLevelName(level), int):
            logger.warning("Ignoring unknown BOOK_ORACLE_LOG_LEVEL=%r", level)
            return DEFAULT_LOG_LEVEL
        return level

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)
