"""
Environment configuration shared by the HTTP API and the console front end.

Config (env vars):
    LOG_LEVEL: Console log level (default: INFO)
    LOG_FILE: Base path of the rotating log file (default: logs/search-server.log)
    MAX_RESULT_DOCUMENT_COUNT: Maximum results per search (default: 5)
    SEARCH_SERVER_STOP_WORDS: Initial stop words for the API engine (default: none)
    PORT: HTTP port for uvicorn (default: 8080)
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .logging_config import DEFAULT_LOG_FILE
from .search_server.ranking import MAX_RESULT_DOCUMENT_COUNT

PROJECT_ROOT = Path(__file__).parent.parent


def load_environment(project_root: Path = PROJECT_ROOT) -> Optional[Path]:
    """
    Load .env.local (local dev) or .env (fallback) into os.environ.

    Returns:
        The file that was loaded, or None if neither exists
    """
    for candidate in (project_root / ".env.local", project_root / ".env"):
        if candidate.exists():
            load_dotenv(candidate, override=True)
            return candidate
    return None


def get_log_level() -> int:
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    return getattr(logging, log_level, logging.INFO)


def get_log_file() -> str:
    return os.getenv("LOG_FILE", DEFAULT_LOG_FILE)


def get_max_result_document_count() -> int:
    """
    Read MAX_RESULT_DOCUMENT_COUNT.

    Raises:
        ValueError: Value is not a positive integer
    """
    value = os.getenv("MAX_RESULT_DOCUMENT_COUNT")
    if not value:
        return MAX_RESULT_DOCUMENT_COUNT
    try:
        count = int(value)
    except ValueError:
        raise ValueError(f"MAX_RESULT_DOCUMENT_COUNT must be an integer, got {value!r}") from None
    if count < 1:
        raise ValueError(f"MAX_RESULT_DOCUMENT_COUNT must be positive, got {count}")
    return count


def get_stop_words() -> Optional[str]:
    return os.getenv("SEARCH_SERVER_STOP_WORDS")


def get_port() -> int:
    return int(os.getenv("PORT", "8080"))
