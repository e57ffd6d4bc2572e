"""
Configuration for the plate layout generator.
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    """Integer environment variable; a malformed value names the variable."""
    raw = os.getenv(name, str(default))
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer, got {raw!r}") from None


# Generator defaults
DEFAULT_GROUP_SIZE = _env_int("PLATELAYOUT_GROUP_SIZE", 1)
DEFAULT_STRATEGY = os.getenv("PLATELAYOUT_STRATEGY", "SampleLayout")
DEFAULT_ROWS = _env_int("PLATELAYOUT_ROWS", 8)
DEFAULT_COLUMNS = _env_int("PLATELAYOUT_COLUMNS", 12)

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "")  # empty = console only

# Web API
PORT = _env_int("PORT", 5050)
DEBUG = os.getenv("FLASK_DEBUG", "false").lower() == "true"


def get_default_dimensions():
    """Return the default plate dimensions as (rows, columns)."""
    return DEFAULT_ROWS, DEFAULT_COLUMNS
