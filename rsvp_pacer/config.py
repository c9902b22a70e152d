"""Configuration defaults and .env loading.

WHY: Centralizes the default reading speeds, the accepted input file
types and the API bind address so they are easy to find, update and
override per machine without touching code.

HOW: python-dotenv loads the .env file on import. Defaults are
module-level constants read from the environment. default_run_config()
turns them into a RunConfig.

RULES:
- RSVP_START_WPM / RSVP_TARGET_WPM default to 100 / 300
- RSVP_ACCELERATION_S is in seconds (default 10); RunConfig uses ms
- Malformed integers raise ValueError naming the variable
- All defaults can be overridden via environment variables
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

from rsvp_pacer.core.models import RunConfig

# Load .env from the project root (where the script is run from)
load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(
            "{} must be an integer, got {!r}. Check the .env file.".format(name, raw)
        ) from None


# ---------------------------------------------------------------------------
# Reading speed defaults
# ---------------------------------------------------------------------------

DEFAULT_START_WPM = _env_int("RSVP_START_WPM", 100)
DEFAULT_TARGET_WPM = _env_int("RSVP_TARGET_WPM", 300)
DEFAULT_ACCELERATION_S = _env_int("RSVP_ACCELERATION_S", 10)

# ---------------------------------------------------------------------------
# Input files
# ---------------------------------------------------------------------------

SUPPORTED_TEXT_EXTENSIONS: set[str] = {".txt", ".md", ".text"}
"""Text file extensions accepted by the CLI (lowercase, with dot)."""

# ---------------------------------------------------------------------------
# HTTP API
# ---------------------------------------------------------------------------

API_HOST = os.getenv("RSVP_API_HOST", "127.0.0.1")
API_PORT = _env_int("RSVP_API_PORT", 8000)


def default_run_config() -> RunConfig:
    """Build a RunConfig from the environment defaults.

    RULES:
    - Not validated here; PlaybackController.start validates
    """
    return RunConfig(
        start_wpm=DEFAULT_START_WPM,
        target_wpm=DEFAULT_TARGET_WPM,
        acceleration_ms=DEFAULT_ACCELERATION_S * 1000,
    )
