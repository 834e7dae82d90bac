"""Runtime settings read from the environment.

Values come from environment variables first, then from a ``.env`` or
``settings.ini`` file if one is found (python-decouple's lookup order).

    CHECKOUT_DATA_DIR    directory holding the JSON data files
    CHECKOUT_LOG_LEVEL   stdlib level name, default WARNING
    CHECKOUT_LOG_JSON    render log lines as JSON, default false
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from decouple import config

# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:

    data_dir: Path
    log_level: str
    log_json: bool


def load_settings() -> Settings:
    """Read the settings, raising ValueError for an unknown log level."""
    log_level = config("CHECKOUT_LOG_LEVEL", default="WARNING").strip().upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(
            f"Invalid CHECKOUT_LOG_LEVEL {log_level!r}; expected one of {', '.join(LOG_LEVELS)}"
        )

    return Settings(
        data_dir=config("CHECKOUT_DATA_DIR", default=str(DEFAULT_DATA_DIR), cast=Path),
        log_level=log_level,
        log_json=config("CHECKOUT_LOG_JSON", default=False, cast=bool),
    )
