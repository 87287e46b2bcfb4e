"""Settings sourced from environment variables."""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_YEARS_BEFORE = 2
DEFAULT_YEARS_AFTER = 2


def _env_non_negative_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer, using %d", name, raw, default)
        return default
    if value < 0:
        logger.warning("Ignoring %s=%r: must not be negative, using %d", name, raw, default)
        return default
    return value


@dataclass(frozen=True)
class Settings:
    """Runtime settings.

    Attributes:
        db_path: SQLite file path, or None for the default location.
        log_level: Level name for the bukukas logger.
        years_before: Years before the anchor year shown in year view.
        years_after: Years after the anchor year shown in year view.
    """

    db_path: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL
    years_before: int = DEFAULT_YEARS_BEFORE
    years_after: int = DEFAULT_YEARS_AFTER

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from BUKUKAS_* environment variables."""
        env = os.environ if env is None else env
        return cls(
            db_path=env.get("BUKUKAS_DB_PATH") or None,
            log_level=(env.get("BUKUKAS_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
            years_before=_env_non_negative_int(env, "BUKUKAS_YEARS_BEFORE", DEFAULT_YEARS_BEFORE),
            years_after=_env_non_negative_int(env, "BUKUKAS_YEARS_AFTER", DEFAULT_YEARS_AFTER),
        )
