import logging
import os
import time
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"


def _parse_seed(raw_value: Optional[str]) -> Optional[int]:
    """
    Parse an integer seed:
      - unset/empty means no override
      - surrounding whitespace is ignored
      - anything that is not an integer logs a warning and is ignored
    """
    raw_value = (raw_value or "").strip()
    if not raw_value:
        return None
    try:
        return int(raw_value)
    except ValueError:
        logger.warning(
            "BOWLING_SEED is not a valid integer (got %r); using a time-based seed",
            raw_value,
        )
        return None


def seed_from_env() -> Optional[int]:
    return _parse_seed(os.getenv("BOWLING_SEED"))


def resolve_seed(seed: Optional[int] = None) -> int:
    """Return ``seed`` if given, else ``BOWLING_SEED``, else the current time."""
    if seed is not None:
        return seed
    env_seed = seed_from_env()
    if env_seed is not None:
        return env_seed
    return int(time.time())


def log_level_from_env() -> int:
    name = (os.getenv("BOWLING_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        logger.warning(
            "BOWLING_LOG_LEVEL %r is not a logging level; defaulting to %s",
            name,
            DEFAULT_LOG_LEVEL,
        )
        return logging.getLevelName(DEFAULT_LOG_LEVEL)
    return level


def parse_float_env(env_var: str, default: float = 0.0) -> float:
    """Read a non-negative float from ``env_var``, warning and falling back
    to ``default`` when it is missing, malformed or negative."""
    raw_value = os.getenv(env_var)
    if raw_value is None:
        return default

    try:
        value = float(raw_value)
    except ValueError:
        logger.warning(
            "%s is not a valid float (got %r); defaulting to %.2f",
            env_var,
            raw_value,
            default,
        )
        return default

    if value < 0:
        logger.warning("%s cannot be negative; defaulting to %.2f", env_var, default)
        return default

    return value
