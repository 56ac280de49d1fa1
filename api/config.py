"""Server settings read from the environment."""

import logging
import os

from games.secretword.rules import DEFAULT_DISCUSSION_SECONDS

ENV_LOG_LEVEL = "PARTY_PORTAL_LOG_LEVEL"
ENV_DISCUSSION_SECONDS = "PARTY_PORTAL_DISCUSSION_SECONDS"
ENV_CORS_ORIGINS = "PARTY_PORTAL_CORS_ORIGINS"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_CORS_ORIGINS = "*"


def get_log_level() -> int:
    """Numeric logging level; unknown names fall back to INFO."""
    name = os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def get_discussion_seconds() -> int:
    """Default Secret Word discussion length for games created without one."""
    raw = os.environ.get(ENV_DISCUSSION_SECONDS)
    if not raw:
        return DEFAULT_DISCUSSION_SECONDS
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{ENV_DISCUSSION_SECONDS} must be an integer, got {raw!r}")
    if value <= 0:
        raise ValueError(f"{ENV_DISCUSSION_SECONDS} must be positive, got {value}")
    return value


def get_cors_origins() -> list[str]:
    """Comma-separated origin list; "*" allows any origin."""
    raw = os.environ.get(ENV_CORS_ORIGINS, DEFAULT_CORS_ORIGINS)
    return [o.strip() for o in raw.split(",") if o.strip()] or [DEFAULT_CORS_ORIGINS]


def configure_logging() -> None:
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
