"""Application configuration loaded from the environment."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

_LOGGER = logging.getLogger(__name__)

ENV_PREFIX = "ARCADE_"


@dataclass(frozen=True)
class ArcadeConfig:
    """Runtime settings.

    An empty ``api_base_url`` selects the in-memory services (offline play).
    """

    api_base_url: str = ""
    language: str = "English"
    log_level: str = "INFO"
    frame_interval_ms: int = 16
    leaderboard_limit: int = 10
    request_timeout: float = 5.0

    @property
    def offline(self) -> bool:
        return not self.api_base_url

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ArcadeConfig:
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            api_base_url=env.get(f"{ENV_PREFIX}API_BASE_URL", defaults.api_base_url).strip(),
            language=env.get(f"{ENV_PREFIX}LANGUAGE", defaults.language),
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level).upper(),
            frame_interval_ms=_int(env, "FRAME_INTERVAL_MS", defaults.frame_interval_ms, 1),
            leaderboard_limit=_int(env, "LEADERBOARD_LIMIT", defaults.leaderboard_limit, 1),
            request_timeout=_float(env, "REQUEST_TIMEOUT", defaults.request_timeout),
        )


def _int(env: Mapping[str, str], name: str, default: int, minimum: int) -> int:
    raw = env.get(ENV_PREFIX + name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        _LOGGER.warning("Ignoring %s%s=%r: not an integer", ENV_PREFIX, name, raw)
        return default
    return max(minimum, value)


def _float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(ENV_PREFIX + name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        _LOGGER.warning("Ignoring %s%s=%r: not a number", ENV_PREFIX, name, raw)
        return default
    return value if value > 0 else default
