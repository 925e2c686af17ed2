"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .fly import DEFAULT_FLY_API_URL, FlyConfig, get_fly_config
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .logging import LOG_LEVEL_ENV, configure_logging, resolve_log_level

__all__ = [
    "DEFAULT_FLY_API_URL",
    "LOG_LEVEL_ENV",
    "ConfigurationError",
    "FlyConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "configure_logging",
    "get_fly_config",
    "optional_env_var",
    "require_env_vars",
    "resolve_log_level",
]
