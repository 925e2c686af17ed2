"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging
from typing import Final

from .env import optional_env_var

LOG_LEVEL_ENV: Final[str] = "FLYPROVIDER_LOG_LEVEL"


def resolve_log_level(default: int = logging.INFO) -> int:
    """Return the level named by ``FLYPROVIDER_LOG_LEVEL``, or ``default``."""

    name = optional_env_var(LOG_LEVEL_ENV, "").upper()
    if not name:
        return default
    level = logging.getLevelNamesMapping().get(name)
    return default if level is None else level


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once.

    Without ``level`` the environment decides, defaulting to INFO. Pass
    ``force=True`` to reconfigure during tests.
    """

    logging.basicConfig(
        level=resolve_log_level() if level is None else level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    # request lines from httpx would repeat every GraphQL call at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
