"""Library configuration: NullsafeConfig, init() and get_config()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from nullsafe._logging import configure_logging, get_logger

__all__ = [
    'ENV_LOG_FORMAT',
    'ENV_LOG_LEVEL',
    'NullsafeConfig',
    'get_config',
    'init',
]

ENV_LOG_LEVEL = 'NULLSAFE_LOG_LEVEL'
ENV_LOG_FORMAT = 'NULLSAFE_LOG_FORMAT'


@dataclass(frozen=True)
class NullsafeConfig:
    """Configuration for nullsafe.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Render logs as JSON (True) or for the console (False).
    """

    log_level: str | None = None
    json_output: bool = True


# Global configuration (set by init())
_config: NullsafeConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from NULLSAFE_LOG_LEVEL; empty or unset means silent."""
    level = os.environ.get(ENV_LOG_LEVEL, '').strip().upper()
    return level or None


def _detect_json_output() -> bool:
    """Read the output format from NULLSAFE_LOG_FORMAT ("json" or "console")."""
    fmt = os.environ.get(ENV_LOG_FORMAT, '').strip().lower()
    if fmt == 'console':
        return False
    if fmt and fmt != 'json':
        logging.warning("Unknown %s value '%s', defaulting to json", ENV_LOG_FORMAT, fmt)
    return True


def init(
    log_level: str | None = None,
    *,
    json_output: bool | None = None,
) -> NullsafeConfig:
    """Initialize nullsafe's logging configuration.

    Arguments win over the environment; anything left as None is read
    from NULLSAFE_LOG_LEVEL / NULLSAFE_LOG_FORMAT.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = environment, then silent.
        json_output: JSON (True) or console (False) rendering. None = environment, then JSON.

    Returns:
        The NullsafeConfig that was set.

    Example:
        ```python
        from nullsafe.config import init

        init()                                  # from the environment
        init('DEBUG', json_output=False)        # explicit
        ```
    """
    global _config  # noqa: PLW0603

    _config = NullsafeConfig(
        log_level=log_level.upper() if log_level is not None else _detect_log_level(),
        json_output=json_output if json_output is not None else _detect_json_output(),
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_output)
        get_logger(__name__).debug(
            'nullsafe configured',
            log_level=_config.log_level,
            json_output=_config.json_output,
        )

    return _config


def get_config() -> NullsafeConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'nullsafe not initialized. Call nullsafe.init() first.'
        raise RuntimeError(msg)
    return _config
