"""Package configuration: PreludeConfig, init() and get_config()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from mprelude._logging import configure_logging

__all__ = [
    'PreludeConfig',
    'get_config',
    'init',
]

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class PreludeConfig:
    """Configuration for mprelude.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Render logs as JSON (True) or colored console output (False).
    """

    log_level: str | None = None
    json_logs: bool = True


# Global configuration (set by init())
_config: PreludeConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from MPRELUDE_LOG_LEVEL, if set."""
    env_level = os.environ.get('MPRELUDE_LOG_LEVEL', '').strip()
    return env_level or None


def _detect_json_logs() -> bool:
    """Read the log format from MPRELUDE_LOG_FORMAT ("json" or "console").

    Unknown values fall back to JSON with a warning.
    """
    env_format = os.environ.get('MPRELUDE_LOG_FORMAT', '').strip().lower()
    if env_format in ('', 'json'):
        return True
    if env_format == 'console':
        return False
    logging.warning("Unknown MPRELUDE_LOG_FORMAT value '%s', defaulting to json", env_format)
    return True


def _resolve_log_level(log_level: str | None) -> str | None:
    if log_level is None:
        return None
    level = log_level.upper()
    if level not in _LOG_LEVELS:
        msg = f'Unknown log level {log_level!r}, expected one of {", ".join(_LOG_LEVELS)}'
        raise ValueError(msg)
    return level


def init(
    log_level: str | None = None,
    json_logs: bool | None = None,
) -> PreludeConfig:
    """Initialize mprelude with the given configuration.

    Values left as None are taken from the environment
    (MPRELUDE_LOG_LEVEL, MPRELUDE_LOG_FORMAT).

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_logs: JSON output if True, console output if False.

    Returns:
        The PreludeConfig that was set.

    Raises:
        ValueError: If the log level is not a known level name.

    Example:
        ```python
        import mprelude

        # Trace wrap_error classification as JSON on stderr
        mprelude.init(log_level='DEBUG')
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = _resolve_log_level(log_level if log_level is not None else _detect_log_level())
    resolved_json = json_logs if json_logs is not None else _detect_json_logs()

    _config = PreludeConfig(log_level=resolved_level, json_logs=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> PreludeConfig:
    """Get the current configuration.

    Returns:
        The current PreludeConfig.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'mprelude not initialized. Call mprelude.init() first.'
        raise RuntimeError(msg)
    return _config
