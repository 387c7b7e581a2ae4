"""Structured logging for mprelude.

The library only emits DEBUG events under the `mprelude` logger namespace
and stays silent until the host application turns logging on, either
through its own stdlib/structlog setup or through `configure_logging()`.

Events can also be observed in-process with `add_log_hook()`, which sees
only `mprelude.*` events regardless of what else the host logs.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'LIBRARY_LOGGER',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
]

LIBRARY_LOGGER = 'mprelude'

type LogHook = Callable[[dict[str, Any]], None]

_log_hooks: list[LogHook] = []

# The root handler installed by configure_logging(), replaced on reconfigure
_handler: logging.Handler | None = None


def _forward_to_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Processor passing a copy of each library event to the registered hooks."""
    name = event_dict.get('logger') or ''
    if name != LIBRARY_LOGGER and not name.startswith(f'{LIBRARY_LOGGER}.'):
        return event_dict
    for hook in tuple(_log_hooks):
        try:
            hook(event_dict.copy())
        except Exception:  # noqa: S112
            continue  # a failing hook must not break logging
    return event_dict


def _get_shared_processors() -> list[Any]:
    """Get processors shared between structlog and stdlib foreign logs."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        _forward_to_hooks,
    ]


def _get_structlog_processors() -> list[Any]:
    """Get the full processor chain for structlog loggers."""
    return [
        structlog.stdlib.filter_by_level,
        *_get_shared_processors(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Render structlog and stdlib records through one structured handler on stderr.

    Calling it again swaps the handler it installed earlier and leaves any
    handlers the host added on the root logger alone.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use colored console output.
    """
    global _handler  # noqa: PLW0603

    structlog.configure(
        processors=_get_structlog_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_get_shared_processors(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root_logger = logging.getLogger()
    if _handler is not None:
        root_logger.removeHandler(_handler)
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    _handler = handler


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger backed by the stdlib logger of the same name.

    The processor chain is bound here rather than taken from the global
    structlog configuration, so library events go through stdlib level
    filtering even when the host never calls `configure_logging()`.

    Args:
        name: Logger name, usually the calling module's __name__.

    Returns:
        A structlog BoundLogger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_get_structlog_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


def add_log_hook(hook: LogHook) -> Callable[[], None]:
    """Register a hook receiving a copy of every `mprelude.*` event dict.

    Hooks only see events that pass the stdlib level of their logger.

    Args:
        hook: Callable that receives the event dict.

    Returns:
        A callable that unregisters the hook; calling it twice is harmless.
    """
    _log_hooks.append(hook)

    def remove() -> None:
        if hook in _log_hooks:
            _log_hooks.remove(hook)

    return remove


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()
