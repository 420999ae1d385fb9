"""Structured logging for nullsafe.

Uses structlog's ProcessorFormatter to unify structlog and stdlib logging
output, so records from applications using nullsafe render the same way.

The combinators themselves never log. Logging a captured failure is always
an explicit choice, made by passing ``failure_logger()`` to ``catch``.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'failure_logger',
    'get_logger',
    'remove_log_hook',
]


def _get_shared_processors() -> list[Any]:
    """Get processors shared between structlog and stdlib foreign logs."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _run_log_hooks,
    ]


def _get_structlog_processors() -> list[Any]:
    """Get the full processor chain for structlog loggers."""
    return [
        *_get_shared_processors(),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _get_renderer(json_output: bool = True) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Configure structlog with ProcessorFormatter for unified output.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use console output.
    """
    structlog.configure(
        processors=_get_structlog_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_get_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(json_output),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger.

    Args:
        name: Logger name. If None, uses the caller's module name.

    Returns:
        A structlog BoundLogger.
    """
    return structlog.get_logger(name)


def failure_logger(
    logger: Any = None,
    *,
    event: str = 'captured failure',
    level: str = 'warning',
) -> Callable[[BaseException], None]:
    """Build a ``catch`` handler that logs the captured failure.

    Args:
        logger: A structlog logger; defaults to the ``nullsafe`` logger.
        event: Event name of the log entry.
        level: Log method to use ("debug", "info", "warning", "error").

    Returns:
        A handler taking the failure and logging its type and message.

    Example:
        ```python
        from nullsafe import catch, failure_logger, transform_capture

        port = catch(transform_capture(raw, int, 8080), failure_logger(event='bad port'))
        ```
    """
    log = logger if logger is not None else get_logger('nullsafe')
    emit = getattr(log, level.lower())

    def handler(failure: BaseException) -> None:
        emit(event, error_type=type(failure).__name__, error=str(failure))

    return handler



# Callbacks that observe every event, e.g. to count captured failures
# reported through failure_logger().
type LogHook = Callable[[dict[str, Any]], None]

_log_hooks: list[LogHook] = []


def add_log_hook(hook: LogHook) -> LogHook:
    """Register ``hook`` to receive a copy of every log event dict.

    Returns the hook so it can be used as a decorator.

    Example:
        ```python
        failures = []

        @add_log_hook
        def collect(event):
            if event['event'] == 'captured failure':
                failures.append(event['error_type'])
        ```
    """
    _log_hooks.append(hook)
    return hook


def remove_log_hook(hook: LogHook) -> None:
    """Unregister ``hook``; unknown hooks are ignored."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    _log_hooks.clear()


def _run_log_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in tuple(_log_hooks):
        try:
            hook(dict(event_dict))
        except Exception:  # noqa: BLE001
            # a broken hook never breaks logging
            continue
    return event_dict
