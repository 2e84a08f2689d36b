"""
structlog configuration for payapi.

Loggers live under the ``payapi`` namespace. ``setup_logging`` is opt-in: a
host application that configures structlog itself can skip it. Event keys
that carry credentials are masked before rendering.
"""

import logging
from typing import Any

import structlog

from payapi.settings import LogFormat, LogLevel, get_settings

LOGGER_NAMESPACE = "payapi"

REDACTED = "***"

SENSITIVE_KEYS = frozenset(
    {"api_key", "authorization", "password", "secret", "stripe_account", "token"}
)


def redact_secrets(_logger: Any, _method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Mask credential-bearing keys, including inside a ``headers`` mapping."""
    for key in list(event_dict):
        if key.lower() in SENSITIVE_KEYS:
            event_dict[key] = REDACTED

    headers = event_dict.get("headers")
    if isinstance(headers, dict):
        event_dict["headers"] = {
            name: REDACTED if name.lower() in SENSITIVE_KEYS else value
            for name, value in headers.items()
        }
    return event_dict


def _renderer(log_format: LogFormat) -> Any:
    if log_format == "console":
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def setup_logging(
    log_level: LogLevel | None = None, log_format: LogFormat | None = None
) -> None:
    """
    Route payapi events through the stdlib ``payapi`` logger.

    Args:
        log_level: Overrides ``settings.log_level``
        log_format: Overrides ``settings.log_format`` (json or console)
    """
    settings = get_settings()
    level = (log_level or settings.log_level).value

    package_logger = logging.getLogger(LOGGER_NAMESPACE)
    package_logger.setLevel(level)
    if not package_logger.handlers:
        package_logger.addHandler(logging.StreamHandler())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            redact_secrets,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            _renderer(log_format or settings.log_format),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Logger for ``name``, placed under the ``payapi`` namespace."""
    if not name:
        name = LOGGER_NAMESPACE
    elif name != LOGGER_NAMESPACE and not name.startswith(f"{LOGGER_NAMESPACE}."):
        name = f"{LOGGER_NAMESPACE}.{name}"
    return structlog.get_logger(name)
