# linkedin_api_mcp/logging_config.py
"""
Logging configuration for the LinkedIn API MCP server with format options.

Provides JSON and compact logging formats for different deployment scenarios.
JSON format for production MCP integration, compact format for development.
Everything goes to stderr: stdout carries the JSON-RPC stream.
"""

import logging
import sys
from typing import Any, List

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

_PACKAGE_PREFIX = "linkedin_api_mcp."

# Libraries that log every request at INFO
_NOISY_LOGGERS = ("httpx", "httpcore", "mcp.server.lowlevel.server")


def _shorten_logger_name(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Drop the package prefix from logger names in compact output."""
    name = event_dict.get("logger")
    if isinstance(name, str) and name.startswith(_PACKAGE_PREFIX):
        event_dict["logger"] = name[len(_PACKAGE_PREFIX) :]
    return event_dict


def configure_logging(log_level: str = "WARNING", json_format: bool = False) -> None:
    """Configure structlog and the standard library for the server.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_format: Whether to use JSON formatting for logs
    """
    numeric_level = getattr(logging, log_level.upper(), logging.WARNING)

    shared_processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso" if json_format else "%H:%M:%S", utc=json_format),
    ]

    renderer: Any
    if json_format:
        renderer = structlog.processors.JSONRenderer()
        final_processors: List[Processor] = [structlog.processors.format_exc_info, renderer]
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)
        final_processors = [_shorten_logger_name, renderer]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *final_processors],
    )

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Set specific loggers to reduce noise
    if numeric_level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))
