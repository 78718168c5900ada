"""
Structured logging configuration using structlog.

JSON output for the batch runner, readable console output when working
interactively. Engine values passed as log context (architectures, group
keys, endpoints, dates) are rendered as their display text.
"""
import sys
import logging
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Optional, Union

import structlog

from radiolinks.utils.config import LoggingParams

# Marks file handlers installed here so a reconfigure replaces them
_FILE_HANDLER_NAME = "radiolinks-file"


def render_link_values(logger, method_name, event_dict):
    """
    structlog processor: turn engine values into plain text.

    LinkArchitecture -> 'XPIC', GroupKey -> 'op:permit:P1',
    Endpoint -> '52.1,21.2', date -> ISO string.
    """
    for name, value in event_dict.items():
        if isinstance(value, Enum):
            event_dict[name] = value.value
        elif isinstance(getattr(type(value), "key", None), property):
            event_dict[name] = value.key
        elif isinstance(value, date):
            event_dict[name] = value.isoformat()
        elif isinstance(value, tuple) and hasattr(value, '_fields'):
            event_dict[name] = str(value)
    return event_dict


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    json_output: bool = False
):
    """
    Configure structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
        json_output: If True, output JSON logs; else human-readable console

    Example:
        >>> from radiolinks.utils.logging_config import configure_logging, get_logger
        >>> configure_logging(log_level="INFO", json_output=False)
        >>> logger = get_logger(__name__)
        >>> logger.info("duplex_links_built", records=1840, links=612)
    """
    level = getattr(logging, log_level.upper())

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )
    root = logging.getLogger()
    root.setLevel(level)

    processors = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        render_link_values,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    for handler in [h for h in root.handlers if h.get_name() == _FILE_HANDLER_NAME]:
        root.removeHandler(handler)
        handler.close()

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.set_name(_FILE_HANDLER_NAME)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter('%(message)s'))
        root.addHandler(file_handler)


def configure_from_params(
    params: LoggingParams,
    level_override: Optional[str] = None,
    json_override: bool = False,
):
    """
    Configure logging from the ``logging`` section of the engine config.

    Command-line overrides win over the configured level and renderer.
    """
    configure_logging(
        log_level=level_override or params.level,
        log_file=params.log_file,
        json_output=json_override or params.json_output,
    )


def get_logger(name: str):
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Structured logger with bound context

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("radiolines_loaded", rows=1840, operators=7)
    """
    return structlog.get_logger(name)
