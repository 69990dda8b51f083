"""
Centralized logging for the template engine using Loguru.

This module provides function-based logging (`LOG` and `COMPLAIN`) that
dynamically respects the `beQuiet` and `noComplain` flags from application
settings.

Features:
- `LOG` for debug tracing of parsing and rendering.
- `COMPLAIN` for warnings about templates that were tolerated rather than
  rendered as written (unterminated tokens, unbalanced scopes, missing
  properties).
- Consistent log format shared by both.

Usage:
    from templateparser.lib.log import LOG, COMPLAIN
    LOG("Parsed 4 segments")
    COMPLAIN("Unterminated token at offset 12")

Environment:
- Set `TPL_BEQUIET=True` to suppress debug output.
- Set `TPL_NOCOMPLAIN=True` to suppress warnings.
"""

from loguru import logger
from typing import Any
import sys

# Create a distinct logger instance for the engine
app_logger = logger.bind(app="TEMPLATEPARSER")

logger_format = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> │ "
    "<level>{level: <7}</level> │ "
    "<yellow>{name: >36}</yellow>::"
    "<cyan>{function: <24}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

app_logger.remove()  # Remove any default handlers
app_logger.add(sys.stderr, format=logger_format)


def LOG(*args: Any, **kwargs: Any) -> None:
    """
    Debug logging, silenced by the `beQuiet` setting.

    :param args: Positional arguments for the log message.
    :param kwargs: Keyword arguments for additional log metadata.
    """
    try:
        from templateparser.config.settings import appsettings

        if not appsettings.beQuiet:
            app_logger.opt(depth=1).debug(*args, **kwargs)
    except Exception as e:
        print(f"Logging error: {e}", file=sys.stderr)


def COMPLAIN(*args: Any, **kwargs: Any) -> None:
    """
    Warning-level logging, silenced by the `noComplain` setting.

    :param args: Positional arguments for the log message.
    :param kwargs: Keyword arguments for additional log metadata.
    """
    try:
        from templateparser.config.settings import appsettings

        if not appsettings.noComplain:
            app_logger.opt(depth=1).warning(*args, **kwargs)
    except Exception as e:
        print(f"Logging error: {e}", file=sys.stderr)
