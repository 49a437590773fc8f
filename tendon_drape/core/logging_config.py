# ==============================================================================
# Tendon Drape - Post-Tensioning Tendon Profile Tools
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
#
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
# You should have received a copy of the GNU General Public License along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# Primary Author: Michael Yoder
# Company: Desert Springs Civil Engineering PLLC
# ==============================================================================

"""
Logging Configuration Module
=============================

Centralized logging setup for the tendon drape tools.

Usage:
    from tendon_drape.core.logging_config import get_logger

    logger = get_logger(__name__)
    logger.info("Profile calculated")
    logger.debug("Inflection distance: %s", x_infl)

Log Levels:
    DEBUG    - Detailed calculation tracing (branches taken, degenerate inputs)
    INFO     - General operational messages
    WARNING  - Something unexpected but recoverable
    ERROR    - Operation failed
"""

import logging
import sys
from typing import Optional

# Package-wide logger name prefix
LOGGER_PREFIX = "tendon"

# Default format for log messages
DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
DETAILED_FORMAT = "[%(levelname)s] %(asctime)s - %(name)s:%(lineno)d - %(message)s"

# Track if logging has been initialized
_initialized = False


def setup_logging(
    level: int = logging.INFO,
    detailed: bool = False,
    stream: Optional[object] = None
) -> logging.Logger:
    """Initialize logging for the tendon drape package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        detailed: If True, use detailed format with timestamps and line numbers
        stream: Output stream (defaults to sys.stdout)

    Returns:
        Root logger for the package
    """
    global _initialized

    root_logger = logging.getLogger(LOGGER_PREFIX)

    # Clear existing handlers if reinitializing
    if _initialized:
        root_logger.handlers.clear()

    root_logger.setLevel(level)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(level)

    fmt = DETAILED_FORMAT if detailed else DEFAULT_FORMAT
    handler.setFormatter(logging.Formatter(fmt))

    root_logger.addHandler(handler)

    # Prevent propagation to avoid duplicate messages
    root_logger.propagate = False

    _initialized = True

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a specific module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance for the module

    Example:
        logger = get_logger(__name__)
        logger.debug("Module loaded")
    """
    if not _initialized:
        setup_logging()

    # e.g., "tendon_drape.core.tendon_profile" -> "tendon.core.tendon_profile"
    if name.startswith("tendon_drape"):
        name = name.replace("tendon_drape", LOGGER_PREFIX, 1)
    elif not name.startswith(LOGGER_PREFIX):
        name = f"{LOGGER_PREFIX}.{name}"

    return logging.getLogger(name)


__all__ = [
    "setup_logging",
    "get_logger",
    "LOGGER_PREFIX",
]
