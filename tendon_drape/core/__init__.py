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
Tendon Drape Core Module

Pure Python business logic for tendon drape calculation:
- logging_config: Centralized logging
- drape_formatting: Drape rounding and inflection override parsing
- unit_conversion: Metric / imperial configuration conversion
- tendon_profile: Profile geometry, spacing, sampling and curvature summary

No UI, file or rendering dependencies; results are consumed by charting,
tabular and CAD export layers.
"""

# Import logging configuration first (no dependencies)
from .logging_config import get_logger, setup_logging

from . import drape_formatting
from . import tendon_profile
from . import unit_conversion

logger = get_logger(__name__)
logger.debug("Tendon drape core loaded")

__all__ = [
    "get_logger",
    "setup_logging",
    "drape_formatting",
    "tendon_profile",
    "unit_conversion",
]
