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
Tendon Drape
============

Vertical drape profiles of post-tensioning tendons: eight parabolic
profile families with minimum-radius reverse curves, sample spacing and
drape rounding, and a curvature summary for friction loss estimates.

Quick start:
    from tendon_drape import ProfileConfig, calculate_profile

    result = calculate_profile(ProfileConfig(selected_profile=3))
    print(result.drapes, result.spaces, result.beta_sum)
"""

__version__ = "0.1.0"

from .core.tendon_profile import (
    ProfileConfig,
    ProfileType,
    Unit,
    SpacingDirection,
    CalculationResult,
    calculate_profile,
)
from .core.unit_conversion import convert_config

__all__ = [
    "__version__",
    "ProfileConfig",
    "ProfileType",
    "Unit",
    "SpacingDirection",
    "CalculationResult",
    "calculate_profile",
    "convert_config",
]
