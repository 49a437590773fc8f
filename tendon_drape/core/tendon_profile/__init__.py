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
Tendon Profile Package
======================

Drape geometry of a post-tensioning tendon along a single span.

This package provides:
- ProfileConfig: Calculation input (span, heights, radius, spacing, ...)
- TendonProfile: The eight drape profile families + straight fallback
- inflection_distance: Reverse curve sizing from the minimum radius
- distribute_spacing: Partition of the span into sample intervals
- sample_profile: Drape points along the segment list
- summarize_curvature: Beta sum and inflection points
- calculate_profile: Complete calculation -> CalculationResult

Usage:
    from tendon_drape.core.tendon_profile import ProfileConfig, calculate_profile

    config = ProfileConfig(length=7000.0, high_pt=450.0, low_pt=45.0,
                           selected_profile=2)
    result = calculate_profile(config)
    for point, space in zip(result.points, result.spaces):
        print(point.x, point.label, space)
"""

from .constants import PROFILE_DESCRIPTIONS, DUCT_DATA_SETS
from .config import (
    Unit,
    SpacingDirection,
    ProfileConfig,
    flip_high_low,
    DuctProperties,
    duct_defaults,
    apply_duct_defaults,
)
from .inflection import auto_inflection_distance, inflection_distance
from .profiles import (
    ProfileType,
    TendonProfile,
    SimpleHalfParabola,
    HalfParabolaWithReverse,
    FullParabolaWithReverse,
    BathtubProfile,
    StraightWithTopReverse,
    StraightWithBottomReverse,
    InvertedHalfParabola,
    HalfParabolaMidReverse,
    LinearProfile,
    create_profile,
    height,
)
from .spacing import distribute_spacing, orient_segments
from .sampler import DrapePoint, sample_profile, profile_coordinates
from .curvature import InflectionPoint, beta_sum, inflection_points, summarize_curvature
from .calculator import CalculationResult, calculate_profile

__all__ = [
    # Constants
    "PROFILE_DESCRIPTIONS",
    "DUCT_DATA_SETS",
    # Configuration
    "Unit",
    "SpacingDirection",
    "ProfileConfig",
    "flip_high_low",
    "DuctProperties",
    "duct_defaults",
    "apply_duct_defaults",
    # Inflection
    "auto_inflection_distance",
    "inflection_distance",
    # Profiles
    "ProfileType",
    "TendonProfile",
    "SimpleHalfParabola",
    "HalfParabolaWithReverse",
    "FullParabolaWithReverse",
    "BathtubProfile",
    "StraightWithTopReverse",
    "StraightWithBottomReverse",
    "InvertedHalfParabola",
    "HalfParabolaMidReverse",
    "LinearProfile",
    "create_profile",
    "height",
    # Spacing and sampling
    "distribute_spacing",
    "orient_segments",
    "DrapePoint",
    "sample_profile",
    "profile_coordinates",
    # Curvature
    "InflectionPoint",
    "beta_sum",
    "inflection_points",
    "summarize_curvature",
    # Calculation
    "CalculationResult",
    "calculate_profile",
]
