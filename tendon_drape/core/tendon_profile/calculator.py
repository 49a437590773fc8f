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
Drape Calculation Module
========================

Runs a complete tendon drape calculation from a ProfileConfig:

    1. Parse the inflection override (once)
    2. Build the selected profile
    3. Distribute spacings and orient them for the spacing direction
    4. Sample drapes at the cumulative stations
    5. Summarize curvature (beta sum, inflection points)

The result is a fresh CalculationResult; nothing is kept between calls,
so independent configurations can be calculated in any order.

Example:
    >>> result = calculate_profile(ProfileConfig())
    >>> result.drapes[0], result.drapes[-1], result.beta_sum
    (450.0, 45.0, 0.231)
"""

from dataclasses import dataclass, field
from typing import List

from ..drape_formatting import parse_inflection_override
from ..logging_config import get_logger
from .config import ProfileConfig
from .curvature import InflectionPoint, summarize_curvature
from .profiles import create_profile
from .sampler import DrapePoint, sample_profile
from .spacing import distribute_spacing, orient_segments

logger = get_logger(__name__)


@dataclass
class CalculationResult:
    """
    Output of a drape calculation.

    Attributes:
        points: Sampled points in station order
        drapes: Rounded heights, one per point
        spaces: Interval lengths between consecutive points
        beta_sum: Approximate total angular change (radians)
        inflection_points: Curvature transitions (0-2 entries)
        length: Span length the result was computed for
    """
    points: List[DrapePoint] = field(default_factory=list)
    drapes: List[float] = field(default_factory=list)
    spaces: List[float] = field(default_factory=list)
    beta_sum: float = 0.0
    inflection_points: List[InflectionPoint] = field(default_factory=list)
    length: float = 0.0

    @property
    def stations(self) -> List[float]:
        return [p.x for p in self.points]

    def to_dict(self) -> dict:
        """Serialize with the result keys used by the drapes UI."""
        return {
            'points': [p.to_dict() for p in self.points],
            'drapes': list(self.drapes),
            'spaces': list(self.spaces),
            'betaSum': self.beta_sum,
            'inflectionPoints': [p.to_dict() for p in self.inflection_points],
        }

    def __repr__(self) -> str:
        return (
            f"CalculationResult({len(self.points)} points, L={self.length:.1f}, "
            f"beta={self.beta_sum:.3f}, {len(self.inflection_points)} IP)"
        )


def calculate_profile(config: ProfileConfig) -> CalculationResult:
    """
    Calculate tendon drapes for a configuration.

    Never raises for odd numeric input: a zero span gives an empty
    result, a zero spacing gives the two end samples, an invalid
    inflection override falls back to automatic sizing.

    Args:
        config: Calculation input

    Returns:
        New CalculationResult
    """
    override = parse_inflection_override(config.inflection_pt)
    profile = create_profile(config, override)

    segments = distribute_spacing(config.length, config.spacing, config.unit)
    segments = orient_segments(segments, config.spacing_direction)

    points, drapes, spaces = sample_profile(profile, segments, config.rounding, config.length)
    beta, inflections = summarize_curvature(profile)

    logger.debug(
        "Profile %s: %d points, beta %.3f, %d inflection point(s)",
        config.selected_profile, len(points), beta, len(inflections)
    )

    return CalculationResult(
        points=points,
        drapes=drapes,
        spaces=spaces,
        beta_sum=beta,
        inflection_points=inflections,
        length=config.length,
    )


__all__ = [
    "CalculationResult",
    "calculate_profile",
]
