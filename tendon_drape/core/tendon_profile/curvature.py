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
Curvature Summary Module
========================

Reporting quantities derived from a profile:

- beta_sum: approximate total angular change of the tendon over the span,
  used for friction loss estimates

      sum(beta) = 4 * |high - low| / L     (radians, 3 decimals)

- inflection points: where the profile switches curve piece. Reported for
  the reverse-curve families only when there is sag to shape; the bathtub
  (4) and mid-point reverse (8) transitions are fixed by geometry and are
  always reported. Only strictly interior points are kept.
"""

import math
from dataclasses import dataclass
from typing import List, Tuple

from ..drape_formatting import round_decimals
from ..logging_config import get_logger
from .constants import BETA_DECIMALS
from .profiles import ProfileType, TendonProfile

logger = get_logger(__name__)

# Families whose transitions do not depend on the sag
FIXED_TRANSITION_PROFILES = (ProfileType.BATHTUB, ProfileType.HALF_PARABOLA_MID_REVERSE)


@dataclass
class InflectionPoint:
    """Curvature transition point (0 < x < length)."""
    x: float
    y: float

    def to_dict(self) -> dict:
        return {'x': self.x, 'y': self.y}


def beta_sum(high_pt: float, low_pt: float, length: float) -> float:
    """
    Approximate total angle change of the tendon.

    Example:
        >>> beta_sum(450.0, 45.0, 7000.0)
        0.231
    """
    if not math.isfinite(length) or length <= 0:
        return 0.0
    return round_decimals(4.0 * abs(high_pt - low_pt) / length, BETA_DECIMALS)


def inflection_points(profile: TendonProfile) -> List[InflectionPoint]:
    """
    Interior curvature transitions of a profile.

    Args:
        profile: Solved profile

    Returns:
        InflectionPoint per transition, in station order as defined by
        the family (0 to 2 entries)
    """
    fixed = profile.profile_type in FIXED_TRANSITION_PROFILES
    if profile.drop == 0 and not fixed:
        return []

    points = []
    for x in profile.transition_stations():
        if 0 < x < profile.length:
            points.append(InflectionPoint(x=x, y=profile.get_height(x)))
    return points


def summarize_curvature(profile: TendonProfile) -> Tuple[float, List[InflectionPoint]]:
    """
    Curvature summary for reporting.

    Args:
        profile: Solved profile

    Returns:
        Tuple of (beta_sum, inflection_points)
    """
    beta = beta_sum(profile.high_pt, profile.low_pt, profile.length)
    points = inflection_points(profile)
    logger.debug("Beta sum %.3f, %d inflection point(s)", beta, len(points))
    return beta, points


__all__ = [
    "FIXED_TRANSITION_PROFILES",
    "InflectionPoint",
    "beta_sum",
    "inflection_points",
    "summarize_curvature",
]
