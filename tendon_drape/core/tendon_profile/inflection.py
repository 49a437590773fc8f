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
Inflection Distance Module
==========================

Sizes the reverse curve inserted next to a support.

A reverse curve is a short parabola with its vertex at the support. Its
length is chosen so the radius of curvature of the parabolic drape does
not drop below the tendon's minimum bend radius:

    x = (4 * h * R) / (2 * L)        (= 2hR / L)

where:
    h = |high_pt - low_pt| (sag)
    R = minimum bend radius
    L = length of the span segment being shaped

The result is clamped to L/2 so a transition never crosses the segment
midpoint. A user override (absolute distance or percentage of the total
span) replaces the calculated value, limited to the segment length.
"""

from typing import Optional, Union

from ..drape_formatting import InflectionOverride, parse_inflection_override
from ..logging_config import get_logger

logger = get_logger(__name__)


def auto_inflection_distance(
    segment_length: float,
    high_pt: float,
    low_pt: float,
    min_radius: float
) -> float:
    """Reverse curve length from the minimum radius, clamped to [0, L/2]."""
    sag = abs(high_pt - low_pt)
    if segment_length <= 0 or sag == 0:
        return 0.0

    x = (4.0 * sag * min_radius) / (2.0 * segment_length)
    return max(0.0, min(x, segment_length / 2.0))


def inflection_distance(
    segment_length: float,
    high_pt: float,
    low_pt: float,
    min_radius: float,
    override: Union[str, InflectionOverride, None] = "",
    total_length: Optional[float] = None
) -> float:
    """
    Distance from the support at which the reverse curve meets the main curve.

    Args:
        segment_length: Length of the segment being shaped (span or half-span)
        high_pt: Height at the support end
        low_pt: Height at the far end
        min_radius: Minimum bend radius
        override: Override text or parsed override ("" = automatic)
        total_length: Total span length for percentage overrides
                      (defaults to segment_length)

    Returns:
        Inflection distance, 0.0 when no reverse curve is required

    Example:
        >>> inflection_distance(7000.0, 450.0, 45.0, 3200.0)
        370.2857142857143
        >>> inflection_distance(7000.0, 450.0, 45.0, 3200.0, "10%")
        700.0
    """
    parsed = parse_inflection_override(override)
    span = segment_length if total_length is None else total_length

    value = parsed.resolve(span)
    if value is not None and value > 0:
        distance = min(value, segment_length)
        logger.debug(
            "Inflection override %s -> %.4f (segment %.4f)",
            parsed.kind.value, distance, segment_length
        )
        return distance

    distance = auto_inflection_distance(segment_length, high_pt, low_pt, min_radius)
    logger.debug("Auto inflection distance %.4f (segment %.4f)", distance, segment_length)
    return distance


__all__ = [
    "auto_inflection_distance",
    "inflection_distance",
]
