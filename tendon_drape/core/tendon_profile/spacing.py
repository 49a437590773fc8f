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
Spacing Distribution Module
===========================

Partitions a span into the intervals at which drapes are reported.

Distribution rules (spacing s, span L):
    count = floor(L / s), rem = L mod s

    rem ~ 0 or rem ~ s    -> all full spacings
    rem >= 0.7 * s        -> [rem] + count * [s]
    otherwise             -> one full spacing absorbs the remainder and is
                             split in two: [s1, s2] + (count - 1) * [s]

The split of s + rem:
    metric, s = 1000      -> s1 = floor((s + rem) / 200) * 100
                             (1100 -> 500/600, 1300 -> 600/700)
    metric                -> s1 = floor((s + rem) / 2)
    imperial              -> s1 = (s + rem) / 2 to 2 decimals
    s2 = (s + rem) - s1

Odd segments come first (the high-point end). SpacingDirection.LEFT
reverses the list so full spacings start at x = 0 instead.

Example:
    >>> distribute_spacing(5100.0, 1000.0, Unit.METRIC)
    [500.0, 600.0, 1000.0, 1000.0, 1000.0, 1000.0]
"""

import math
from typing import List

from ..drape_formatting import round_decimals
from ..logging_config import get_logger
from .config import SpacingDirection, Unit
from .constants import (
    LARGE_REMAINDER_RATIO,
    METRIC_ROUND_SPACING,
    METRIC_SPLIT_STEP,
    SPACING_MATCH_TOLERANCE,
    SPACING_TOLERANCE,
)

logger = get_logger(__name__)


def split_start_segment(total: float, spacing: float, unit: Unit) -> List[float]:
    """
    Split a full spacing plus a small remainder into two segments.

    Args:
        total: spacing + remainder
        spacing: Nominal spacing
        unit: Unit system (selects the split rule)

    Returns:
        [s1, s2] with s1 + s2 == total
    """
    if Unit.from_value(unit) == Unit.METRIC:
        if abs(spacing - METRIC_ROUND_SPACING) <= SPACING_MATCH_TOLERANCE:
            first = math.floor(total / (2.0 * METRIC_SPLIT_STEP)) * METRIC_SPLIT_STEP
        else:
            first = float(math.floor(total / 2.0))
    else:
        first = round_decimals(total / 2.0, 2)

    return [first, total - first]


def distribute_spacing(length: float, spacing: float, unit: Unit = Unit.METRIC) -> List[float]:
    """
    Divide a span into sample intervals.

    Args:
        length: Span length
        spacing: Nominal sample interval
        unit: Unit system (only the small-remainder split depends on it)

    Returns:
        Positive segment lengths summing to length; empty unless length
        and spacing are both finite and positive
    """
    if not math.isfinite(length) or not math.isfinite(spacing) or length <= 0 or spacing <= 0:
        logger.debug("No spacing for length=%s spacing=%s", length, spacing)
        return []

    unit = Unit.from_value(unit)
    count = math.floor(length / spacing)
    remainder = length % spacing

    if remainder < SPACING_TOLERANCE or spacing - remainder < SPACING_TOLERANCE:
        full = round(length / spacing)
        logger.debug("Exact multiple: %d x %s", full, spacing)
        return [spacing] * full

    if remainder >= LARGE_REMAINDER_RATIO * spacing:
        logger.debug("Large remainder %.4f leads", remainder)
        return [remainder] + [spacing] * count

    if count == 0:
        # Shorter than one spacing and too short to split
        return [length]

    start = split_start_segment(spacing + remainder, spacing, unit)
    logger.debug("Small remainder %.4f split into %s", remainder, start)
    return start + [spacing] * (count - 1)


def orient_segments(segments: List[float], direction: SpacingDirection) -> List[float]:
    """
    Order segments for the requested spacing direction.

    RIGHT keeps the distributor order (full spacings measured from the
    right support); LEFT measures them from the left support.
    """
    if SpacingDirection.from_value(direction) == SpacingDirection.LEFT:
        return list(reversed(segments))
    return list(segments)


__all__ = [
    "split_start_segment",
    "distribute_spacing",
    "orient_segments",
]
