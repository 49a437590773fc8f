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
Drape Sampling Module
=====================

Evaluates a profile at the cumulative stations of a segment list.

Each sample is a DrapePoint carrying the raw height and the drape label
(height snapped to the rounding increment). Sampling always starts at
x = 0 and always ends at x = length:

- an accumulated station within OVERSHOOT_TOLERANCE of the span end is
  snapped to it
- if the last station still misses the span end by more than
  END_GAP_TOLERANCE, a closing sample is appended and the segment list
  is extended by the residual
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..drape_formatting import round_to_increment
from ..logging_config import get_logger
from .constants import END_GAP_TOLERANCE, OVERSHOOT_TOLERANCE
from .profiles import TendonProfile

logger = get_logger(__name__)


@dataclass
class DrapePoint:
    """
    A sampled point of the tendon profile.

    Attributes:
        x: Distance from the start of the span
        y: Raw computed height
        label: Height rounded to the reporting increment
    """
    x: float
    y: float
    label: float

    def to_dict(self) -> dict:
        return {'x': self.x, 'y': self.y, 'label': self.label}

    def __repr__(self):
        return f"DrapePoint({self.x:.2f}, {self.y:.3f}, label={self.label:g})"


def _make_point(profile: TendonProfile, x: float, rounding: float) -> DrapePoint:
    y = profile.get_height(x)
    return DrapePoint(x=x, y=y, label=round_to_increment(y, rounding))


def sample_profile(
    profile: TendonProfile,
    segments: Sequence[float],
    rounding: float,
    length: Optional[float] = None
) -> Tuple[List[DrapePoint], List[float], List[float]]:
    """
    Sample a profile along a segment list.

    Args:
        profile: Profile to evaluate
        segments: Ordered segment lengths
        rounding: Drape rounding increment
        length: Span length (defaults to profile.length)

    Returns:
        Tuple of (points, drapes, spaces); spaces is the segment list,
        extended when a closing sample was needed. All three are empty
        for a span that is not finite and positive.
    """
    span = profile.length if length is None else length
    if not math.isfinite(span) or span <= 0:
        logger.debug("Degenerate span %s, nothing to sample", span)
        return [], [], []

    spaces = [float(s) for s in segments]
    points = [_make_point(profile, 0.0, rounding)]

    if spaces:
        stations = np.cumsum(spaces)
        for station in stations:
            x = float(station)
            if abs(x - span) < OVERSHOOT_TOLERANCE:
                x = span
            points.append(_make_point(profile, x, rounding))

    last_x = points[-1].x
    if abs(last_x - span) > END_GAP_TOLERANCE:
        logger.debug("Closing sample at %.4f (last station %.4f)", span, last_x)
        spaces.append(span - last_x)
        points.append(_make_point(profile, span, rounding))

    drapes = [p.label for p in points]
    return points, drapes, spaces


def profile_coordinates(profile: TendonProfile, num_points: int = 101) -> Tuple[np.ndarray, np.ndarray]:
    """
    Dense profile coordinates for plotting.

    Args:
        profile: Profile to evaluate
        num_points: Number of evenly spaced stations including both ends

    Returns:
        Tuple of (x, y) arrays; empty arrays for a degenerate span
    """
    if profile.is_degenerate or num_points < 2:
        return np.array([]), np.array([])

    xs = np.linspace(0.0, profile.length, num_points)
    ys = np.array([profile.get_height(float(x)) for x in xs])
    return xs, ys


__all__ = [
    "DrapePoint",
    "sample_profile",
    "profile_coordinates",
]
