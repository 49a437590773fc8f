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
Tendon Profile Geometry Module
==============================

Defines the eight drape profile families and the straight-line fallback:

    1. SimpleHalfParabola           vertex at (L, low)
    2. HalfParabolaWithReverse      reverse curve at the high end + main parabola
    3. FullParabolaWithReverse      symmetric, reverse curves at both supports
    4. BathtubProfile               parabolic ends, flat middle (fixed 0.25 ratio)
    5. StraightWithTopReverse       reverse curve at the high end + tangent line
    6. StraightWithBottomReverse    tangent line + reverse curve at the low end
    7. InvertedHalfParabola         vertex at (0, high)
    8. HalfParabolaMidReverse       two parabolas meeting at the span midpoint
    -  LinearProfile                fallback for unknown profile ids

Each profile solves its coefficients once in the constructor and then
evaluates height and slope in closed form. Coordinates:

    x = distance from the start of the span (0 <= x <= L)
    y = tendon height; y(0) = high_pt for every family

Two-piece families are built so the pieces share value and slope at the
inflection point (C1). Transition lengths that would make a coefficient
undefined (zero reverse curve, transition at the segment end) collapse to
the remaining piece, which is the limit of the formula.

Example:
    >>> config = ProfileConfig(length=7000.0, high_pt=450.0, low_pt=45.0,
    ...                        selected_profile=2)
    >>> profile = create_profile(config)
    >>> profile.get_height(0.0), profile.get_height(7000.0)
    (450.0, 45.0)
"""

import math
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import List, Optional, Union

from ..drape_formatting import AUTO_OVERRIDE, InflectionOverride, parse_inflection_override
from ..logging_config import get_logger
from .config import ProfileConfig
from .constants import PROFILE_DESCRIPTIONS, REVERSE_CURVE_RATIO_BATHTUB
from .inflection import inflection_distance

logger = get_logger(__name__)


class ProfileType(IntEnum):
    """Drape profile families, numbered as presented to the user."""
    SIMPLE_HALF_PARABOLA = 1
    HALF_PARABOLA_REVERSE = 2
    FULL_PARABOLA_REVERSE = 3
    BATHTUB = 4
    STRAIGHT_REVERSE_TOP = 5
    STRAIGHT_REVERSE_BOTTOM = 6
    INVERTED_HALF_PARABOLA = 7
    HALF_PARABOLA_MID_REVERSE = 8

    @property
    def description(self) -> str:
        return PROFILE_DESCRIPTIONS[self.value]


class TendonProfile(ABC):
    """Abstract base class for drape profile families.

    All profiles implement:
    - get_height(x): tendon height at distance x
    - get_slope(x): dy/dx at distance x
    - transition_stations(): x of each curvature transition (may be empty)

    A span whose length is not finite and positive is degenerate: height
    is high_pt everywhere and slope is zero.
    """

    profile_type: Optional[ProfileType] = None

    def __init__(
        self,
        length: float,
        high_pt: float,
        low_pt: float,
        min_radius: float = 0.0,
        override: InflectionOverride = AUTO_OVERRIDE
    ):
        """Initialize profile and solve its coefficients.

        Args:
            length: Span length
            high_pt: Height at x = 0
            low_pt: Height at x = length
            min_radius: Minimum bend radius (reverse curve families)
            override: Parsed inflection override (reverse curve families)
        """
        self.length = length
        self.high_pt = high_pt
        self.low_pt = low_pt
        self.min_radius = min_radius
        self.override = override

        if not self.is_degenerate:
            self._solve()

    @property
    def drop(self) -> float:
        """Signed height difference high_pt - low_pt."""
        return self.high_pt - self.low_pt

    @property
    def is_degenerate(self) -> bool:
        return not math.isfinite(self.length) or self.length <= 0

    def contains(self, x: float, tolerance: float = 1e-6) -> bool:
        """True if x lies within [0, length]."""
        return -tolerance <= x <= self.length + tolerance

    def get_height(self, x: float) -> float:
        """Tendon height at distance x from the start of the span."""
        if self.is_degenerate:
            return self.high_pt
        return self._height(x)

    def get_slope(self, x: float) -> float:
        """First derivative dy/dx at distance x."""
        if self.is_degenerate:
            return 0.0
        return self._slope(x)

    def transition_stations(self) -> List[float]:
        """Stations where the profile changes curve piece."""
        return []

    def _solve(self) -> None:
        """Compute coefficients (span is known to be non-degenerate)."""

    @abstractmethod
    def _height(self, x: float) -> float:
        pass

    @abstractmethod
    def _slope(self, x: float) -> float:
        pass

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(L={self.length:.1f}, "
            f"high={self.high_pt:.2f}, low={self.low_pt:.2f})"
        )


class ReverseCurvePair:
    """Reverse curve at a support followed by the main parabola.

    Local coordinate xx runs from the support (vertex of the reverse
    curve, height high) to the end of the shaped segment (vertex of the
    main parabola, height low):

        Reverse:  y = high - A * xx^2                 0 <= xx < x_infl
        Main:     y = low + B * (xx - span)^2          x_infl <= xx <= span

    Matching value and slope at x_infl gives:

        A = (high - low) / (x_infl * span)
        B = (high - low) / (span * (span - x_infl))
    """

    def __init__(self, span: float, x_infl: float, high: float, low: float):
        self.span = span
        self.x_infl = x_infl
        self.high = high
        self.low = low

        drop = high - low
        self.reverse_only = x_infl >= span
        self.a = drop / (x_infl * span) if x_infl > 0 else 0.0
        self.b = 0.0 if self.reverse_only else drop / (span * (span - x_infl))

    def _in_reverse(self, xx: float) -> bool:
        return self.reverse_only or xx < self.x_infl

    def height(self, xx: float) -> float:
        if self._in_reverse(xx):
            return self.high - self.a * xx * xx
        return self.low + self.b * (xx - self.span) ** 2

    def slope(self, xx: float) -> float:
        if self._in_reverse(xx):
            return -2.0 * self.a * xx
        return 2.0 * self.b * (xx - self.span)


class SimpleHalfParabola(TendonProfile):
    """Single parabola with its vertex at the low end.

        y = a * (x - L)^2 + low,    a = (high - low) / L^2
    """

    profile_type = ProfileType.SIMPLE_HALF_PARABOLA

    def _solve(self) -> None:
        self.a = self.drop / self.length ** 2

    def _height(self, x: float) -> float:
        return self.drop * ((x - self.length) / self.length) ** 2 + self.low_pt

    def _slope(self, x: float) -> float:
        return 2.0 * self.a * (x - self.length)


class HalfParabolaWithReverse(TendonProfile):
    """Reverse curve at the high support, main parabola down to the low end."""

    profile_type = ProfileType.HALF_PARABOLA_REVERSE

    def _solve(self) -> None:
        self.x_infl = inflection_distance(
            self.length, self.high_pt, self.low_pt, self.min_radius,
            self.override, self.length
        )
        self.curves = ReverseCurvePair(self.length, self.x_infl, self.high_pt, self.low_pt)

    def _height(self, x: float) -> float:
        return self.curves.height(x)

    def _slope(self, x: float) -> float:
        return self.curves.slope(x)

    def transition_stations(self) -> List[float]:
        if self.is_degenerate:
            return []
        return [self.x_infl]


class FullParabolaWithReverse(TendonProfile):
    """Symmetric profile with reverse curves at both supports.

    Both supports sit at high_pt and the span centre at low_pt. Each half
    is the two-piece construction of profile 2 over the half span, the
    right half mirrored through xx = L - x.
    """

    profile_type = ProfileType.FULL_PARABOLA_REVERSE

    def _solve(self) -> None:
        self.mid = self.length / 2.0
        self.x_infl = inflection_distance(
            self.mid, self.high_pt, self.low_pt, self.min_radius,
            self.override, self.length
        )
        self.curves = ReverseCurvePair(self.mid, self.x_infl, self.high_pt, self.low_pt)

    def _height(self, x: float) -> float:
        return self.curves.height(min(x, self.length - x))

    def _slope(self, x: float) -> float:
        if x < self.mid:
            return self.curves.slope(x)
        return -self.curves.slope(self.length - x)

    def transition_stations(self) -> List[float]:
        if self.is_degenerate:
            return []
        return [self.x_infl, self.length - self.x_infl]


class BathtubProfile(TendonProfile):
    """Parabolic ends over a fixed fraction of the span, flat at low_pt between.

    The end length is REVERSE_CURVE_RATIO_BATHTUB * L and does not depend
    on the minimum radius.
    """

    profile_type = ProfileType.BATHTUB
    ratio = REVERSE_CURVE_RATIO_BATHTUB

    def _solve(self) -> None:
        self.x1 = self.length * self.ratio
        self.x2 = self.length * (1.0 - self.ratio)
        self.a_start = self.drop / self.x1 ** 2
        self.a_end = self.drop / (self.length - self.x2) ** 2

    def _height(self, x: float) -> float:
        if x < self.x1:
            return self.drop * ((x - self.x1) / self.x1) ** 2 + self.low_pt
        if x > self.x2:
            return self.drop * ((x - self.x2) / (self.length - self.x2)) ** 2 + self.low_pt
        return self.low_pt

    def _slope(self, x: float) -> float:
        if x < self.x1:
            return 2.0 * self.a_start * (x - self.x1)
        if x > self.x2:
            return 2.0 * self.a_end * (x - self.x2)
        return 0.0

    def transition_stations(self) -> List[float]:
        if self.is_degenerate:
            return []
        return [self.x1, self.x2]


class StraightWithTopReverse(TendonProfile):
    """Reverse curve at the high support, then a tangent line to the low end.

        Curve:  y = high - A * x^2,           A = (high - low) / (2 L xi - xi^2)
        Line:   y = low + m * (x - L),        m = -2 A xi

    The line is the tangent at xi; it passes through (L, low) by the
    choice of A. With no reverse curve (xi = 0) this is the straight chord.
    """

    profile_type = ProfileType.STRAIGHT_REVERSE_TOP

    def _solve(self) -> None:
        xi = inflection_distance(
            self.length, self.high_pt, self.low_pt, self.min_radius,
            self.override, self.length
        )
        self.x_infl = xi
        if xi > 0:
            self.a = self.drop / (2.0 * self.length * xi - xi * xi)
            self.m = -2.0 * self.a * xi
        else:
            self.a = 0.0
            self.m = -self.drop / self.length

    def _height(self, x: float) -> float:
        if x < self.x_infl:
            return self.high_pt - self.a * x * x
        return self.low_pt + self.m * (x - self.length)

    def _slope(self, x: float) -> float:
        if x < self.x_infl:
            return -2.0 * self.a * x
        return self.m

    def transition_stations(self) -> List[float]:
        if self.is_degenerate:
            return []
        return [self.x_infl]


class StraightWithBottomReverse(TendonProfile):
    """Tangent line from the high support, reverse curve at the low end.

    Mirror of StraightWithTopReverse about the transition xt = L - xi:

        Line:   y = high + m * x,             m = 2 A (xt - L)
        Curve:  y = low + A * (x - L)^2,      A = (high - low) / (L^2 - xt^2)
    """

    profile_type = ProfileType.STRAIGHT_REVERSE_BOTTOM

    def _solve(self) -> None:
        xi = inflection_distance(
            self.length, self.high_pt, self.low_pt, self.min_radius,
            self.override, self.length
        )
        self.x_infl = xi
        self.x_transition = self.length - xi
        xt = self.x_transition
        if xi > 0:
            self.a = self.drop / (self.length ** 2 - xt ** 2)
            self.m = 2.0 * self.a * (xt - self.length)
        else:
            self.a = 0.0
            self.m = -self.drop / self.length

    def _height(self, x: float) -> float:
        if x < self.x_transition:
            return self.high_pt + self.m * x
        return self.low_pt + self.a * (x - self.length) ** 2

    def _slope(self, x: float) -> float:
        if x < self.x_transition:
            return self.m
        return 2.0 * self.a * (x - self.length)

    def transition_stations(self) -> List[float]:
        if self.is_degenerate:
            return []
        return [self.x_transition]


class InvertedHalfParabola(TendonProfile):
    """Single parabola with its vertex at the high end.

        y = a * x^2 + high,    a = (low - high) / L^2
    """

    profile_type = ProfileType.INVERTED_HALF_PARABOLA

    def _solve(self) -> None:
        self.a = -self.drop / self.length ** 2

    def _height(self, x: float) -> float:
        return self.high_pt - self.drop * (x / self.length) ** 2

    def _slope(self, x: float) -> float:
        return 2.0 * self.a * x


class HalfParabolaMidReverse(TendonProfile):
    """Two parabolas meeting at (L/2, (high + low)/2).

    The first has its vertex at (0, high), the second at (L, low).
    """

    profile_type = ProfileType.HALF_PARABOLA_MID_REVERSE

    def _solve(self) -> None:
        self.mid = self.length / 2.0
        self.mid_y = (self.high_pt + self.low_pt) / 2.0
        self.a_start = (self.high_pt - self.mid_y) / self.mid ** 2
        self.a_end = (self.mid_y - self.low_pt) / (self.mid - self.length) ** 2

    def _height(self, x: float) -> float:
        if x < self.mid:
            return self.high_pt - self.a_start * x * x
        return self.low_pt + self.a_end * (x - self.length) ** 2

    def _slope(self, x: float) -> float:
        if x < self.mid:
            return -2.0 * self.a_start * x
        return 2.0 * self.a_end * (x - self.length)

    def transition_stations(self) -> List[float]:
        if self.is_degenerate:
            return []
        return [self.mid]


class LinearProfile(TendonProfile):
    """Straight chord from (0, high) to (L, low); fallback for unknown ids."""

    def _height(self, x: float) -> float:
        return self.high_pt + (self.low_pt - self.high_pt) * (x / self.length)

    def _slope(self, x: float) -> float:
        return (self.low_pt - self.high_pt) / self.length


PROFILE_CLASSES = {
    ProfileType.SIMPLE_HALF_PARABOLA: SimpleHalfParabola,
    ProfileType.HALF_PARABOLA_REVERSE: HalfParabolaWithReverse,
    ProfileType.FULL_PARABOLA_REVERSE: FullParabolaWithReverse,
    ProfileType.BATHTUB: BathtubProfile,
    ProfileType.STRAIGHT_REVERSE_TOP: StraightWithTopReverse,
    ProfileType.STRAIGHT_REVERSE_BOTTOM: StraightWithBottomReverse,
    ProfileType.INVERTED_HALF_PARABOLA: InvertedHalfParabola,
    ProfileType.HALF_PARABOLA_MID_REVERSE: HalfParabolaMidReverse,
}


def create_profile(
    config: ProfileConfig,
    override: Union[str, InflectionOverride, None] = None
) -> TendonProfile:
    """
    Build the profile selected in a configuration.

    Args:
        config: Calculation input
        override: Already parsed inflection override; parsed from
                  config.inflection_pt when None

    Returns:
        TendonProfile for config.selected_profile (LinearProfile if unknown)
    """
    if override is None:
        override = config.inflection_pt
    parsed = parse_inflection_override(override)

    profile_cls = PROFILE_CLASSES.get(config.selected_profile)
    if profile_cls is None:
        logger.debug("Unknown profile id %r, using straight line", config.selected_profile)
        profile_cls = LinearProfile

    return profile_cls(
        config.length,
        config.high_pt,
        config.low_pt,
        min_radius=config.min_radius,
        override=parsed,
    )


def height(x: float, config: ProfileConfig) -> float:
    """Tendon height at x for the profile selected in config."""
    return create_profile(config).get_height(x)


__all__ = [
    "ProfileType",
    "TendonProfile",
    "ReverseCurvePair",
    "SimpleHalfParabola",
    "HalfParabolaWithReverse",
    "FullParabolaWithReverse",
    "BathtubProfile",
    "StraightWithTopReverse",
    "StraightWithBottomReverse",
    "InvertedHalfParabola",
    "HalfParabolaMidReverse",
    "LinearProfile",
    "PROFILE_CLASSES",
    "create_profile",
    "height",
]
