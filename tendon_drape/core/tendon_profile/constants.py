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
Tendon Profile Constants
========================

Geometric ratios, numerical tolerances and duct reference data used by the
drape calculation.

Duct data (DUCT_DATA_SETS) is tabulated in millimetres per strand diameter:
    od:  duct outside diameter
    ecc: strand eccentricity (strand centroid offset from duct centreline)
    rad: minimum bend radius for the tendon
"""

# Bathtub profile: parabolic end length as a fraction of the span
REVERSE_CURVE_RATIO_BATHTUB = 0.25

# Spacing distribution
SPACING_TOLERANCE = 0.01          # Remainder treated as zero / full spacing
LARGE_REMAINDER_RATIO = 0.7       # Remainder >= 0.7 * spacing stands alone
METRIC_ROUND_SPACING = 1000.0     # Metric spacing that splits to round hundreds
SPACING_MATCH_TOLERANCE = 1.0     # |spacing - 1000| within this counts as 1000
METRIC_SPLIT_STEP = 100.0         # Round-hundreds split step

# Sampling
OVERSHOOT_TOLERANCE = 0.001       # Accumulated station snapped to span end
END_GAP_TOLERANCE = 1.0           # Larger end gap gets a closing sample

# Reporting
BETA_DECIMALS = 3

MM_PER_INCH = 25.4

DEFAULT_ROUNDING = {
    "metric": 1.0,     # 1 mm
    "imperial": 0.25,  # 1/4 in
}

DEFAULT_SPACING = {
    "metric": 1000.0,
    "imperial": 24.0,
}

PROFILE_DESCRIPTIONS = {
    1: "Simple half parabola - no reverse Curve",
    2: "Half Parabola with reverse curve",
    3: "Full parabola with reverse curve at each end",
    4: "Straight parabolic with reverse curve at each end",
    5: "Straight segment with a parabolic reverse curve at top end",
    6: "Straight segment with a parabolic reverse curve at bottom end",
    7: "Inverted Simple half parabola - no reverse Curve",
    8: "Half parabola with a reverse curve mid point given",
}

DEFAULT_STRAND_DIAMETER = "15.2"

# Values in mm. 32s for 12.9 mm strand uses the 110 mm standard duct.
DUCT_DATA_SETS = {
    "12.9": {
        "slab": {"od": 23.0, "ecc": 2.6, "rad": 3200.0},
        "7s": {"od": 60.0, "ecc": 10.9, "rad": 2900.0},
        "9s": {"od": 65.0, "ecc": 11.1, "rad": 3800.0},
        "12s": {"od": 75.0, "ecc": 14.0, "rad": 4100.0},
        "15s": {"od": 85.0, "ecc": 16.8, "rad": 4800.0},
        "20s": {"od": 90.0, "ecc": 14.9, "rad": 5700.0},
        "27s": {"od": 100.0, "ecc": 14.9, "rad": 6400.0},
        "32s": {"od": 110.0, "ecc": 20.9, "rad": 6900.0},
        "37s": {"od": 120.0, "ecc": 23.7, "rad": 7500.0},
    },
    "15.2": {
        "slab": {"od": 23.0, "ecc": 1.4, "rad": 3200.0},
        "5s": {"od": 60.0, "ecc": 11.5, "rad": 2900.0},
        "7s": {"od": 65.0, "ecc": 9.9, "rad": 3800.0},
        "9s": {"od": 75.0, "ecc": 12.6, "rad": 4100.0},
        "12s": {"od": 85.0, "ecc": 14.9, "rad": 4800.0},
        "15s": {"od": 90.0, "ecc": 13.4, "rad": 5700.0},
        "19s": {"od": 100.0, "ecc": 15.1, "rad": 6400.0},
        "22s": {"od": 110.0, "ecc": 18.4, "rad": 6900.0},
        "27s": {"od": 120.0, "ecc": 19.6, "rad": 7500.0},
        "31s": {"od": 125.0, "ecc": 18.8, "rad": 8200.0},
        "37s": {"od": 135.0, "ecc": 20.1, "rad": 9100.0},
    },
}

__all__ = [
    "REVERSE_CURVE_RATIO_BATHTUB",
    "SPACING_TOLERANCE",
    "LARGE_REMAINDER_RATIO",
    "METRIC_ROUND_SPACING",
    "SPACING_MATCH_TOLERANCE",
    "METRIC_SPLIT_STEP",
    "OVERSHOOT_TOLERANCE",
    "END_GAP_TOLERANCE",
    "BETA_DECIMALS",
    "MM_PER_INCH",
    "DEFAULT_ROUNDING",
    "DEFAULT_SPACING",
    "PROFILE_DESCRIPTIONS",
    "DEFAULT_STRAND_DIAMETER",
    "DUCT_DATA_SETS",
]
