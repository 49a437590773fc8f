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
Tendon Profile Configuration
============================

Defines the ProfileConfig dataclass: the complete input of a drape
calculation, as collected by a UI or read from a saved state.

The calculation is a pure function of this value. Nothing here validates
engineering plausibility; odd values (zero span, zero spacing, unknown
profile ids) are carried through and degrade gracefully downstream.

Example:
    >>> config = ProfileConfig(length=7000.0, high_pt=450.0, low_pt=45.0)
    >>> config.unit
    <Unit.METRIC: 'metric'>
    >>> flip_high_low(config).high_pt
    45.0
"""

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..drape_formatting import round_decimals
from ..logging_config import get_logger
from .constants import (
    DEFAULT_ROUNDING,
    DEFAULT_SPACING,
    DEFAULT_STRAND_DIAMETER,
    DUCT_DATA_SETS,
    MM_PER_INCH,
)

logger = get_logger(__name__)


class Unit(Enum):
    """Unit system of all lengths in a configuration."""
    METRIC = "metric"      # millimetres
    IMPERIAL = "imperial"  # inches

    @classmethod
    def from_value(cls, value) -> "Unit":
        """Coerce a member or its string value; unknown values give METRIC."""
        try:
            return cls(value)
        except ValueError:
            logger.debug("Unknown unit %r, using metric", value)
            return cls.METRIC

    @property
    def default_rounding(self) -> float:
        return DEFAULT_ROUNDING[self.value]

    @property
    def default_spacing(self) -> float:
        return DEFAULT_SPACING[self.value]


class SpacingDirection(Enum):
    """Support from which full sample spacings are laid off."""
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def from_value(cls, value) -> "SpacingDirection":
        """Coerce a member or its string value; unknown values give RIGHT."""
        try:
            return cls(value)
        except ValueError:
            logger.debug("Unknown spacing direction %r, using right", value)
            return cls.RIGHT


@dataclass
class ProfileConfig:
    """
    Input of a tendon drape calculation.

    Attributes:
        length: Span length
        high_pt: Tendon height at the start of the span (x = 0)
        low_pt: Tendon height at the end of the span (x = length)
        min_radius: Minimum bend radius of the tendon
        rounding: Snap increment for reported drapes
        spacing: Nominal interval between drape samples
        selected_profile: Profile family id (1-8, anything else = straight line)
        inflection_pt: Override text ("" = auto, "350" = distance, "10%" = of span)
        unit: Unit system (affects spacing split and default rounding only)
        spacing_direction: Support the full spacings are measured from
        strand_diameter: Strand size ("12.9", "15.2" or "other")
        duct_size: Duct designation ("slab", "5s", "7s", ... or "Other")
        duct_od: Duct outside diameter
        strand_ecc: Strand eccentricity within the duct
    """
    length: float = 7000.0
    high_pt: float = 450.0
    low_pt: float = 45.0
    min_radius: float = 3200.0
    rounding: float = 1.0
    spacing: float = 1000.0
    selected_profile: int = 1
    inflection_pt: str = ""
    unit: Unit = Unit.METRIC
    spacing_direction: SpacingDirection = SpacingDirection.RIGHT
    strand_diameter: str = DEFAULT_STRAND_DIAMETER
    duct_size: str = "slab"
    duct_od: float = 23.0
    strand_ecc: float = 1.4

    def __post_init__(self):
        self.unit = Unit.from_value(self.unit)
        self.spacing_direction = SpacingDirection.from_value(self.spacing_direction)

    @property
    def sag(self) -> float:
        """Absolute height difference between the span ends."""
        return abs(self.high_pt - self.low_pt)

    @property
    def is_metric(self) -> bool:
        return self.unit == Unit.METRIC

    def to_dict(self) -> dict:
        """
        Serialize to the key layout used by the drapes UI state.

        Returns:
            Dictionary with camelCase keys, enums as their string values
        """
        return {
            'length': self.length,
            'highPt': self.high_pt,
            'lowPt': self.low_pt,
            'minRadius': self.min_radius,
            'rounding': self.rounding,
            'spacing': self.spacing,
            'selectedProfile': self.selected_profile,
            'inflectionPt': self.inflection_pt,
            'unit': self.unit.value,
            'spacingDirection': self.spacing_direction.value,
            'strandDiameter': self.strand_diameter,
            'ductSize': self.duct_size,
            'ductDiaOD': self.duct_od,
            'strandEcc': self.strand_ecc,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'ProfileConfig':
        """
        Deserialize from a UI state dictionary.

        Missing keys take the defaults. Unknown unit or direction strings
        fall back to metric / right.

        Args:
            data: Dictionary from to_dict() or the UI state

        Returns:
            New ProfileConfig instance
        """
        defaults = cls()

        unit = Unit.from_value(data.get('unit', defaults.unit.value))
        direction = SpacingDirection.from_value(
            data.get('spacingDirection', defaults.spacing_direction.value)
        )

        return cls(
            length=float(data.get('length', defaults.length)),
            high_pt=float(data.get('highPt', defaults.high_pt)),
            low_pt=float(data.get('lowPt', defaults.low_pt)),
            min_radius=float(data.get('minRadius', defaults.min_radius)),
            rounding=float(data.get('rounding', unit.default_rounding)),
            spacing=float(data.get('spacing', unit.default_spacing)),
            selected_profile=int(data.get('selectedProfile', defaults.selected_profile)),
            inflection_pt=str(data.get('inflectionPt', defaults.inflection_pt) or ""),
            unit=unit,
            spacing_direction=direction,
            strand_diameter=str(data.get('strandDiameter', defaults.strand_diameter)),
            duct_size=str(data.get('ductSize', defaults.duct_size)),
            duct_od=float(data.get('ductDiaOD', defaults.duct_od)),
            strand_ecc=float(data.get('strandEcc', defaults.strand_ecc)),
        )


def flip_high_low(config: ProfileConfig) -> ProfileConfig:
    """Return a copy with the high and low points swapped."""
    return dataclasses.replace(config, high_pt=config.low_pt, low_pt=config.high_pt)


@dataclass(frozen=True)
class DuctProperties:
    """Tabulated duct data in the unit it was requested in."""
    od: float
    eccentricity: float
    min_radius: float


def duct_defaults(
    strand_diameter: str,
    duct_size: str,
    unit: Unit = Unit.METRIC
) -> Optional[DuctProperties]:
    """
    Look up tabulated duct properties.

    Strand diameters without their own table ("other") use the 15.2 mm
    table. Imperial values are converted from mm: OD and eccentricity to
    2 decimals, radius to whole inches.

    Args:
        strand_diameter: "12.9", "15.2" or "other"
        duct_size: "slab", "5s", "7s", ...
        unit: Unit of the returned values

    Returns:
        DuctProperties, or None if the size has no tabulated data
    """
    table = DUCT_DATA_SETS.get(strand_diameter, DUCT_DATA_SETS[DEFAULT_STRAND_DIAMETER])
    data = table.get(duct_size)
    if data is None:
        return None

    if unit == Unit.IMPERIAL:
        return DuctProperties(
            od=round_decimals(data["od"] / MM_PER_INCH, 2),
            eccentricity=round_decimals(data["ecc"] / MM_PER_INCH, 2),
            min_radius=round_decimals(data["rad"] / MM_PER_INCH, 0),
        )
    return DuctProperties(od=data["od"], eccentricity=data["ecc"], min_radius=data["rad"])


def apply_duct_defaults(config: ProfileConfig, duct_size: str) -> ProfileConfig:
    """
    Select a duct size and fill in its tabulated properties.

    Sizes without data (e.g. "Other") only change the designation; the
    current OD, eccentricity and radius are kept.

    Args:
        config: Current configuration
        duct_size: Duct designation to select

    Returns:
        Updated copy of the configuration
    """
    props = duct_defaults(config.strand_diameter, duct_size, config.unit)
    if props is None:
        return dataclasses.replace(config, duct_size=duct_size)

    return dataclasses.replace(
        config,
        duct_size=duct_size,
        duct_od=props.od,
        strand_ecc=props.eccentricity,
        min_radius=props.min_radius,
    )


__all__ = [
    "Unit",
    "SpacingDirection",
    "ProfileConfig",
    "flip_high_low",
    "DuctProperties",
    "duct_defaults",
    "apply_duct_defaults",
]
