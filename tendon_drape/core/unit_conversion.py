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
Unit Conversion Utilities

Converts a tendon profile configuration between metric (mm) and
imperial (in) when the user switches unit systems. The drape calculation
itself never converts units; callers convert the configuration first.

Field precisions (decimal places after conversion):

    field          imperial  metric
    general            2        0     lengths, heights
    diameter           2        1     duct OD
    eccentricity       3        1     strand eccentricity
    large_radius       0        0     minimum radius, spacing
"""

import dataclasses
from typing import Union

from .drape_formatting import (
    InflectionOverride,
    OverrideKind,
    format_inflection_override,
    parse_inflection_override,
    round_decimals,
)
from .logging_config import get_logger
from .tendon_profile.config import ProfileConfig, Unit
from .tendon_profile.constants import MM_PER_INCH

logger = get_logger(__name__)

FIELD_PRECISION = {
    "general": {Unit.IMPERIAL: 2, Unit.METRIC: 0},
    "diameter": {Unit.IMPERIAL: 2, Unit.METRIC: 1},
    "eccentricity": {Unit.IMPERIAL: 3, Unit.METRIC: 1},
    "large_radius": {Unit.IMPERIAL: 0, Unit.METRIC: 0},
}


def _as_unit(unit: Union[Unit, str]) -> Unit:
    return unit if isinstance(unit, Unit) else Unit(unit)


def convert_simple(value: float, target_unit: Union[Unit, str], precision: int = 2) -> float:
    """
    Convert a value into target_unit from the other unit system.

    Examples:
        >>> convert_simple(7000, Unit.IMPERIAL)
        275.59
        >>> convert_simple(12, "metric", 1)
        304.8
    """
    target = _as_unit(target_unit)
    if target == Unit.IMPERIAL:
        converted = value / MM_PER_INCH
    else:
        converted = value * MM_PER_INCH
    return round_decimals(converted, precision)


def convert_field(value: float, target_unit: Union[Unit, str], field: str) -> float:
    """
    Convert a configuration value with the precision of its field type.

    Args:
        value: Value in the opposite unit system
        target_unit: Unit to convert to
        field: "general", "diameter", "eccentricity" or "large_radius"

    Returns:
        Converted value; unknown field types are returned unchanged
    """
    target = _as_unit(target_unit)
    precision = FIELD_PRECISION.get(field)
    if precision is None:
        logger.warning("Unknown conversion field %r, value left unchanged", field)
        return value
    return convert_simple(value, target, precision[target])


def convert_inflection_override(text: str, target_unit: Union[Unit, str]) -> str:
    """
    Convert an absolute inflection override; percentages and auto are unit-free.

    Examples:
        >>> convert_inflection_override("350", Unit.IMPERIAL)
        '13.78'
        >>> convert_inflection_override("10%", Unit.IMPERIAL)
        '10%'
    """
    target = _as_unit(target_unit)
    parsed = parse_inflection_override(text)
    if parsed.kind != OverrideKind.ABSOLUTE:
        return text

    precision = 2 if target == Unit.IMPERIAL else 0
    value = convert_simple(parsed.value, target, precision)
    return format_inflection_override(InflectionOverride(OverrideKind.ABSOLUTE, value))


def convert_config(config: ProfileConfig, target_unit: Union[Unit, str]) -> ProfileConfig:
    """
    Convert a configuration to another unit system.

    Rounding is reset to the default increment of the target unit.
    Converting to the current unit returns an unchanged copy.

    Args:
        config: Configuration to convert
        target_unit: Unit to convert to

    Returns:
        Converted copy of the configuration
    """
    target = _as_unit(target_unit)
    if target == config.unit:
        return dataclasses.replace(config)

    logger.debug("Converting configuration %s -> %s", config.unit.value, target.value)

    return dataclasses.replace(
        config,
        unit=target,
        length=convert_field(config.length, target, "general"),
        high_pt=convert_field(config.high_pt, target, "general"),
        low_pt=convert_field(config.low_pt, target, "general"),
        duct_od=convert_field(config.duct_od, target, "diameter"),
        strand_ecc=convert_field(config.strand_ecc, target, "eccentricity"),
        min_radius=convert_field(config.min_radius, target, "large_radius"),
        spacing=convert_field(config.spacing, target, "large_radius"),
        rounding=target.default_rounding,
        inflection_pt=convert_inflection_override(config.inflection_pt, target),
    )


__all__ = [
    "FIELD_PRECISION",
    "convert_simple",
    "convert_field",
    "convert_inflection_override",
    "convert_config",
]
