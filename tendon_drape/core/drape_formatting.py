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
Drape Formatting Utilities

Handles the two pieces of free-form numeric text the tendon tools deal with:

- Rounding of computed heights to the reporting increment
  (e.g. nearest 5 mm or nearest 1/8 in).
- The inflection point override typed by the user:
    ""      -> automatic (sized from the minimum bend radius)
    "350"   -> absolute distance from the support (current unit)
    "10%"   -> percentage of the total span length

The override is parsed once into an InflectionOverride. Invalid text is
never an error here: it resolves to automatic mode.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .logging_config import get_logger

logger = get_logger(__name__)


class OverrideKind(Enum):
    """How the inflection distance is determined."""
    AUTO = "AUTO"           # Sized from minimum radius
    ABSOLUTE = "ABSOLUTE"   # Distance in current unit
    PERCENT = "PERCENT"     # Percentage of total span length


@dataclass(frozen=True)
class InflectionOverride:
    """Parsed inflection point override.

    Attributes:
        kind: AUTO, ABSOLUTE or PERCENT
        value: Positive distance or percentage (0.0 for AUTO)
    """
    kind: OverrideKind = OverrideKind.AUTO
    value: float = 0.0

    @property
    def is_auto(self) -> bool:
        return self.kind == OverrideKind.AUTO

    def resolve(self, total_length: float) -> Optional[float]:
        """Absolute override distance, or None in automatic mode.

        Args:
            total_length: Total span length (percentages refer to this)

        Returns:
            Override distance in the current unit, or None for AUTO
        """
        if self.kind == OverrideKind.ABSOLUTE:
            return self.value
        if self.kind == OverrideKind.PERCENT:
            return total_length * self.value / 100.0
        return None


AUTO_OVERRIDE = InflectionOverride()


def parse_inflection_override(
    text: Union[str, InflectionOverride, None]
) -> InflectionOverride:
    """
    Parse inflection override text.

    Accepts formats:
    - "" or None      -> AUTO
    - "350"           -> ABSOLUTE(350.0)
    - " 12.5 % "      -> PERCENT(12.5)
    - an already parsed InflectionOverride is returned as-is

    Non-numeric, non-finite and non-positive values fall back to AUTO.

    Args:
        text: Override text from the configuration

    Returns:
        Parsed InflectionOverride
    """
    if isinstance(text, InflectionOverride):
        return text
    if text is None:
        return AUTO_OVERRIDE

    raw = str(text).strip()
    if not raw:
        return AUTO_OVERRIDE

    kind = OverrideKind.ABSOLUTE
    if raw.endswith('%'):
        kind = OverrideKind.PERCENT
        raw = raw[:-1].strip()

    try:
        value = float(raw)
    except ValueError:
        logger.debug("Ignoring non-numeric inflection override %r", text)
        return AUTO_OVERRIDE

    if not math.isfinite(value) or value <= 0:
        logger.debug("Ignoring non-positive inflection override %r", text)
        return AUTO_OVERRIDE

    return InflectionOverride(kind, value)


def format_inflection_override(override: InflectionOverride) -> str:
    """
    Format a parsed override back to its text form.

    Examples:
        >>> format_inflection_override(InflectionOverride(OverrideKind.PERCENT, 10.0))
        '10%'
        >>> format_inflection_override(InflectionOverride(OverrideKind.ABSOLUTE, 13.78))
        '13.78'
        >>> format_inflection_override(AUTO_OVERRIDE)
        ''
    """
    if override.is_auto:
        return ""

    text = f"{override.value:.6f}".rstrip('0').rstrip('.')
    if override.kind == OverrideKind.PERCENT:
        return f"{text}%"
    return text


def validate_inflection_input(text: str) -> tuple[bool, str]:
    """
    Validate inflection override input.

    Unlike parse_inflection_override this reports why a value would be
    ignored, for display next to the input field.

    Args:
        text: Override text to validate

    Returns:
        Tuple of (is_valid, error_message)
        If valid (including empty = automatic), error_message is empty string
    """
    raw = (text or "").strip()
    if not raw:
        return True, ""

    if parse_inflection_override(raw).is_auto:
        return False, (
            f"Invalid inflection point: {text}. "
            "Expected a positive distance or percentage (e.g. 350 or 10%)"
        )
    return True, ""


def round_to_increment(value: float, increment: float) -> float:
    """
    Snap a value to the nearest multiple of the rounding increment.

    Halves round up (towards +infinity). A non-positive or non-finite
    increment, or a non-finite value, leaves the value unchanged.

    Examples:
        >>> round_to_increment(327.4, 5)
        325.0
        >>> round_to_increment(12.3, 0.25)
        12.25
    """
    if not math.isfinite(value) or not math.isfinite(increment) or increment <= 0:
        return value
    return float(math.floor(value / increment + 0.5) * increment)


def round_decimals(value: float, decimals: int) -> float:
    """
    Round to a number of decimal places, halves away from zero.

    Matches the fixed-decimal display of the drapes tool, unlike the
    built-in round() which sends halves to the even digit.

    Examples:
        >>> round_decimals(0.5, 0)
        1.0
        >>> round_decimals(-2.5, 0)
        -3.0
        >>> round_decimals(275.5906, 2)
        275.59
    """
    if not math.isfinite(value):
        return value
    factor = 10 ** decimals
    return math.copysign(math.floor(abs(value) * factor + 0.5) / factor, value)


__all__ = [
    "OverrideKind",
    "InflectionOverride",
    "AUTO_OVERRIDE",
    "parse_inflection_override",
    "format_inflection_override",
    "validate_inflection_input",
    "round_to_increment",
    "round_decimals",
]
