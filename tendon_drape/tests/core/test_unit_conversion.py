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
Tests for Unit Conversion Utilities
===================================

Tests metric / imperial conversion of tendon profile configurations.
"""

import pytest

from tendon_drape import convert_config
from tendon_drape.core.tendon_profile import Unit
from tendon_drape.core.unit_conversion import (
    convert_field,
    convert_inflection_override,
    convert_simple,
)


class TestConvertSimple:
    """Tests for convert_simple function."""

    @pytest.mark.unit
    def test_mm_to_inches(self):
        """Test conversion to imperial."""
        assert convert_simple(7000.0, Unit.IMPERIAL) == 275.59

    @pytest.mark.unit
    def test_inches_to_mm(self):
        """Test conversion to metric with a unit string."""
        assert convert_simple(12.0, "metric", 1) == 304.8

    @pytest.mark.unit
    def test_precision(self):
        """Test rounding to the requested decimals."""
        assert convert_simple(1.4, Unit.IMPERIAL, 3) == 0.055
        assert convert_simple(3200.0, Unit.IMPERIAL, 0) == 126.0

    @pytest.mark.unit
    @pytest.mark.parametrize("value,precision,expected", [
        (12.7, 0, 1.0),
        (-12.7, 0, -1.0),
        (6.35, 1, 0.3),
    ])
    def test_half_rounds_away_from_zero(self, value, precision, expected):
        """Test that an exact half rounds away from zero, not to even."""
        assert convert_simple(value, Unit.IMPERIAL, precision) == expected

    @pytest.mark.unit
    def test_unknown_unit_string(self):
        """Test that an unknown unit string is rejected."""
        with pytest.raises(ValueError):
            convert_simple(1.0, "cubits")


class TestConvertField:
    """Tests for convert_field function."""

    @pytest.mark.unit
    @pytest.mark.parametrize("value,unit,field,expected", [
        (450.0, Unit.IMPERIAL, "general", 17.72),
        (17.72, Unit.METRIC, "general", 450.0),
        (23.0, Unit.IMPERIAL, "diameter", 0.91),
        (0.91, Unit.METRIC, "diameter", 23.1),
        (1.4, Unit.IMPERIAL, "eccentricity", 0.055),
        (1000.0, Unit.IMPERIAL, "large_radius", 39.0),
    ])
    def test_field_precision(self, value, unit, field, expected):
        """Test per-field precision."""
        assert convert_field(value, unit, field) == expected

    @pytest.mark.unit
    def test_unknown_field_unchanged(self, log_stream):
        """Test that unknown fields pass through with a warning."""
        assert convert_field(12.5, Unit.IMPERIAL, "weight") == 12.5
        assert "Unknown conversion field 'weight'" in log_stream.getvalue()


class TestConvertInflectionOverride:
    """Tests for convert_inflection_override function."""

    @pytest.mark.unit
    def test_absolute_to_imperial(self):
        """Test that absolute distances are converted to 2 decimals."""
        assert convert_inflection_override("350", Unit.IMPERIAL) == "13.78"

    @pytest.mark.unit
    def test_absolute_to_metric(self):
        """Test that metric distances are whole millimetres."""
        assert convert_inflection_override("13.78", Unit.METRIC) == "350"

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["", "10%", "abc"])
    def test_unit_free_text_unchanged(self, text):
        """Test that percentages, auto and invalid text are kept."""
        assert convert_inflection_override(text, Unit.IMPERIAL) == text


class TestConvertConfig:
    """Tests for convert_config function."""

    @pytest.mark.unit
    def test_to_imperial(self, make_config):
        """Test converting the default configuration to inches."""
        config = convert_config(make_config(inflection_pt="350"), Unit.IMPERIAL)

        assert config.unit == Unit.IMPERIAL
        assert config.length == 275.59
        assert config.high_pt == 17.72
        assert config.low_pt == 1.77
        assert config.duct_od == 0.91
        assert config.strand_ecc == 0.055
        assert config.min_radius == 126.0
        assert config.spacing == 39.0
        assert config.rounding == 0.25
        assert config.inflection_pt == "13.78"

    @pytest.mark.unit
    def test_back_to_metric(self, default_config):
        """Test converting there and back."""
        config = convert_config(convert_config(default_config, "imperial"), "metric")

        assert config.unit == Unit.METRIC
        assert config.length == 7000.0
        assert config.high_pt == 450.0
        assert config.low_pt == 45.0
        assert config.min_radius == 3200.0
        assert config.strand_ecc == 1.4
        assert config.rounding == 1.0

    @pytest.mark.unit
    def test_same_unit_is_copy(self, default_config):
        """Test that converting to the current unit returns an equal copy."""
        config = convert_config(default_config, Unit.METRIC)
        assert config == default_config
        assert config is not default_config

    @pytest.mark.unit
    def test_non_length_fields_kept(self, make_config):
        """Test that profile id, direction and duct designation are kept."""
        original = make_config(selected_profile=6, duct_size="7s")
        config = convert_config(original, Unit.IMPERIAL)
        assert config.selected_profile == 6
        assert config.duct_size == "7s"
        assert config.spacing_direction == original.spacing_direction
