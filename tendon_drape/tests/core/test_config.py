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
Tests for Tendon Profile Configuration
======================================

Tests ProfileConfig serialization, the high/low flip and the duct
reference data lookup.
"""

import pytest

from tendon_drape.core.tendon_profile import (
    DUCT_DATA_SETS,
    DuctProperties,
    ProfileConfig,
    SpacingDirection,
    Unit,
    apply_duct_defaults,
    duct_defaults,
    flip_high_low,
)


class TestUnit:
    """Tests for Unit enum."""

    @pytest.mark.unit
    def test_metric_defaults(self):
        """Test 1 mm rounding and 1000 mm spacing."""
        assert Unit.METRIC.default_rounding == 1.0
        assert Unit.METRIC.default_spacing == 1000.0

    @pytest.mark.unit
    def test_imperial_defaults(self):
        """Test 1/4 in rounding and 24 in spacing."""
        assert Unit.IMPERIAL.default_rounding == 0.25
        assert Unit.IMPERIAL.default_spacing == 24.0

    @pytest.mark.unit
    @pytest.mark.parametrize("value,expected", [
        (Unit.IMPERIAL, Unit.IMPERIAL),
        ("imperial", Unit.IMPERIAL),
        ("metric", Unit.METRIC),
        ("furlongs", Unit.METRIC),
        (None, Unit.METRIC),
    ])
    def test_from_value(self, value, expected):
        """Test coercion of members and their string values."""
        assert Unit.from_value(value) is expected

    @pytest.mark.unit
    def test_from_value_logs_fallback(self, log_stream):
        """Test that an unknown unit is reported at debug level."""
        Unit.from_value("furlongs")
        assert "Unknown unit 'furlongs', using metric" in log_stream.getvalue()


class TestSpacingDirection:
    """Tests for SpacingDirection enum."""

    @pytest.mark.unit
    @pytest.mark.parametrize("value,expected", [
        (SpacingDirection.LEFT, SpacingDirection.LEFT),
        ("left", SpacingDirection.LEFT),
        ("right", SpacingDirection.RIGHT),
        ("up", SpacingDirection.RIGHT),
    ])
    def test_from_value(self, value, expected):
        """Test coercion of members and their string values."""
        assert SpacingDirection.from_value(value) is expected


class TestProfileConfig:
    """Tests for ProfileConfig dataclass."""

    @pytest.mark.unit
    def test_defaults(self, default_config):
        """Test the start-up values of the drapes tool."""
        assert default_config.length == 7000.0
        assert default_config.high_pt == 450.0
        assert default_config.low_pt == 45.0
        assert default_config.min_radius == 3200.0
        assert default_config.selected_profile == 1
        assert default_config.inflection_pt == ""
        assert default_config.is_metric
        assert default_config.spacing_direction == SpacingDirection.RIGHT

    @pytest.mark.unit
    def test_sag(self, make_config):
        """Test that sag is the absolute height difference."""
        assert make_config(high_pt=45.0, low_pt=450.0).sag == 405.0

    @pytest.mark.unit
    def test_to_dict(self, default_config):
        """Test camelCase keys and enum values."""
        data = default_config.to_dict()
        assert data['highPt'] == 450.0
        assert data['lowPt'] == 45.0
        assert data['minRadius'] == 3200.0
        assert data['selectedProfile'] == 1
        assert data['unit'] == "metric"
        assert data['spacingDirection'] == "right"
        assert data['ductDiaOD'] == 23.0
        assert data['strandEcc'] == 1.4

    @pytest.mark.unit
    def test_from_dict_restores_to_dict(self, make_config):
        """Test that a serialized configuration is restored."""
        config = make_config(
            selected_profile=3, inflection_pt="10%",
            spacing_direction=SpacingDirection.LEFT, duct_size="7s",
        )
        assert ProfileConfig.from_dict(config.to_dict()) == config

    @pytest.mark.unit
    def test_from_dict_missing_keys(self):
        """Test that missing keys take the defaults."""
        config = ProfileConfig.from_dict({'length': 9000})
        assert config.length == 9000.0
        assert config.high_pt == 450.0
        assert config.unit == Unit.METRIC

    @pytest.mark.unit
    def test_from_dict_imperial_defaults(self):
        """Test that missing rounding and spacing follow the unit."""
        config = ProfileConfig.from_dict({'unit': "imperial"})
        assert config.rounding == 0.25
        assert config.spacing == 24.0

    @pytest.mark.unit
    def test_from_dict_unknown_enums(self):
        """Test fallback for unknown unit and direction strings."""
        config = ProfileConfig.from_dict({'unit': "furlongs", 'spacingDirection': "up"})
        assert config.unit == Unit.METRIC
        assert config.spacing_direction == SpacingDirection.RIGHT

    @pytest.mark.unit
    def test_string_enums_coerced(self):
        """Test that unit and direction strings become enum members."""
        config = ProfileConfig(unit="imperial", spacing_direction="left")
        assert config.unit is Unit.IMPERIAL
        assert config.spacing_direction is SpacingDirection.LEFT
        assert config.to_dict()['unit'] == "imperial"
        assert not config.is_metric

    @pytest.mark.unit
    def test_from_dict_null_override(self):
        """Test that a null override becomes automatic."""
        assert ProfileConfig.from_dict({'inflectionPt': None}).inflection_pt == ""


class TestFlipHighLow:
    """Tests for flip_high_low function."""

    @pytest.mark.unit
    def test_flip(self, default_config):
        """Test that high and low points swap."""
        flipped = flip_high_low(default_config)
        assert flipped.high_pt == 45.0
        assert flipped.low_pt == 450.0
        assert flipped.length == default_config.length

    @pytest.mark.unit
    def test_original_unchanged(self, default_config):
        """Test that the input is not modified."""
        flip_high_low(default_config)
        assert default_config.high_pt == 450.0

    @pytest.mark.unit
    def test_flip_twice(self, default_config):
        """Test that flipping twice restores the configuration."""
        assert flip_high_low(flip_high_low(default_config)) == default_config


class TestDuctDefaults:
    """Tests for duct_defaults and apply_duct_defaults."""

    @pytest.mark.unit
    def test_metric_lookup(self):
        """Test tabulated values in millimetres."""
        assert duct_defaults("15.2", "7s") == DuctProperties(od=65.0, eccentricity=9.9, min_radius=3800.0)

    @pytest.mark.unit
    def test_strand_tables_differ(self):
        """Test that each strand diameter has its own table."""
        assert duct_defaults("12.9", "9s").od == 65.0
        assert duct_defaults("15.2", "9s").od == 75.0

    @pytest.mark.unit
    def test_imperial_lookup(self):
        """Test conversion of tabulated values to inches."""
        props = duct_defaults("15.2", "7s", Unit.IMPERIAL)
        assert props.od == 2.56
        assert props.eccentricity == 0.39
        assert props.min_radius == 150.0

    @pytest.mark.unit
    def test_other_strand_uses_15_2(self):
        """Test that strands without a table use the 15.2 mm data."""
        assert duct_defaults("other", "slab") == duct_defaults("15.2", "slab")

    @pytest.mark.unit
    def test_unknown_size(self):
        """Test that sizes without data return None."""
        assert duct_defaults("15.2", "Other") is None
        assert duct_defaults("12.9", "5s") is None

    @pytest.mark.unit
    def test_every_table_has_slab(self):
        """Test that the slab duct exists for every strand."""
        assert all("slab" in table for table in DUCT_DATA_SETS.values())

    @pytest.mark.unit
    def test_apply_duct_defaults(self, default_config):
        """Test that selecting a size fills OD, eccentricity and radius."""
        config = apply_duct_defaults(default_config, "12s")
        assert config.duct_size == "12s"
        assert config.duct_od == 85.0
        assert config.strand_ecc == 14.9
        assert config.min_radius == 4800.0

    @pytest.mark.unit
    def test_apply_other_keeps_values(self, make_config):
        """Test that a size without data keeps the current values."""
        config = apply_duct_defaults(make_config(duct_od=70.0, min_radius=4000.0), "Other")
        assert config.duct_size == "Other"
        assert config.duct_od == 70.0
        assert config.min_radius == 4000.0
