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
Pytest Configuration and Fixtures
==================================

Shared fixtures for the tendon drape test suite.
"""

import dataclasses
import io
import logging
from typing import Callable

import pytest

from tendon_drape.core.logging_config import setup_logging
from tendon_drape.core.tendon_profile import ProfileConfig


# =============================================================================
# Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no external deps)")
    config.addinivalue_line("markers", "integration: Full calculation tests")


# =============================================================================
# Configuration Fixtures
# =============================================================================

@pytest.fixture
def default_config() -> ProfileConfig:
    """Start-up configuration of the drapes tool.

    Returns:
        7000 mm span, 450 -> 45 mm, R = 3200 mm, 1000 mm spacing, profile 1
    """
    return ProfileConfig()


@pytest.fixture
def make_config() -> Callable[..., ProfileConfig]:
    """Factory for configurations differing from the defaults.

    Returns:
        Callable taking ProfileConfig field overrides
    """
    def _make(**changes) -> ProfileConfig:
        return dataclasses.replace(ProfileConfig(), **changes)
    return _make


@pytest.fixture
def zero_sag_config(make_config) -> Callable[[int], ProfileConfig]:
    """Factory for a level tendon (high_pt == low_pt) of a given profile."""
    def _make(profile_id: int) -> ProfileConfig:
        return make_config(high_pt=100.0, low_pt=100.0, selected_profile=profile_id)
    return _make


# =============================================================================
# Logging Fixtures
# =============================================================================

@pytest.fixture
def log_stream():
    """Capture package log output at DEBUG level.

    The package logger does not propagate, so records are read from a
    stream handler instead of caplog.
    """
    stream = io.StringIO()
    setup_logging(level=logging.DEBUG, stream=stream)
    yield stream
    setup_logging()


__all__ = [
    "log_stream",
    "default_config",
    "make_config",
    "zero_sag_config",
]
