"""Shared fixtures for the StarStyle test suite."""

import pytest

from starstyle import config as config_module
from starstyle.compiler import StyleSheet


@pytest.fixture
def sheet():
    """A fresh, empty style sheet per test."""
    return StyleSheet()


@pytest.fixture
def restore_config():
    """Put the process-wide configuration back after the test."""
    saved = config_module._config
    yield
    config_module._config = saved
