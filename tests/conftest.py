"""Pytest configuration and shared fixtures for compound-config tests."""

import copy
import sys
from pathlib import Path

import pytest

# Add package to path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from tests.fixtures import (
    COMMAND_CONFIG,
    COMMAND_SCHEMA,
    create_binding_option,
    create_command_option,
    write_yaml,
)


# ============================================================================
# Option Fixtures
# ============================================================================


@pytest.fixture
def binding_option():
    """(int, str) option with no rows."""
    return create_binding_option()


@pytest.fixture
def populated_option():
    """(int, str) option holding the two example bindings."""
    option = create_binding_option()
    assert option.set_value_untyped([
        ["binding1", "5", "run-app"],
        ["binding2", "9", "toggle"],
    ])
    return option


@pytest.fixture
def command_option():
    """(activator, str) option with no rows."""
    return create_command_option()


@pytest.fixture
def update_counter():
    """Callable that counts how many times it was called."""

    class Counter:
        def __init__(self):
            self.calls = 0

        def __call__(self):
            self.calls += 1

    return Counter()


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def schema_data() -> dict:
    return copy.deepcopy(COMMAND_SCHEMA)


@pytest.fixture
def config_data() -> dict:
    return copy.deepcopy(COMMAND_CONFIG)


@pytest.fixture
def sample_schema_file(tmp_path, schema_data) -> Path:
    """Create sample option schema file."""
    return write_yaml(tmp_path / "schema.yaml", schema_data)


@pytest.fixture
def sample_config_file(tmp_path, config_data) -> Path:
    """Create sample flat config file."""
    return write_yaml(tmp_path / "config.yaml", config_data)


@pytest.fixture
def invalid_config_file(tmp_path, config_data) -> Path:
    """Config file whose decoration width is not an integer."""
    config_data["decoration"]["width_main"] = "wide"
    return write_yaml(tmp_path / "invalid.yaml", config_data)
