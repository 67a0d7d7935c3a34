"""
Pytest configuration and shared fixtures.

Fixtures provided:
- jdbc_url: Oracle thin-driver JDBC URL used across scenarios
- fake_pool_builder: PoolBuilder that records configs instead of opening pools
- recording_config_builder: DefaultConfigBuilder that records its arguments
- infrastructure_yaml: factory writing an infrastructure YAML into tmp_path
"""

import sys
from pathlib import Path
from typing import Any, List

import pytest
import yaml

# Add src to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from dbhotel.domain.datasource.config_builder import DefaultConfigBuilder
from dbhotel.domain.model.pool_config import PoolConfig
from dbhotel.domain.model.vendor import DatabaseVendor
from dbhotel.ports.outbound.pool_builder import PoolBuilder


# ============================================================================
# Test doubles
# ============================================================================

class FakePool:
    """Stands in for a pool object; keeps the config it was built from."""

    def __init__(self, config: PoolConfig):
        self.config = config


class FakePoolBuilder(PoolBuilder):
    """Records every config handed to build_pool and returns a new FakePool."""

    def __init__(self, vendor: DatabaseVendor = DatabaseVendor.ORACLE):
        self._vendor = vendor
        self.configs: List[PoolConfig] = []

    @property
    def vendor(self) -> DatabaseVendor:
        return self._vendor

    def build_pool(self, config: PoolConfig) -> FakePool:
        # snapshot: later mutation must not change what the pool saw
        self.configs.append(config.model_copy())
        return FakePool(config)


class RecordingConfigBuilder(DefaultConfigBuilder):
    """DefaultConfigBuilder that remembers the arguments of each call."""

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.calls: List[tuple] = []

    def build_config(self, jdbc_url, username, password, minimum_idle):
        self.calls.append((jdbc_url, username, password, minimum_idle))
        return super().build_config(jdbc_url, username, password, minimum_idle)


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def jdbc_url():
    return "jdbc:oracle:thin:@host:1521/svc"


@pytest.fixture
def fake_pool_builder():
    return FakePoolBuilder()


@pytest.fixture
def postgres_fake_pool_builder():
    return FakePoolBuilder(DatabaseVendor.POSTGRES)


@pytest.fixture
def recording_config_builder():
    return RecordingConfigBuilder()


@pytest.fixture
def infrastructure_yaml(tmp_path):
    """Write a dict as YAML and return the absolute path as a string."""

    def _write(data: Any, name: str = "infrastructure.yaml") -> str:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def oracle_section():
    return {
        "jdbc_url": "jdbc:oracle:thin:@db.example:1521/FREEPDB1",
        "username": "hotel_admin",
        "password": "secret",
        "oracle_script_required": True,
    }


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


def pytest_collection_modifyitems(config, items):
    """Mark adapter tests as integration-level, everything else as unit."""
    for item in items:
        if "adapters" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
