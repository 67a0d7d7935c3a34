"""Smoke tests to verify the test environment is properly configured.

These tests validate that:
- Fixtures from conftest.py load correctly
- The public package API is importable
- The fake pool builder satisfies the PoolBuilder contract
"""

import dbhotel
from dbhotel.ports.outbound import ConfigBuilder, ConnectionVerifier, PoolBuilder

# ---------------------------------------------------------------------------
# Fixture sanity checks
# ---------------------------------------------------------------------------


class TestFixturesLoad:

    def test_fake_pool_builder_is_pool_builder(self, fake_pool_builder):
        assert isinstance(fake_pool_builder, PoolBuilder)
        assert fake_pool_builder.configs == []

    def test_recording_config_builder_is_config_builder(self, recording_config_builder):
        assert isinstance(recording_config_builder, ConfigBuilder)

    def test_infrastructure_yaml_writes_file(self, infrastructure_yaml):
        path = infrastructure_yaml({"a": 1})
        with open(path, encoding="utf-8") as f:
            assert "a: 1" in f.read()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


class TestPublicApi:

    def test_exports(self):
        for name in dbhotel.__all__:
            assert hasattr(dbhotel, name)

    def test_ports_are_abstract(self):
        for port in (ConfigBuilder, PoolBuilder, ConnectionVerifier):
            assert getattr(port, "__abstractmethods__")
