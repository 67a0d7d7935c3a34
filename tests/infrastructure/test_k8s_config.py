"""Tests for dbhotel.infrastructure.k8s - YamlConfig and load_infrastructure_config."""

import pytest

from dbhotel.infrastructure.k8s import (
    INFRASTRUCTURE_CONFIG_ENV,
    YamlConfig,
    load_infrastructure_config,
)


class TestYamlConfig:

    def test_dot_notation(self, infrastructure_yaml):
        config = YamlConfig(infrastructure_yaml({"databases": {"oracle": {"username": "u"}}}))

        assert config.get("databases.oracle.username") == "u"
        assert config.get("databases") == {"oracle": {"username": "u"}}

    def test_missing_path(self, infrastructure_yaml):
        config = YamlConfig(infrastructure_yaml({"databases": {}}))

        with pytest.raises(KeyError, match="databases.oracle"):
            config.get("databases.oracle")
        assert config.has("databases.oracle") is False
        assert config.has("databases") is True

    def test_path_through_scalar(self, infrastructure_yaml):
        config = YamlConfig(infrastructure_yaml({"databases": "none"}))
        assert config.has("databases.oracle") is False

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            YamlConfig(str(tmp_path / "absent.yaml"))

    def test_non_mapping_rejected(self, infrastructure_yaml):
        with pytest.raises(ValueError, match="expected dict"):
            YamlConfig(infrastructure_yaml(["a", "b"]))


class TestLoadInfrastructureConfig:

    def test_explicit_path_wins(self, infrastructure_yaml, monkeypatch):
        monkeypatch.setenv(INFRASTRUCTURE_CONFIG_ENV, "/does/not/exist.yaml")
        path = infrastructure_yaml({"a": 1})

        assert load_infrastructure_config(path).get("a") == 1

    def test_env_variable(self, infrastructure_yaml, monkeypatch):
        monkeypatch.setenv(INFRASTRUCTURE_CONFIG_ENV, infrastructure_yaml({"a": 2}))

        assert load_infrastructure_config().get("a") == 2

    def test_no_path(self, monkeypatch, mocker):
        mocker.patch("dbhotel.infrastructure.k8s.load_dotenv")
        monkeypatch.delenv(INFRASTRUCTURE_CONFIG_ENV, raising=False)

        with pytest.raises(ValueError, match=INFRASTRUCTURE_CONFIG_ENV):
            load_infrastructure_config()
