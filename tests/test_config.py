"""
Tests for configuration loading.
"""

import json
import logging

import pytest
import yaml

from doctorus import Config, Locale
from doctorus.types import ConfigurationError
from doctorus.util import (
    load_config_from_env,
    merge_configs,
    load_config_file,
)


class TestConfigUtilities:
    """Test low-level configuration helpers"""

    def test_load_from_env(self, monkeypatch):
        monkeypatch.setenv("DOCTORUS_ENVIRONMENT", "prod")
        monkeypatch.setenv("DOCTORUS_SSM-PREFIX", "/app/prod")
        monkeypatch.setenv("OTHER_SETTING", "ignored")
        config = load_config_from_env()
        assert config["environment"] == "prod"
        assert config["ssm_prefix"] == "/app/prod"
        assert "other_setting" not in config

    def test_merge_configs(self):
        assert merge_configs({"a": 1, "b": 1}, {"b": 2}, None) == {"a": 1, "b": 2}

    def test_load_yaml_file(self, tmp_path):
        path = tmp_path / "doctorus.yaml"
        path.write_text(yaml.safe_dump({"environment": "staging", "log-level": "debug"}))
        assert load_config_file(str(path)) == {"environment": "staging", "log_level": "debug"}

    def test_load_json_file(self, tmp_path):
        path = tmp_path / "doctorus.json"
        path.write_text(json.dumps({"environment": "dev"}))
        assert load_config_file(str(path)) == {"environment": "dev"}

    def test_empty_yaml_file(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert load_config_file(str(path)) == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_config_file(str(tmp_path / "missing.yaml"))

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "doctorus.ini"
        path.write_text("[doctorus]")
        with pytest.raises(ConfigurationError):
            load_config_file(str(path))

    def test_invalid_content(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError):
            load_config_file(str(path))

        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError):
            load_config_file(str(path))


class TestConfig:
    """Test the Config dataclass"""

    def test_defaults(self):
        config = Config()
        assert config.environment is None
        assert config.ssm_prefix is None
        assert config.default_locale is Locale.US_EN
        assert config.log_level == "INFO"
        assert config.validate()

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("DOCTORUS_ENVIRONMENT", "prod")
        monkeypatch.setenv("DOCTORUS_DEFAULT_LOCALE", "fr-FR")
        monkeypatch.setenv("DOCTORUS_LOG_LEVEL", "debug")
        config = Config.from_env()
        assert config.environment == "prod"
        assert config.default_locale is Locale.FR_FR
        assert config.log_level == "DEBUG"

    def test_from_file(self, tmp_path):
        path = tmp_path / "doctorus.yaml"
        path.write_text("environment: dev\nssm_prefix: /doctorus/dev\n")
        config = Config.from_file(str(path))
        assert config.environment == "dev"
        assert config.ssm_prefix == "/doctorus/dev"
        assert config.to_dict()["default_locale"] == "us-EN"

    def test_load_overlays_env_on_file(self, tmp_path, monkeypatch):
        path = tmp_path / "doctorus.yaml"
        path.write_text("environment: dev\ndefault_locale: us-EN\n")
        monkeypatch.setenv("DOCTORUS_DEFAULT_LOCALE", "fr-FR")
        config = Config.load(str(path))
        assert config.environment == "dev"
        assert config.default_locale is Locale.FR_FR

    def test_load_without_file(self, monkeypatch):
        monkeypatch.setenv("DOCTORUS_ENVIRONMENT", "staging")
        assert Config.load().environment == "staging"

    def test_unknown_keys_ignored(self, caplog):
        with caplog.at_level(logging.WARNING):
            config = Config.from_dict({"environment": "dev", "region": "eu-west-3"})
        assert config.environment == "dev"
        assert "region" in caplog.text

    def test_unsupported_locale(self):
        with pytest.raises(ConfigurationError) as exc_info:
            Config(default_locale="de-DE")
        assert exc_info.value.config_key == "default_locale"

    @pytest.mark.parametrize("kwargs", [
        {"log_level": "verbose"},
        {"environment": "prod/eu"},
        {"ssm_prefix": "doctorus/prod"},
    ])
    def test_validate(self, kwargs):
        with pytest.raises(ConfigurationError):
            Config(**kwargs).validate()
