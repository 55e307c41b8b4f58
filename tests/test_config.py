"""Tests for entry_requirements.config - YAML settings."""

import logging

import pytest

from entry_requirements.config import (
    DEFAULT_INPUT_PATH,
    ConfigError,
    Settings,
    load_config_file,
    load_settings,
)


def _write(tmp_path, text):
    path = tmp_path / "entry_requirements.yaml"
    path.write_text(text)
    return str(path)


class TestLoadSettings:
    def test_empty_file_gives_defaults(self, tmp_path):
        settings = load_settings(_write(tmp_path, ""))
        assert settings == Settings()
        assert settings.input_path == DEFAULT_INPUT_PATH
        assert settings.skip_countries == ["ITA"]

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_settings(str(tmp_path / "nope.yaml")) == Settings()

    def test_values(self, tmp_path):
        path = _write(tmp_path, (
            "input_path: in.json\n"
            "output_path: out.json\n"
            "workers: 4\n"
            "indent: 0\n"
            "log_level: debug\n"
            "log_file: logs/x.log\n"
            "skip_countries: [ita, san]\n"
        ))
        settings = load_settings(path)
        assert settings.input_path == "in.json"
        assert settings.workers == 4
        assert settings.indent == 0
        assert settings.log_level == "DEBUG"
        assert settings.log_file == "logs/x.log"
        assert settings.skip_countries == ["ITA", "SAN"]

    @pytest.mark.parametrize("text,match", [
        ("workers: 0\n", "workers"),
        ("workers: many\n", "workers"),
        ("indent: -1\n", "indent"),
        ("skip_countries: ITA\n", "skip_countries"),
        ("log_level: LOUD\n", "log_level"),
        ("- a\n- b\n", "mapping"),
    ])
    def test_invalid_values(self, tmp_path, text, match):
        with pytest.raises(ConfigError, match=match):
            load_settings(_write(tmp_path, text))

    def test_unparseable_yaml_warns_and_defaults(self, tmp_path, caplog):
        path = _write(tmp_path, "workers: [1, 2\n")
        with caplog.at_level(logging.WARNING, logger="entry_requirements.config"):
            assert load_config_file(path) == {}
        assert "Failed to load config" in caplog.text
