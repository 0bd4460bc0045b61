"""Tests for configuration loading"""

import pytest

from paysim.utils.config_loader import load_config, save_config, get_processing_config
from paysim.utils.errors import ConfigurationError


def test_load_config(config_file, csv_path):
    config = load_config(str(config_file))
    assert config['version'] == '1.0'
    assert config['storage']['transaction_file'] == str(csv_path)
    assert get_processing_config(config) == {'delay_seconds': 0.0, 'failure_rate': 0.0}


def test_shipped_configs_load():
    """Run from the repository root"""
    config = load_config()
    assert get_processing_config(config) == {'delay_seconds': 1.5, 'failure_rate': 0.1}

    demo = load_config("config/checkout_demo.yaml")
    assert demo['storage']['transaction_file'] == "demo_transaction_history.csv"


def test_demo_mode_selects_demo_config(monkeypatch):
    monkeypatch.setenv("DEMO_MODE", "true")
    config = load_config()
    assert config['storage']['transaction_file'] == "demo_transaction_history.csv"


def test_env_overrides(monkeypatch, config_file, tmp_path):
    monkeypatch.setenv("PAYSIM_FAILURE_RATE", "0.5")
    monkeypatch.setenv("PAYSIM_DELAY_SECONDS", "2")
    monkeypatch.setenv("PAYSIM_TRANSACTION_FILE", str(tmp_path / "other.csv"))

    config = load_config(str(config_file))
    assert get_processing_config(config) == {'delay_seconds': 2.0, 'failure_rate': 0.5}
    assert config['storage']['transaction_file'] == str(tmp_path / "other.csv")


def test_bad_env_override(monkeypatch, config_file):
    monkeypatch.setenv("PAYSIM_FAILURE_RATE", "often")
    with pytest.raises(ConfigurationError):
        load_config(str(config_file))


def test_missing_processing_defaults():
    assert get_processing_config({}) == {'delay_seconds': 1.5, 'failure_rate': 0.1}


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        load_config(str(tmp_path / "nope.yaml"))


def test_invalid_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("version: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="Invalid YAML"):
        load_config(str(path))


def test_missing_keys(tmp_path):
    path = tmp_path / "partial.yaml"
    path.write_text("version: '1.0'\nprocessing: {}\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="storage"):
        load_config(str(path))


def test_save_and_reload(tmp_path):
    config = {
        'version': '1.0',
        'processing': {'delay_seconds': 0.2, 'failure_rate': 0.3},
        'storage': {'transaction_file': 'x.csv'}
    }
    path = tmp_path / "nested" / "saved.yaml"
    save_config(str(path), config)
    assert load_config(str(path)) == config


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
