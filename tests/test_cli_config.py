"""Tests for CLI configuration module."""

import json

from cli.config import Config, default_config_path


def test_config_defaults_without_creating_file(temp_config):
    """Missing config file yields defaults and nothing is written."""
    assert temp_config.get_default_chunk_size_mb() == 100
    assert temp_config.get_log_level() == 'WARNING'
    assert not temp_config.config_path.exists()
    assert not temp_config.config_path.parent.exists()


def test_config_loads_existing_file(tmp_path, monkeypatch):
    monkeypatch.delenv('SPLITJOIN_CHUNK_SIZE_MB', raising=False)
    monkeypatch.delenv('LOG_LEVEL', raising=False)
    config_path = tmp_path / 'config.json'
    config_path.write_text(json.dumps({'default_chunk_size_mb': 250, 'log_level': 'info'}))

    config = Config(config_path)

    assert config.get_default_chunk_size_mb() == 250
    assert config.get_log_level() == 'INFO'


def test_config_handles_corrupted_file(tmp_path, monkeypatch):
    monkeypatch.delenv('SPLITJOIN_CHUNK_SIZE_MB', raising=False)
    config_path = tmp_path / 'config.json'
    config_path.write_text('{ invalid json content')

    config = Config(config_path)

    assert config.get_default_chunk_size_mb() == 100
    assert sorted(p.name for p in tmp_path.iterdir()) == ['config.json']


def test_config_rejects_non_object_json(tmp_path, monkeypatch):
    monkeypatch.delenv('SPLITJOIN_CHUNK_SIZE_MB', raising=False)
    config_path = tmp_path / 'config.json'
    config_path.write_text('[1, 2, 3]')

    assert Config(config_path).get_default_chunk_size_mb() == 100


def test_environment_overrides_file(tmp_path, monkeypatch):
    config_path = tmp_path / 'config.json'
    config_path.write_text(json.dumps({'default_chunk_size_mb': 250, 'log_level': 'INFO'}))
    monkeypatch.setenv('SPLITJOIN_CHUNK_SIZE_MB', '20')
    monkeypatch.setenv('LOG_LEVEL', 'debug')

    config = Config(config_path)

    assert config.get_default_chunk_size_mb() == 20
    assert config.get_log_level() == 'DEBUG'


def test_invalid_values_fall_back(temp_config):
    temp_config.data['default_chunk_size_mb'] = 'lots'
    assert temp_config.get_default_chunk_size_mb() == 100

    temp_config.data['default_chunk_size_mb'] = 501
    assert temp_config.get_default_chunk_size_mb() == 100

    temp_config.data['default_chunk_size_mb'] = 0
    assert temp_config.get_default_chunk_size_mb() == 100

    temp_config.data['log_level'] = 'chatty'
    assert temp_config.get_log_level() == 'WARNING'


def test_default_config_path_override(tmp_path, monkeypatch):
    monkeypatch.setenv('SPLITJOIN_CONFIG', str(tmp_path / 'custom.json'))
    assert default_config_path() == tmp_path / 'custom.json'


def test_default_config_path_in_home(monkeypatch):
    monkeypatch.delenv('SPLITJOIN_CONFIG', raising=False)
    assert default_config_path().parts[-2:] == ('.splitjoin', 'config.json')
