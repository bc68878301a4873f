"""Shared pytest fixtures for all tests."""

import logging
import random

import pytest

from cli.config import Config
from common.logging_config import PACKAGE_LOGGERS
from engine.splitter import split_file


def make_bytes(size: int, seed: int = 0) -> bytes:
    """Deterministic pseudo-random content of the given size."""
    return random.Random(seed).randbytes(size)


@pytest.fixture
def make_source(tmp_path):
    """
    Factory creating a source file with deterministic content.

    Returns:
        Callable (size, name='source.bin') -> Path
    """
    def _make(size: int, name: str = 'source.bin'):
        path = tmp_path / name
        path.write_bytes(make_bytes(size, seed=size))
        return path
    return _make


@pytest.fixture
def out_dir(tmp_path):
    """Empty directory that receives manifests and chunks."""
    directory = tmp_path / 'parts'
    directory.mkdir()
    return directory


@pytest.fixture
def split_250(make_source, out_dir):
    """
    A 250-byte source split into 100-byte chunks.

    Returns:
        (source Path, SplitResult)
    """
    source = make_source(250)
    result = split_file(str(source), str(out_dir / 'base'), 100, unit_bytes=1)
    return source, result


@pytest.fixture
def temp_config(tmp_path, monkeypatch):
    """
    Config instance backed by a file in a temporary directory.

    Environment overrides are cleared so that defaults are predictable.
    """
    monkeypatch.delenv('SPLITJOIN_CHUNK_SIZE_MB', raising=False)
    monkeypatch.delenv('LOG_LEVEL', raising=False)
    return Config(tmp_path / '.splitjoin' / 'config.json')


@pytest.fixture
def cli_config(temp_config, monkeypatch):
    """Install temp_config as the CLI's global configuration."""
    monkeypatch.setattr('cli.commands._config', temp_config)
    return temp_config


@pytest.fixture(autouse=True)
def reset_package_loggers():
    """Drop handlers installed by setup_logging so each test starts clean."""
    yield
    for name in PACKAGE_LOGGERS:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.propagate = True
        logger.setLevel(logging.NOTSET)
