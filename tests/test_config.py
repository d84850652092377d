"""Tests for engine configuration."""

import importlib
import logging

import logzero
import pytest

import ringpoly.config
from ringpoly import EngineConfig, get_config, set_config, set_log_level


def test_defaults():
    config = EngineConfig()
    assert config.karatsuba_cutoff == 2
    assert config.log_level == logging.WARNING


def test_invalid_cutoff():
    with pytest.raises(ValueError, match="karatsuba_cutoff"):
        EngineConfig(karatsuba_cutoff=0)


def test_set_config_returns_previous():
    original = get_config()
    custom = EngineConfig(karatsuba_cutoff=32)
    assert set_config(custom) is original
    assert get_config() is custom


def test_set_log_level():
    set_log_level(logging.DEBUG)
    assert get_config().log_level == logging.DEBUG


def test_summary():
    summary = EngineConfig(karatsuba_cutoff=8).summary()
    assert "Karatsuba cutoff: 8" in summary
    assert "WARNING" in summary


def test_package_logger_is_separate():
    assert ringpoly.config.logger.name == "ringpoly"
    assert ringpoly.config.logger is not logzero.logger


def test_set_log_level_changes_package_logger():
    set_log_level(logging.DEBUG)
    assert ringpoly.config.logger.level == logging.DEBUG
    set_config(EngineConfig(log_level=logging.ERROR))
    assert ringpoly.config.logger.level == logging.ERROR


def test_host_logzero_level_survives():
    host_level = logzero.logger.level
    logzero.loglevel(logging.DEBUG)
    try:
        importlib.reload(ringpoly.config)
        set_config(EngineConfig(log_level=logging.ERROR))
        set_log_level(logging.INFO)
        assert logzero.logger.level == logging.DEBUG
    finally:
        logzero.loglevel(host_level)
