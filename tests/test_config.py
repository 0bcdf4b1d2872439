"""Configuration from environment variables."""

from __future__ import annotations

import logging

import pytest

import netsettle.config as cfg


def test_defaults(isolated_data_dir):
    config = cfg.BaseConfig()

    assert config.DATA_DIR == isolated_data_dir.resolve()
    assert config.DATA_DIR.exists()
    assert config.DEV_MODE is True
    assert config.TRACE is False
    assert config.LOG_LEVEL == logging.INFO


@pytest.mark.parametrize(("raw", "expected"), [("1", True), ("yes", True), ("off", False), ("", False)])
def test_trace_flag(monkeypatch, raw, expected):
    monkeypatch.setenv("NETSETTLE_TRACE", raw)
    assert cfg.BaseConfig().TRACE is expected


def test_log_level_from_env(monkeypatch):
    monkeypatch.setenv("NETSETTLE_LOG_LEVEL", "debug")
    assert cfg.BaseConfig().LOG_LEVEL == logging.DEBUG


def test_invalid_log_level_raises(monkeypatch):
    monkeypatch.setenv("NETSETTLE_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError, match="NETSETTLE_LOG_LEVEL"):
        cfg.BaseConfig()


def test_dev_config_traces_by_default():
    config = cfg.DevConfig()
    assert config.DEV_MODE is True
    assert config.TRACE is True


def test_test_config_uses_given_directory(tmp_path):
    config = cfg.TestConfig(tmp_path / "custom")
    assert config.DATA_DIR == tmp_path / "custom"
    assert config.DATA_DIR.is_dir()
    assert config.TESTING is True
