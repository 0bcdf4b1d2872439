"""Pytest configuration and shared fixtures for netsettle tests."""

from __future__ import annotations

import logging

import pytest

from netsettle.models import NetBalance, make_balances


@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path, monkeypatch):
    """Point config at a temporary directory and reset logging afterwards."""

    monkeypatch.setenv("NETSETTLE_DATA_DIR", str(tmp_path / "instance"))
    monkeypatch.delenv("NETSETTLE_TRACE", raising=False)
    monkeypatch.delenv("NETSETTLE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("NETSETTLE_DEV_MODE", raising=False)
    yield tmp_path / "instance"

    logger = logging.getLogger("netsettle")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def balances():
    """Factory building NetBalance lists from ``(party_id, amount)`` pairs."""

    def _factory(*pairs) -> list[NetBalance]:
        return make_balances(pairs)

    return _factory


@pytest.fixture
def write_csv(tmp_path):
    """Write a balance CSV and return its path."""

    def _write(text: str, name: str = "balances.csv"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
